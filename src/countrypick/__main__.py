"""
Command line lookups against the country directory.
Run: python -m countrypick find dial_code 380 (from repo root, with .env or env vars set).
"""
import argparse
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from countrypick.application import dial_code_label, find, guess_country
from countrypick.domain import CountryDataError, CountryRecord
from countrypick.infrastructure import get_default_countries, normalize_phone

logger = logging.getLogger(__name__)


def _load_env() -> None:
    # Repo root: from src/countrypick/__main__.py go up to repo root
    repo_root = Path(__file__).resolve().parent.parent.parent
    for path in (repo_root / ".env", Path.cwd() / ".env"):
        if path.exists():
            load_dotenv(path)
            break


def _format_country(country: CountryRecord, prefix: str = "+") -> str:
    parts = [country.iso2, country.name, dial_code_label(country, prefix)]
    if country.format:
        parts.append(country.format)
    return "\t".join(parts)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="countrypick", description=__doc__.strip().splitlines()[0])
    sub = parser.add_subparsers(dest="command", required=True)

    p_find = sub.add_parser("find", help="first country whose field equals value")
    p_find.add_argument("field", help="name, iso2, dial_code, format or area_codes")
    p_find.add_argument("value", nargs="+", help="value (several for area_codes)")

    p_guess = sub.add_parser("guess", help="guess the country of an international number")
    p_guess.add_argument("phone")

    p_list = sub.add_parser("list", help="print the directory in order")
    p_list.add_argument("--prefix", default="+", help='dial code prefix (default "+")')
    return parser


def main(argv: list[str] | None = None) -> int:
    _load_env()
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=os.environ.get("COUNTRYPICK_LOG_LEVEL", "WARNING").upper(),
    )
    args = _build_parser().parse_args(argv)
    try:
        countries = get_default_countries()
    except (OSError, CountryDataError) as e:
        print(f"Cannot load country data: {e}", file=sys.stderr)
        return 1

    if args.command == "list":
        for country in countries:
            print(_format_country(country, args.prefix))
        return 0

    if args.command == "find":
        value = tuple(args.value) if args.field in ("area_codes", "areaCodes") else " ".join(args.value)
        try:
            country = find(args.field, value, countries)
        except CountryDataError as e:
            print(str(e), file=sys.stderr)
            return 1
        if country is None:
            print(f"No country with {args.field} = {value!r}", file=sys.stderr)
            return 1
        print(_format_country(country))
        return 0

    country = guess_country(args.phone, countries)
    if country is None:
        print(f"No country matches {args.phone!r}", file=sys.stderr)
        return 1
    print(_format_country(country))
    e164 = normalize_phone(args.phone, default_region=country.iso2)
    if e164:
        print(e164)
    else:
        logger.info("%r is not a complete valid number for %s", args.phone, country.iso2)
    return 0


if __name__ == "__main__":
    sys.exit(main())
