"""Load and validate the YAML country directory. Used as the default by resolver and selector."""

import logging
import os
from pathlib import Path

import yaml

from countrypick.domain import CountryDirectory, ValidationError, parse_country

logger = logging.getLogger(__name__)


def _data_dir() -> Path:
    """Return the package data directory (holds countries.yaml and the selector machine)."""
    return Path(__file__).resolve().parent.parent / "data"


def get_countries_path() -> Path:
    """Return path to the country YAML (COUNTRYPICK_COUNTRIES_PATH env or data/countries.yaml)."""
    default = _data_dir() / "countries.yaml"
    path = os.environ.get("COUNTRYPICK_COUNTRIES_PATH", "").strip()
    if path:
        return Path(path).resolve()
    return default


def load_countries(path: Path | None = None) -> CountryDirectory:
    """Load country YAML and return a CountryDirectory. Validates minimal structure."""
    if path is None:
        path = get_countries_path()
    raw = path.read_text(encoding="utf-8")
    data = yaml.safe_load(raw)
    if not isinstance(data, dict):
        raise ValidationError(f"{path}: country YAML must be a dict")
    rows = data.get("countries")
    if not isinstance(rows, list) or not rows:
        raise ValidationError(f"{path}: must have a non-empty 'countries' list")
    records = []
    for index, row in enumerate(rows):
        if not isinstance(row, list):
            raise ValidationError(f"{path}: entry {index} must be a list")
        # Numbers in the dial code column would lose leading zeros; require strings.
        if len(row) >= 3 and not all(isinstance(v, str) for v in row[:3]):
            raise ValidationError(
                f"{path}: entry {index} name, iso2 and dial code must be quoted strings"
            )
        try:
            records.append(parse_country(row))
        except ValidationError as e:
            raise ValidationError(f"{path}: entry {index}: {e}") from e
    directory = CountryDirectory(records)
    logger.debug("Loaded %d countries from %s", len(directory), path)
    return directory


# Module-level cache for the default directory
_countries_cache: CountryDirectory | None = None


def get_default_countries(cache: bool = True) -> CountryDirectory:
    """Load the default directory (cached by default). Pass cache=False to reload."""
    global _countries_cache
    if cache and _countries_cache is not None:
        return _countries_cache
    _countries_cache = load_countries()
    return _countries_cache
