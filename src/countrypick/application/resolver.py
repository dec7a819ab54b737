"""Country lookup by field value, and country guessing from a partial phone number."""

from collections.abc import Iterable, Sequence

from countrypick.domain import (
    CountryDirectory,
    CountryRecord,
    UnsupportedFieldError,
    parse_country,
)
from countrypick.infrastructure.country_data import get_default_countries
from countrypick.infrastructure.phone import dial_digits

SEARCHABLE_FIELDS = frozenset({"name", "iso2", "dial_code", "format", "area_codes"})

# Tuple-form names accepted as aliases.
FIELD_ALIASES = {"dialCode": "dial_code", "areaCodes": "area_codes"}

Countries = CountryDirectory | Iterable[Sequence] | Iterable[CountryRecord]


def _records(countries: Countries | None) -> Iterable[CountryRecord]:
    if countries is None:
        return get_default_countries()
    if isinstance(countries, CountryDirectory):
        return countries
    return (c if isinstance(c, CountryRecord) else parse_country(c) for c in countries)


def find(field: str, value, countries: Countries | None = None) -> CountryRecord | None:
    """Return the first country whose field equals value, or None.

    Searching by priority is refused: it is a tie-break weight shared by many
    countries, not an identity. Directory order decides between countries that
    share a dial code.
    """
    attr = FIELD_ALIASES.get(field, field)
    if attr not in SEARCHABLE_FIELDS:
        raise UnsupportedFieldError(field)
    if attr == "area_codes" and value is not None and not isinstance(value, tuple):
        value = tuple(value)
    for record in _records(countries):
        if getattr(record, attr) == value:
            return record
    return None


def _priority_key(record: CountryRecord) -> float:
    return float("inf") if record.priority is None else record.priority


def guess_country(phone: str | None, countries: Countries | None = None) -> CountryRecord | None:
    """Guess the country of a (partially typed) international number.

    Longest matching dial code first; among countries sharing it, an area code
    match wins, then the lowest priority, then directory order.
    """
    digits = dial_digits(phone)
    if not digits:
        return None

    candidates = [r for r in _records(countries) if r.dial_code and digits.startswith(r.dial_code)]
    if not candidates:
        return None
    longest = max(len(r.dial_code) for r in candidates)
    candidates = [r for r in candidates if len(r.dial_code) == longest]

    subscriber = digits[longest:]
    if subscriber:
        for record in candidates:
            if any(subscriber.startswith(code) for code in record.area_codes or ()):
                return record

    # min() keeps the first of equal keys, so directory order breaks ties.
    return min(candidates, key=_priority_key)
