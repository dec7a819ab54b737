"""
countrypick core: clean-architecture layout.

- domain: CountryRecord, tuple conversion, CountryDirectory, errors. No outer dependencies.
- application: lookup (find, guess_country) and the CountrySelector state machine.
- infrastructure: YAML country data, XState machine config, schedulers, phone digits.
"""

from countrypick.application import (
    SEARCH_DELAY,
    CountrySelector,
    SelectorItem,
    dial_code_label,
    find,
    guess_country,
)
from countrypick.domain import (
    CountryDataError,
    CountryDirectory,
    CountryRecord,
    UnsupportedFieldError,
    ValidationError,
    build_country_data,
    parse_country,
)
from countrypick.infrastructure import (
    AsyncioScheduler,
    ClockScheduler,
    get_default_countries,
    load_countries,
)

__all__ = [
    "SEARCH_DELAY",
    "AsyncioScheduler",
    "ClockScheduler",
    "CountryDataError",
    "CountryDirectory",
    "CountryRecord",
    "CountrySelector",
    "SelectorItem",
    "UnsupportedFieldError",
    "ValidationError",
    "build_country_data",
    "dial_code_label",
    "find",
    "get_default_countries",
    "guess_country",
    "load_countries",
    "parse_country",
]
