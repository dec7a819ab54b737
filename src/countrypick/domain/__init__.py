"""Domain layer: country model, directory, and errors. No dependencies on outer layers."""

from countrypick.domain.directory import CountryDirectory
from countrypick.domain.entities import CountryRecord, build_country_data, parse_country
from countrypick.domain.errors import (
    CountryDataError,
    UnsupportedFieldError,
    ValidationError,
)

__all__ = [
    "CountryDataError",
    "CountryDirectory",
    "CountryRecord",
    "UnsupportedFieldError",
    "ValidationError",
    "build_country_data",
    "parse_country",
]
