"""Errors raised by the country model and resolver. Not-found is never an error."""


class CountryDataError(ValueError):
    """Base class for invalid country data or misuse of the lookup API."""


class ValidationError(CountryDataError):
    """Country data cannot be converted: wrong shape or a broken invariant."""


class UnsupportedFieldError(CountryDataError):
    """Lookup was asked to search by a field that is not an identity."""

    def __init__(self, field: str) -> None:
        super().__init__(f'Field "{field}" is not supported')
        self.field = field
