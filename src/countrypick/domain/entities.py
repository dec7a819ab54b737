"""Domain entities: CountryRecord and its compact tuple form."""

from collections.abc import Sequence
from dataclasses import dataclass, field

from countrypick.domain.errors import ValidationError

# Positional layout of the compact form: name, iso2, dial code, then optional fields.
TUPLE_FIELDS = ("name", "iso2", "dial_code", "format", "priority", "area_codes")
MIN_TUPLE_LENGTH = 3


@dataclass(frozen=True)
class CountryRecord:
    """
    One country of a directory.
    iso2 is the stable key; dial_code may be shared by several records, in which
    case priority (lower wins) and area_codes tell them apart.
    """

    name: str = field(default="")
    iso2: str = field(default="")
    dial_code: str = field(default="")
    format: str | None = None
    priority: int | None = None
    area_codes: tuple[str, ...] | None = None

    def __post_init__(self):
        # Lists coming from YAML or callers are stored as tuples so records stay hashable.
        if self.area_codes is not None and not isinstance(self.area_codes, tuple):
            object.__setattr__(self, "area_codes", tuple(self.area_codes))

    @classmethod
    def from_tuple(cls, data: Sequence) -> "CountryRecord":
        return parse_country(data)

    def to_tuple(self) -> tuple:
        return build_country_data(self)


def parse_country(data: Sequence) -> CountryRecord:
    """Map a 3..6 field tuple to a CountryRecord. Only the length is checked."""
    if isinstance(data, (str, bytes)) or not isinstance(data, Sequence):
        raise ValidationError(f"Country data must be a sequence, got {type(data).__name__}.")
    if not MIN_TUPLE_LENGTH <= len(data) <= len(TUPLE_FIELDS):
        raise ValidationError(
            f"Country data must have {MIN_TUPLE_LENGTH} to {len(TUPLE_FIELDS)} fields, "
            f"got {len(data)}."
        )
    values = dict(zip(TUPLE_FIELDS, data))
    return CountryRecord(**values)


def build_country_data(record: CountryRecord) -> tuple:
    """Return the minimal tuple for record.

    priority and area_codes are only meaningful next to a format, and the tuple
    is positional, so no defined field may follow an undefined one.
    """
    if record.format is None:
        for name in ("priority", "area_codes"):
            if getattr(record, name) is not None:
                raise ValidationError(
                    f'Country "{record.iso2}": "{name}" requires "format" to be set.'
                )

    values = [getattr(record, name) for name in TUPLE_FIELDS]
    for prev_name, prev, name, value in zip(
        TUPLE_FIELDS, values, TUPLE_FIELDS[1:], values[1:]
    ):
        if prev is None and value is not None:
            raise ValidationError(
                f'Country "{record.iso2}": "{name}" is set but "{prev_name}" is not.'
            )

    while len(values) > MIN_TUPLE_LENGTH and values[-1] is None:
        values.pop()
    if len(values) == len(TUPLE_FIELDS):
        values[-1] = list(values[-1])
    return tuple(values)
