"""CountryDirectory: ordered, immutable sequence of CountryRecords."""

from collections.abc import Callable, Iterable, Iterator, Sequence

from countrypick.domain.entities import CountryRecord, parse_country
from countrypick.domain.errors import ValidationError


class CountryDirectory(Sequence):
    """Read-only list of countries. Order is tab order and resolution order.

    Nothing here re-sorts: when several countries share a dial code, the one
    listed first is the default.
    """

    __slots__ = ("_records", "_by_iso2")

    def __init__(self, records: Iterable[CountryRecord] = ()) -> None:
        self._records: tuple[CountryRecord, ...] = tuple(records)
        self._by_iso2: dict[str, int] = {}
        for index, record in enumerate(self._records):
            if record.iso2 in self._by_iso2:
                raise ValidationError(
                    f'Duplicate iso2 "{record.iso2}" at index {index} '
                    f"(first seen at {self._by_iso2[record.iso2]})."
                )
            self._by_iso2[record.iso2] = index

    @classmethod
    def from_tuples(cls, rows: Iterable[Sequence]) -> "CountryDirectory":
        return cls(parse_country(row) for row in rows)

    def __iter__(self) -> Iterator[CountryRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return CountryDirectory(self._records[index])
        return self._records[index]

    def __eq__(self, other) -> bool:
        if not isinstance(other, CountryDirectory):
            return NotImplemented
        return self._records == other._records

    def __hash__(self) -> int:
        return hash(self._records)

    def __repr__(self) -> str:
        return f"CountryDirectory({len(self._records)} countries)"

    def index_where(self, predicate: Callable[[CountryRecord], bool]) -> int | None:
        """Return the index of the first record matching predicate, or None."""
        for index, record in enumerate(self._records):
            if predicate(record):
                return index
        return None

    def index_of(self, iso2: str | None) -> int | None:
        if iso2 is None:
            return None
        return self._by_iso2.get(iso2)

    def get(self, iso2: str | None) -> CountryRecord | None:
        index = self.index_of(iso2)
        return None if index is None else self._records[index]

    def subset(self, iso2s: Iterable[str]) -> "CountryDirectory":
        """New directory with only the given countries, in this directory's order."""
        wanted = set(iso2s)
        return CountryDirectory(r for r in self._records if r.iso2 in wanted)

    def without(self, iso2s: Iterable[str]) -> "CountryDirectory":
        unwanted = set(iso2s)
        return CountryDirectory(r for r in self._records if r.iso2 not in unwanted)
