"""
Match records and match columns.

A match record holds the matched substring and its 1-based inclusive start
and end positions. A record that did not match has all three fields set to
None. A match column is the sequence of records for one capture group (or
for the whole match) across all input strings.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Optional, Tuple, Union

from .errors import InvalidArgument


FIELDS = ('match', 'start', 'end')


@dataclass(frozen=True)
class MatchRecord:
    """One match result for one (string, group) pair."""
    match: Optional[str]
    start: Optional[int]
    end: Optional[int]

    def __post_init__(self):
        present = [value is not None for value in (self.match, self.start, self.end)]
        if any(present) and not all(present):
            raise InvalidArgument(
                f"Match record fields must be all present or all absent, got "
                f"match={self.match!r}, start={self.start!r}, end={self.end!r}")

    @classmethod
    def absent(cls) -> 'MatchRecord':
        return cls(None, None, None)

    @property
    def is_match(self) -> bool:
        return self.start is not None

    def to_dict(self) -> Dict[str, Optional[Union[str, int]]]:
        return {'match': self.match, 'start': self.start, 'end': self.end}


class MatchColumn:
    """
    Immutable sequence of MatchRecord, one per input string.
    """

    __slots__ = ('_records',)

    def __init__(self, records: Iterable[MatchRecord] = ()):
        self._records: Tuple[MatchRecord, ...] = tuple(records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[MatchRecord]:
        return iter(self._records)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return MatchColumn(self._records[index])
        return self._records[index]

    def __eq__(self, other) -> bool:
        if not isinstance(other, MatchColumn):
            return NotImplemented
        return self._records == other._records

    def __hash__(self) -> int:
        return hash(self._records)

    def __repr__(self) -> str:
        return f"MatchColumn({list(self._records)!r})"

    @property
    def records(self) -> Tuple[MatchRecord, ...]:
        return self._records

    def field(self, name: str) -> Tuple[Optional[Union[str, int]], ...]:
        """
        Pull one field out of every record in the column.

        Args:
            name: 'match', 'start' or 'end'

        Returns:
            Tuple with the field value of each record; None where the record
            did not match
        """
        if name not in FIELDS:
            raise InvalidArgument(
                f"Unknown match record field {name!r}, expected one of {', '.join(FIELDS)}")
        return tuple(getattr(record, name) for record in self._records)


def field(column: MatchColumn, name: str) -> Tuple[Optional[Union[str, int]], ...]:
    """Return the `name` field of every record in `column`."""
    return column.field(name)
