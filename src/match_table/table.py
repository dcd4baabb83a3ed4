"""
Match table: ordered, possibly duplicate-named columns over the input strings.
"""

from typing import Any, Dict, Iterator, List, Sequence, Tuple, Union

from .records import MatchColumn


TEXT_COLUMN = '.text'
MATCH_COLUMN = '.match'

Column = Union[MatchColumn, Tuple[str, ...]]


class MatchTable:
    """
    Result of re_exec.

    Columns are kept in order as (name, column) pairs: one MatchColumn per
    capture group, then the input strings under '.text', then the whole
    match under '.match'. Group names come straight from the regex engine,
    so unnamed groups are called "" and names may repeat.
    """

    def __init__(self, columns: Sequence[Tuple[str, Column]]):
        self._columns: Tuple[Tuple[str, Column], ...] = tuple(columns)
        lengths = {len(column) for _, column in self._columns}
        if len(lengths) > 1:
            raise ValueError(f"Columns have different lengths: {sorted(lengths)}")
        self._nrow = lengths.pop() if lengths else 0

    def __len__(self) -> int:
        return self._nrow

    def __eq__(self, other) -> bool:
        if not isinstance(other, MatchTable):
            return NotImplemented
        return self._columns == other._columns

    def __repr__(self) -> str:
        return f"MatchTable(names={list(self.names)!r}, nrow={self._nrow})"

    def __getitem__(self, key: Union[str, int]) -> Column:
        """
        Look up a column by name (first column with that name) or position.
        """
        if isinstance(key, int):
            return self._columns[key][1]
        for name, column in self._columns:
            if name == key:
                return column
        raise KeyError(key)

    def __contains__(self, name: str) -> bool:
        return name in self.names

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(name for name, _ in self._columns)

    @property
    def nrow(self) -> int:
        return self._nrow

    @property
    def ncol(self) -> int:
        return len(self._columns)

    @property
    def text(self) -> Tuple[str, ...]:
        return self[TEXT_COLUMN]

    @property
    def match(self) -> MatchColumn:
        return self[MATCH_COLUMN]

    @property
    def groups(self) -> List[Tuple[str, MatchColumn]]:
        """Capture group columns as (name, column) pairs, in engine order."""
        return [(name, column) for name, column in self._columns
                if name not in (TEXT_COLUMN, MATCH_COLUMN)]

    def column(self, index: int) -> Column:
        return self._columns[index][1]

    def rows(self) -> Iterator[Tuple[Any, ...]]:
        """Iterate over rows; each row holds one cell per column, in column order."""
        for i in range(self._nrow):
            yield tuple(column[i] for _, column in self._columns)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to a JSON-serializable dictionary.

        Names and columns are kept as parallel lists since names may repeat.
        """
        columns = []
        for _, column in self._columns:
            if isinstance(column, MatchColumn):
                columns.append([record.to_dict() for record in column])
            else:
                columns.append(list(column))
        return {'names': list(self.names), 'columns': columns}
