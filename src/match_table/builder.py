"""
First regular expression match and positions, as a match table.
"""

from typing import Any, Iterable, List, Optional, Tuple

from regex_engine import RegexProcessor, PatternError, NO_MATCH
from .errors import InvalidArgument
from .options import MatchOptions
from .records import MatchColumn, MatchRecord
from .table import MatchTable, TEXT_COLUMN, MATCH_COLUMN


def re_exec(texts: Iterable[Any],
            pattern: str,
            perl: bool = True,
            options: Optional[MatchOptions] = None,
            **kwargs) -> MatchTable:
    """
    Match a regular expression to each string and return the first match,
    its position and the capture groups, if any.

    Rows of the result correspond to the input strings. Columns are one per
    capture group (named after the group, "" if unnamed), '.text' with the
    input strings and '.match' with the whole match. Strings that do not
    match get records whose match, start and end are all None.

    Args:
        texts: Input strings; other values are converted with str()
        pattern: A single regex pattern
        perl: Use Perl-compatible syntax (the 'regex' library)
        options: Match options; overrides `perl` and `kwargs` when given
        **kwargs: Fields of MatchOptions, e.g. ignore_case=True, fixed=True

    Returns:
        MatchTable

    Raises:
        InvalidArgument: If pattern is not a single string, an input is None,
                         an option is unknown, or the engine rejects the pattern
    """
    _check_pattern(pattern)
    if options is None:
        options = MatchOptions.from_dict({'perl': perl, **kwargs})
    elif kwargs:
        raise InvalidArgument("Pass either options or keyword options, not both")

    text = _coerce_texts(texts)

    processor = RegexProcessor(use_advanced_regex=options.perl)
    try:
        result = processor.first_match(
            text, pattern,
            flags=options.flags_for(processor.regex_module),
            fixed=options.fixed)
    except PatternError as e:
        raise InvalidArgument(f"Invalid regex pattern {pattern!r}: {e.message}") from e

    whole = MatchColumn(
        _make_record(t, start, length)
        for t, start, length in zip(text, result.starts, result.lengths))

    columns: List[Tuple[str, Any]] = []
    if result.has_captures:
        starts, lengths = result.capture_starts, result.capture_lengths
        for g, name in enumerate(result.capture_names):
            columns.append((name, MatchColumn(
                _make_record(t, starts.get(i, g), lengths.get(i, g))
                for i, t in enumerate(text))))

    columns.append((TEXT_COLUMN, text))
    columns.append((MATCH_COLUMN, whole))
    return MatchTable(columns)


def _check_pattern(pattern) -> None:
    if isinstance(pattern, (list, tuple)):
        raise InvalidArgument(f"Expected a single pattern string, got a sequence of {len(pattern)}")
    if pattern is None:
        raise InvalidArgument("Pattern must not be None")
    if not isinstance(pattern, str):
        raise InvalidArgument(f"Pattern must be a string, got {type(pattern).__name__}")


def _coerce_texts(texts) -> Tuple[str, ...]:
    # A lone string is one input, not a sequence of characters
    if isinstance(texts, str):
        return (texts,)
    if texts is None:
        raise InvalidArgument("Input strings must not be None")
    try:
        values = list(texts)
    except TypeError as e:
        raise InvalidArgument(f"Input strings must be iterable, got {type(texts).__name__}") from e
    coerced = []
    for i, value in enumerate(values):
        if value is None:
            raise InvalidArgument(f"Input string at position {i} is None")
        coerced.append(value if isinstance(value, str) else str(value))
    return tuple(coerced)


def _make_record(text: str, start: int, length: int) -> MatchRecord:
    """
    Build the record for a 1-based start and a match length.
    """
    if start == NO_MATCH:
        return MatchRecord.absent()
    end = start + length - 1
    return MatchRecord(text[start - 1:end], start, end)
