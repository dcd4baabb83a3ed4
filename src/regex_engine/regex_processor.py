"""
Regex processor for first-match extraction.
Runs one pattern against a sequence of strings and reports match offsets,
lengths and capture groups in 1-based positions.
"""

import re
import regex  # Perl-compatible syntax: (?<name>...), [[:upper:]], possessive quantifiers
from typing import List, Optional, Sequence, Tuple
from dataclasses import dataclass, field
from loguru import logger


NO_MATCH = -1


class PatternError(ValueError):
    """Raised when the regex engine rejects a pattern."""

    def __init__(self, pattern: str, message: str):
        super().__init__(message)
        self.pattern = pattern
        self.message = message


@dataclass
class CaptureGrid:
    """(row, group) indexed grid of capture offsets or lengths."""
    n_rows: int
    n_groups: int
    values: List[int] = field(default_factory=list)  # row-major, stride n_groups

    def __post_init__(self):
        if len(self.values) != self.n_rows * self.n_groups:
            raise ValueError(
                f"grid of {self.n_rows}x{self.n_groups} needs "
                f"{self.n_rows * self.n_groups} values, got {len(self.values)}")

    def get(self, row: int, group: int) -> int:
        if not (0 <= row < self.n_rows and 0 <= group < self.n_groups):
            raise IndexError(f"cell ({row}, {group}) outside {self.n_rows}x{self.n_groups} grid")
        return self.values[row * self.n_groups + group]

    def row(self, row: int) -> List[int]:
        start = row * self.n_groups
        return self.values[start:start + self.n_groups]


@dataclass
class FirstMatchResult:
    """
    Engine report for the first match of one pattern in each input string.

    Offsets are 1-based. A row (or a group within a row) that did not match
    has both its start and its length set to NO_MATCH. The capture fields are
    only filled in when the pattern defines capture groups.
    """
    starts: List[int]
    lengths: List[int]
    capture_starts: Optional[CaptureGrid] = None
    capture_lengths: Optional[CaptureGrid] = None
    capture_names: Optional[List[str]] = None

    @property
    def has_captures(self) -> bool:
        return self.capture_names is not None


class RegexProcessor:
    """
    Handles first-match regex operations on sequences of strings.
    """

    def __init__(self, use_advanced_regex: bool = True):
        """
        Initialize regex processor.

        Args:
            use_advanced_regex: Use 'regex' library (Perl-compatible syntax)
                                instead of the standard 're' module
        """
        self.regex_module = regex if use_advanced_regex else re

    def compile(self, pattern: str, flags: int = 0, fixed: bool = False):
        """
        Compile pattern with the selected engine.

        Args:
            pattern: Regex pattern
            flags: Regex flags (e.g., regex.IGNORECASE)
            fixed: If True, match the pattern as a literal string

        Raises:
            PatternError: If the engine rejects the pattern
        """
        source = self.regex_module.escape(pattern) if fixed else pattern
        try:
            return self.regex_module.compile(source, flags)
        except self.regex_module.error as e:
            logger.warning(f"Regex engine rejected pattern {pattern!r}: {e}")
            raise PatternError(pattern, str(e)) from e

    def first_match(self,
                    texts: Sequence[str],
                    pattern: str,
                    flags: int = 0,
                    fixed: bool = False) -> FirstMatchResult:
        """
        Find the first match of pattern in every string of texts.

        Args:
            texts: Strings to search in
            pattern: Regex pattern
            flags: Regex flags
            fixed: If True, match the pattern as a literal string

        Returns:
            FirstMatchResult with 1-based starts, lengths and capture grids
        """
        compiled = self.compile(pattern, flags, fixed)
        n_groups = compiled.groups

        starts: List[int] = []
        lengths: List[int] = []
        group_starts: List[int] = []
        group_lengths: List[int] = []

        for text in texts:
            m = compiled.search(text)
            start, length = self._span_to_offsets(m.span() if m else None)
            starts.append(start)
            lengths.append(length)

            for g in range(1, n_groups + 1):
                # Groups outside the winning alternative report (-1, -1)
                span = m.span(g) if m else None
                g_start, g_length = self._span_to_offsets(span)
                group_starts.append(g_start)
                group_lengths.append(g_length)

        logger.debug(
            f"Matched {pattern!r} against {len(starts)} strings "
            f"({n_groups} capture groups, engine={self.regex_module.__name__})")

        result = FirstMatchResult(starts=starts, lengths=lengths)
        if n_groups > 0:
            result.capture_starts = CaptureGrid(len(starts), n_groups, group_starts)
            result.capture_lengths = CaptureGrid(len(starts), n_groups, group_lengths)
            result.capture_names = self._group_names(compiled)

        return result

    def _span_to_offsets(self, span) -> Tuple[int, int]:
        """
        Convert a 0-based half-open span to a 1-based (start, length) pair.
        """
        if span is None or span[0] < 0:
            return NO_MATCH, NO_MATCH
        return span[0] + 1, span[1] - span[0]

    def _group_names(self, compiled) -> List[str]:
        """
        Names of all capture groups in group order, "" for unnamed groups.
        """
        names = [""] * compiled.groups
        for name, index in compiled.groupindex.items():
            names[index - 1] = name
        return names

    def validate_pattern(self, pattern: str) -> Tuple[bool, str]:
        """
        Validate regex pattern.

        Returns:
            Tuple of (is_valid, error_message)
        """
        try:
            self.compile(pattern)
            return True, ""
        except PatternError as e:
            return False, e.message
