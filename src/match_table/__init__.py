"""Tidy first-match tables for regular expressions."""

from .builder import re_exec
from .errors import RematchError, InvalidArgument
from .options import MatchOptions
from .records import MatchRecord, MatchColumn, field
from .table import MatchTable, TEXT_COLUMN, MATCH_COLUMN

__all__ = [
    're_exec', 'RematchError', 'InvalidArgument', 'MatchOptions',
    'MatchRecord', 'MatchColumn', 'field', 'MatchTable', 'TEXT_COLUMN', 'MATCH_COLUMN'
]
