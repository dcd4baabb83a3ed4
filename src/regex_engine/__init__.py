"""Regex engine wrapper reporting first-match offsets and capture groups."""

from loguru import logger

from .regex_processor import (
    RegexProcessor, FirstMatchResult, CaptureGrid, PatternError, NO_MATCH
)

# Silent unless the application opts in with logger.enable("regex_engine")
logger.disable(__name__)

__all__ = ['RegexProcessor', 'FirstMatchResult', 'CaptureGrid', 'PatternError', 'NO_MATCH']
