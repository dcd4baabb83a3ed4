"""Shared test fixtures."""

import pytest
from loguru import logger

from regex_engine import RegexProcessor


NAME_REX = r"(?<first>[[:upper:]][[:lower:]]+) (?<last>[[:upper:]][[:lower:]]+)"

NOTABLES = ["  Ben Franklin and Jefferson Davis", "\tMillard Fillmore"]


@pytest.fixture
def processor():
    return RegexProcessor()


@pytest.fixture
def std_processor():
    return RegexProcessor(use_advanced_regex=False)


@pytest.fixture
def engine_logging():
    logger.enable("regex_engine")
    yield
    logger.disable("regex_engine")
