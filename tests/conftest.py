"""Pytest configuration and shared fixtures."""

import pytest

from choice_string import ParserConfig, Selection, parse


@pytest.fixture
def sample_selection():
    """The selection typed as '1 3 5 6-8'."""
    return parse("1 3 5 6-8")


@pytest.fixture
def empty_selection():
    """A selection with nothing in it."""
    return Selection()


@pytest.fixture
def wide_selection():
    """A selection far too wide to materialize."""
    return parse("1-1000000000000")


@pytest.fixture
def menu_items():
    """A numbered list of choices as a caller would present it."""
    return ["apple", "banana", "cherry", "date", "elderberry", "fig", "grape", "honeydew"]


@pytest.fixture
def strict_config():
    """Config limited to space, comma and semicolon delimiters."""
    return ParserConfig.strict()
