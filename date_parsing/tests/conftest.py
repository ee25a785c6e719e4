"""Pytest configuration for date parsing tests."""

import os

import pytest

from date_parsing.log import set_notifier

# Pin the two-digit year pivot so MM/DD/YY expectations don't drift
os.environ.setdefault("DATE_PARSING_CURRENT_YEAR", "2026")


@pytest.fixture(autouse=True)
def clear_notifier():
    """Make sure a notifier installed by one test never leaks into another."""
    set_notifier(None)
    yield
    set_notifier(None)
