"""
Pytest configuration and fixtures for humandate tests.
"""

import sys
from datetime import date
from pathlib import Path

import pytest

# Add src directory to Python path to allow importing humandate
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from humandate import HumanDateParser, fixed_clock  # noqa: E402
from humandate.languages import en, es, que  # noqa: E402

# June has 30 days, which exercises the epoch-day fallback for "31".
TODAY = date(2025, 6, 15)

ENV_VARS = ("HUMANDATE_LANGUAGE", "HUMANDATE_LANGUAGE_FILE", "HUMANDATE_DATE_FORMAT")


@pytest.fixture
def today() -> date:
    """The pinned current date used by parser fixtures."""
    return TODAY


@pytest.fixture
def numeric_parser() -> HumanDateParser:
    """Parser in numeric-only mode."""
    return HumanDateParser(clock=fixed_clock(TODAY))


@pytest.fixture
def en_parser() -> HumanDateParser:
    """Parser with the English profile active."""
    return HumanDateParser(en(), clock=fixed_clock(TODAY))


@pytest.fixture
def es_parser() -> HumanDateParser:
    """Parser with the Spanish profile active."""
    return HumanDateParser(es(), clock=fixed_clock(TODAY))


@pytest.fixture
def que_parser() -> HumanDateParser:
    """Parser with the Quechua profile active."""
    return HumanDateParser(que(), clock=fixed_clock(TODAY))


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove HUMANDATE_* variables, restoring them after the test.

    Each variable is set before being deleted so monkeypatch also undoes
    values a .env file loads during the test.
    """
    for name in ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch
