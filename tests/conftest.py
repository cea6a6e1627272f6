"""Pytest configuration and shared fixtures."""

import itertools

import pytest

from sd_efficiency.config import create_default_config
from sd_efficiency.models import Entry
from sd_efficiency.presenters import NullPresenter
from sd_efficiency.services import AggregateCalculator, EntryStore, EntryValidator

FIXED_TIMESTAMP = 1_700_000_000_000


@pytest.fixture
def fixed_clock():
    """Clock that always returns the same epoch-millisecond timestamp."""
    return lambda: FIXED_TIMESTAMP


@pytest.fixture
def ticking_clock():
    """Clock that advances one minute per call."""
    counter = itertools.count()
    return lambda: FIXED_TIMESTAMP + next(counter) * 60_000


@pytest.fixture
def id_factory():
    """Deterministic id factory: entry-1, entry-2, ..."""
    counter = itertools.count(1)
    return lambda: f"entry-{next(counter)}"


@pytest.fixture
def validator(fixed_clock, id_factory):
    """Provide a validator with pinned clock and ids."""
    return EntryValidator(clock=fixed_clock, id_factory=id_factory)


@pytest.fixture
def calculator():
    return AggregateCalculator()


@pytest.fixture
def data_file(tmp_path):
    """Path of a not-yet-existing JSON data file."""
    return tmp_path / "data" / "entries.json"


@pytest.fixture
def store(data_file):
    return EntryStore(data_file)


@pytest.fixture
def test_config(data_file):
    """Provide a test configuration with a temporary data file."""
    return create_default_config(data_file=data_file)


@pytest.fixture
def null_presenter():
    """Provide a null presenter for testing (no output)."""
    return NullPresenter()


@pytest.fixture
def make_entry():
    """Factory fixture for creating Entry instances with sensible defaults."""
    counter = itertools.count(1)

    def _make(
        total_hours=24.0,
        good_hours=22.0,
        bad_hours=2.0,
        efficiency=None,
        entry_id=None,
        timestamp=FIXED_TIMESTAMP,
    ):
        if efficiency is None:
            efficiency = round(good_hours / total_hours * 100, 2)
        return Entry(
            id=entry_id or f"made-{next(counter)}",
            timestamp=timestamp,
            total_hours=total_hours,
            good_hours=good_hours,
            bad_hours=bad_hours,
            efficiency=efficiency,
        )

    return _make
