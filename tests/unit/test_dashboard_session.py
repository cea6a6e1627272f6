"""Tests for DashboardSession."""

import json

import pytest

from sd_efficiency.exceptions import EntryValidationError, ErrorKind
from sd_efficiency.models import EfficiencyHealth
from sd_efficiency.orchestration import DashboardSession, create_dashboard_session
from sd_efficiency.services import EntryStore


class RecordingPresenter:
    """Presenter that keeps warnings for assertions."""

    def __init__(self):
        self.warnings = []

    def show_info(self, message):
        pass

    def show_success(self, message):
        pass

    def show_warning(self, message):
        self.warnings.append(message)

    def show_error(self, message):
        pass

    def show_entries(self, entries):
        pass

    def show_summary(self, snapshot, health, composition, trend):
        pass


class FailingStore(EntryStore):
    """Store whose saves always fail."""

    def save(self, collection):
        return False


@pytest.fixture
def session(validator, calculator, store, null_presenter):
    return DashboardSession(validator, calculator, store=store, presenter=null_presenter)


class TestAddEntry:
    """Tests for adding entries."""

    def test_new_entry_goes_first(self, session):
        session.add_entry("24", "22", "2")
        session.add_entry("24", "19", "5")

        assert [e.id for e in session.entries] == ["entry-2", "entry-1"]

    def test_rejected_entry_leaves_collection_unchanged(self, session):
        session.add_entry("24", "22", "2")

        with pytest.raises(EntryValidationError) as exc_info:
            session.add_entry("10", "5", "4")

        assert exc_info.value.kind is ErrorKind.INCONSISTENT
        assert len(session.entries) == 1

    def test_add_persists(self, session, data_file):
        session.add_entry("24", "22", "2")

        data = json.loads(data_file.read_text(encoding="utf-8"))
        assert [record["id"] for record in data] == ["entry-1"]

    def test_save_failure_keeps_entry_and_warns(self, validator, calculator, data_file):
        presenter = RecordingPresenter()
        session = DashboardSession(
            validator, calculator, store=FailingStore(data_file), presenter=presenter
        )

        entry = session.add_entry("24", "22", "2")

        assert session.entries.get(entry.id) == entry
        assert len(presenter.warnings) == 1
        assert "Could not save" in presenter.warnings[0]

    def test_works_without_store(self, validator, calculator):
        session = DashboardSession(validator, calculator)
        session.add_entry("1", "1", "0")
        assert session.load() == 0
        assert len(session.entries) == 1


class TestRemoveAndClear:
    """Tests for removing entries."""

    def test_remove_by_id(self, session, data_file):
        session.add_entry("24", "22", "2")
        session.add_entry("24", "19", "5")

        assert session.remove_entry("entry-1") is True
        assert [e.id for e in session.entries] == ["entry-2"]
        data = json.loads(data_file.read_text(encoding="utf-8"))
        assert [record["id"] for record in data] == ["entry-2"]

    def test_remove_unknown_id_is_noop(self, session):
        session.add_entry("24", "22", "2")
        assert session.remove_entry("nope") is False
        assert len(session.entries) == 1

    def test_clear_all_removes_file(self, session, data_file):
        session.add_entry("24", "22", "2")
        session.clear_all()

        assert len(session.entries) == 0
        assert not data_file.exists()

    def test_clear_failure_warns(self, validator, calculator, data_file):
        data_file.mkdir(parents=True)
        presenter = RecordingPresenter()
        session = DashboardSession(
            validator, calculator, store=EntryStore(data_file), presenter=presenter
        )
        session.add_entry("24", "22", "2")

        assert session.clear_all() is False
        assert len(session.entries) == 0
        assert any("Could not delete" in warning for warning in presenter.warnings)

    def test_clear_all_returns_true(self, session):
        session.add_entry("24", "22", "2")
        assert session.clear_all() is True

    def test_clear_all_without_store(self, validator, calculator):
        assert DashboardSession(validator, calculator).clear_all() is True


class TestAnalysisVisibility:
    """Tests for when aggregate results are shown."""

    def test_hidden_initially(self, session):
        assert session.analysis_visible is False

    def test_request_on_empty_collection_stays_hidden(self, session):
        assert session.request_analysis() is False

    def test_request_shows_analysis(self, session):
        session.add_entry("24", "22", "2")
        assert session.request_analysis() is True
        assert session.analysis_visible

    def test_adding_hides_analysis(self, session):
        session.add_entry("24", "22", "2")
        session.request_analysis()
        session.add_entry("24", "19", "5")
        assert session.analysis_visible is False

    def test_removing_from_larger_collection_keeps_analysis(self, session):
        session.add_entry("24", "22", "2")
        session.add_entry("24", "19", "5")
        session.request_analysis()

        session.remove_entry("entry-1")
        assert session.analysis_visible is True

    def test_removing_last_entry_hides_analysis(self, session):
        session.add_entry("24", "22", "2")
        session.request_analysis()

        session.remove_entry("entry-1")
        assert session.analysis_visible is False

    def test_clear_hides_analysis(self, session):
        session.add_entry("24", "22", "2")
        session.request_analysis()
        session.clear_all()
        assert session.analysis_visible is False


class TestReads:
    """Tests for aggregate reads through the session."""

    def test_snapshot_and_views(self, session):
        session.add_entry("24", "22", "2")
        session.add_entry("24", "19", "5")

        snapshot = session.snapshot()
        assert snapshot.total_recording == 48
        assert snapshot.avg_efficiency == pytest.approx(85.42)
        assert session.health(snapshot) is EfficiencyHealth.FAIR
        assert [s.value for s in session.composition()] == [41, 7]
        assert [p.efficiency for p in session.trend()] == pytest.approx([91.67, 79.17])

    def test_health_without_snapshot(self, session):
        session.add_entry("10", "10", "0")
        assert session.health() is EfficiencyHealth.HEALTHY


class TestSessionFactory:
    """Tests for create_dashboard_session()."""

    def test_loads_persisted_entries(self, test_config, fixed_clock, id_factory):
        first = create_dashboard_session(test_config, clock=fixed_clock, id_factory=id_factory)
        first.add_entry("24", "22", "2")

        second = create_dashboard_session(test_config)
        assert [e.id for e in second.entries] == ["entry-1"]
        assert second.analysis_visible is False

    def test_skip_load(self, test_config, id_factory):
        create_dashboard_session(test_config, id_factory=id_factory).add_entry("1", "1", "0")

        session = create_dashboard_session(test_config, load=False)
        assert len(session.entries) == 0

    def test_uses_configured_tolerance(self, test_config):
        from sd_efficiency.config import create_default_config

        config = create_default_config(data_file=test_config.data_file, tolerance=0.5)
        session = create_dashboard_session(config)
        session.add_entry("10", "7", "2.6")
        assert len(session.entries) == 1
