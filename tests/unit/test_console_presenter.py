"""Tests for ConsolePresenter."""

from sd_efficiency.models import (
    AggregateSnapshot,
    CompositionSlice,
    EfficiencyHealth,
    TrendPoint,
)
from sd_efficiency.presenters import ConsolePresenter


class TestConsolePresenter:
    def test_message_prefixes(self, capsys):
        presenter = ConsolePresenter()
        presenter.show_info("plain")
        presenter.show_success("done")
        presenter.show_warning("careful")
        presenter.show_error("broken")

        assert capsys.readouterr().out.splitlines() == [
            "plain",
            "[OK] done",
            "[WARN] careful",
            "[ERROR] broken",
        ]

    def test_show_entries_prints_full_ids(self, make_entry, capsys):
        entry = make_entry(entry_id="0123456789abcdef0123456789abcdef")
        ConsolePresenter().show_entries([entry])

        out = capsys.readouterr().out
        assert "1 rows logged" in out
        assert "0123456789abcdef0123456789abcdef" in out
        assert "91.67%" in out

    def test_show_summary(self, capsys):
        snapshot = AggregateSnapshot(
            total_recording=10.0,
            total_good=10.0,
            total_bad=0.0,
            avg_efficiency=100.0,
            entry_count=1,
        )
        ConsolePresenter().show_summary(
            snapshot,
            EfficiencyHealth.HEALTHY,
            [CompositionSlice("good", 10.0), CompositionSlice("bad", 0.0)],
            [TrendPoint(1_700_000_000_000, 100.0)],
        )

        out = capsys.readouterr().out
        assert "Avg. efficiency: 100.00% (Healthy)" in out
        assert "Wasted (Bad)" in out
        assert "0.0h" in out
        assert "Efficiency trend (oldest first):" in out
