"""Tests for the sd-efficiency command line."""

import csv

import pytest

from sd_efficiency import __version__
from sd_efficiency.cli.main import build_parser, main


@pytest.fixture
def run(data_file):
    """Run the CLI against a temporary data file."""

    def _run(*argv):
        return main(["--data-file", str(data_file), *argv])

    return _run


class TestAddAndList:
    def test_add_valid_entry(self, run, capsys):
        assert run("add", "24", "22", "2") == 0
        assert "[OK] Logged entry" in capsys.readouterr().out

    def test_add_rejects_inconsistent_entry(self, run, capsys, data_file):
        assert run("add", "10", "5", "4") == 1

        out = capsys.readouterr().out
        assert "[ERROR] Validation Failed" in out
        assert not data_file.exists()

    def test_add_rejects_non_numeric_entry(self, run, capsys):
        assert run("add", "ten", "5", "5") == 1
        assert "valid numbers" in capsys.readouterr().out

    def test_add_rejects_zero_total(self, run, capsys):
        assert run("add", "0", "0", "0") == 1
        assert "greater than zero" in capsys.readouterr().out

    def test_list_empty(self, run, capsys):
        assert run("list") == 0
        assert "No data entries yet" in capsys.readouterr().out

    def test_list_shows_newest_first(self, run, capsys):
        run("add", "24", "22", "2")
        run("add", "10", "7", "3")
        capsys.readouterr()

        assert run("list") == 0
        out = capsys.readouterr().out
        assert "2 rows logged" in out
        assert out.index("70.00%") < out.index("91.67%")
        assert "24.0h" in out


class TestSummary:
    def test_summary_without_entries(self, run, capsys):
        assert run("summary") == 1
        assert "Add test data rows" in capsys.readouterr().out

    def test_summary_values(self, run, capsys):
        run("add", "24", "22", "2")
        run("add", "24", "19", "5")
        capsys.readouterr()

        assert run("summary") == 0
        out = capsys.readouterr().out
        assert "Total recording: 48.0h" in out
        assert "Avg. efficiency: 85.42% (Fair)" in out
        assert "Useful (Good)" in out
        assert "Wasted (Bad)" in out
        assert out.index("91.67%") < out.index("79.17%")


class TestRemoveAndClear:
    def _only_id(self, data_file):
        import json

        return json.loads(data_file.read_text(encoding="utf-8"))[0]["id"]

    def test_remove_entry(self, run, capsys, data_file):
        run("add", "24", "22", "2")
        entry_id = self._only_id(data_file)

        assert run("remove", entry_id) == 0
        assert "Removed entry" in capsys.readouterr().out

    def test_remove_unknown_entry(self, run, capsys):
        run("add", "24", "22", "2")
        assert run("remove", "missing") == 1
        assert "[WARN] No entry with id missing" in capsys.readouterr().out

    def test_clear_with_yes(self, run, capsys, data_file):
        run("add", "24", "22", "2")
        assert run("clear", "--yes") == 0
        assert not data_file.exists()
        assert "Cleared 1 entries" in capsys.readouterr().out

    def test_clear_aborted(self, run, monkeypatch, data_file):
        run("add", "24", "22", "2")
        monkeypatch.setattr("builtins.input", lambda prompt: "n")

        assert run("clear") == 1
        assert data_file.exists()

    def test_clear_confirmed(self, run, monkeypatch, data_file):
        run("add", "24", "22", "2")
        monkeypatch.setattr("builtins.input", lambda prompt: "y")

        assert run("clear") == 0
        assert not data_file.exists()

    def test_clear_failure(self, tmp_path, capsys):
        data_dir = tmp_path / "entries.json"
        data_dir.mkdir()

        assert main(["--data-file", str(data_dir), "clear", "--yes"]) == 1
        out = capsys.readouterr().out
        assert "[WARN] Could not delete saved entries" in out
        assert "Cleared" not in out


class TestExport:
    def test_export(self, run, capsys, tmp_path):
        run("add", "24", "22", "2")
        out_file = tmp_path / "report.csv"

        assert run("export", str(out_file)) == 0
        with out_file.open(encoding="utf-8", newline="") as f:
            rows = list(csv.reader(f))
        assert len(rows) == 2
        assert "Exported 1 entries" in capsys.readouterr().out

    def test_export_failure(self, run, capsys, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("x", encoding="utf-8")

        assert run("export", str(blocker / "report.csv")) == 1
        assert "[ERROR] Could not write" in capsys.readouterr().out


class TestParser:
    def test_no_command_prints_help(self, capsys):
        assert main([]) == 1
        assert "usage: sd-efficiency" in capsys.readouterr().out

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_add_requires_three_values(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["add", "24", "22"])
