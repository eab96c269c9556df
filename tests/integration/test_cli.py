"""Integration tests for the milo command-line interface.

Each test has exactly one assertion.
"""

from pathlib import Path

import pytest

from milo.__main__ import format_diff, main
from milo.cli import create_parser
from milo.core import compute_word_diff
from milo.history import HistoryStore


@pytest.fixture
def history_file(tmp_path: Path) -> Path:
    return tmp_path / "transformation_history.json"


def run(history_file: Path, *argv: str) -> int:
    return main(["--history-file", str(history_file), *argv])


class TestAddCommand:
    """Test recording through the CLI."""

    def test_add_exits_zero(self, history_file: Path) -> None:
        """A successful add returns exit status 0."""
        assert run(history_file, "add", "Concise", "I am a very tall guy.", "I'm very tall.") == 0

    def test_add_writes_history(self, history_file: Path) -> None:
        """The entry is stored in the configured file."""
        run(history_file, "add", "Concise", "I am a very tall guy.", "I'm very tall.")
        assert HistoryStore(history_file).load().entries[0].added_count == 1

    def test_add_reads_file_arguments(self, history_file: Path, tmp_path: Path) -> None:
        """@path arguments are read from files and line-trimmed."""
        before = tmp_path / "before.txt"
        after = tmp_path / "after.txt"
        before.write_text("  Hello world  \n", encoding="utf-8")
        after.write_text("Hello there world\n", encoding="utf-8")
        run(history_file, "add", "Friendly", f"@{before}", f"@{after}")
        assert HistoryStore(history_file).load().entries[0].original_text == "Hello world"

    def test_add_applies_max_entries(self, history_file: Path) -> None:
        """--max-entries bounds the stored history."""
        for i in range(3):
            run(history_file, "--max-entries", "2", "add", f"Tone {i}", "a", "b")
        assert len(HistoryStore(history_file).load().entries) == 2

    def test_missing_text_file_exits_one(self, history_file: Path, tmp_path: Path) -> None:
        """An unreadable @path argument is reported with exit status 1."""
        missing = tmp_path / "missing.txt"
        assert run(history_file, "add", "Formal", f"@{missing}", "text") == 1

    def test_non_utf8_text_file_exits_one(self, history_file: Path, tmp_path: Path) -> None:
        """A text file that is not UTF-8 is reported with exit status 1."""
        latin = tmp_path / "latin.txt"
        latin.write_bytes("caf\u00e9".encode("latin-1"))
        assert run(history_file, "add", "Formal", f"@{latin}", "text") == 1

    def test_unreadable_text_file_writes_nothing(
        self, history_file: Path, tmp_path: Path
    ) -> None:
        """A failed @path read does not touch the history file."""
        run(history_file, "add", "Formal", f"@{tmp_path / 'missing.txt'}", "text")
        assert not history_file.exists()


class TestQueryCommands:
    """Test listing, diff and stats output."""

    def test_history_lists_entries(self, history_file: Path, capsys) -> None:
        """history prints one line per entry."""
        run(history_file, "add", "Concise", "a b", "a")
        capsys.readouterr()
        run(history_file, "history")
        assert "Concise" in capsys.readouterr().out

    def test_diff_marks_changes(self, history_file: Path, capsys) -> None:
        """diff marks removed tokens."""
        run(history_file, "add", "Concise", "Hello big world", "Hello world")
        capsys.readouterr()
        run(history_file, "diff", "0")
        assert "[-big-]" in capsys.readouterr().out

    def test_diff_missing_entry_exits_one(self, history_file: Path) -> None:
        """An out-of-range index is reported with exit status 1."""
        assert run(history_file, "diff", "5") == 1

    def test_delete_missing_entry_exits_one(self, history_file: Path) -> None:
        """Deleting a missing entry returns exit status 1."""
        assert run(history_file, "delete", "0") == 1

    def test_stats_writes_csv(self, history_file: Path, tmp_path: Path) -> None:
        """stats --csv exports the daily and summary reports."""
        report_dir = tmp_path / "reports"
        run(history_file, "add", "Concise", "a b", "a")
        run(history_file, "stats", "--days", "3", "--csv", str(report_dir))
        lines = (report_dir / "daily_stats.csv").read_text(encoding="utf-8").splitlines()
        assert len(lines) == 4

    def test_clear_empties_history(self, history_file: Path) -> None:
        """clear removes every entry."""
        run(history_file, "add", "Concise", "a b", "a")
        run(history_file, "clear")
        assert not HistoryStore(history_file).load().entries


class TestFormatDiff:
    """Test diff rendering."""

    def test_marks_additions(self) -> None:
        """Added tokens are wrapped in {+ +}."""
        lines = format_diff(compute_word_diff("Hello world", "Hello big world"))
        assert lines[1] == "+ Hello {+big+} world"


class TestCountArguments:
    """Test validation of count-like options."""

    @pytest.mark.parametrize(
        "argv",
        [
            ["stats", "--days", "-3"],
            ["stats", "--days", "0"],
            ["history", "--limit", "0"],
            ["--max-entries", "0", "add", "Formal", "a", "b"],
        ],
    )
    def test_non_positive_counts_are_rejected(self, argv: list[str]) -> None:
        """Counts below one stop argument parsing."""
        with pytest.raises(SystemExit):
            create_parser().parse_args(argv)

    def test_positive_days_accepted(self) -> None:
        """A positive day count parses to an int."""
        assert create_parser().parse_args(["stats", "--days", "30"]).days == 30

    def test_non_numeric_days_rejected(self) -> None:
        """A non-numeric day count stops argument parsing."""
        with pytest.raises(SystemExit):
            create_parser().parse_args(["stats", "--days", "week"])
