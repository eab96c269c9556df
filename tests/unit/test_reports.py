"""Unit tests for CSV statistics reports.

Each test has exactly one assertion.
"""

from datetime import date
from pathlib import Path

from milo.core import DayStats, UsageSummary
from milo.reports import write_daily_stats_csv, write_usage_summary_csv


class TestDailyStatsCsv:
    """Test the per-day CSV."""

    def test_writes_header_and_rows(self, tmp_path: Path) -> None:
        """One header line and one line per day are written."""
        path = tmp_path / "daily.csv"
        stats = [
            DayStats(
                date=date(2024, 1, 15), transformation_count=2, word_count=5, sentence_count=3
            ),
            DayStats(date=date(2024, 1, 16)),
        ]
        write_daily_stats_csv(stats, path)
        assert path.read_text(encoding="utf-8").splitlines() == [
            "date,transformation_count,word_count,sentence_count",
            "2024-01-15,2,5,3",
            "2024-01-16,0,0,0",
        ]


class TestUsageSummaryCsv:
    """Test the totals CSV."""

    def test_writes_metrics(self, tmp_path: Path) -> None:
        """Each total is written as a metric row."""
        path = tmp_path / "nested" / "summary.csv"
        summary = UsageSummary(
            total_transformations=3, total_words=9, total_sentences=4, history_count=3
        )
        write_usage_summary_csv(summary, path)
        assert "total_words,9" in path.read_text(encoding="utf-8").splitlines()
