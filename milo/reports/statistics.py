"""Statistics CSV report generation."""

from pathlib import Path

from milo.core import DayStats, UsageSummary
from milo.utils import ensure_directory_exists


def write_daily_stats_csv(stats: list[DayStats], filepath: Path) -> None:
    """Write one row per day, oldest first."""
    ensure_directory_exists(filepath.parent)
    with open(filepath, "w", encoding="utf-8") as f:
        f.write("date,transformation_count,word_count,sentence_count\n")
        for day in stats:
            f.write(
                f"{day.date.isoformat()},{day.transformation_count},"
                f"{day.word_count},{day.sentence_count}\n"
            )


def write_usage_summary_csv(summary: UsageSummary, filepath: Path) -> None:
    """Write machine-readable usage totals."""
    ensure_directory_exists(filepath.parent)
    with open(filepath, "w", encoding="utf-8") as f:
        f.write("metric,value\n")
        f.write(f"total_transformations,{summary.total_transformations}\n")
        f.write(f"total_words,{summary.total_words}\n")
        f.write(f"total_sentences,{summary.total_sentences}\n")
        f.write(f"history_count,{summary.history_count}\n")


def generate_statistics_reports(
    stats: list[DayStats], summary: UsageSummary, report_dir: Path
) -> list[Path]:
    """Write both CSV reports into ``report_dir`` and return their paths."""
    daily_path = report_dir / "daily_stats.csv"
    summary_path = report_dir / "usage_summary.csv"
    write_daily_stats_csv(stats, daily_path)
    write_usage_summary_csv(summary, summary_path)
    return [daily_path, summary_path]
