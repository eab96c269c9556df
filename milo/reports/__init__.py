"""CSV exports of usage statistics."""

from milo.reports.statistics import (
    generate_statistics_reports,
    write_daily_stats_csv,
    write_usage_summary_csv,
)

__all__ = [
    "generate_statistics_reports",
    "write_daily_stats_csv",
    "write_usage_summary_csv",
]
