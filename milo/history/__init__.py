"""Persisted transformation history and the statistics derived from it."""

from milo.history.store import HistoryStore, TransformationHistory, date_key
from milo.history.stats import get_daily_stats, get_transformation_diff, get_usage_summary

__all__ = [
    "HistoryStore",
    "TransformationHistory",
    "date_key",
    "get_daily_stats",
    "get_transformation_diff",
    "get_usage_summary",
]
