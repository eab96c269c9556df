"""Statistics derived from a TransformationHistory."""

from datetime import date, datetime, timedelta, timezone

from milo.core import DayStats, EntryIndexError, TextDiff, UsageSummary, compute_word_diff
from milo.history.store import TransformationHistory
from milo.utils import Constants


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


def get_daily_stats(
    history: TransformationHistory, days: int, today: date | None = None
) -> list[DayStats]:
    """Per-day counters for the last ``days`` calendar days ending today, oldest first.

    Days without entries are filled with zero-valued DayStats, so the result
    always has exactly ``days`` items.

    Args:
        history: History to read
        days: Number of days in the window
        today: Last day of the window (defaults to the current UTC date)
    """
    today = today or utc_today()
    stats = []
    for offset in range(days - 1, -1, -1):
        day = today - timedelta(days=offset)
        key = day.strftime(Constants.DATE_KEY_FORMAT)
        existing = history.daily_stats.get(key)
        stats.append(existing.model_copy() if existing is not None else DayStats(date=day))
    return stats


def get_usage_summary(history: TransformationHistory) -> UsageSummary:
    return UsageSummary(
        total_transformations=history.get_total_transformations(),
        total_words=history.get_total_words_transformed(),
        total_sentences=history.get_total_sentences_transformed(),
        history_count=len(history.entries),
    )


def get_transformation_diff(history: TransformationHistory, entry_index: int) -> TextDiff:
    """Recompute the word diff of a stored entry.

    Raises:
        EntryIndexError: If ``entry_index`` is outside the retained entries
    """
    if entry_index < 0 or entry_index >= len(history.entries):
        raise EntryIndexError(entry_index, len(history.entries))
    entry = history.entries[entry_index]
    return compute_word_diff(entry.original_text, entry.transformed_text)
