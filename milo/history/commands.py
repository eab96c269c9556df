"""Operations called by the surrounding application.

Each call performs its own load (and, for mutations, save) through a
HistoryStore. Concurrent callers must serialize access themselves; the last
save wins.
"""

from datetime import datetime, timezone

from loguru import logger

from milo.core import (
    DayStats,
    TextDiff,
    TransformationEntry,
    UsageSummary,
    compute_word_diff,
    count_sentences,
)
from milo.history import stats
from milo.history.store import HistoryStore
from milo.utils import Constants


def build_entry(
    label: str,
    original_text: str,
    transformed_text: str,
    timestamp: datetime | None = None,
) -> TransformationEntry:
    """Create an entry with diff tallies and the sentence count of the transformed text."""
    diff = compute_word_diff(original_text, transformed_text)
    return TransformationEntry(
        label=label,
        original_text=original_text,
        transformed_text=transformed_text,
        timestamp=timestamp or datetime.now(timezone.utc),
        word_count=diff.added_count + diff.removed_count,
        sentence_count=count_sentences(transformed_text),
        added_count=diff.added_count,
        removed_count=diff.removed_count,
    )


def add_transformation(
    store: HistoryStore,
    label: str,
    original_text: str,
    transformed_text: str,
    timestamp: datetime | None = None,
    max_entries: int | None = None,
) -> TransformationEntry:
    """Record a transformation and persist the history.

    ``max_entries``, when given, replaces the retention limit stored in the file.

    Raises:
        StorageWriteError: If the history cannot be saved
    """
    history = store.load()
    if max_entries is not None:
        history.max_entries = max_entries
    entry = build_entry(label, original_text, transformed_text, timestamp)
    history.add_entry(entry)
    store.save(history)
    logger.debug(
        f"Recorded '{label}' transformation: +{entry.added_count} -{entry.removed_count}, "
        f"{entry.sentence_count} sentence(s)"
    )
    return entry


def get_history(store: HistoryStore, limit: int | None = None) -> list[TransformationEntry]:
    if limit is None:
        limit = Constants.DEFAULT_HISTORY_LIMIT
    return store.load().get_recent_entries(limit)


def delete_entry(store: HistoryStore, index: int) -> TransformationEntry:
    """Remove one entry by index and persist the history.

    Raises:
        EntryIndexError: If ``index`` is out of range
        StorageWriteError: If the history cannot be saved
    """
    history = store.load()
    removed = history.delete_entry(index)
    store.save(history)
    logger.info(f"Deleted entry {index} ('{removed.label}')")
    return removed


def clear_history(store: HistoryStore) -> None:
    history = store.load()
    history.clear_history()
    store.save(history)
    logger.info("Cleared transformation history")


def get_usage_summary(store: HistoryStore) -> UsageSummary:
    return stats.get_usage_summary(store.load())


def get_daily_stats(store: HistoryStore, days: int | None = None) -> list[DayStats]:
    if days is None:
        days = Constants.DEFAULT_STATS_DAYS
    return stats.get_daily_stats(store.load(), days)


def get_diff_for_entry(store: HistoryStore, index: int) -> TextDiff:
    """Re-derive the diff of the entry at ``index``.

    Raises:
        EntryIndexError: If ``index`` is out of range
    """
    return stats.get_transformation_diff(store.load(), index)
