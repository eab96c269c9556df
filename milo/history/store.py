"""Size-bounded transformation log with a per-day aggregate index."""

from __future__ import annotations

import json
import os
from pathlib import Path

from loguru import logger
from pydantic import BaseModel, Field, ValidationError

from milo.core import (
    DayStats,
    EntryIndexError,
    StorageReadError,
    StorageWriteError,
    TransformationEntry,
)
from milo.utils import Constants, default_history_path, ensure_directory_exists


def date_key(entry: TransformationEntry) -> str:
    """ISO date (UTC) used to bucket an entry in ``daily_stats``."""
    return entry.day.strftime(Constants.DATE_KEY_FORMAT)


class TransformationHistory(BaseModel):
    """Aggregate root of the history engine.

    ``entries`` is ordered most-recent-first and never longer than
    ``max_entries`` when that is set. ``daily_stats`` counters only grow:
    entries dropped by retention or deleted by index stay counted until
    ``clear_history``.
    """

    entries: list[TransformationEntry] = Field(default_factory=list)
    daily_stats: dict[str, DayStats] = Field(default_factory=dict)
    max_entries: int | None = Field(Constants.DEFAULT_MAX_ENTRIES, ge=0)

    def add_entry(self, entry: TransformationEntry) -> None:
        """Insert entry as the most recent one, apply retention, update its day."""
        self.entries.insert(0, entry)

        if self.max_entries is not None and len(self.entries) > self.max_entries:
            dropped = len(self.entries) - self.max_entries
            del self.entries[self.max_entries :]
            logger.debug(f"Retention dropped {dropped} oldest entries")

        key = date_key(entry)
        day_stats = self.daily_stats.get(key)
        if day_stats is None:
            day_stats = DayStats(date=entry.day)
            self.daily_stats[key] = day_stats

        day_stats.transformation_count += 1
        day_stats.word_count += entry.word_count
        day_stats.sentence_count += entry.sentence_count

    def get_recent_entries(self, limit: int) -> list[TransformationEntry]:
        """First ``limit`` entries, newest first."""
        return self.entries[: max(limit, 0)]

    def delete_entry(self, index: int) -> TransformationEntry:
        """Remove the entry at ``index`` (0 is the newest) and return it."""
        if index < 0 or index >= len(self.entries):
            raise EntryIndexError(index, len(self.entries))
        return self.entries.pop(index)

    def clear_history(self) -> None:
        """Drop all entries and all daily aggregates."""
        self.entries.clear()
        self.daily_stats.clear()

    def get_total_transformations(self) -> int:
        return len(self.entries)

    def get_total_words_transformed(self) -> int:
        return sum(entry.word_count for entry in self.entries)

    def get_total_sentences_transformed(self) -> int:
        return sum(entry.sentence_count for entry in self.entries)


class HistoryStore:
    """Loads and saves a TransformationHistory as an indented JSON document.

    The store keeps no state besides its path; each operation is a full
    load-mutate-save cycle and callers serialize concurrent writers.
    """

    def __init__(self, path: str | Path | None = None) -> None:
        self.path = Path(path) if path is not None else default_history_path()

    def read(self) -> TransformationHistory:
        """Read the history file strictly.

        Raises:
            StorageReadError: If the file is missing, unreadable or malformed
        """
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise StorageReadError(f"Failed to read history file {self.path}: {e}") from e

        if not isinstance(payload, dict):
            raise StorageReadError(
                f"Invalid history file {self.path}: top level must be an object"
            )

        # A file without max_entries is unbounded; the default only applies to new histories
        payload.setdefault("max_entries", None)

        try:
            return TransformationHistory.model_validate(payload)
        except ValidationError as e:
            raise StorageReadError(f"Invalid history file {self.path}: {e}") from e

    def load(self) -> TransformationHistory:
        """Read the history file, falling back to an empty history on any failure."""
        if not self.path.exists():
            logger.debug(f"No history file at {self.path}, starting empty")
            return TransformationHistory()

        try:
            history = self.read()
        except StorageReadError as e:
            logger.warning(f"⚠️  {e}")
            logger.warning("  Starting with an empty history")
            return TransformationHistory()

        logger.debug(f"Loaded {len(history.entries)} entries from {self.path}")
        return history

    def save(self, history: TransformationHistory) -> None:
        """Write the full aggregate.

        The document goes to a sibling ``.tmp`` file first and then replaces
        the history file, so an interrupted save leaves the previous file intact.

        Raises:
            StorageWriteError: If serialization or the write fails
        """
        temp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            ensure_directory_exists(self.path.parent)
            with open(temp_path, "w", encoding="utf-8") as f:
                f.write(history.model_dump_json(indent=2))
                f.flush()
                os.fsync(f.fileno())
            os.replace(temp_path, self.path)
        except (OSError, ValueError) as e:
            logger.error(f"✗ Failed to save history to {self.path}: {e}")
            raise StorageWriteError(f"Failed to save history to {self.path}: {e}") from e

        logger.debug(f"Saved {len(history.entries)} entries to {self.path}")
