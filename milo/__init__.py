"""Milo - history and word-diff engine for clipboard text transformations.

Records every rewrite of a text as a history entry with a word-level diff,
a sentence count and per-day usage statistics.
"""

from milo.core import (
    ChangeType,
    Config,
    DayStats,
    TextDiff,
    TransformationEntry,
    UsageSummary,
    WordDiff,
    compute_word_diff,
    count_sentences,
    load_config,
    tokenize,
)
from milo.history import HistoryStore, TransformationHistory
from milo.utils.logging import setup_logger

__version__ = "0.3.0"
__all__ = [
    "ChangeType",
    "Config",
    "DayStats",
    "HistoryStore",
    "TextDiff",
    "TransformationEntry",
    "TransformationHistory",
    "UsageSummary",
    "WordDiff",
    "compute_word_diff",
    "count_sentences",
    "load_config",
    "setup_logger",
    "tokenize",
]
