"""Core text analysis for Milo: tokenization, sentence counting and word diffs."""

from .config import Config, load_config
from .diff import compute_lcs, compute_word_diff, match_key
from .errors import (
    EntryIndexError,
    HistoryError,
    StorageReadError,
    StorageWriteError,
    TextInputError,
)
from .sentences import count_sentences
from .tokenizer import (
    ChineseTokenizer,
    Tokenizer,
    WhitespaceTokenizer,
    contains_cjk,
    select_tokenizer,
    tokenize,
)
from .types import ChangeType, DayStats, TextDiff, TransformationEntry, UsageSummary, WordDiff

__all__ = [
    "ChangeType",
    "ChineseTokenizer",
    "Config",
    "DayStats",
    "EntryIndexError",
    "HistoryError",
    "StorageReadError",
    "StorageWriteError",
    "TextInputError",
    "TextDiff",
    "Tokenizer",
    "TransformationEntry",
    "UsageSummary",
    "WhitespaceTokenizer",
    "WordDiff",
    "compute_lcs",
    "compute_word_diff",
    "contains_cjk",
    "count_sentences",
    "load_config",
    "match_key",
    "select_tokenizer",
    "tokenize",
]
