"""Script-aware tokenization of text into word-like units."""

from abc import ABC, abstractmethod
import re

import jieba

_CJK_PATTERN = re.compile(r"[\u4e00-\u9fff]")


class Tokenizer(ABC):
    """Strategy that splits a string into an ordered list of tokens."""

    @abstractmethod
    def tokenize(self, text: str) -> list[str]:
        """Split text into tokens."""


class WhitespaceTokenizer(Tokenizer):
    """Split on whitespace runs; punctuation stays attached to its word."""

    def tokenize(self, text: str) -> list[str]:
        return text.split()


class ChineseTokenizer(Tokenizer):
    """Dictionary-based segmentation for text containing CJK ideographs.

    Uses jieba's precise mode without the HMM model for unknown words, so the
    result depends only on the dictionary. Whitespace segments are dropped.
    """

    def tokenize(self, text: str) -> list[str]:
        return [token for token in jieba.lcut(text, cut_all=False, HMM=False) if token.strip()]


WHITESPACE_TOKENIZER = WhitespaceTokenizer()
CHINESE_TOKENIZER = ChineseTokenizer()


def contains_cjk(text: str) -> bool:
    """Check whether text has at least one CJK Unified Ideograph."""
    return _CJK_PATTERN.search(text) is not None


def select_tokenizer(text: str) -> Tokenizer:
    """Pick the segmentation strategy for a single input."""
    if contains_cjk(text):
        return CHINESE_TOKENIZER
    return WHITESPACE_TOKENIZER


def tokenize(text: str) -> list[str]:
    """Tokenize text with the strategy appropriate for its script."""
    text = text or ""
    return select_tokenizer(text).tokenize(text)
