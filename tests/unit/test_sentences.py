"""Unit tests for multi-script sentence counting.

Each test has exactly one assertion.
"""

import pytest

from milo.core.sentences import count_sentences


class TestCountSentencesEmpty:
    """Test empty and whitespace-only input."""

    def test_empty_string_is_zero(self) -> None:
        """Empty string has no sentences."""
        assert count_sentences("") == 0

    def test_whitespace_only_is_zero(self) -> None:
        """Whitespace-only string has no sentences."""
        assert count_sentences("   \n ") == 0


class TestCountSentencesEnglish:
    """Test half-width punctuation."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("Hello world.", 1),
            ("Hello world. How are you?", 2),
            ("Hello world! How are you? Fine.", 3),
        ],
    )
    def test_counts_terminal_marks(self, text: str, expected: int) -> None:
        """Each terminal mark closes one sentence."""
        assert count_sentences(text) == expected

    def test_repeated_marks_count_once(self) -> None:
        """Runs like '!!!' and '???' close a single sentence each."""
        assert count_sentences("Hello world!!! How are you???") == 2

    def test_ellipsis_counts_once(self) -> None:
        """Three dots followed by a space close one sentence."""
        assert count_sentences("Hello world... How are you.") == 2

    def test_unterminated_text_is_one_sentence(self) -> None:
        """Text without terminal punctuation counts as one sentence."""
        assert count_sentences("Hello world") == 1


class TestCountSentencesCjk:
    """Test full-width punctuation."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("你好世界。", 1),
            ("你好世界。你好吗？", 2),
            ("你好世界！你好吗？很好。", 3),
        ],
    )
    def test_counts_fullwidth_marks(self, text: str, expected: int) -> None:
        """Full-width marks close sentences like half-width ones."""
        assert count_sentences(text) == expected

    def test_unterminated_cjk_is_one_sentence(self) -> None:
        """CJK text without terminal punctuation counts as one sentence."""
        assert count_sentences("你好世界") == 1


class TestCountSentencesMixed:
    """Test mixed scripts and special marks in one pass."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("Hello世界。你好吗?", 2),
            ("Hello 世界! 你好嗎？", 2),
            ("Testing... 測試。", 2),
            ("Hello! 你好！ How are you? 你好嗎？", 4),
        ],
    )
    def test_mixed_scripts(self, text: str, expected: int) -> None:
        """Half-width and full-width marks are treated uniformly."""
        assert count_sentences(text) == expected

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("Hello… World.", 2),
            ("Really⁉ Yes‼", 2),
            ("Hello⋯ World？", 2),
            ("What⁇ No⁈", 2),
        ],
    )
    def test_special_marks(self, text: str, expected: int) -> None:
        """Ellipsis characters and doubled marks end sentences."""
        assert count_sentences(text) == expected

    def test_mixed_mark_run_counts_once(self) -> None:
        """A run mixing different marks and spaces is one boundary."""
        assert count_sentences("Wait?! . ! Really") == 1

    @pytest.mark.parametrize("text", ["x", "...", "。", "no punctuation here", "?!"])
    def test_non_empty_text_has_at_least_one(self, text: str) -> None:
        """Non-blank text always has at least one sentence."""
        assert count_sentences(text) >= 1
