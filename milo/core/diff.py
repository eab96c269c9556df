"""Word-level diff based on the Longest Common Subsequence of two token lists."""

from loguru import logger

from milo.core.tokenizer import tokenize
from milo.core.types import ChangeType, TextDiff, WordDiff
from milo.utils.constants import Constants


def match_key(token: str) -> str:
    """Return the form of a token used for equality in the alignment.

    Trailing punctuation is ignored so that ``"tall"`` and ``"tall."`` align.
    As a consequence, an edit that only changes trailing punctuation
    (``"Hello."`` to ``"Hello!"``) is not counted as an added or removed word.
    A token made only of punctuation is compared as-is.
    """
    return token.rstrip(Constants.TRAILING_PUNCTUATION) or token


def compute_lcs(a: list[str], b: list[str]) -> list[str]:
    """Compute the Longest Common Subsequence of two sequences.

    Classic O(m*n) dynamic programming. When backtracking hits equal scores,
    the original axis (``a``) is consumed first, so the result is stable for
    identical inputs.

    Args:
        a: Original sequence
        b: Transformed sequence

    Returns:
        The common subsequence, in order
    """
    m, n = len(a), len(b)
    table = [[0] * (n + 1) for _ in range(m + 1)]

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            if a[i - 1] == b[j - 1]:
                table[i][j] = table[i - 1][j - 1] + 1
            else:
                table[i][j] = max(table[i - 1][j], table[i][j - 1])

    lcs: list[str] = []
    i, j = m, n
    while i > 0 and j > 0:
        if a[i - 1] == b[j - 1]:
            lcs.append(a[i - 1])
            i -= 1
            j -= 1
        elif table[i - 1][j] >= table[i][j - 1]:
            i -= 1
        else:
            j -= 1

    lcs.reverse()
    return lcs


def _classify(
    tokens: list[str], keys: list[str], lcs: list[str], changed: ChangeType
) -> list[WordDiff]:
    """Walk tokens with a cursor into the LCS; non-matching tokens get ``changed``."""
    result: list[WordDiff] = []
    cursor = 0
    for position, (token, key) in enumerate(zip(tokens, keys)):
        if cursor < len(lcs) and key == lcs[cursor]:
            change_type = ChangeType.UNCHANGED
            cursor += 1
        else:
            change_type = changed
        result.append(WordDiff(token=token, change_type=change_type, position=position))
    return result


def compute_word_diff(original: str, transformed: str) -> TextDiff:
    """Diff two texts at word granularity.

    Each text is tokenized on its own, so one side may be segmented as CJK
    while the other is split on whitespace.

    Args:
        original: Text before the transformation
        transformed: Text after the transformation

    Returns:
        TextDiff with both tagged sequences and the added/removed tallies
    """
    original_tokens = tokenize(original)
    transformed_tokens = tokenize(transformed)
    original_keys = [match_key(t) for t in original_tokens]
    transformed_keys = [match_key(t) for t in transformed_tokens]

    lcs = compute_lcs(original_keys, transformed_keys)

    original_diff = _classify(original_tokens, original_keys, lcs, ChangeType.REMOVED)
    transformed_diff = _classify(transformed_tokens, transformed_keys, lcs, ChangeType.ADDED)

    added_count = sum(1 for d in transformed_diff if d.change_type is ChangeType.ADDED)
    removed_count = sum(1 for d in original_diff if d.change_type is ChangeType.REMOVED)

    logger.debug(
        f"Diffed {len(original_tokens)} -> {len(transformed_tokens)} tokens: "
        f"+{added_count} -{removed_count}"
    )

    return TextDiff(
        original_diff=original_diff,
        transformed_diff=transformed_diff,
        added_count=added_count,
        removed_count=removed_count,
    )
