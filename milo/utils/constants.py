"""Shared constants for Milo."""


class Constants:
    """Application-wide constants."""

    APP_NAME = "milo"
    HISTORY_FILENAME = "transformation_history.json"

    # Retention and query defaults
    DEFAULT_MAX_ENTRIES = 1000
    DEFAULT_HISTORY_LIMIT = 50
    DEFAULT_STATS_DAYS = 7

    # ISO date key used by the daily aggregate index
    DATE_KEY_FORMAT = "%Y-%m-%d"

    # Half-width, full-width (CJK), ellipsis and doubled marks
    SENTENCE_ENDINGS = frozenset(".!?。！？…⋯‼⁇⁈⁉")

    # Stripped from the end of a token when comparing tokens in the diff
    TRAILING_PUNCTUATION = ".!?。！？…⋯‼⁇⁈⁉,;:，；："
