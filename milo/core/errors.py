"""Exception hierarchy for history storage and queries."""


class HistoryError(Exception):
    """Base class for history engine failures."""


class StorageReadError(HistoryError):
    """The history file could not be read or parsed."""


class StorageWriteError(HistoryError):
    """The history file could not be serialized or written."""


class TextInputError(HistoryError):
    """Text for a transformation could not be read from its source file."""


class EntryIndexError(HistoryError, IndexError):
    """An entry index does not refer to a stored entry."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"Entry index {index} out of bounds for history of {size} entries")
        self.index = index
        self.size = size
