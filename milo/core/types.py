"""Domain models for transformations, diffs and daily aggregates."""

from datetime import date, datetime, timezone
from enum import Enum

from pydantic import AliasChoices, BaseModel, Field, field_validator


class ChangeType(Enum):
    """Classification of a token in a word diff."""

    ADDED = "added"
    REMOVED = "removed"
    UNCHANGED = "unchanged"


class WordDiff(BaseModel):
    """A single classified token.

    ``position`` is the 0-based index of the token within its own sequence
    (original or transformed), not a shared coordinate.
    """

    token: str
    change_type: ChangeType
    position: int = Field(ge=0)


class TextDiff(BaseModel):
    """Word-level diff between an original and a transformed text."""

    original_diff: list[WordDiff] = Field(default_factory=list)
    transformed_diff: list[WordDiff] = Field(default_factory=list)
    added_count: int = Field(0, ge=0)
    removed_count: int = Field(0, ge=0)


class TransformationEntry(BaseModel):
    """One recorded transformation.

    ``word_count`` is the change volume (``added_count + removed_count``),
    not the number of tokens in either text.
    """

    label: str = Field(validation_alias=AliasChoices("label", "tone_name"))
    original_text: str
    transformed_text: str
    timestamp: datetime
    word_count: int = Field(0, ge=0)
    sentence_count: int = Field(0, ge=0)
    added_count: int = Field(0, ge=0)
    removed_count: int = Field(0, ge=0)

    model_config = {"frozen": True}

    @field_validator("timestamp")
    @classmethod
    def ensure_utc(cls, v: datetime) -> datetime:
        """Treat naive timestamps as UTC and normalize aware ones to UTC."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)

    @property
    def day(self) -> date:
        """Calendar date (UTC) the entry belongs to."""
        return self.timestamp.date()


class DayStats(BaseModel):
    """Aggregated counters for one calendar day."""

    date: date
    transformation_count: int = Field(0, ge=0)
    word_count: int = Field(0, ge=0)
    sentence_count: int = Field(0, ge=0)


class UsageSummary(BaseModel):
    """Totals over the retained entries."""

    total_transformations: int = 0
    total_words: int = 0
    total_sentences: int = 0
    history_count: int = 0
