"""Core data models for Fakenewsdle."""

from dataclasses import dataclass
from enum import StrEnum

from pydantic import BaseModel, Field, StrictBool, StrictInt, ValidationError, model_validator

from fakenewsdle.errors import MalformedPersistedStateError


class SessionState(StrEnum):
    """States of the daily game session."""

    LOADING = "loading"
    ANSWERING = "answering"
    REVEALED = "revealed"
    COMPLETE = "complete"


@dataclass(frozen=True)
class HeadlineRecord:
    """One parsed CSV data row, builder-side.

    ``original_line`` is the exact source row so that unconsumed rows can be
    written back to the source file without re-serialization.
    """

    text: str
    label: str
    original_line: str


@dataclass(frozen=True)
class DatasetEntry:
    """A labeled headline as consumed by the game.

    ``is_fake`` is True when the headline is the fabricated or satirical one.
    """

    headline: str
    is_fake: bool


@dataclass(frozen=True)
class Question:
    """The headline currently presented to the player."""

    headline: str
    choice_labels: tuple[str, str]
    number: int
    total: int


@dataclass(frozen=True)
class GuessResult:
    """Outcome of a single guess."""

    correct: bool
    reveal_label: str


@dataclass(frozen=True)
class ProgressSummary:
    """Score summary exposed to the presentation layer."""

    score: int
    total_answered: int
    accuracy_pct: float
    share_text: str


class AnswerRecord(BaseModel):
    """A single recorded answer."""

    guess: StrictBool
    correct: StrictBool

    model_config = {"frozen": True}


class SessionProgress(BaseModel):
    """Per-day progress persisted after every answer."""

    date: str = Field(min_length=1)
    answers: list[AnswerRecord] = Field(default_factory=list)
    score: StrictInt = 0

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def score_matches_answers(self) -> "SessionProgress":
        correct = sum(1 for a in self.answers if a.correct)
        if self.score != correct:
            msg = f"score {self.score} does not match {correct} correct answers"
            raise ValueError(msg)
        return self

    @classmethod
    def from_blob(cls, blob: str) -> "SessionProgress":
        """Parse a persisted JSON blob.

        Raises:
            MalformedPersistedStateError: If the blob is not valid JSON or does
                not match the progress schema.
        """
        try:
            return cls.model_validate_json(blob)
        except ValidationError as e:
            raise MalformedPersistedStateError(str(e)) from e

    def to_blob(self) -> str:
        return self.model_dump_json()
