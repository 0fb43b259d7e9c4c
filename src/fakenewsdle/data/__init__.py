"""Data models for Fakenewsdle."""

from fakenewsdle.data.models import (
    AnswerRecord,
    DatasetEntry,
    GuessResult,
    HeadlineRecord,
    ProgressSummary,
    Question,
    SessionProgress,
    SessionState,
)

__all__ = [
    "AnswerRecord",
    "DatasetEntry",
    "GuessResult",
    "HeadlineRecord",
    "ProgressSummary",
    "Question",
    "SessionProgress",
    "SessionState",
]
