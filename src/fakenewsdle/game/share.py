"""Share text and score messages for a finished day."""

from collections.abc import Sequence
from datetime import date, timedelta

from fakenewsdle.data import AnswerRecord

CORRECT_GLYPH = "✅"
WRONG_GLYPH = "❌"
GLYPHS_PER_ROW = 4

EXCELLENT_THRESHOLD = 80.0
GOOD_THRESHOLD = 60.0


def accuracy_pct(score: int, total_answered: int) -> float:
    """Percentage of correct answers; 0.0 when nothing has been answered."""
    if total_answered == 0:
        return 0.0
    return score / total_answered * 100


def answer_grid(answers: Sequence[AnswerRecord], per_row: int = GLYPHS_PER_ROW) -> str:
    """Rows of ✅/❌ glyphs in answer order."""
    glyphs = [CORRECT_GLYPH if a.correct else WRONG_GLYPH for a in answers]
    rows = ["".join(glyphs[i : i + per_row]) for i in range(0, len(glyphs), per_row)]
    return "\n".join(rows)


def build_share_text(
    title: str, day: date, score: int, answers: Sequence[AnswerRecord]
) -> str:
    """Build the shareable result summary.

    Example::

        Fakenewsdle 2026-10-18
        7/10 (70%)

        ✅✅❌✅
        ✅❌✅✅
        ❌✅
    """
    total = len(answers)
    pct = accuracy_pct(score, total)
    lines = [f"{title} {day.isoformat()}", f"{score}/{total} ({pct:.0f}%)"]
    grid = answer_grid(answers)
    if grid:
        lines.extend(["", grid])
    return "\n".join(lines)


def score_message(pct: float, excellent: str, good: str, poor: str) -> str:
    """Pick the message tier for a final accuracy percentage."""
    if pct >= EXCELLENT_THRESHOLD:
        return excellent
    if pct >= GOOD_THRESHOLD:
        return good
    return poor


def format_countdown(remaining: timedelta) -> str:
    """Format a duration as ``"<hours>h <minutes>m"``."""
    total_minutes = max(int(remaining.total_seconds()) // 60, 0)
    hours, minutes = divmod(total_minutes, 60)
    return f"{hours}h {minutes}m"
