"""Daily selection, session state machine and progress persistence."""

from fakenewsdle.game.selector import (
    day_number,
    select_today,
    time_until_next_rotation,
    total_sets,
)
from fakenewsdle.game.session import GameSession
from fakenewsdle.game.share import (
    accuracy_pct,
    answer_grid,
    build_share_text,
    format_countdown,
    score_message,
)
from fakenewsdle.game.storage import FileProgressStore, InMemoryProgressStore, ProgressStore

__all__ = [
    "FileProgressStore",
    "GameSession",
    "InMemoryProgressStore",
    "ProgressStore",
    "accuracy_pct",
    "answer_grid",
    "build_share_text",
    "day_number",
    "format_countdown",
    "score_message",
    "select_today",
    "time_until_next_rotation",
    "total_sets",
]
