"""Turn-by-turn state machine for one day's game."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from datetime import date, datetime
from typing import TYPE_CHECKING

from fakenewsdle.data import (
    AnswerRecord,
    DatasetEntry,
    GuessResult,
    ProgressSummary,
    Question,
    SessionProgress,
    SessionState,
)
from fakenewsdle.errors import MalformedPersistedStateError, SessionStateError
from fakenewsdle.game.selector import select_today
from fakenewsdle.game.share import accuracy_pct, build_share_text
from fakenewsdle.game.storage import ProgressStore

if TYPE_CHECKING:
    from fakenewsdle.config.models import GameConfig

logger = logging.getLogger(__name__)


class GameSession:
    """Daily headline game for a single player.

    States move ``LOADING -> ANSWERING -> REVEALED -> (ANSWERING | COMPLETE)``.
    Progress is saved to the store after every guess, before the guess result
    is returned. The calendar day is fixed when the session starts.

    Args:
        dataset: Full dataset in its stable order. Never modified.
        config: Variant and rotation settings.
        store: Persistence provider for per-day progress.
        clock: Returns the current local time.
    """

    def __init__(
        self,
        dataset: Sequence[DatasetEntry],
        config: GameConfig,
        store: ProgressStore,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._dataset = dataset
        self._config = config
        self._store = store
        self._clock = clock

        self._state = SessionState.LOADING
        self._day: date | None = None
        self._daily_set: list[DatasetEntry] = []
        self._answers: list[AnswerRecord] = []
        self._score = 0
        self._current_index = 0
        self._last_result: GuessResult | None = None

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def day(self) -> date | None:
        """Calendar day the session plays, or None before ``start``."""
        return self._day

    @property
    def daily_set(self) -> list[DatasetEntry]:
        return list(self._daily_set)

    @property
    def answers(self) -> list[AnswerRecord]:
        return list(self._answers)

    @property
    def score(self) -> int:
        return self._score

    @property
    def total_answered(self) -> int:
        return len(self._answers)

    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def last_result(self) -> GuessResult | None:
        """Result of the most recent guess while in ``REVEALED``."""
        return self._last_result

    def start(self) -> SessionState:
        """Load today's set and restore any saved progress for today.

        Unreadable or stale progress is discarded and the day starts fresh.

        Returns:
            ``ANSWERING``, or ``COMPLETE`` if today's set is already finished.
        """
        if self._state is not SessionState.LOADING:
            msg = f"Session already started (state: {self._state})"
            raise SessionStateError(msg)

        self._day = self._clock().date()
        self._daily_set = select_today(
            self._dataset, self._config.epoch_date, self._day, self._config.page_size
        )

        progress = self._load_progress(self._day)
        if progress is not None:
            self._answers = list(progress.answers)
            self._score = progress.score
            self._current_index = len(progress.answers)
            logger.info(f"Restored {len(self._answers)} answers for {progress.date}")

        if self._current_index >= len(self._daily_set):
            self._state = SessionState.COMPLETE
        else:
            self._state = SessionState.ANSWERING
        return self._state

    def get_current_question(self) -> Question:
        """Headline being played, with the two choice labels (genuine first)."""
        self._require(SessionState.ANSWERING, SessionState.REVEALED)
        entry = self._daily_set[self._current_index]
        return Question(
            headline=entry.headline,
            choice_labels=(self._config.false_label, self._config.true_label),
            number=self._current_index + 1,
            total=len(self._daily_set),
        )

    def submit_guess(self, guess: bool) -> GuessResult:
        """Record a guess for the current headline and persist progress.

        Args:
            guess: True if the player thinks the headline is fabricated.

        Returns:
            Whether the guess was right and the label to reveal.
        """
        self._require(SessionState.ANSWERING)
        entry = self._daily_set[self._current_index]
        correct = guess == entry.is_fake

        answers = [*self._answers, AnswerRecord(guess=guess, correct=correct)]
        score = self._score + 1 if correct else self._score
        self._save_progress(answers, score)
        self._answers = answers
        self._score = score

        if entry.is_fake:
            reveal = self._config.reveal_true_text
        else:
            reveal = self._config.reveal_false_text
        self._last_result = GuessResult(correct=correct, reveal_label=reveal)
        self._state = SessionState.REVEALED
        return self._last_result

    def advance(self) -> SessionState:
        """Move past a revealed headline to the next one or to ``COMPLETE``."""
        self._require(SessionState.REVEALED)
        self._last_result = None
        if self._current_index + 1 >= len(self._daily_set):
            self._state = SessionState.COMPLETE
        else:
            self._current_index += 1
            self._state = SessionState.ANSWERING
        return self._state

    def get_progress_summary(self) -> ProgressSummary:
        """Score so far, accuracy and the share text."""
        if self._state is SessionState.LOADING or self._day is None:
            msg = "Session has not been started"
            raise SessionStateError(msg)
        return ProgressSummary(
            score=self._score,
            total_answered=self.total_answered,
            accuracy_pct=accuracy_pct(self._score, self.total_answered),
            share_text=build_share_text(
                self._config.title, self._day, self._score, self._answers
            ),
        )

    def _require(self, *states: SessionState) -> None:
        if self._state not in states:
            allowed = ", ".join(s.value for s in states)
            msg = f"Action not allowed in state {self._state.value} (expected {allowed})"
            raise SessionStateError(msg)

    def _load_progress(self, day: date) -> SessionProgress | None:
        blob = self._store.load(self._config.storage_key)
        if blob is None:
            return None

        try:
            progress = SessionProgress.from_blob(blob)
        except MalformedPersistedStateError as e:
            logger.warning(f"Discarding unreadable progress: {e}")
            return None

        if progress.date != day.isoformat():
            logger.debug(f"Ignoring progress from {progress.date}")
            return None

        if len(progress.answers) > len(self._daily_set):
            logger.warning(
                f"Discarding progress with {len(progress.answers)} answers "
                f"for a set of {len(self._daily_set)}"
            )
            return None

        return progress

    def _save_progress(self, answers: list[AnswerRecord], score: int) -> None:
        if self._day is None:
            msg = "Session has not been started"
            raise SessionStateError(msg)
        progress = SessionProgress(date=self._day.isoformat(), answers=answers, score=score)
        self._store.save(self._config.storage_key, progress.to_blob())
