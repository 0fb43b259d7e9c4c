"""Deterministic daily rotation over the dataset."""

import math
from collections.abc import Sequence
from datetime import date, datetime, timedelta
from typing import TypeVar

T = TypeVar("T")


def day_number(epoch_date: date, today: date) -> int:
    """Whole days from ``epoch_date`` to ``today``; negative before the epoch."""
    return (today - epoch_date).days


def total_sets(dataset_size: int, page_size: int) -> int:
    """Number of daily sets in one rotation period."""
    if page_size <= 0:
        msg = f"page_size must be positive, got {page_size}"
        raise ValueError(msg)
    return math.ceil(dataset_size / page_size)


def select_today(dataset: Sequence[T], epoch_date: date, today: date, page_size: int) -> list[T]:
    """Select the contiguous slice of ``dataset`` shown on ``today``.

    Set ``k`` covers ``dataset[k*page_size:(k+1)*page_size]``; the last set may
    be short. Sets rotate every ``total_sets`` days. Python's ``%`` keeps the
    set index in ``[0, total_sets)`` for dates before the epoch too.

    Args:
        dataset: Full dataset in its stable order.
        epoch_date: Launch day, set 0.
        today: Calendar day to select for.
        page_size: Headlines per day.

    Returns:
        Today's headlines; empty when the dataset is empty.
    """
    sets = total_sets(len(dataset), page_size)
    if sets == 0:
        return []

    set_index = day_number(epoch_date, today) % sets
    start = set_index * page_size
    end = min(start + page_size, len(dataset))
    return list(dataset[start:end])


def time_until_next_rotation(now: datetime) -> timedelta:
    """Time remaining until the next local midnight."""
    tomorrow = datetime.combine(now.date() + timedelta(days=1), datetime.min.time(), now.tzinfo)
    return tomorrow - now
