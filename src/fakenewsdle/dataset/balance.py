"""Balancing and shuffling of labeled headline batches."""

import random
from dataclasses import dataclass, field
from typing import TypeVar

from fakenewsdle.data import DatasetEntry, HeadlineRecord

T = TypeVar("T")


@dataclass(frozen=True)
class BalancedBatch:
    """Result of balancing two sources.

    ``entries`` holds ``taken`` real and ``taken`` fake entries, in source
    order (real first). The ``remaining_*`` lists are the unconsumed records.
    """

    entries: list[DatasetEntry] = field(default_factory=list)
    remaining_real: list[HeadlineRecord] = field(default_factory=list)
    remaining_fake: list[HeadlineRecord] = field(default_factory=list)
    taken: int = 0


def balance_records(real: list[HeadlineRecord], fake: list[HeadlineRecord]) -> BalancedBatch:
    """Take the first ``min(len(real), len(fake))`` records from each source.

    Earliest rows are consumed first so that a draining source is exhausted
    front to back across repeated runs.

    Args:
        real: Records from the genuine-headline source.
        fake: Records from the fabricated/satirical source.

    Returns:
        BalancedBatch with the tagged entries and both remainders.
    """
    n = min(len(real), len(fake))
    entries = [DatasetEntry(headline=r.text, is_fake=False) for r in real[:n]]
    entries.extend(DatasetEntry(headline=r.text, is_fake=True) for r in fake[:n])
    return BalancedBatch(
        entries=entries,
        remaining_real=list(real[n:]),
        remaining_fake=list(fake[n:]),
        taken=n,
    )


def shuffle_entries(items: list[T], rng: random.Random | None = None) -> list[T]:
    """Return a uniformly shuffled copy of ``items`` (Fisher-Yates).

    Args:
        items: Items to shuffle; not modified.
        rng: Random source. Unseeded module-level randomness when omitted.
    """
    shuffled = list(items)
    (rng or random).shuffle(shuffled)
    return shuffled
