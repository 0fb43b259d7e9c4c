"""Block-list filtering of headlines that leak their source or topic."""

from collections.abc import Iterable

from fakenewsdle.data import DatasetEntry

DEFAULT_BLOCKLIST: tuple[str, ...] = (
    "onion",
    "clickhole",
    "babylon bee",
    "area man",
    "area woman",
    "satire",
    "reuters",
    "associated press",
)


class ContentFilter:
    """Drops entries whose headline contains any blocked substring.

    Matching is case-insensitive.

    Args:
        blocklist: Substrings to block. Blank terms are ignored.
    """

    def __init__(self, blocklist: Iterable[str] = DEFAULT_BLOCKLIST) -> None:
        self._terms = tuple(t.strip().lower() for t in blocklist if t.strip())

    @property
    def terms(self) -> tuple[str, ...]:
        return self._terms

    def is_blocked(self, headline: str) -> bool:
        lowered = headline.lower()
        return any(term in lowered for term in self._terms)

    def apply(self, entries: list[DatasetEntry]) -> list[DatasetEntry]:
        """Return the entries that pass the filter, preserving order."""
        return [e for e in entries if not self.is_blocked(e.headline)]
