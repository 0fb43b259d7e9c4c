"""Key-value persistence for per-day session progress."""

import logging
import re
from pathlib import Path
from typing import Protocol

from fakenewsdle.dataset import atomic_write_text

logger = logging.getLogger(__name__)


class ProgressStore(Protocol):
    """Interface for the progress persistence provider."""

    def load(self, key: str) -> str | None:
        """Return the blob stored under ``key``, or None if there is none."""
        ...

    def save(self, key: str, blob: str) -> None:
        """Store ``blob`` under ``key``, replacing any previous value."""
        ...


class InMemoryProgressStore:
    """Progress store backed by a dict. Used for tests and throwaway sessions."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._slots: dict[str, str] = dict(initial or {})

    def load(self, key: str) -> str | None:
        return self._slots.get(key)

    def save(self, key: str, blob: str) -> None:
        self._slots[key] = blob


_UNSAFE_KEY_CHARS = re.compile(r"[^A-Za-z0-9_.-]")


class FileProgressStore:
    """Progress store keeping one ``<key>.json`` file per slot.

    Args:
        directory: Directory holding the slot files. Created on first save.
    """

    def __init__(self, directory: Path | str) -> None:
        self._directory = Path(directory)

    def path_for(self, key: str) -> Path:
        """File used for ``key``; unsafe characters are replaced."""
        return self._directory / f"{_UNSAFE_KEY_CHARS.sub('_', key)}.json"

    def load(self, key: str) -> str | None:
        path = self.path_for(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read progress file {path}: {e}")
            return None

    def save(self, key: str, blob: str) -> None:
        atomic_write_text(self.path_for(key), blob)
