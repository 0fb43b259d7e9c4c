"""Shared types and helpers for dataset builders."""

from dataclasses import dataclass, field
from pathlib import Path

from fakenewsdle.data import DatasetEntry
from fakenewsdle.dataset import CsvDocument, read_csv_document
from fakenewsdle.errors import MalformedInputError, MissingFileError


@dataclass(frozen=True)
class BuildResult:
    """Outcome of a builder run.

    ``remaining`` maps each drained source path to its unconsumed row count;
    it is empty for builders that do not drain.
    """

    output_path: Path
    added: list[DatasetEntry] = field(default_factory=list)
    dataset_size: int = 0
    remaining: dict[Path, int] = field(default_factory=dict)


def require_file(path: Path) -> None:
    """Raise MissingFileError unless ``path`` exists."""
    if not path.exists():
        msg = f'File "{path}" does not exist'
        raise MissingFileError(msg)


def read_source(path: Path) -> CsvDocument:
    """Read and parse a labeled CSV source.

    Raises:
        MissingFileError: If the file does not exist.
        MalformedInputError: If the header lacks the required columns,
            the file is not UTF-8 text, or the path is a directory.
    """
    require_file(path)
    try:
        data = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        msg = f'File "{path}" is not valid UTF-8: {e}'
        raise MalformedInputError(msg) from e
    except IsADirectoryError as e:
        msg = f'"{path}" is a directory, not a CSV file'
        raise MalformedInputError(msg) from e
    return read_csv_document(data)
