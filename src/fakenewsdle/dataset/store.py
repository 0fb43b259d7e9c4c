"""Reading and writing the JSON dataset artifact."""

import json
import os
import tempfile
from pathlib import Path

from pydantic import (
    AliasChoices,
    BaseModel,
    Field,
    StrictBool,
    TypeAdapter,
    ValidationError,
    field_validator,
)

from fakenewsdle.data import DatasetEntry
from fakenewsdle.errors import MalformedInputError, MissingFileError

FLAG_FIELDS = ("isFake", "isOnion", "isFabricated")


class DatasetEntrySchema(BaseModel):
    """On-disk shape of one dataset entry.

    Accepts any of the flag names used by the builder variants.
    """

    headline: str = Field(min_length=1)
    is_fake: StrictBool = Field(validation_alias=AliasChoices(*FLAG_FIELDS))

    @field_validator("headline", mode="before")
    @classmethod
    def strip_headline(cls, v: object) -> object:
        return v.strip() if isinstance(v, str) else v


_DATASET_ADAPTER = TypeAdapter(list[DatasetEntrySchema])


def parse_dataset(data: str | bytes) -> list[DatasetEntry]:
    """Validate dataset JSON and convert it to entries.

    Raises:
        MalformedInputError: If the JSON is unparseable or any entry is invalid.
    """
    try:
        rows = _DATASET_ADAPTER.validate_json(data)
    except ValidationError as e:
        msg = f"Invalid dataset JSON: {e.error_count()} error(s), first: {e.errors()[0]['msg']}"
        raise MalformedInputError(msg) from e
    return [DatasetEntry(headline=r.headline, is_fake=r.is_fake) for r in rows]


def load_dataset(path: Path | str) -> list[DatasetEntry]:
    """Load and validate a dataset file.

    Raises:
        MissingFileError: If the file does not exist.
        MalformedInputError: If the contents are not a valid dataset
            or the path is a directory.
    """
    path = Path(path)
    if not path.exists():
        msg = f'File "{path}" does not exist'
        raise MissingFileError(msg)
    try:
        data = path.read_bytes()
    except IsADirectoryError as e:
        msg = f'"{path}" is a directory, not a dataset file'
        raise MalformedInputError(msg) from e
    return parse_dataset(data)


def dump_dataset(
    entries: list[DatasetEntry], *, flag_field: str = "isFake", indent: int | None = 2
) -> str:
    """Serialize entries to a JSON array.

    Args:
        entries: Entries in dataset order.
        flag_field: JSON key for the fabricated/satirical flag.
        indent: Pretty-print indent, or None for compact output.
    """
    payload = [{"headline": e.headline, flag_field: e.is_fake} for e in entries]
    if indent is None:
        return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
    return json.dumps(payload, ensure_ascii=False, indent=indent)


def save_dataset(
    path: Path | str,
    entries: list[DatasetEntry],
    *,
    flag_field: str = "isFake",
    indent: int | None = 2,
) -> None:
    """Write the dataset file atomically."""
    atomic_write_text(Path(path), dump_dataset(entries, flag_field=flag_field, indent=indent))


def atomic_write_text(path: Path, text: str) -> None:
    """Write ``text`` to ``path`` via a temp file in the same directory."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(text)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
