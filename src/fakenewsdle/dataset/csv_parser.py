"""Line-oriented CSV parsing for labeled headline sources.

Records are always exactly one physical line. Quoted fields may contain
commas and doubled quotes, but never newlines. Each parsed record keeps its
original line so consumed rows can be drained without rewriting the rest.
"""

import logging
from dataclasses import dataclass, field

from fakenewsdle.data import HeadlineRecord
from fakenewsdle.errors import MalformedInputError

logger = logging.getLogger(__name__)

TEXT_COLUMN = "text"
LABEL_COLUMN = "label"


@dataclass(frozen=True)
class CsvDocument:
    """A parsed CSV source: its header line and the surviving records."""

    header: str
    records: list[HeadlineRecord] = field(default_factory=list)


def parse_csv_line(line: str) -> list[str]:
    """Split one CSV line into field values.

    A ``"`` toggles quoted mode; inside quotes ``""`` yields a literal quote.

    Args:
        line: A single physical line, without its line terminator.

    Returns:
        Field values in order. Surrounding whitespace is not stripped.
    """
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False
    i = 0
    while i < len(line):
        char = line[i]
        if char == '"':
            if in_quotes and i + 1 < len(line) and line[i + 1] == '"':
                current.append('"')
                i += 1
            else:
                in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            fields.append("".join(current))
            current = []
        else:
            current.append(char)
        i += 1

    fields.append("".join(current))
    return fields


def read_csv_document(data: str) -> CsvDocument:
    """Parse a full CSV document into a header line and headline records.

    The header is split on bare commas and matched case-insensitively for the
    ``text`` and ``label`` columns. Data rows that are blank, too short to
    reach both columns, or whose text is empty are dropped.

    Args:
        data: Entire CSV file contents.

    Returns:
        CsvDocument with the stripped header line and surviving records.

    Raises:
        MalformedInputError: If the header lacks a ``text`` or ``label`` column.
    """
    lines = data.strip().split("\n")
    header = lines[0].strip() if lines else ""
    columns = [c.strip().lower() for c in header.split(",")]

    if TEXT_COLUMN not in columns or LABEL_COLUMN not in columns:
        msg = f'CSV must contain "{TEXT_COLUMN}" and "{LABEL_COLUMN}" columns'
        raise MalformedInputError(msg)

    text_index = columns.index(TEXT_COLUMN)
    label_index = columns.index(LABEL_COLUMN)
    needed = max(text_index, label_index)

    records: list[HeadlineRecord] = []
    dropped = 0
    for raw in lines[1:]:
        line = raw.strip()
        if not line:
            continue

        values = parse_csv_line(line)
        if len(values) <= needed:
            dropped += 1
            continue

        text = values[text_index].strip()
        if not text:
            dropped += 1
            continue

        records.append(
            HeadlineRecord(text=text, label=values[label_index].strip(), original_line=line)
        )

    if dropped:
        logger.debug(f"Dropped {dropped} malformed rows")

    return CsvDocument(header=header, records=records)


def parse_csv(data: str) -> list[HeadlineRecord]:
    """Parse a full CSV document into headline records.

    See ``read_csv_document`` for the parsing rules.
    """
    return read_csv_document(data).records


def render_csv(header: str, records: list[HeadlineRecord]) -> str:
    """Render a header plus records using each record's original line."""
    lines = [header, *(r.original_line for r in records)]
    return "\n".join(lines) + "\n"
