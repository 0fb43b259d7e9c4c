"""Dataset preparation: CSV parsing, balancing, filtering and JSON storage."""

from fakenewsdle.dataset.balance import BalancedBatch, balance_records, shuffle_entries
from fakenewsdle.dataset.content_filter import DEFAULT_BLOCKLIST, ContentFilter
from fakenewsdle.dataset.csv_parser import (
    CsvDocument,
    parse_csv,
    parse_csv_line,
    read_csv_document,
    render_csv,
)
from fakenewsdle.dataset.store import (
    atomic_write_text,
    dump_dataset,
    load_dataset,
    parse_dataset,
    save_dataset,
)

__all__ = [
    "BalancedBatch",
    "ContentFilter",
    "CsvDocument",
    "DEFAULT_BLOCKLIST",
    "atomic_write_text",
    "balance_records",
    "dump_dataset",
    "load_dataset",
    "parse_csv",
    "parse_csv_line",
    "parse_dataset",
    "read_csv_document",
    "render_csv",
    "save_dataset",
    "shuffle_entries",
]
