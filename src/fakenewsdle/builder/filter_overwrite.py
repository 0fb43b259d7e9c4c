"""Single-source dataset build with content filtering."""

import logging
import random
import time
from pathlib import Path

from fakenewsdle.builder.base import BuildResult, read_source
from fakenewsdle.data import DatasetEntry
from fakenewsdle.dataset import ContentFilter, save_dataset, shuffle_entries
from fakenewsdle.run_logger import BuildLogger

logger = logging.getLogger(__name__)


def default_output_path(input_csv: Path) -> Path:
    """Input path with its extension replaced by ``.json``."""
    return input_csv.with_suffix(".json")


class FilterOverwriteBuilder:
    """Converts one labeled CSV into a dataset, overwriting the output.

    A row is fabricated when its label equals ``fake_label``. Rows whose
    headline contains a blocked term are dropped. The source is not drained.

    Args:
        content_filter: Block-list filter applied to headlines.
        fake_label: Label value marking a fabricated/satirical row.
        flag_field: JSON key written for the fabricated flag.
        rng: Random source for the shuffle. Unseeded when omitted.
        build_logger: Optional BuildLogger for stage records.
    """

    def __init__(
        self,
        content_filter: ContentFilter | None = None,
        fake_label: str = "1",
        flag_field: str = "isOnion",
        rng: random.Random | None = None,
        build_logger: BuildLogger | None = None,
    ) -> None:
        self._filter = content_filter or ContentFilter()
        self._fake_label = fake_label
        self._flag_field = flag_field
        self._rng = rng
        self._build_logger = build_logger

    def run(self, input_csv: Path | str, output: Path | str | None = None) -> BuildResult:
        """Build the dataset from ``input_csv``.

        Args:
            input_csv: Labeled CSV source.
            output: Dataset JSON file. Defaults to ``input_csv`` with a ``.json`` suffix.

        Returns:
            BuildResult whose ``added`` is the whole written dataset.

        Raises:
            MissingFileError: If the CSV does not exist.
            MalformedInputError: On bad CSV headers or an unreadable source
                (not UTF-8, or a directory).
        """
        input_csv = Path(input_csv)
        output = Path(output) if output is not None else default_output_path(input_csv)

        if self._build_logger:
            self._build_logger.start_run("filter_overwrite", {"input": input_csv, "output": output})

        logger.info(f"Reading {input_csv}...")
        t0 = time.monotonic()
        records = read_source(input_csv).records
        entries = [
            DatasetEntry(headline=r.text, is_fake=r.label == self._fake_label) for r in records
        ]
        fake_count = sum(1 for e in entries if e.is_fake)
        logger.info(f"   Parsed {len(entries)} headlines ({fake_count} fake)")
        self._log_stage("parse", {"input": input_csv}, {"count": len(entries)}, t0)

        t0 = time.monotonic()
        kept = self._filter.apply(entries)
        logger.info(f"   Filtered out {len(entries) - len(kept)} headlines with blocked terms")
        self._log_stage("filter", {"count": len(entries)}, {"count": len(kept)}, t0)

        t0 = time.monotonic()
        shuffled = shuffle_entries(kept, self._rng)
        self._log_stage("shuffle", {"count": len(kept)}, {"count": len(shuffled)}, t0)

        t0 = time.monotonic()
        save_dataset(output, shuffled, flag_field=self._flag_field, indent=None)
        logger.info(f"Wrote {len(shuffled)} records to {output}")
        self._log_stage("write_dataset", {"count": len(shuffled)}, {"path": output}, t0)

        if self._build_logger:
            self._build_logger.finish_run(len(shuffled), len(shuffled))

        return BuildResult(output_path=output, added=shuffled, dataset_size=len(shuffled))

    def _log_stage(self, stage: str, input_data: object, output_data: object, t0: float) -> None:
        if self._build_logger:
            self._build_logger.log_stage(
                stage=stage,
                input_data=input_data,
                output_data=output_data,
                duration_seconds=time.monotonic() - t0,
            )
