"""Balanced merge of two labeled sources into an append-only dataset."""

import logging
import random
import time
from pathlib import Path

from fakenewsdle.builder.base import BuildResult, read_source, require_file
from fakenewsdle.data import DatasetEntry
from fakenewsdle.dataset import (
    atomic_write_text,
    balance_records,
    load_dataset,
    render_csv,
    save_dataset,
    shuffle_entries,
)
from fakenewsdle.run_logger import BuildLogger

logger = logging.getLogger(__name__)


class MergeDrainBuilder:
    """Merges a real and a fake CSV source into the dataset and drains them.

    Flow:
    1. Both sources are read and parsed fully before anything is written
    2. The first ``min(real, fake)`` rows of each are taken and tagged
    3. The batch is shuffled and appended to the existing dataset
    4. Each source is rewritten with only its unconsumed rows

    The dataset is written before the sources, so a crash between the two
    writes re-includes the same rows on the next run (at-least-once).

    Args:
        flag_field: JSON key written for the fabricated flag.
        indent: Pretty-print indent for the dataset, or None for compact.
        rng: Random source for the shuffle. Unseeded when omitted.
        build_logger: Optional BuildLogger for stage records.
    """

    def __init__(
        self,
        flag_field: str = "isFake",
        indent: int | None = 2,
        rng: random.Random | None = None,
        build_logger: BuildLogger | None = None,
    ) -> None:
        self._flag_field = flag_field
        self._indent = indent
        self._rng = rng
        self._build_logger = build_logger

    def run(self, real_csv: Path | str, fake_csv: Path | str, output: Path | str) -> BuildResult:
        """Execute one merge-and-drain pass.

        Args:
            real_csv: Source of genuine headlines.
            fake_csv: Source of fabricated/satirical headlines.
            output: Dataset JSON file; created if absent.

        Returns:
            BuildResult with the appended entries in dataset order.

        Raises:
            MissingFileError: If either CSV source does not exist.
            MalformedInputError: On bad CSV headers, unreadable (non-UTF-8 or
                directory) sources, or an invalid existing dataset.
        """
        real_csv, fake_csv, output = Path(real_csv), Path(fake_csv), Path(output)
        require_file(real_csv)
        require_file(fake_csv)

        if self._build_logger:
            self._build_logger.start_run(
                "merge_drain", {"real": real_csv, "fake": fake_csv, "output": output}
            )

        logger.info("Reading CSV files...")
        t0 = time.monotonic()
        real_doc = read_source(real_csv)
        fake_doc = read_source(fake_csv)
        logger.info(f"   Real headlines: {len(real_doc.records)}")
        logger.info(f"   Fake headlines: {len(fake_doc.records)}")
        self._log_stage(
            "parse",
            {"real": real_csv, "fake": fake_csv},
            {"real": len(real_doc.records), "fake": len(fake_doc.records)},
            t0,
        )

        t0 = time.monotonic()
        batch = balance_records(real_doc.records, fake_doc.records)
        logger.info(f"Taking {batch.taken} from each file (balanced dataset)")
        self._log_stage(
            "balance",
            {"real": len(real_doc.records), "fake": len(fake_doc.records)},
            {"taken_per_source": batch.taken},
            t0,
        )

        t0 = time.monotonic()
        added = shuffle_entries(batch.entries, self._rng)
        self._log_stage("shuffle", {"count": len(batch.entries)}, {"count": len(added)}, t0)

        t0 = time.monotonic()
        existing: list[DatasetEntry] = []
        if output.exists():
            logger.info("Loading existing JSON file...")
            existing = load_dataset(output)
            logger.info(f"   Existing records: {len(existing)}")
        else:
            logger.info("Creating new JSON file...")

        updated = existing + added
        save_dataset(output, updated, flag_field=self._flag_field, indent=self._indent)
        logger.info(f"   Total records in JSON: {len(updated)}")
        logger.info(
            f"   Added: {len(added)} records ({batch.taken} real + {batch.taken} fake)"
        )
        self._log_stage(
            "write_dataset",
            {"existing": len(existing), "added": len(added)},
            {"path": output, "total": len(updated)},
            t0,
        )

        t0 = time.monotonic()
        logger.info("Removing processed records from CSV files...")
        atomic_write_text(real_csv, render_csv(real_doc.header, batch.remaining_real))
        atomic_write_text(fake_csv, render_csv(fake_doc.header, batch.remaining_fake))
        logger.info(f"   Remaining in {real_csv}: {len(batch.remaining_real)}")
        logger.info(f"   Remaining in {fake_csv}: {len(batch.remaining_fake)}")
        self._log_stage(
            "drain",
            {"taken_per_source": batch.taken},
            {"real": len(batch.remaining_real), "fake": len(batch.remaining_fake)},
            t0,
        )

        if self._build_logger:
            self._build_logger.finish_run(len(added), len(updated))

        return BuildResult(
            output_path=output,
            added=added,
            dataset_size=len(updated),
            remaining={
                real_csv: len(batch.remaining_real),
                fake_csv: len(batch.remaining_fake),
            },
        )

    def _log_stage(self, stage: str, input_data: object, output_data: object, t0: float) -> None:
        if self._build_logger:
            self._build_logger.log_stage(
                stage=stage,
                input_data=input_data,
                output_data=output_data,
                duration_seconds=time.monotonic() - t0,
            )
