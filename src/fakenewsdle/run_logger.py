"""Build logger for recording dataset builder stages to JSON files."""

import dataclasses
import uuid
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from pydantic import BaseModel


class StageRecord(BaseModel):
    """Record of a single builder stage."""

    stage: str
    input: Any = None
    output: Any = None
    timestamp: str = ""
    duration_seconds: float = 0.0


class BuildRecord(BaseModel):
    """Record of a complete builder run."""

    run_id: str
    builder_type: str
    sources: dict[str, Any]
    started_at: str
    completed_at: str | None = None
    stages: list[StageRecord] = []
    added_count: int = 0
    dataset_size: int = 0


def _serialize(obj: Any) -> Any:
    """Serialize an object to JSON-compatible format.

    Handles dataclasses, Pydantic models, lists, dicts, paths and primitives.
    """
    if obj is None:
        return None
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    if isinstance(obj, BaseModel):
        return obj.model_dump()
    if isinstance(obj, (list, tuple)):
        return [_serialize(item) for item in obj]
    if isinstance(obj, dict):
        return {k: _serialize(v) for k, v in obj.items()}
    if isinstance(obj, Path):
        return str(obj)
    return obj


class BuildLogger:
    """Accumulates builder stage records and writes a JSON log file per run.

    When ``enabled=False``, all methods are no-ops.

    Args:
        log_dir: Directory to write JSON log files.
        enabled: If False, all methods become no-ops.
    """

    def __init__(self, log_dir: Path, *, enabled: bool = True) -> None:
        self._log_dir = log_dir
        self._enabled = enabled
        self._record: BuildRecord | None = None
        self._last_log_path: Path | None = None

    @property
    def enabled(self) -> bool:
        """Whether logging is active."""
        return self._enabled

    @property
    def last_log_path(self) -> Path | None:
        """Path to the last written log file, or None."""
        return self._last_log_path

    def start_run(self, builder_type: str, sources: dict[str, Any]) -> None:
        """Initialize a new build record.

        Args:
            builder_type: Builder variant (e.g. "merge_drain", "filter_overwrite").
            sources: Input and output paths of the run.
        """
        if not self._enabled:
            return

        self._record = BuildRecord(
            run_id=str(uuid.uuid4()),
            builder_type=builder_type,
            sources=_serialize(sources),
            started_at=datetime.now(tz=UTC).isoformat(),
        )

    def log_stage(
        self,
        stage: str,
        input_data: Any,
        output_data: Any,
        duration_seconds: float,
    ) -> None:
        """Append a stage record to the current run.

        Args:
            stage: Stage name (e.g. "parse", "balance", "drain").
            input_data: Stage input summary (will be serialized).
            output_data: Stage output summary (will be serialized).
            duration_seconds: Wall-clock time for this stage.
        """
        if not self._enabled or self._record is None:
            return

        self._record.stages.append(
            StageRecord(
                stage=stage,
                input=_serialize(input_data),
                output=_serialize(output_data),
                timestamp=datetime.now(tz=UTC).isoformat(),
                duration_seconds=round(duration_seconds, 4),
            )
        )

    def finish_run(self, added_count: int, dataset_size: int) -> Path | None:
        """Write the build record to a JSON file.

        Args:
            added_count: Entries written by this run.
            dataset_size: Total entries in the dataset after the run.

        Returns:
            Path to the written JSON file, or None if logging is disabled.
        """
        if not self._enabled or self._record is None:
            return None

        self._record.completed_at = datetime.now(tz=UTC).isoformat()
        self._record.added_count = added_count
        self._record.dataset_size = dataset_size

        self._log_dir.mkdir(parents=True, exist_ok=True)

        # build_2026-02-12T14-30-00.json (colons -> dashes, no micros/tz)
        ts = self._record.started_at.replace(":", "-")
        ts = ts.split(".")[0].split("+")[0]
        filepath = self._log_dir / f"build_{ts}_{self._record.run_id[:8]}.json"

        filepath.write_text(self._record.model_dump_json(indent=2))
        self._last_log_path = filepath
        self._record = None
        return filepath
