"""Tests for the merge-and-drain dataset builder."""

import json
import random
from pathlib import Path

import pytest

from fakenewsdle.builder import MergeDrainBuilder
from fakenewsdle.data import DatasetEntry
from fakenewsdle.dataset import load_dataset
from fakenewsdle.errors import MalformedInputError, MissingFileError
from fakenewsdle.run_logger import BuildLogger

REAL_CSV = (
    "text,label\n"
    "Senate passes budget,0\n"
    '"Storm, wind hit coast",0\n'
    "Markets close higher,0\n"
    '"Mayor says ""no comment""" ,0\n'
)

FAKE_CSV = "Text,Label\nArea Man Wins Argument,1\n\"Nation, Tired\",1\n"


@pytest.fixture
def sources(tmp_path: Path) -> tuple[Path, Path, Path]:
    real = tmp_path / "real.csv"
    fake = tmp_path / "fake.csv"
    real.write_text(REAL_CSV, encoding="utf-8")
    fake.write_text(FAKE_CSV, encoding="utf-8")
    return real, fake, tmp_path / "dataset.json"


def test_merge_creates_balanced_dataset(sources: tuple[Path, Path, Path]) -> None:
    real, fake, output = sources
    result = MergeDrainBuilder(rng=random.Random(1)).run(real, fake, output)

    assert len(result.added) == 4
    assert sum(1 for e in result.added if e.is_fake) == 2
    assert result.dataset_size == 4
    assert sorted(e.headline for e in result.added) == sorted(
        ["Senate passes budget", "Storm, wind hit coast", "Area Man Wins Argument", "Nation, Tired"]
    )
    assert load_dataset(output) == result.added


def test_merge_drains_consumed_rows(sources: tuple[Path, Path, Path]) -> None:
    real, fake, output = sources
    result = MergeDrainBuilder().run(real, fake, output)

    assert real.read_text(encoding="utf-8") == (
        'text,label\nMarkets close higher,0\n"Mayor says ""no comment""" ,0\n'
    )
    assert fake.read_text(encoding="utf-8") == "Text,Label\n"
    assert result.remaining == {real: 2, fake: 0}


def test_merge_appends_to_existing_dataset(sources: tuple[Path, Path, Path]) -> None:
    real, fake, output = sources
    existing = [{"headline": "Old one", "isOnion": True}, {"headline": "Old two", "isOnion": False}]
    output.write_text(json.dumps(existing), encoding="utf-8")

    result = MergeDrainBuilder().run(real, fake, output)

    dataset = load_dataset(output)
    assert dataset[:2] == [
        DatasetEntry(headline="Old one", is_fake=True),
        DatasetEntry(headline="Old two", is_fake=False),
    ]
    assert dataset[2:] == result.added
    assert result.dataset_size == 6


def test_repeated_runs_exhaust_sources(sources: tuple[Path, Path, Path]) -> None:
    real, fake, output = sources
    builder = MergeDrainBuilder()
    builder.run(real, fake, output)
    fake.write_text("text,label\nThird Fake,1\n", encoding="utf-8")

    second = builder.run(real, fake, output)

    assert [e.headline for e in second.added if not e.is_fake] == ["Markets close higher"]
    assert len(load_dataset(output)) == 6
    assert real.read_text(encoding="utf-8") == 'text,label\n"Mayor says ""no comment""" ,0\n'


def test_merge_with_empty_source_appends_nothing(sources: tuple[Path, Path, Path]) -> None:
    real, fake, output = sources
    fake.write_text("text,label\n", encoding="utf-8")

    result = MergeDrainBuilder().run(real, fake, output)

    assert result.added == []
    assert load_dataset(output) == []
    assert real.read_text(encoding="utf-8") == REAL_CSV


def test_merge_writes_pretty_json_with_flag_field(sources: tuple[Path, Path, Path]) -> None:
    real, fake, output = sources
    MergeDrainBuilder(flag_field="isFake", indent=2).run(real, fake, output)
    text = output.read_text(encoding="utf-8")
    assert text.startswith("[\n  {")
    assert all("isFake" in row for row in json.loads(text))


def test_merge_missing_source(tmp_path: Path) -> None:
    fake = tmp_path / "fake.csv"
    fake.write_text(FAKE_CSV, encoding="utf-8")
    with pytest.raises(MissingFileError):
        MergeDrainBuilder().run(tmp_path / "nope.csv", fake, tmp_path / "out.json")
    assert not (tmp_path / "out.json").exists()


def test_merge_bad_header_writes_nothing(sources: tuple[Path, Path, Path]) -> None:
    real, fake, output = sources
    fake.write_text("headline,kind\nx,1\n", encoding="utf-8")
    with pytest.raises(MalformedInputError):
        MergeDrainBuilder().run(real, fake, output)
    assert not output.exists()
    assert real.read_text(encoding="utf-8") == REAL_CSV


def test_merge_invalid_existing_json_leaves_sources(sources: tuple[Path, Path, Path]) -> None:
    real, fake, output = sources
    output.write_text("{broken", encoding="utf-8")
    with pytest.raises(MalformedInputError):
        MergeDrainBuilder().run(real, fake, output)
    assert real.read_text(encoding="utf-8") == REAL_CSV
    assert fake.read_text(encoding="utf-8") == FAKE_CSV


def test_merge_drain_keeps_rows_with_unicode_line_separators(tmp_path: Path) -> None:
    real = tmp_path / "real.csv"
    fake = tmp_path / "fake.csv"
    real.write_text("text,label\nfirst,0\nSenate votes\u2028today,0\n", encoding="utf-8")
    fake.write_text("text,label\nArea Man Wins Argument,1\n", encoding="utf-8")

    result = MergeDrainBuilder().run(real, fake, tmp_path / "dataset.json")

    assert "first" in [e.headline for e in result.added]
    assert real.read_text(encoding="utf-8") == "text,label\nSenate votes\u2028today,0\n"
    assert result.remaining == {real: 1, fake: 0}


def test_merge_non_utf8_source_writes_nothing(sources: tuple[Path, Path, Path]) -> None:
    real, fake, output = sources
    fake.write_bytes(b"text,label\n\xff\xfeBad bytes,1\n")
    with pytest.raises(MalformedInputError, match="UTF-8"):
        MergeDrainBuilder().run(real, fake, output)
    assert not output.exists()
    assert real.read_text(encoding="utf-8") == REAL_CSV


def test_merge_directory_source(sources: tuple[Path, Path, Path], tmp_path: Path) -> None:
    real, _, output = sources
    folder = tmp_path / "folder.csv"
    folder.mkdir()
    with pytest.raises(MalformedInputError, match="directory"):
        MergeDrainBuilder().run(real, folder, output)
    assert not output.exists()


def test_merge_records_build_log(sources: tuple[Path, Path, Path], tmp_path: Path) -> None:
    real, fake, output = sources
    build_logger = BuildLogger(log_dir=tmp_path / "logs")
    MergeDrainBuilder(build_logger=build_logger).run(real, fake, output)

    assert build_logger.last_log_path is not None
    record = json.loads(build_logger.last_log_path.read_text())
    assert record["builder_type"] == "merge_drain"
    assert [s["stage"] for s in record["stages"]] == [
        "parse",
        "balance",
        "shuffle",
        "write_dataset",
        "drain",
    ]
    assert record["added_count"] == 4
