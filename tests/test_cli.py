"""Tests for the command-line interface."""

import json
from datetime import date, datetime
from pathlib import Path

import pytest

from fakenewsdle.cli import FilterArgs, build_parser, main, play
from fakenewsdle.config import AppConfig, GameConfig
from fakenewsdle.data import AnswerRecord, DatasetEntry, SessionProgress, SessionState
from fakenewsdle.game import FileProgressStore, GameSession, InMemoryProgressStore


@pytest.fixture
def sources(tmp_path: Path) -> tuple[Path, Path, Path]:
    real = tmp_path / "real.csv"
    fake = tmp_path / "fake.csv"
    real.write_text("text,label\nReal A,0\nReal B,0\nReal C,0\nReal D,0\nReal E,0\n")
    fake.write_text("text,label\nFake A,1\nFake B,1\nFake C,1\nFake D,1\n")
    return real, fake, tmp_path / "dataset.json"


def test_missing_arguments_exit_one(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc:
        main(["merge", "real.csv"])
    assert exc.value.code == 1
    assert "error" in capsys.readouterr().err


def test_no_command_exits_one() -> None:
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 1


def test_merge_command(
    sources: tuple[Path, Path, Path], capsys: pytest.CaptureFixture[str]
) -> None:
    real, fake, output = sources
    main(["merge", str(real), str(fake), str(output)])

    dataset = json.loads(output.read_text())
    assert len(dataset) == 8
    assert real.read_text() == "text,label\nReal E,0\n"
    assert fake.read_text() == "text,label\n"

    out = capsys.readouterr().out
    assert "Preview of added records" in out
    assert "... and 5 more" in out


def test_merge_missing_file_exits_one(sources: tuple[Path, Path, Path], tmp_path: Path) -> None:
    _, fake, output = sources
    with pytest.raises(SystemExit) as exc:
        main(["merge", str(tmp_path / "nope.csv"), str(fake), str(output)])
    assert exc.value.code == 1


def test_merge_bad_header_exits_one(sources: tuple[Path, Path, Path]) -> None:
    real, fake, output = sources
    fake.write_text("headline\nx\n")
    with pytest.raises(SystemExit) as exc:
        main(["merge", str(real), str(fake), str(output)])
    assert exc.value.code == 1


def test_merge_bad_existing_json_exits_one(sources: tuple[Path, Path, Path]) -> None:
    real, fake, output = sources
    output.write_text("not json")
    with pytest.raises(SystemExit) as exc:
        main(["merge", str(real), str(fake), str(output)])
    assert exc.value.code == 1


def test_merge_with_build_log(sources: tuple[Path, Path, Path], tmp_path: Path) -> None:
    real, fake, output = sources
    log_dir = tmp_path / "logs"
    main(["--log", "--log-dir", str(log_dir), "merge", str(real), str(fake), str(output)])
    assert len(list(log_dir.glob("build_*.json"))) == 1


def test_filter_command_default_output(tmp_path: Path) -> None:
    source = tmp_path / "onion.csv"
    source.write_text("text,label\nArea Man Sad,1\nBill Passes,0\nDog Runs For Office,1\n")
    main(["filter", str(source)])

    rows = json.loads((tmp_path / "onion.json").read_text())
    assert sorted(r["headline"] for r in rows) == ["Bill Passes", "Dog Runs For Office"]
    assert {r["headline"]: r["isOnion"] for r in rows}["Dog Runs For Office"] is True


def test_filter_args_default_output() -> None:
    args = FilterArgs(config=Path("c.yaml"), input_csv=Path("data/in.csv"))
    assert args.output == Path("data/in.json")


def test_invalid_config_exits_one(tmp_path: Path, sources: tuple[Path, Path, Path]) -> None:
    real, fake, output = sources
    config = tmp_path / "bad.yaml"
    config.write_text("game:\n  page_size: 0\n")
    with pytest.raises(SystemExit) as exc:
        main(["--config", str(config), "merge", str(real), str(fake), str(output)])
    assert exc.value.code == 1


def test_parser_play_defaults() -> None:
    ns = build_parser().parse_args(["play", "--date", "2026-10-18"])
    assert ns.date == date(2026, 10, 18)
    assert ns.dataset == Path("dataset.json")


# -- terminal play --


def _config() -> AppConfig:
    return AppConfig(
        game=GameConfig(page_size=3, epoch_date=date(2026, 10, 18), storage_key="cliTest")
    )


def test_play_runs_to_completion(capsys: pytest.CaptureFixture[str]) -> None:
    dataset = [
        DatasetEntry(headline="One", is_fake=True),
        DatasetEntry(headline="Two", is_fake=False),
        DatasetEntry(headline="Three", is_fake=True),
    ]
    clock = lambda: datetime(2026, 10, 18, 12, 0)  # noqa: E731
    store = InMemoryProgressStore()
    config = _config()
    session = GameSession(dataset, config.game, store, clock=clock)
    session.start()

    replies = iter(["x", "2", "2", "2"])
    play(session, config, read=lambda _prompt: next(replies), clock=clock)

    assert session.state is SessionState.COMPLETE
    assert session.score == 2
    out = capsys.readouterr().out
    assert "Please enter 1 or 2." in out
    assert "2/3 (67%)" in out
    assert "Next challenge in: 12h 0m" in out


def test_play_command_with_finished_day(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    dataset_path = tmp_path / "dataset.json"
    dataset_path.write_text(
        json.dumps([{"headline": f"H{i}", "isFake": i % 2 == 0} for i in range(3)])
    )
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        "game:\n  page_size: 3\n  epoch_date: 2026-10-18\n  storage_key: cliTest\n"
    )
    progress_dir = tmp_path / "progress"
    answers = [AnswerRecord(guess=True, correct=True)] * 3
    FileProgressStore(progress_dir).save(
        "cliTest", SessionProgress(date="2026-10-18", answers=answers, score=3).to_blob()
    )

    main(
        [
            "--config",
            str(config_path),
            "play",
            "--dataset",
            str(dataset_path),
            "--progress-dir",
            str(progress_dir),
            "--date",
            "2026-10-18",
        ]
    )

    out = capsys.readouterr().out
    assert "Today's Challenge Complete!" in out
    assert "3/3 (100%)" in out


def test_play_command_missing_dataset(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as exc:
        main(["play", "--dataset", str(tmp_path / "missing.json")])
    assert exc.value.code == 1


def test_filter_uses_its_own_preview_count(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    config = tmp_path / "config.yaml"
    config.write_text("merge:\n  preview_count: 3\nfilter:\n  preview_count: 0\n")
    source = tmp_path / "onion.csv"
    source.write_text("text,label\nBill Passes,0\nDog Runs For Office,1\n")

    main(["--config", str(config), "filter", str(source)])

    assert "Preview of added records" not in capsys.readouterr().out
    assert (tmp_path / "onion.json").exists()


def test_merge_non_utf8_source_exits_one(sources: tuple[Path, Path, Path]) -> None:
    real, fake, output = sources
    fake.write_bytes(b"text,label\n\xffFake,1\n")
    with pytest.raises(SystemExit) as exc:
        main(["merge", str(real), str(fake), str(output)])
    assert exc.value.code == 1
    assert not output.exists()


def test_filter_directory_source_exits_one(tmp_path: Path) -> None:
    folder = tmp_path / "source.csv"
    folder.mkdir()
    with pytest.raises(SystemExit) as exc:
        main(["filter", str(folder)])
    assert exc.value.code == 1
