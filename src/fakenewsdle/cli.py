"""CLI for the Fakenewsdle dataset builders and terminal game."""

import argparse
import json
import logging
import sys
from collections.abc import Callable
from datetime import date, datetime
from pathlib import Path
from typing import NoReturn

from pydantic import BaseModel, ValidationError, model_validator

from fakenewsdle.builder import default_output_path
from fakenewsdle.config import (
    AppConfig,
    create_filter_builder,
    create_merge_builder,
    create_run_logger,
    create_session,
    get_default_config_path,
    load_config,
)
from fakenewsdle.data import DatasetEntry, SessionState
from fakenewsdle.dataset import load_dataset
from fakenewsdle.errors import FakenewsdleError
from fakenewsdle.game import (
    FileProgressStore,
    GameSession,
    format_countdown,
    score_message,
    time_until_next_rotation,
)

logger = logging.getLogger(__name__)


class CLIArgs(BaseModel):
    """Validated arguments shared by all commands."""

    config: Path
    log: bool = False
    log_dir: str | None = None
    verbose: bool = False


class MergeArgs(CLIArgs):
    """Arguments for ``merge``."""

    real_csv: Path
    fake_csv: Path
    output: Path


class FilterArgs(CLIArgs):
    """Arguments for ``filter``; output defaults to the input with a .json suffix."""

    input_csv: Path
    output: Path | None = None

    @model_validator(mode="after")
    def default_output(self) -> "FilterArgs":
        if self.output is None:
            self.output = default_output_path(self.input_csv)
        return self


class PlayArgs(CLIArgs):
    """Arguments for ``play``."""

    dataset: Path
    progress_dir: Path
    play_date: date | None = None


class _Parser(argparse.ArgumentParser):
    """Argument parser that exits with status 1 on usage errors."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _preview(entries: list[DatasetEntry], flag_field: str, count: int) -> None:
    if not entries or count == 0:
        return
    print("\nPreview of added records:")
    preview = [{"headline": e.headline, flag_field: e.is_fake} for e in entries[:count]]
    print(json.dumps(preview, indent=2, ensure_ascii=False))
    if len(entries) > count:
        print(f"   ... and {len(entries) - count} more")


def run_merge(args: MergeArgs, config: AppConfig) -> None:
    """Merge two CSV sources into the dataset and drain them."""
    build_logger = create_run_logger(
        config, log_override=args.log or None, log_dir_override=args.log_dir
    )
    builder = create_merge_builder(config.merge, build_logger=build_logger)
    result = builder.run(args.real_csv, args.fake_csv, args.output)
    logger.info("\nDone!")
    _preview(result.added, config.merge.flag_field, config.merge.preview_count)

    if build_logger and build_logger.last_log_path:
        logger.info(f"\nBuild log written to: {build_logger.last_log_path}")


def run_filter(args: FilterArgs, config: AppConfig) -> None:
    """Convert one CSV source into a filtered, shuffled dataset."""
    build_logger = create_run_logger(
        config, log_override=args.log or None, log_dir_override=args.log_dir
    )
    builder = create_filter_builder(config.filter, build_logger=build_logger)
    result = builder.run(args.input_csv, args.output)
    logger.info("\nDone!")
    _preview(result.added, config.filter.flag_field, config.filter.preview_count)

    if build_logger and build_logger.last_log_path:
        logger.info(f"\nBuild log written to: {build_logger.last_log_path}")


def _ask_guess(session: GameSession, read: Callable[[str], str]) -> bool:
    question = session.get_current_question()
    false_label, true_label = question.choice_labels
    while True:
        answer = read(f"[1] {false_label}   [2] {true_label} > ").strip()
        if answer in ("1", "2"):
            return answer == "2"
        print("Please enter 1 or 2.")


def play(
    session: GameSession,
    config: AppConfig,
    read: Callable[[str], str] = input,
    clock: Callable[[], datetime] = datetime.now,
) -> None:
    """Drive a started session in the terminal until today's set is complete."""
    game = config.game
    print(f"\n{game.title}\n{game.subtitle}")

    while session.state is not SessionState.COMPLETE:
        question = session.get_current_question()
        summary = session.get_progress_summary()
        print(
            f"\nQuestion {question.number} of {question.total}   "
            f"Score: {summary.score}/{summary.total_answered}"
        )
        print(f"\n  {question.headline}\n")

        result = session.submit_guess(_ask_guess(session, read))
        verdict = "✅ Correct!" if result.correct else "❌ Wrong"
        print(f"{verdict} This was a {result.reveal_label} headline.")
        session.advance()

    summary = session.get_progress_summary()
    print("\nToday's Challenge Complete!")
    if summary.total_answered:
        print(
            f"You got {summary.score} out of {summary.total_answered} headlines correct! "
            f"({summary.accuracy_pct:.0f}%)"
        )
        print(
            score_message(
                summary.accuracy_pct,
                game.excellent_message,
                game.good_message,
                game.poor_message,
            )
        )
    print(f"\n{summary.share_text}\n")
    print("Come back tomorrow for new headlines!")
    print(f"Next challenge in: {format_countdown(time_until_next_rotation(clock()))}")


def _fixed_clock(day: date) -> Callable[[], datetime]:
    fixed = datetime.combine(day, datetime.now().time())
    return lambda: fixed


def run_play(args: PlayArgs, config: AppConfig) -> None:
    """Play today's headlines in the terminal."""
    dataset = load_dataset(args.dataset)
    clock = _fixed_clock(args.play_date) if args.play_date is not None else datetime.now
    session = create_session(config, dataset, FileProgressStore(args.progress_dir), clock=clock)
    session.start()
    play(session, config, clock=clock)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for all commands."""
    parser = _Parser(
        prog="fakenewsdle",
        description="Build headline datasets and play the daily real-or-fake game.",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: packaged configs/default.yaml)",
    )
    parser.add_argument(
        "--log",
        action="store_true",
        default=False,
        help="Write a JSON build log for merge/filter runs",
    )
    parser.add_argument(
        "--log-dir",
        type=str,
        default=None,
        help="Directory for build logs (default: from config)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    sub = parser.add_subparsers(dest="command", required=True, parser_class=_Parser)

    merge = sub.add_parser(
        "merge", help="Merge real and fake CSVs into the dataset and drain them"
    )
    merge.add_argument("real_csv", type=Path, help="CSV of real headlines")
    merge.add_argument("fake_csv", type=Path, help="CSV of fake/satirical headlines")
    merge.add_argument("output", type=Path, help="Dataset JSON file to append to")

    filt = sub.add_parser("filter", help="Convert one labeled CSV into a filtered dataset")
    filt.add_argument("input_csv", type=Path, help="Labeled CSV (label 1 = fake)")
    filt.add_argument("output", type=Path, nargs="?", default=None, help="Dataset JSON file")

    play_cmd = sub.add_parser("play", help="Play today's headlines in the terminal")
    play_cmd.add_argument(
        "--dataset", type=Path, default=Path("dataset.json"), help="Dataset JSON file"
    )
    play_cmd.add_argument(
        "--progress-dir",
        type=Path,
        default=Path(".fakenewsdle"),
        help="Directory for saved daily progress",
    )
    play_cmd.add_argument(
        "--date", type=date.fromisoformat, default=None, help="Play as if today were YYYY-MM-DD"
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Entry point for the CLI."""
    ns = build_parser().parse_args(argv)
    config_path: Path = ns.config if ns.config else get_default_config_path()
    common = {"config": config_path, "log": ns.log, "log_dir": ns.log_dir, "verbose": ns.verbose}

    try:
        config = load_config(config_path)
        logging.basicConfig(
            level=logging.DEBUG if ns.verbose else config.logging.level.upper(),
            format="%(message)s",
        )
        if ns.command == "merge":
            run_merge(
                MergeArgs(real_csv=ns.real_csv, fake_csv=ns.fake_csv, output=ns.output, **common),
                config,
            )
        elif ns.command == "filter":
            run_filter(FilterArgs(input_csv=ns.input_csv, output=ns.output, **common), config)
        else:
            run_play(
                PlayArgs(
                    dataset=ns.dataset, progress_dir=ns.progress_dir, play_date=ns.date, **common
                ),
                config,
            )
    except (FakenewsdleError, FileNotFoundError, ValidationError) as e:
        logging.basicConfig(level=logging.INFO, format="%(message)s")
        logger.error(f"Error: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
