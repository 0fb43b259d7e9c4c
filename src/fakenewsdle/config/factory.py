"""Factory functions to create components from configuration."""

import random
from collections.abc import Callable, Sequence
from datetime import datetime
from pathlib import Path

from fakenewsdle.builder.filter_overwrite import FilterOverwriteBuilder
from fakenewsdle.builder.merge_drain import MergeDrainBuilder
from fakenewsdle.config.models import AppConfig, FilterOverwriteConfig, MergeDrainConfig
from fakenewsdle.data import DatasetEntry
from fakenewsdle.dataset import ContentFilter
from fakenewsdle.game.session import GameSession
from fakenewsdle.game.storage import ProgressStore
from fakenewsdle.run_logger import BuildLogger


def create_run_logger(
    config: AppConfig,
    *,
    log_override: bool | None = None,
    log_dir_override: str | None = None,
) -> BuildLogger | None:
    """Create the build run logger, or None if logging is disabled.

    Args:
        config: Root configuration.
        log_override: Override the config's logging.enabled setting.
        log_dir_override: Override the config's logging.log_dir setting.
    """
    log_enabled = log_override if log_override is not None else config.logging.enabled
    if not log_enabled:
        return None
    log_dir = Path(log_dir_override if log_dir_override is not None else config.logging.log_dir)
    return BuildLogger(log_dir=log_dir, enabled=True)


def create_merge_builder(
    config: MergeDrainConfig,
    build_logger: BuildLogger | None = None,
    rng: random.Random | None = None,
) -> MergeDrainBuilder:
    """Create a merge-and-drain builder from config."""
    return MergeDrainBuilder(
        flag_field=config.flag_field,
        indent=config.indent,
        rng=rng,
        build_logger=build_logger,
    )


def create_filter_builder(
    config: FilterOverwriteConfig,
    build_logger: BuildLogger | None = None,
    rng: random.Random | None = None,
) -> FilterOverwriteBuilder:
    """Create a filter-and-overwrite builder from config."""
    return FilterOverwriteBuilder(
        content_filter=ContentFilter(config.blocklist),
        fake_label=config.fake_label,
        flag_field=config.flag_field,
        rng=rng,
        build_logger=build_logger,
    )


def create_session(
    config: AppConfig,
    dataset: Sequence[DatasetEntry],
    store: ProgressStore,
    clock: Callable[[], datetime] = datetime.now,
) -> GameSession:
    """Create an unstarted game session for the configured variant."""
    return GameSession(dataset=dataset, config=config.game, store=store, clock=clock)
