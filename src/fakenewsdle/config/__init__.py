"""Configuration module for Fakenewsdle."""

from fakenewsdle.config.factory import (
    create_filter_builder,
    create_merge_builder,
    create_run_logger,
    create_session,
)
from fakenewsdle.config.loader import get_default_config_path, load_config
from fakenewsdle.config.models import (
    AppConfig,
    FilterOverwriteConfig,
    GameConfig,
    LoggingConfig,
    MergeDrainConfig,
)

__all__ = [
    "AppConfig",
    "FilterOverwriteConfig",
    "GameConfig",
    "LoggingConfig",
    "MergeDrainConfig",
    "create_filter_builder",
    "create_merge_builder",
    "create_run_logger",
    "create_session",
    "get_default_config_path",
    "load_config",
]
