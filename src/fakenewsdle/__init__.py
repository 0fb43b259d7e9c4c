"""Fakenewsdle: a daily real-or-fake headline game and its dataset builders."""

from fakenewsdle.builder import BuildResult, FilterOverwriteBuilder, MergeDrainBuilder
from fakenewsdle.config import (
    AppConfig,
    FilterOverwriteConfig,
    GameConfig,
    MergeDrainConfig,
    create_filter_builder,
    create_merge_builder,
    create_session,
    load_config,
)
from fakenewsdle.data import (
    AnswerRecord,
    DatasetEntry,
    GuessResult,
    HeadlineRecord,
    ProgressSummary,
    Question,
    SessionProgress,
    SessionState,
)
from fakenewsdle.dataset import (
    ContentFilter,
    balance_records,
    load_dataset,
    parse_csv,
    parse_csv_line,
    save_dataset,
    shuffle_entries,
)
from fakenewsdle.errors import (
    FakenewsdleError,
    MalformedInputError,
    MalformedPersistedStateError,
    MissingFileError,
    SessionStateError,
)
from fakenewsdle.game import (
    FileProgressStore,
    GameSession,
    InMemoryProgressStore,
    ProgressStore,
    build_share_text,
    select_today,
)
from fakenewsdle.run_logger import BuildLogger

__all__ = [
    # Models
    "AnswerRecord",
    "DatasetEntry",
    "GuessResult",
    "HeadlineRecord",
    "ProgressSummary",
    "Question",
    "SessionProgress",
    "SessionState",
    # Errors
    "FakenewsdleError",
    "MalformedInputError",
    "MalformedPersistedStateError",
    "MissingFileError",
    "SessionStateError",
    # Dataset
    "ContentFilter",
    "balance_records",
    "load_dataset",
    "parse_csv",
    "parse_csv_line",
    "save_dataset",
    "shuffle_entries",
    # Builders
    "BuildResult",
    "FilterOverwriteBuilder",
    "MergeDrainBuilder",
    # Game
    "GameSession",
    "build_share_text",
    "select_today",
    # Protocols
    "ProgressStore",
    # Stores
    "FileProgressStore",
    "InMemoryProgressStore",
    # Logging
    "BuildLogger",
    # Config
    "AppConfig",
    "FilterOverwriteConfig",
    "GameConfig",
    "MergeDrainConfig",
    "create_filter_builder",
    "create_merge_builder",
    "create_session",
    "load_config",
]
