"""Offline builders that produce the JSON dataset from CSV sources."""

from fakenewsdle.builder.base import BuildResult
from fakenewsdle.builder.filter_overwrite import FilterOverwriteBuilder, default_output_path
from fakenewsdle.builder.merge_drain import MergeDrainBuilder

__all__ = [
    "BuildResult",
    "FilterOverwriteBuilder",
    "MergeDrainBuilder",
    "default_output_path",
]
