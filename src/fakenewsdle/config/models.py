"""Pydantic configuration models for Fakenewsdle components."""

from datetime import date

from pydantic import BaseModel, Field

from fakenewsdle.dataset.content_filter import DEFAULT_BLOCKLIST

# ============================================================
# Game Config
# ============================================================


class GameConfig(BaseModel):
    """Cosmetic variant and rotation settings for the daily game.

    ``true_label`` names the fabricated/satirical choice, ``false_label`` the
    genuine one.
    """

    variant: str = "onion"
    title: str = "Onion or Not"
    subtitle: str = "Today's Daily Challenge"
    true_label: str = "🧅 The Onion"
    false_label: str = "📰 Real News"
    reveal_true_text: str = "satirical Onion"
    reveal_false_text: str = "real news"
    page_size: int = Field(default=10, gt=0)
    epoch_date: date = date(2025, 9, 29)
    storage_key: str = Field(default="onionGameProgress", min_length=1)
    excellent_message: str = "Excellent! You're a headline expert!"
    good_message: str = "Good job! You can spot satire pretty well!"
    poor_message: str = "The Onion got you! Better luck next time!"

    model_config = {"frozen": True}


# ============================================================
# Builder Configs
# ============================================================


class MergeDrainConfig(BaseModel):
    """Configuration for MergeDrainBuilder."""

    flag_field: str = "isFake"
    indent: int | None = 2
    preview_count: int = Field(default=3, ge=0)

    model_config = {"frozen": True}


class FilterOverwriteConfig(BaseModel):
    """Configuration for FilterOverwriteBuilder."""

    fake_label: str = "1"
    flag_field: str = "isOnion"
    blocklist: list[str] = Field(default_factory=lambda: list(DEFAULT_BLOCKLIST))
    preview_count: int = Field(default=3, ge=0)

    model_config = {"frozen": True}


# ============================================================
# Logging Config
# ============================================================


class LoggingConfig(BaseModel):
    """Configuration for console logging and the build run log."""

    enabled: bool = False
    log_dir: str = "logs"
    level: str = "INFO"

    model_config = {"frozen": True}


# ============================================================
# Root Config
# ============================================================


class AppConfig(BaseModel):
    """Root configuration for Fakenewsdle."""

    game: GameConfig = Field(default_factory=GameConfig)
    merge: MergeDrainConfig = Field(default_factory=MergeDrainConfig)
    filter: FilterOverwriteConfig = Field(default_factory=FilterOverwriteConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}
