"""YAML configuration loading utilities."""

from pathlib import Path

import yaml

from fakenewsdle.config.models import AppConfig


def load_config(path: Path | str) -> AppConfig:
    """Load configuration from YAML file.

    An empty document yields the defaults.

    Args:
        path: Path to YAML config file.

    Returns:
        Validated AppConfig.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        pydantic.ValidationError: If config is invalid.
    """
    path = Path(path)
    with path.open(encoding="utf-8") as f:
        raw = yaml.safe_load(f)

    return AppConfig.model_validate(raw or {})


def get_default_config_path() -> Path:
    """Get path to default config file."""
    return Path(__file__).parent.parent / "configs" / "default.yaml"
