"""Configuration loader for cron-builder."""

import json
from pathlib import Path

from loguru import logger
from pydantic import ValidationError
from pydantic_settings import SettingsError

from cron_builder.config.schema import Config

DEFAULT_CONFIG_DIR = Path.home() / ".cron-builder"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.json"


def load_config(config_path: Path | None = None) -> Config:
    """
    Load configuration from file and environment variables.

    Priority: environment variables > config file > defaults. An invalid file
    is skipped with a warning; invalid environment values fall back to the
    built-in defaults.

    Args:
        config_path: Optional path to config file. Defaults to ~/.cron-builder/config.json.

    Returns:
        Loaded configuration.
    """
    path = config_path or DEFAULT_CONFIG_FILE

    if path.exists():
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            config = Config(**data)
            logger.debug(f"Config loaded from {path}")
            return config
        except (OSError, ValueError, TypeError, SettingsError) as e:
            logger.warning(f"Failed to load config from {path}: {e}, using defaults")

    try:
        return Config()
    except (ValidationError, SettingsError) as e:
        logger.warning(f"Invalid CRON_BUILDER_* environment settings: {e}, using defaults")
        return Config.model_construct()


def save_default_config(config_path: Path | None = None) -> Path:
    """
    Save default configuration to file.

    Environment overrides are not written; the file holds the built-in defaults.

    Args:
        config_path: Optional path to save config. Defaults to ~/.cron-builder/config.json.

    Returns:
        Path where config was saved.
    """
    path = config_path or DEFAULT_CONFIG_FILE
    path.parent.mkdir(parents=True, exist_ok=True)

    data = Config.model_construct().model_dump(mode="json")
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")

    logger.info(f"Default config saved to {path}")
    return path
