"""Configuration module."""

from cron_builder.config.schema import Config
from cron_builder.config.loader import load_config, save_default_config

__all__ = ["Config", "load_config", "save_default_config"]
