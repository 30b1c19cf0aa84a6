"""Configuration schema using Pydantic."""

from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


class ScheduleDefaults(BaseModel):
    """Default schedule values for new editing sessions."""

    expression: str = "0 0 * * *"
    time: str = "00:00"


class OutputConfig(BaseModel):
    """CLI output configuration."""

    as_json: bool = False


class Config(BaseSettings):
    """Root configuration for cron-builder."""

    defaults: ScheduleDefaults = Field(default_factory=ScheduleDefaults)
    output: OutputConfig = Field(default_factory=OutputConfig)
    log_level: LogLevel = "WARNING"

    model_config = SettingsConfigDict(
        env_prefix="CRON_BUILDER_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        """Accept loguru level names in any case."""
        return value.upper() if isinstance(value, str) else value
