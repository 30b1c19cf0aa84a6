"""Utility functions module."""

from cron_builder.utils.helpers import (
    format_time,
    is_plain_int,
    normalize_time,
    split_time,
)

__all__ = ["format_time", "is_plain_int", "normalize_time", "split_time"]
