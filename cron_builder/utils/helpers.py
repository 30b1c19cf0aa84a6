"""Common utility functions."""

import re

_TIME_PATTERN = re.compile(r"^(\d{1,2}):(\d{1,2})$")


def is_plain_int(token: str) -> bool:
    """Return True when a cron field token is a plain non-negative decimal integer."""
    return token.isascii() and token.isdigit()


def format_time(hour: str | int, minute: str | int) -> str:
    """
    Build a zero-padded HH:MM string.

    Args:
        hour: Hour value, as cron token or integer.
        minute: Minute value, as cron token or integer.

    Returns:
        Time string such as "09:05".
    """
    return f"{str(hour).zfill(2)}:{str(minute).zfill(2)}"


def split_time(value: str | None) -> tuple[int, int]:
    """
    Split an HH:MM string into (hour, minute).

    Missing or unparseable values fall back to midnight.

    Args:
        value: Time string.

    Returns:
        Tuple of hour and minute integers.
    """
    if not value:
        return 0, 0
    match = _TIME_PATTERN.match(value.strip())
    if not match:
        return 0, 0
    return int(match.group(1)), int(match.group(2))


def normalize_time(value: str) -> str | None:
    """
    Validate a 24-hour time and return it zero-padded.

    Args:
        value: Time string like "9:30" or "09:30".

    Returns:
        Normalized "HH:MM" string, or None when the value is not a valid time.
    """
    match = _TIME_PATTERN.match(value.strip())
    if not match:
        return None
    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        return None
    return format_time(hour, minute)

