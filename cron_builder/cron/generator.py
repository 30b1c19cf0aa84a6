"""Cron expression generator: schedule configuration -> cron string."""

from cron_builder.cron.types import (
    DEFAULT_EXPRESSION,
    WILDCARD,
    CustomSchedule,
    DailySchedule,
    MonthlySchedule,
    ScheduleConfig,
    WeeklySchedule,
)
from cron_builder.utils.helpers import split_time


def generate_expression(config: ScheduleConfig) -> str:
    """
    Render a schedule as a five-field cron expression.

    Never fails: missing or malformed fields fall back to defaults
    (midnight, day 1, wildcard weekday) and unknown configs yield
    "0 0 * * *".

    Args:
        config: Schedule to render.

    Returns:
        Cron expression string.
    """
    if isinstance(config, CustomSchedule):
        return config.raw_expression or DEFAULT_EXPRESSION

    if not isinstance(config, (DailySchedule, WeeklySchedule, MonthlySchedule)):
        return DEFAULT_EXPRESSION

    hour, minute = split_time(config.time)

    if isinstance(config, WeeklySchedule):
        days = ",".join(str(d) for d in config.weekdays) or WILDCARD
        return f"{minute} {hour} * * {days}"

    if isinstance(config, MonthlySchedule):
        return f"{minute} {hour} {config.day_of_month or 1} * *"

    return f"{minute} {hour} * * *"
