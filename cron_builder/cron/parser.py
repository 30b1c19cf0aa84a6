"""Cron expression parser: cron string -> schedule configuration."""

from loguru import logger

from cron_builder.cron.types import (
    WILDCARD,
    CustomSchedule,
    DailySchedule,
    MonthlySchedule,
    ScheduleConfig,
    WeeklySchedule,
)
from cron_builder.utils.helpers import format_time, is_plain_int

FIELD_COUNT = 5


def parse_expression(cron: str) -> ScheduleConfig | None:
    """
    Classify a five-field cron expression.

    Expressions that do not fit the daily, weekly or monthly shapes are
    returned as a CustomSchedule holding the input verbatim.

    Args:
        cron: Cron expression ("minute hour day month weekday").

    Returns:
        The matching schedule, or None when the input is not five fields.
    """
    parts = cron.split()
    if len(parts) != FIELD_COUNT:
        logger.debug(f"Not a five-field cron expression: {cron!r}")
        return None

    minute, hour, day, month, weekday = parts

    if not (is_plain_int(minute) and is_plain_int(hour)) or month != WILDCARD:
        return _custom(cron)

    time = format_time(hour, minute)

    if day == WILDCARD and weekday == WILDCARD:
        return DailySchedule(time=time)

    if day == WILDCARD:
        days = weekday.split(",")
        if not all(is_plain_int(d) for d in days):
            return _custom(cron)
        return WeeklySchedule(time=time, weekdays=tuple(int(d) for d in days))

    if weekday == WILDCARD and is_plain_int(day):
        return MonthlySchedule(time=time, day_of_month=int(day))

    return _custom(cron)


def _custom(cron: str) -> CustomSchedule:
    logger.debug(f"Treating cron expression as custom: {cron!r}")
    return CustomSchedule(raw_expression=cron)
