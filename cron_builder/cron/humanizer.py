"""Natural-language rendering of cron expressions."""

from cron_builder.cron.parser import parse_expression
from cron_builder.cron.types import (
    CustomSchedule,
    DailySchedule,
    MonthlySchedule,
    WeeklySchedule,
)

DAY_NAMES = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")

INVALID_EXPRESSION = "Invalid cron expression"
INVALID_SCHEDULE = "Invalid schedule"


def ordinal_suffix(day: int) -> str:
    """Suffix for a day of month. Only 1, 2 and 3 get special forms."""
    return {1: "st", 2: "nd", 3: "rd"}.get(day, "th")


def day_name(day: int) -> str:
    if 0 <= day < len(DAY_NAMES):
        return DAY_NAMES[day]
    return str(day)


def describe_schedule(config: object) -> str:
    """
    Render a schedule configuration as a sentence.

    Args:
        config: A schedule variant.

    Returns:
        Description, or "Invalid schedule" for anything unrecognized.
    """
    if isinstance(config, DailySchedule):
        return f"Daily at {config.time}"
    if isinstance(config, WeeklySchedule):
        days = ", ".join(day_name(d) for d in config.weekdays)
        return f"Weekly on {days} at {config.time}"
    if isinstance(config, MonthlySchedule):
        day = config.day_of_month
        return f"Monthly on the {day}{ordinal_suffix(day)} at {config.time}"
    if isinstance(config, CustomSchedule):
        return f"Custom: {config.raw_expression}"
    return INVALID_SCHEDULE


def human_readable(cron: str) -> str:
    """
    Describe a cron expression in plain English.

    Args:
        cron: Cron expression.

    Returns:
        Description such as "Weekly on Monday, Friday at 09:00", or
        "Invalid cron expression" when the input is not five fields.
    """
    config = parse_expression(cron)
    if config is None:
        return INVALID_EXPRESSION
    return describe_schedule(config)
