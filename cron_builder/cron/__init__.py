"""Cron expression building module."""

from cron_builder.cron.editor import ScheduleEditor, ScheduleInputError
from cron_builder.cron.generator import generate_expression
from cron_builder.cron.humanizer import describe_schedule, human_readable
from cron_builder.cron.parser import parse_expression
from cron_builder.cron.presets import PRESETS, Preset, get_preset
from cron_builder.cron.types import (
    CustomSchedule,
    DailySchedule,
    MonthlySchedule,
    ScheduleConfig,
    ScheduleKind,
    WeeklySchedule,
)

__all__ = [
    "CustomSchedule",
    "DailySchedule",
    "MonthlySchedule",
    "PRESETS",
    "Preset",
    "ScheduleConfig",
    "ScheduleEditor",
    "ScheduleInputError",
    "ScheduleKind",
    "WeeklySchedule",
    "describe_schedule",
    "generate_expression",
    "get_preset",
    "human_readable",
    "parse_expression",
]
