"""Schedule configuration type definitions."""

from dataclasses import dataclass
from enum import Enum
from typing import Union

DEFAULT_TIME = "00:00"
DEFAULT_EXPRESSION = "0 0 * * *"
WILDCARD = "*"


class ScheduleKind(Enum):
    """Kind of recurring schedule."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    CUSTOM = "custom"


@dataclass(frozen=True)
class DailySchedule:
    """Runs once a day at `time` (HH:MM)."""

    time: str = DEFAULT_TIME

    @property
    def kind(self) -> ScheduleKind:
        return ScheduleKind.DAILY


@dataclass(frozen=True)
class WeeklySchedule:
    """Runs on each listed weekday (0 = Sunday) at `time`."""

    time: str = DEFAULT_TIME
    weekdays: tuple[int, ...] = ()

    @property
    def kind(self) -> ScheduleKind:
        return ScheduleKind.WEEKLY


@dataclass(frozen=True)
class MonthlySchedule:
    """Runs on `day_of_month` at `time`."""

    time: str = DEFAULT_TIME
    day_of_month: int = 1

    @property
    def kind(self) -> ScheduleKind:
        return ScheduleKind.MONTHLY


@dataclass(frozen=True)
class CustomSchedule:
    """Free-form five-field cron expression, kept verbatim."""

    raw_expression: str | None = None

    @property
    def kind(self) -> ScheduleKind:
        return ScheduleKind.CUSTOM


ScheduleConfig = Union[DailySchedule, WeeklySchedule, MonthlySchedule, CustomSchedule]
