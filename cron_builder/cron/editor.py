"""Stateful schedule editor backing interactive builders."""

from typing import Callable

from loguru import logger

from cron_builder.cron.generator import generate_expression
from cron_builder.cron.humanizer import human_readable
from cron_builder.cron.parser import parse_expression
from cron_builder.cron.types import (
    DEFAULT_EXPRESSION,
    DEFAULT_TIME,
    CustomSchedule,
    DailySchedule,
    MonthlySchedule,
    ScheduleConfig,
    ScheduleKind,
    WeeklySchedule,
)
from cron_builder.utils.helpers import normalize_time


class ScheduleInputError(ValueError):
    """Raised when an editor field receives an unusable value."""


def validate_time(value: str) -> str:
    """Return `value` as zero-padded HH:MM, or raise ScheduleInputError."""
    time = normalize_time(value)
    if time is None:
        raise ScheduleInputError(f"Invalid time: {value!r} (expected HH:MM, 24-hour)")
    return time


def validate_weekday(day: int) -> int:
    if not 0 <= day <= 6:
        raise ScheduleInputError(f"Invalid weekday: {day} (expected 0-6)")
    return day


def validate_day_of_month(day: int | str) -> int:
    """Return `day` as an int in 1-31, or raise ScheduleInputError."""
    try:
        value = int(day)
    except (TypeError, ValueError):
        raise ScheduleInputError(f"Invalid day of month: {day!r}") from None
    if not 1 <= value <= 31:
        raise ScheduleInputError(f"Invalid day of month: {value} (expected 1-31)")
    return value


class ScheduleEditor:
    """
    Editing session over a single schedule.

    Holds the fields of every schedule kind at once, so switching kinds back
    and forth keeps what the user already entered. Each change regenerates
    the cron expression and reports it through `on_change`.
    """

    def __init__(
        self,
        expression: str = DEFAULT_EXPRESSION,
        on_change: Callable[[str], None] | None = None,
    ) -> None:
        self._on_change = on_change
        self.time = DEFAULT_TIME
        self.weekdays: list[int] = []
        self.day_of_month = 1
        self.custom_expression = DEFAULT_EXPRESSION

        config = parse_expression(expression) or DailySchedule(time=DEFAULT_TIME)
        self.kind = config.kind

        if isinstance(config, CustomSchedule):
            self.custom_expression = config.raw_expression or DEFAULT_EXPRESSION
        else:
            self.time = config.time
        if isinstance(config, WeeklySchedule):
            self.weekdays = list(config.weekdays)
        if isinstance(config, MonthlySchedule):
            self.day_of_month = config.day_of_month

    @property
    def config(self) -> ScheduleConfig:
        """Immutable snapshot of the schedule for the current kind."""
        if self.kind == ScheduleKind.WEEKLY:
            return WeeklySchedule(time=self.time, weekdays=tuple(self.weekdays))
        if self.kind == ScheduleKind.MONTHLY:
            return MonthlySchedule(time=self.time, day_of_month=self.day_of_month)
        if self.kind == ScheduleKind.CUSTOM:
            return CustomSchedule(raw_expression=self.custom_expression)
        return DailySchedule(time=self.time)

    @property
    def expression(self) -> str:
        return generate_expression(self.config)

    @property
    def description(self) -> str:
        return human_readable(self.expression)

    def set_kind(self, kind: ScheduleKind | str) -> str:
        """Switch schedule kind, keeping every other field."""
        try:
            self.kind = ScheduleKind(kind)
        except ValueError:
            raise ScheduleInputError(f"Unknown schedule kind: {kind}") from None
        return self._changed()

    def set_time(self, value: str) -> str:
        """Set the HH:MM time used by daily, weekly and monthly schedules."""
        self.time = validate_time(value)
        return self._changed()

    def toggle_weekday(self, day: int) -> str:
        """
        Select or deselect a weekday (0 = Sunday). Selection stays sorted.

        A selected day can always be deselected, even one outside 0-6 that
        came from the starting expression.
        """
        if day in self.weekdays:
            self.weekdays = [d for d in self.weekdays if d != day]
        else:
            self.weekdays = sorted([*self.weekdays, validate_weekday(day)])
        return self._changed()

    def set_day_of_month(self, day: int | str) -> str:
        """Set the day of month (1-31)."""
        self.day_of_month = validate_day_of_month(day)
        return self._changed()

    def set_custom_expression(self, expression: str) -> str:
        """Store a free-form expression and switch to the custom kind."""
        self.custom_expression = expression
        self.kind = ScheduleKind.CUSTOM
        return self._changed()

    def _changed(self) -> str:
        expression = self.expression
        logger.debug(f"Schedule updated: {self.kind.value} -> {expression}")
        if self._on_change is not None:
            self._on_change(expression)
        return expression
