"""Ready-made example schedules."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Preset:
    """A named example cron expression."""

    expression: str
    description: str


PRESETS: tuple[Preset, ...] = (
    Preset("0 9 * * *", "Daily at 9:00 AM"),
    Preset("30 14 * * 1,3,5", "Mon, Wed, Fri at 2:30 PM"),
    Preset("0 0 15 * *", "Monthly on 15th at midnight"),
)


def get_preset(index: int) -> Preset:
    """Return the preset at `index`. Raises IndexError when out of range."""
    if not 0 <= index < len(PRESETS):
        raise IndexError(f"No preset at index {index}")
    return PRESETS[index]
