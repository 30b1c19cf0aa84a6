"""CLI commands for cron-builder."""

import json
import sys
from pathlib import Path
from typing import List, Optional

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cron_builder.config import load_config, save_default_config
from cron_builder.cron import (
    PRESETS,
    CustomSchedule,
    DailySchedule,
    MonthlySchedule,
    ScheduleConfig,
    ScheduleEditor,
    ScheduleInputError,
    ScheduleKind,
    WeeklySchedule,
    generate_expression,
    human_readable,
    parse_expression,
)
from cron_builder.cron.editor import validate_day_of_month, validate_time, validate_weekday
from cron_builder.cron.humanizer import INVALID_EXPRESSION

app = typer.Typer(
    name="cron-builder",
    help="cron-builder: build, parse and describe five-field cron expressions",
)
console = Console()


def _setup_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level.upper())


@app.callback()
def main() -> None:
    """cron-builder: build, parse and describe five-field cron expressions."""
    # Quiet until a command has loaded its configured level.
    _setup_logging("WARNING")


def _schedule_fields(config: ScheduleConfig) -> dict[str, object]:
    """Flatten a schedule into display/JSON fields."""
    fields: dict[str, object] = {"kind": config.kind.value}
    if isinstance(config, CustomSchedule):
        fields["expression"] = config.raw_expression
        return fields
    fields["time"] = config.time
    if isinstance(config, WeeklySchedule):
        fields["weekdays"] = list(config.weekdays)
    if isinstance(config, MonthlySchedule):
        fields["day_of_month"] = config.day_of_month
    return fields


@app.command()
def parse(
    expression: str = typer.Argument(..., help="Cron expression, quoted"),
    as_json: Optional[bool] = typer.Option(None, "--json/--no-json", help="Output JSON"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Config file path"),
) -> None:
    """Parse a cron expression into schedule fields."""
    config = load_config(config_path)
    _setup_logging(config.log_level)

    schedule = parse_expression(expression)
    if schedule is None:
        console.print(f"[red]Error:[/red] {INVALID_EXPRESSION}")
        raise typer.Exit(1)

    fields = _schedule_fields(schedule)
    if as_json if as_json is not None else config.output.as_json:
        typer.echo(json.dumps(fields))
        return

    table = Table(title="Schedule")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")
    for key, value in fields.items():
        table.add_row(key, ", ".join(map(str, value)) if isinstance(value, list) else str(value))
    console.print(table)


@app.command()
def generate(
    kind: str = typer.Option(..., "--kind", "-k", help="daily, weekly, monthly or custom"),
    time: Optional[str] = typer.Option(None, "--time", "-t", help="Time as HH:MM"),
    weekdays: Optional[List[int]] = typer.Option(None, "--weekday", "-w", help="Weekday, 0 = Sunday (repeatable)"),
    day: int = typer.Option(1, "--day", "-d", help="Day of month"),
    expression: Optional[str] = typer.Option(None, "--expression", "-e", help="Raw expression for custom"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Config file path"),
) -> None:
    """Generate a cron expression from schedule fields."""
    config = load_config(config_path)
    _setup_logging(config.log_level)

    try:
        schedule_kind = ScheduleKind(kind.lower())
    except ValueError:
        console.print(f"[red]Error:[/red] Unknown schedule kind: {kind}")
        raise typer.Exit(1)

    try:
        schedule = _build_schedule(
            schedule_kind, time or config.defaults.time, weekdays or [], day, expression
        )
    except ScheduleInputError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    typer.echo(generate_expression(schedule))


def _build_schedule(
    kind: ScheduleKind,
    time: str,
    weekdays: list[int],
    day: int,
    expression: str | None,
) -> ScheduleConfig:
    """Validate CLI fields with the editor's rules and build the schedule."""
    if kind == ScheduleKind.CUSTOM:
        return CustomSchedule(raw_expression=expression)

    normalized = validate_time(time)
    if kind == ScheduleKind.WEEKLY:
        return WeeklySchedule(time=normalized, weekdays=tuple(validate_weekday(d) for d in weekdays))
    if kind == ScheduleKind.MONTHLY:
        return MonthlySchedule(time=normalized, day_of_month=validate_day_of_month(day))
    return DailySchedule(time=normalized)


@app.command()
def describe(
    expression: str = typer.Argument(..., help="Cron expression, quoted"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Config file path"),
) -> None:
    """Describe a cron expression in plain English."""
    config = load_config(config_path)
    _setup_logging(config.log_level)

    typer.echo(human_readable(expression))


@app.command()
def presets(
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Config file path"),
) -> None:
    """List example schedules."""
    config = load_config(config_path)
    _setup_logging(config.log_level)

    table = Table(title="Presets")
    table.add_column("#", style="dim")
    table.add_column("Expression", style="cyan", no_wrap=True)
    table.add_column("Label")
    table.add_column("Description", style="green")

    for index, preset in enumerate(PRESETS):
        table.add_row(str(index), preset.expression, preset.description, human_readable(preset.expression))

    console.print(table)


def _show(editor: ScheduleEditor) -> None:
    console.print(f"{escape(editor.expression)}  [dim]{escape(editor.description)}[/dim]")


def _apply_edit(editor: ScheduleEditor, command: str, argument: str) -> None:
    if command == "kind":
        editor.set_kind(argument.lower())
    elif command == "time":
        editor.set_time(argument)
    elif command == "day":
        editor.set_day_of_month(argument)
    elif command == "toggle":
        try:
            weekday = int(argument)
        except ValueError:
            raise ScheduleInputError(f"Invalid weekday: {argument!r}") from None
        editor.toggle_weekday(weekday)
    elif command == "custom":
        editor.set_custom_expression(argument)
    else:
        raise ScheduleInputError(f"Unknown command: {command}")


@app.command()
def edit(
    expression: Optional[str] = typer.Argument(None, help="Starting cron expression"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Config file path"),
) -> None:
    """Edit a schedule interactively."""
    config = load_config(config_path)
    _setup_logging(config.log_level)

    editor = ScheduleEditor(expression or config.defaults.expression)

    console.print("[bold]cron-builder[/bold] interactive editor.")
    console.print("Commands: kind <k>, time <HH:MM>, day <n>, toggle <weekday>, custom <expr>, show, exit\n")
    _show(editor)

    while True:
        try:
            user_input = console.input("[bold blue]> [/bold blue]").strip()
        except (KeyboardInterrupt, EOFError):
            break
        if user_input.lower() in ("exit", "quit"):
            break
        if not user_input:
            continue
        if user_input.lower() == "show":
            _show(editor)
            continue

        command, _, argument = user_input.partition(" ")
        try:
            _apply_edit(editor, command.lower(), argument.strip())
        except ScheduleInputError as e:
            console.print(f"[red]Error:[/red] {e}")
            continue
        _show(editor)

    console.print(f"\n{escape(editor.expression)}")


@app.command()
def onboard(
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Config file path"),
) -> None:
    """Write the default configuration file."""
    path = save_default_config(config_path)
    console.print(f"[green]Config created at:[/green] {path}")


@app.command()
def status(
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Config file path"),
) -> None:
    """Show current configuration."""
    config = load_config(config_path)
    _setup_logging(config.log_level)

    table = Table(title="cron-builder Status")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Default Expression", config.defaults.expression)
    table.add_row("Default Description", human_readable(config.defaults.expression))
    table.add_row("Default Time", config.defaults.time)
    table.add_row("JSON Output", "Enabled" if config.output.as_json else "Disabled")
    table.add_row("Log Level", config.log_level)

    console.print(table)


if __name__ == "__main__":
    app()
