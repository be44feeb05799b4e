"""CLI entry point for dayspan."""

import logging

import typer

from dayspan.commands.admin import init_command
from dayspan.commands.day import day_command, shift_command
from dayspan.commands.month import month_command
from dayspan.commands.range import overlap_command, range_command
from dayspan.config import get_log_level
from dayspan.domain.models import Unit
from dayspan.logging_config import setup_logging

app = typer.Typer(
    name="dayspan",
    help="dayspan - Days, months and date ranges at a glance",
    add_completion=False,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging on stderr"),
) -> None:
    """dayspan - Days, months and date ranges at a glance."""
    setup_logging(logging.DEBUG if verbose else get_log_level())


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing config"),
    timezone: str = typer.Option(None, "--timezone", "-z", help="Ambient timezone (e.g. Europe/London)"),
) -> None:
    """Initialize dayspan configuration."""
    init_command(force, timezone)


@app.command()
def day(
    date: str = typer.Argument(None, help="Day to show (default: today)"),
) -> None:
    """Show weekday, month and relative position of a day."""
    day_command(date)


@app.command()
def month(
    month: str = typer.Argument(None, help="Month to show, YYYY-MM (default: this month)"),
) -> None:
    """Show the first and last day of a month."""
    month_command(month)


@app.command(name="range")
def range_(
    start: str,
    end: str,
    hours: bool = typer.Option(False, "--hours", help="List every hour instead of every day"),
) -> None:
    """List every day of a range, both ends included."""
    range_command(start, end, hours)


@app.command()
def overlap(
    first_start: str,
    first_end: str,
    second_start: str,
    second_end: str,
) -> None:
    """Show the days two ranges have in common."""
    overlap_command(first_start, first_end, second_start, second_end)


@app.command()
def shift(
    date: str,
    unit: Unit = typer.Option(Unit.DAY, "--unit", "-u", help="Calendar unit to move by"),
    count: int = typer.Option(1, "--count", "-n", help="Number of units (negative moves back)"),
    month: bool = typer.Option(False, "--month", "-m", help="Treat DATE as a month"),
) -> None:
    """Move a day (or a month) by a number of calendar units."""
    shift_command(date, unit, count, month)


if __name__ == "__main__":
    app()
