"""Day and shift commands."""

import sys

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from dayspan.config import clock_from_config
from dayspan.dates import describe_day, describe_month
from dayspan.domain.day import Day
from dayspan.domain.errors import DayspanError
from dayspan.domain.models import Unit
from dayspan.domain.month import Month

console = Console()


def yes_no(value: bool) -> str:
    return "[green]yes[/green]" if value else "[dim]no[/dim]"


def day_command(date_text: str | None = None) -> None:
    """Show calendar facts about a day."""
    try:
        clock = clock_from_config()
        day = Day.parse(date_text, clock=clock) if date_text else Day.today(clock)
    except DayspanError as e:
        console.print(f"[red]{escape(str(e))}[/red]", style="bold")
        sys.exit(1)

    table = Table(title=f"{day} ({day.timezone_name})")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Weekday", day.value.format("dddd"))
    table.add_row("Weekend", yes_no(day.is_weekend()))
    table.add_row("First of month", yes_no(day.is_first_of_month()))
    table.add_row("Last of month", yes_no(day.is_last_of_month()))
    table.add_row("Month", f"{day.month()} ({day.month().label()})")
    table.add_row("Relative", describe_day(day, clock))

    console.print(table)


def shift_command(date_text: str, unit: Unit, count: int = 1, month: bool = False) -> None:
    """Move a day (or a month) by a number of calendar units."""
    try:
        clock = clock_from_config()
        if month:
            start_month = Month.parse(date_text, clock=clock)
            shifted_month = start_month.shift(unit, count)
            console.print(f"{start_month} {count:+d} {unit.plural} → [bold cyan]{shifted_month}[/bold cyan]")
            console.print(f"[dim]{shifted_month.label()}, {describe_month(shifted_month, clock)}[/dim]")
            return

        start_day = Day.parse(date_text, clock=clock)
        shifted_day = start_day.shift(unit, count)
        console.print(f"{start_day} {count:+d} {unit.plural} → [bold cyan]{shifted_day}[/bold cyan]")
        console.print(f"[dim]{shifted_day.value.format('dddd')}, {describe_day(shifted_day, clock)}[/dim]")

    except DayspanError as e:
        console.print(f"[red]{escape(str(e))}[/red]", style="bold")
        sys.exit(1)
