"""Range and overlap commands."""

import sys

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from dayspan.config import clock_from_config
from dayspan.dates import format_range
from dayspan.domain.date_range import DateRange
from dayspan.domain.errors import DayspanError, RangesDontOverlapError

console = Console()


def range_command(start: str, end: str, hours: bool = False) -> None:
    """List every day (or hour) of an inclusive range."""
    try:
        clock = clock_from_config()
        date_range = DateRange.parse(start, end, clock=clock)
    except DayspanError as e:
        console.print(f"[red]{escape(str(e))}[/red]", style="bold")
        sys.exit(1)

    table = Table(title=format_range(date_range))
    table.add_column("#", style="dim", justify="right")

    if hours:
        table.add_column("Hour", style="cyan")
        for idx, instant in enumerate(date_range.per_hour(), 1):
            table.add_row(str(idx), instant.to_datetime_string())
    else:
        table.add_column("Date", style="cyan")
        table.add_column("Weekday", style="white")
        for idx, day in enumerate(date_range, 1):
            weekday = day.value.format("dddd")
            if day.is_weekend():
                weekday = f"[dim]{weekday}[/dim]"
            table.add_row(str(idx), str(day), weekday)

    console.print(table)


def overlap_command(first_start: str, first_end: str, second_start: str, second_end: str) -> None:
    """Show the days two ranges have in common."""
    try:
        clock = clock_from_config()
        first = DateRange.parse(first_start, first_end, clock=clock)
        second = DateRange.parse(second_start, second_end, clock=clock)
        overlapping = first.get_overlapping(second)

    except RangesDontOverlapError:
        console.print("[yellow]No overlap[/yellow]")
        console.print(f"[dim]{format_range(first)}[/dim]")
        console.print(f"[dim]{format_range(second)}[/dim]")
        return
    except DayspanError as e:
        console.print(f"[red]{escape(str(e))}[/red]", style="bold")
        sys.exit(1)

    console.print(f"[green]✓[/green] Overlap: {format_range(overlapping)}")
