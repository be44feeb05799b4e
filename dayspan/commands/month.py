"""Month command."""

import sys

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from dayspan.config import clock_from_config
from dayspan.dates import describe_month, format_range, month_range
from dayspan.domain.errors import DayspanError
from dayspan.domain.month import Month

console = Console()


def month_command(month_text: str | None = None) -> None:
    """Show the span of a month."""
    try:
        clock = clock_from_config()
        month = Month.parse(month_text, clock=clock) if month_text else Month.this_month(clock)
    except DayspanError as e:
        console.print(f"[red]{escape(str(e))}[/red]", style="bold")
        sys.exit(1)

    since, until, label = month_range(month)

    table = Table(title=f"{label} ({month.timezone_name})")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Month", str(month))
    table.add_row("First day", since)
    table.add_row("Last day", str(month.last_date()))
    table.add_row("Next month starts", until)
    table.add_row("Days", str(month.days_in_month))
    table.add_row("Relative", describe_month(month, clock))

    console.print(table)
    console.print(f"[dim]{format_range(month.to_date_range())}[/dim]")
