"""Admin commands for configuration."""

import sys

from rich.console import Console

from dayspan.clock import make_timezone
from dayspan.config import create_default_config, get_config_path, set_timezone

console = Console()


def init_command(force: bool = False, timezone: str | None = None) -> None:
    """Initialize dayspan configuration."""
    config_path = get_config_path()

    # Guard: refuse to overwrite without force flag
    if config_path.exists() and not force:
        console.print("[red]Initialization failed:[/red]", style="bold")
        console.print(f"  Config already exists: {config_path}")
        console.print("\n[yellow]Use 'dayspan init --force' to overwrite[/yellow]")
        sys.exit(1)

    if timezone:
        try:
            make_timezone(timezone)
        except ValueError as e:
            console.print(f"[red]{e}[/red]", style="bold")
            sys.exit(1)

    try:
        console.print(f"[cyan]Creating config file at {config_path}...[/cyan]")
        create_default_config(config_path)
        if timezone:
            set_timezone(timezone, config_path)
        console.print("[green]✓[/green] Config file created (permissions: 600)")

    except OSError as e:
        console.print(f"[red]Filesystem error: {e}[/red]", style="bold")
        sys.exit(1)

    console.print("\n[green]Initialization complete![/green]", style="bold")
    console.print(f"[dim]Config: {config_path}[/dim]")
