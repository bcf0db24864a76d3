"""Console helpers shared by the Monoid Docs CLI commands."""

from typing import Any

from rich.console import Console
from rich.table import Table

console = Console()

# Settings whose values are never printed
SECRET_SETTINGS = frozenset({"storage_key", "database_url"})


def print_table(
    rows: list[dict[str, Any]], title: str = "", columns: list[str] | None = None
) -> None:
    """Render ``rows`` as a rich table, one column per key."""
    if not rows:
        console.print(f"[yellow]Nothing to show for {title or 'this query'}.[/yellow]")
        return

    columns = columns or list(rows[0])
    table = Table(title=title, show_lines=False)
    for column in columns:
        table.add_column(column.replace("_", " ").title(), overflow="fold")

    for row in rows:
        table.add_row(*(str(row.get(column, "")) for column in columns))

    console.print(table)


def print_settings(settings: dict[str, Any], title: str = "Configuration") -> None:
    """Render a settings mapping with secret values masked."""
    table = Table(title=title)
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    for key, value in settings.items():
        if key in SECRET_SETTINGS and value:
            value = "****"
        table.add_row(key, "-" if value is None else str(value))

    console.print(table)


def echo_success(message: str) -> None:
    console.print(f"[green]✓ {message}[/green]")


def echo_info(message: str) -> None:
    console.print(f"[blue]ℹ {message}[/blue]")
