# ABOUTME: Rich table and panel builders for CLI output
# ABOUTME: Renders quotes, failed attempt histories and the logging setup

from typing import Any

from rich.box import ROUNDED
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from random_wikiquote.core.models import AttemptOutcome, QuoteResult


def create_key_value_table(
    title: str,
    data: dict[str, str],
    title_style: str = "bold cyan",
    key_style: str = "bold blue",
    value_style: str = "green",
    box_style=ROUNDED,
) -> Table:
    """Create a two-column key-value table.

    Args:
        title: Table title with emoji/styling
        data: Dictionary of key-value pairs to display
        title_style: Style for the table title
        key_style: Style for the key column
        value_style: Style for the value column
        box_style: Border style for the table

    Returns:
        Formatted Rich table ready for printing
    """
    table = Table(
        title=f"[{title_style}]{title}[/{title_style}]",
        box=box_style,
        show_header=True,
        header_style="bold magenta",
        border_style="cyan",
        title_justify="left",
        expand=False,
    )

    table.add_column("Field", style=key_style, no_wrap=False)
    table.add_column("Value", style=value_style, no_wrap=False)

    for key, value in data.items():
        table.add_row(key, str(value))

    return table


def create_quote_panel(result: QuoteResult) -> Panel:
    """Render an accepted quote with its page title as the attribution."""
    return Panel(
        f"[italic]“{escape(result.quote)}”[/italic]",
        title="💬 Random Wikiquote",
        subtitle=f"[bold]{escape(result.title)}[/bold]",
        border_style="magenta",
        expand=False,
    )


def create_attempts_table(outcomes: list[AttemptOutcome]) -> Table:
    """Create a table listing why each pipeline attempt failed."""
    table = Table(
        title="[bold red]🔁 Attempts[/bold red]",
        box=ROUNDED,
        header_style="bold magenta",
        border_style="red",
        title_justify="left",
    )

    table.add_column("#", justify="right", style="bold")
    table.add_column("Stage", style="yellow")
    table.add_column("Page", justify="right")
    table.add_column("Section")
    table.add_column("Reason", style="white")

    for outcome in outcomes:
        table.add_row(
            str(outcome.attempt),
            outcome.stage.value,
            str(outcome.page_id) if outcome.page_id is not None else "-",
            outcome.section_index or "-",
            escape(outcome.reason or ""),
        )

    return table


def create_logging_status_table(status: dict[str, Any]) -> Table:
    """Create a logging configuration status table.

    Args:
        status: Logging status dictionary

    Returns:
        Styled logging configuration table
    """
    logging_data = {
        "🔧 Mode": status["mode"].title(),
        "📁 Log Directory": status["log_directory"] or "N/A (production mode)",
        "🔇 Suppressed Libraries": ", ".join(status["third_party_suppressed"]),
    }

    # Add log files if they exist
    if status["log_files"]["main"]:
        logging_data["📝 Main Log"] = status["log_files"]["main"]
    if status["log_files"]["json"]:
        logging_data["📊 JSON Log"] = status["log_files"]["json"]
    if status["log_files"]["errors"]:
        logging_data["🚨 Error Log"] = status["log_files"]["errors"]

    return create_key_value_table(
        title="🔍 Logging Configuration",
        data=logging_data,
        title_style="bold green",
        key_style="blue",
        value_style="white",
    )


def print_rich_table(console: Console, table: Table) -> None:
    """Print a rich table with consistent spacing and style.

    Args:
        console: Rich console instance
        table: Configured table to print
    """
    console.print()  # Add spacing before
    console.print(table)
    console.print()  # Add spacing after
