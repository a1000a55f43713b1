"""
Functions for formatting and displaying data in the console using Rich.
"""

from collections.abc import Iterable
from pathlib import Path
from typing import Any

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from contact_book.models.config import BookConfig
from contact_book.models.person import Person
from contact_book.models.stats import SessionStats
from contact_book.utils.formatting import format_duration


def format_error_with_suggestions(
    error: Exception, context: dict | None = None
) -> Panel:
    """Formats an error with actionable suggestions into a Rich Panel."""
    error_type = type(error).__name__
    error_msg = str(error)

    suggestions_map = {
        "ConfigurationError": [
            "• Check the values in your configuration file.",
            "• Run `contact-book --show-config` to see the effective settings.",
            "• Run `contact-book init --force` to start from the defaults.",
        ],
        "PersistenceError": [
            "• Make sure the directory of the people file exists and is writable.",
            "• Use `--file` to save to a different location.",
        ],
    }

    suggestions = suggestions_map.get(
        error_type, ["• Run the command with -vv for detailed logs."]
    )

    error_text = Text()
    error_text.append(f"{error_type}: ", style="bold red")
    error_text.append(error_msg)

    suggestion_text = Text("\n".join(suggestions))

    content = Table.grid(padding=(1, 0))
    content.add_row(error_text)
    content.add_row()
    content.add_row(Text("Suggestions", style="bold yellow"))
    content.add_row(suggestion_text)

    if context:
        content.add_row()
        content.add_row(Text(f"Context: {context}", style="dim"))

    return Panel(
        content,
        title="[bold red]An Error Occurred[/bold red]",
        border_style="red",
        expand=False,
    )


def _people_table(title: str, rows: Iterable[tuple[int | None, Person]]) -> Table:
    table = Table(title=title, box=box.SIMPLE_HEAVY, title_style="bold")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Name", style="cyan")
    table.add_column("Phone", style="green")
    table.add_column("Age", justify="right")
    for number, person in rows:
        table.add_row(
            "" if number is None else str(number),
            Text(person.full_name),
            Text(person.phone_number),
            str(person.age),
        )
    return table


def print_people_table(console: Console, people: Iterable[Person]) -> None:
    """Prints every person in order, numbered from 1."""
    console.print(_people_table("People List", enumerate(people, 1)))


def print_matches(
    console: Console, matches: Iterable[tuple[int, Person]], title: str
) -> None:
    """Prints numbered matches, using whatever numbering the caller supplies."""
    console.print(_people_table(title, matches))


def print_config(
    config_path: Path, config: BookConfig, console: Console | None = None
):
    """Displays the effective configuration."""
    console = console or Console()
    config_data: dict[str, Any] = {
        key: getattr(config, key) for key in sorted(BookConfig.get_ini_keys())
    }
    content = ""
    for key, value in config_data.items():
        if key == "max_people" and value == 0:
            value = "0 (unbounded)"
        content += f"{key} = {value}\n"

    source = escape(str(config_path)) if config_path.is_file() else "defaults, no file"
    console.print(
        Panel(
            content.strip(),
            title=f"Configuration ([dim]{source}[/dim])",
            border_style="cyan",
        )
    )


def print_summary_panel(
    console: Console, stats: SessionStats, data_file: Path, people_count: int
):
    """Displays a short summary of the session when the user exits."""
    stats_table = Table(show_header=False, box=None, padding=(0, 2))
    stats_table.add_column(style="bold cyan", justify="right")
    stats_table.add_column(style="white", justify="left")

    stats_table.add_row("Loaded:", str(stats.people_loaded))
    stats_table.add_row("Added:", f"[green]{stats.people_added}[/green]")
    stats_table.add_row("Deleted:", f"[red]{stats.people_deleted}[/red]")
    if stats.searches:
        stats_table.add_row("Searches:", str(stats.searches))
    if stats.listings:
        stats_table.add_row("Listings:", str(stats.listings))
    if stats.rejected_inputs:
        stats_table.add_row(
            "Rejected Inputs:", f"[yellow]{stats.rejected_inputs}[/yellow]"
        )
    stats_table.add_row("", "")
    stats_table.add_row("People Now:", f"[bold]{people_count}[/bold]")
    stats_table.add_row(
        "Time Elapsed:", f"[blue]{format_duration(stats.duration_s)}[/blue]"
    )

    if stats.saved:
        title = "[bold]Saved[/bold]"
        border_color = "green"
        stats_table.add_row("File:", f"[dim]{escape(str(data_file))}[/dim]")
    else:
        title = "[bold]Not Saved[/bold]"
        border_color = "yellow"

    console.print()
    console.print(
        Panel(
            stats_table,
            title=title,
            border_style=border_color,
            expand=False,
            padding=(1, 2),
        )
    )
