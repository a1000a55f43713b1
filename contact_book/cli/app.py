"""
Defines the command-line interface for the application using Typer.
Running the program without a subcommand starts the interactive menu.
"""

import logging
import os
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from contact_book import __version__
from contact_book.core.store import PeopleStore
from contact_book.exceptions import ContactBookError
from contact_book.models.stats import SessionStats
from contact_book.storage.config_manager import ConfigManager
from contact_book.storage.people_file import PeopleFile

from .formatters import print_config
from .menu import ConsoleInput, MenuLoop

console = Console()

logging.basicConfig(
    level="INFO",
    format="%(message)s",
    datefmt="[%X]",
    handlers=[
        RichHandler(
            console=console,
            rich_tracebacks=True,
            show_path=False,
            show_level=False,
            markup=True,
        )
    ],
)
log = logging.getLogger("contact_book")

app = typer.Typer(
    name="contact-book",
    help="A console contact manager. Run without a command to open the menu.",
    rich_markup_mode="rich",
    pretty_exceptions_show_locals=False,
    add_completion=False,
)


def get_config_dir() -> Path:
    if os.name == "nt":
        base_dir = Path(os.getenv("APPDATA", "~\\AppData\\Roaming"))
    else:
        base_dir = Path(os.getenv("XDG_CONFIG_HOME", "~/.config"))
    return base_dir.expanduser() / "contact-book"


CONFIG_DIR = get_config_dir()
CONFIG_FILE = CONFIG_DIR / "config.ini"


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    data_file: Path | None = typer.Option(
        None,
        "--file",
        "-f",
        help="People file to load and save (default: people.txt).",
        dir_okay=False,
    ),
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase logging verbosity (-vv for debug).",
    ),
    version: bool = typer.Option(
        False, "--version", help="Show version and exit.", is_eager=True
    ),
    show_config: bool = typer.Option(
        False, "--show-config", help="Display the current configuration."
    ),
):
    """Contact Book CLI"""
    if version:
        console.print(f"[bold]contact-book[/bold] version [cyan]{__version__}[/cyan]")
        raise typer.Exit()

    log_level = "INFO"
    if verbose >= 2:
        log_level = "DEBUG"
    logging.getLogger("contact_book").setLevel(log_level)

    if ctx.invoked_subcommand is not None:
        return

    cli_options = {}
    if data_file is not None:
        cli_options["data_file"] = str(data_file)

    try:
        config = ConfigManager(CONFIG_FILE).load_config(cli_options)
    except ContactBookError as e:
        console.print(f"[bold red]Error: {escape(str(e))}[/bold red]")
        raise typer.Exit(code=1) from e

    if show_config:
        print_config(CONFIG_FILE, config, console)
        raise typer.Exit()

    people_file = PeopleFile(config.data_file)
    people, count = people_file.load(config.capacity)
    if count:
        log.info(f"Loaded {count} people from '{escape(str(people_file.path))}'.")

    store = PeopleStore(people, capacity=config.capacity)
    menu = MenuLoop(
        store,
        people_file,
        console,
        reader=ConsoleInput(console),
        stats=SessionStats(people_loaded=count),
        show_summary=config.show_summary,
    )
    raise typer.Exit(code=menu.run())


@app.command()
def init(
    force: bool = typer.Option(
        False, "--force", "-f", help="Overwrite an existing configuration file."
    ),
):
    """Write a configuration file with the default settings."""
    if (
        CONFIG_FILE.exists()
        and not force
        and not typer.confirm("Configuration file already exists. Overwrite it?")
    ):
        raise typer.Abort()

    try:
        ConfigManager(CONFIG_FILE).save_new_config()
    except ContactBookError as e:
        console.print(f"[red]✗ {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e
    console.print(
        "[bold green]✓ Configuration saved to "
        f"'{escape(str(CONFIG_FILE))}'[/bold green]"
    )
