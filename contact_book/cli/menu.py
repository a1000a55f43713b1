"""
The interactive numbered menu that drives a contact book session.

The loop has a single working state, the main menu, and one terminal state
reached through Exit. Each prompt reads a whole line and keeps only its first
whitespace-delimited token, so a malformed answer is always consumed in full
and never fed back into the next prompt.
"""

import enum
import logging
from typing import TextIO

from rich.console import Console
from rich.markup import escape

from contact_book.cli.formatters import (
    print_matches,
    print_people_table,
    print_summary_panel,
)
from contact_book.core.store import PeopleStore
from contact_book.exceptions import (
    InvalidSelectionError,
    PersistenceError,
    PersonNotFoundError,
)
from contact_book.models.person import Person
from contact_book.models.stats import SessionStats
from contact_book.storage.people_file import PeopleFile
from contact_book.utils.formatting import first_token, parse_int

log = logging.getLogger(__name__)

MENU_LINE = "1.Add 2.Delete 3.Search 4.List 5.Exit"


class MenuChoice(enum.IntEnum):
    """Options shown on the main menu."""

    ADD = 1
    DELETE = 2
    SEARCH = 3
    LIST = 4
    EXIT = 5


class MenuState(enum.Enum):
    MAIN_MENU = "main_menu"
    EXIT = "exit"


class ConsoleInput:
    """
    Reads answers from the console one line at a time.

    With no stream, input comes from the terminal through `Console.input`;
    a stream (any object with `readline`) is used for scripted sessions.
    """

    def __init__(self, console: Console, stream: TextIO | None = None):
        self.console = console
        self.stream = stream

    def read_line(self, prompt: str) -> str:
        """
        Prompts once and returns the raw line.

        Raises:
            EOFError: If the input is exhausted.
        """
        line = self.console.input(prompt, stream=self.stream)
        if self.stream is not None and line == "":
            raise EOFError
        return line

    def read_token(self, prompt: str) -> str:
        """Prompts until a non-blank line arrives and returns its first token."""
        while True:
            token = first_token(self.read_line(prompt))
            if token:
                return token


class MenuLoop:
    """Runs the main menu against a store until the user picks Exit."""

    def __init__(
        self,
        store: PeopleStore,
        people_file: PeopleFile,
        console: Console,
        reader: ConsoleInput | None = None,
        stats: SessionStats | None = None,
        show_summary: bool = True,
    ):
        self.store = store
        self.people_file = people_file
        self.console = console
        self.reader = reader or ConsoleInput(console)
        self.stats = stats or SessionStats(people_loaded=len(store))
        self.show_summary = show_summary

    def run(self) -> int:
        """
        Shows the menu until Exit is chosen.

        Returns:
            The process exit status.
        """
        self.console.print("[bold cyan]Welcome to Contact Book[/bold cyan]")
        state = MenuState.MAIN_MENU
        try:
            while state is MenuState.MAIN_MENU:
                state = self.step()
        except (EOFError, KeyboardInterrupt):
            self.console.print(
                "\n[yellow]⚠️  Input closed. Session ended without saving.[/yellow]"
            )
            if self.stats.has_changes:
                self.console.print("[yellow]Unsaved changes were discarded.[/yellow]")
            log.debug(
                f"Session interrupted with {len(self.store)} people in memory; "
                "nothing was written."
            )
            if self.show_summary:
                self._print_summary()
        return 0

    def step(self) -> MenuState:
        """Shows the menu once, handles one choice and returns the next state."""
        self.console.print(f"\n{MENU_LINE}")
        token = self.reader.read_token("Your choice: ")

        number = parse_int(token)
        if number is None:
            self._reject("Invalid input, please enter a number")
            return MenuState.MAIN_MENU

        try:
            choice = MenuChoice(number)
        except ValueError:
            self._reject("Invalid choice")
            return MenuState.MAIN_MENU

        match choice:
            case MenuChoice.ADD:
                self.add_person()
            case MenuChoice.DELETE:
                self.delete_person()
            case MenuChoice.SEARCH:
                self.search_person()
            case MenuChoice.LIST:
                self.list_people()
            case MenuChoice.EXIT:
                self.exit()
                return MenuState.EXIT
        return MenuState.MAIN_MENU

    def add_person(self) -> None:
        if self.store.is_full:
            self.console.print("[red]List is full[/red]")
            return

        first_name = self.reader.read_token("Enter first name: ")
        last_name = self.reader.read_token("Enter last name: ")
        phone_number = self.reader.read_token("Enter phone number: ")
        age = self._read_age()

        person = Person(
            first_name=first_name,
            last_name=last_name,
            phone_number=phone_number,
            age=age,
        )
        if not self.store.add(person):
            self.console.print("[red]List is full[/red]")
            return

        self.stats.people_added += 1
        self.console.print("[green]✓ Person added successfully[/green]")

    def delete_person(self) -> None:
        if self.store.is_empty:
            self.console.print("[yellow]No people to delete[/yellow]")
            return

        first_name = self.reader.read_token("Enter first name to delete: ")
        matches = self.store.search(first_name)
        if not matches:
            self.console.print("[yellow]No person found with that name[/yellow]")
            return

        print_matches(
            self.console,
            ((number, person) for number, (_, person) in enumerate(matches, 1)),
            title="Matches",
        )
        selection = parse_int(
            self.reader.read_token(f"Choose a person to delete (1-{len(matches)}): ")
        )
        if selection is None:
            self._reject("Invalid choice")
            return

        try:
            self.store.delete(first_name, selection)
        except InvalidSelectionError:
            self._reject("Invalid choice")
            return
        except PersonNotFoundError:
            self.console.print("[yellow]No person found with that name[/yellow]")
            return

        self.stats.people_deleted += 1
        self.console.print("[green]✓ Person deleted successfully[/green]")

    def search_person(self) -> None:
        if self.store.is_empty:
            self.console.print("[yellow]No people to search[/yellow]")
            return

        first_name = self.reader.read_token("Enter first name to search: ")
        self.stats.searches += 1
        matches = self.store.search(first_name)
        if not matches:
            self.console.print("[yellow]No person found with that name[/yellow]")
            return
        print_matches(self.console, matches, title="Search Results")

    def list_people(self) -> None:
        self.stats.listings += 1
        if self.store.is_empty:
            self.console.print("[yellow]No people found[/yellow]")
            return
        print_people_table(self.console, self.store.list_people())

    def exit(self) -> None:
        """Writes the store back to the people file and says goodbye."""
        try:
            self.people_file.save(self.store.snapshot())
            self.stats.saved = True
        except PersistenceError as e:
            self.console.print(f"[bold red]✗ {escape(str(e))}[/bold red]")
            log.debug("Save failed; in-memory list left as is.", exc_info=True)

        if self.show_summary:
            self._print_summary()
        self.console.print("Goodbye!")

    def _read_age(self) -> int:
        while True:
            age = parse_int(self.reader.read_token("Enter age: "))
            if age is not None:
                return age
            self._reject("Invalid input, please enter a number")

    def _reject(self, message: str) -> None:
        self.stats.rejected_inputs += 1
        self.console.print(f"[red]{message}[/red]")

    def _print_summary(self) -> None:
        print_summary_panel(
            self.console, self.stats, self.people_file.path, len(self.store)
        )
