import io
import logging

import pytest
from rich.console import Console
from rich.logging import RichHandler

from contact_book.models.person import Person


def make_person(first="Ann", last="Lee", phone="555", age=30) -> Person:
    return Person(first_name=first, last_name=last, phone_number=phone, age=age)


@pytest.fixture()
def console():
    """A console that records everything printed to it."""
    return Console(file=io.StringIO(), width=120, color_system=None, force_terminal=False)


def output_of(console: Console) -> str:
    return console.file.getvalue()


@pytest.fixture()
def rich_log():
    """
    Routes the package's DEBUG logging through a markup-enabled RichHandler, the
    way the CLI configures it, and returns the console the records land on.
    """
    log_console = Console(
        file=io.StringIO(), width=200, color_system=None, force_terminal=False
    )
    handler = RichHandler(console=log_console, show_path=False, markup=True)
    logger = logging.getLogger("contact_book")
    previous_level = logger.level
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    yield log_console
    logger.removeHandler(handler)
    logger.setLevel(previous_level)
