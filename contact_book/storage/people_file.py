"""
Reads and writes the flat text file that holds the contact list between sessions.

Each person is stored as four whitespace-separated fields followed by a newline:

    <first_name> <last_name> <phone_number> <age>

The reader treats the file as a stream of tokens and does not look at line
boundaries, so a person split over two lines still loads, while a stray token
shifts every field that follows it.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from rich.markup import escape

from contact_book.exceptions import PersistenceError
from contact_book.models.person import Person
from contact_book.utils.formatting import parse_int

log = logging.getLogger(__name__)

FIELDS_PER_PERSON = 4


class PeopleFile:
    """Loads and saves the people list from a single text file."""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def load(self, capacity: int | None = None) -> tuple[list[Person], int]:
        """
        Loads as many people as can be read from the file.

        Reading stops at the first group of tokens that is not a valid person,
        at the end of the file, or once `capacity` people have been read.
        A missing or unreadable file is treated as an empty list.

        Returns:
            The loaded people and how many there are.
        """
        shown_path = escape(str(self.path))
        try:
            with open(self.path, encoding="utf-8") as f:
                tokens = f.read().split()
        except FileNotFoundError:
            log.debug(f"No people file at '{shown_path}', starting empty.")
            return [], 0
        except (OSError, UnicodeDecodeError) as e:
            log.debug(
                f"Could not read people file '{shown_path}': {escape(str(e))}"
            )
            return [], 0

        people: list[Person] = []
        for start in range(0, len(tokens), FIELDS_PER_PERSON):
            if capacity is not None and len(people) >= capacity:
                log.warning(
                    f"Stopped loading at {capacity} people; the rest of "
                    f"'{shown_path}' was ignored."
                )
                break

            group = tokens[start : start + FIELDS_PER_PERSON]
            person = self._parse_group(group)
            if person is None:
                log.warning(
                    f"Stopped loading '{shown_path}' at malformed entry "
                    f"#{len(people) + 1}: {escape(repr(' '.join(group)))}"
                )
                break
            people.append(person)

        return people, len(people)

    def save(self, people: Iterable[Person]) -> None:
        """
        Overwrites the file with one line per person, in the given order.

        Raises:
            PersistenceError: If the file cannot be opened or written.
        """
        count = 0
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                for person in people:
                    f.write(person.to_line())
                    count += 1
        except OSError as e:
            raise PersistenceError(
                f"Error opening file '{self.path}' for writing: {e}"
            ) from e
        log.debug(f"Saved {count} people to '{escape(str(self.path))}'.")

    @staticmethod
    def _parse_group(group: list[str]) -> Person | None:
        """Builds a person from four tokens, or returns None if they don't fit."""
        if len(group) != FIELDS_PER_PERSON:
            return None
        first_name, last_name, phone_number, age_token = group
        age = parse_int(age_token)
        if age is None:
            return None
        return Person(
            first_name=first_name,
            last_name=last_name,
            phone_number=phone_number,
            age=age,
        )
