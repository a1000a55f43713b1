"""
The in-memory, ordered collection of people for one session.
"""

import logging
from collections.abc import Iterable, Iterator

from rich.markup import escape

from contact_book.exceptions import InvalidSelectionError, PersonNotFoundError
from contact_book.models.person import Person
from contact_book.utils.formatting import format_person

log = logging.getLogger(__name__)

DEFAULT_CAPACITY = 1000


class PeopleStore:
    """
    Keeps people in insertion order with an optional soft cap on size.

    Lookups are linear scans on the exact, case-sensitive first name. Removal
    keeps the relative order of the remaining people.
    """

    def __init__(
        self,
        people: Iterable[Person] | None = None,
        capacity: int | None = DEFAULT_CAPACITY,
    ):
        if capacity is not None and capacity < 1:
            raise ValueError("Capacity must be a positive number or None.")
        self.capacity = capacity
        self._people: list[Person] = []
        for person in people or ():
            if not self.add(person):
                log.warning(
                    f"Store capacity of {capacity} reached, ignoring remaining people."
                )
                break

    def __len__(self) -> int:
        return len(self._people)

    def __iter__(self) -> Iterator[Person]:
        return self.list_people()

    @property
    def is_empty(self) -> bool:
        return not self._people

    @property
    def is_full(self) -> bool:
        return self.capacity is not None and len(self._people) >= self.capacity

    def add(self, person: Person) -> bool:
        """
        Appends a person to the end of the list.

        Returns:
            True if the person was added, False if the store is at capacity.
        """
        if self.is_full:
            log.debug(f"Refused to add {escape(person.full_name)}: store is full.")
            return False
        self._people.append(person)
        log.debug(
            f"Added {escape(format_person(person))} at position {len(self._people)}."
        )
        return True

    def list_people(self) -> Iterator[Person]:
        """Yields every person in current order."""
        yield from self._people

    def search(self, first_name: str) -> list[tuple[int, Person]]:
        """
        Finds every person whose first name equals `first_name` exactly.

        Returns:
            A list of (ordinal, person) pairs, where the ordinal is the 1-based
            position of the person in `list_people()`. Empty when nothing matches.
        """
        return [
            (position, person)
            for position, person in enumerate(self._people, 1)
            if person.first_name == first_name
        ]

    def delete(self, first_name: str, selection: int) -> Person:
        """
        Removes one person among those named `first_name`.

        Args:
            first_name: The exact first name to match.
            selection: 1-based index into the matches, in store order.

        Returns:
            The removed person.

        Raises:
            PersonNotFoundError: If nobody has that first name.
            InvalidSelectionError: If `selection` is outside 1..number of matches.
        """
        matches = self.search(first_name)
        if not matches:
            raise PersonNotFoundError(
                f"No person found with first name '{first_name}'."
            )
        if not 1 <= selection <= len(matches):
            raise InvalidSelectionError(
                f"Selection {selection} is outside 1-{len(matches)}."
            )

        position, person = matches[selection - 1]
        del self._people[position - 1]
        log.debug(f"Deleted {escape(format_person(person))} from position {position}.")
        return person

    def snapshot(self) -> list[Person]:
        """Returns a copy of the current list, safe to hand to persistence."""
        return list(self._people)
