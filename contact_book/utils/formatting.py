"""
Helper functions for turning raw console text into field values and back.
"""

import re

from contact_book.models.person import Person

# Optional sign followed by ASCII digits only
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def first_token(text: str) -> str:
    """
    Returns the first whitespace-delimited token of `text`, or '' if there is none.
    Everything after the first run of whitespace is dropped.
    """
    parts = text.split(maxsplit=1)
    return parts[0] if parts else ""


def parse_int(token: str) -> int | None:
    """
    Parses a base-10 integer token, returning None when it is not one.
    Underscore separators and non-ASCII digits are rejected.
    """
    if not INTEGER_PATTERN.fullmatch(token):
        return None
    try:
        return int(token)
    except ValueError:
        # longer than the interpreter's int string limit
        return None


def format_person(person: Person) -> str:
    """Formats a person on one line (e.g., 'Ann Lee | Phone: 555 | Age: 30')."""
    return f"{person.full_name} | Phone: {person.phone_number} | Age: {person.age}"


def format_duration(seconds: float) -> str:
    """
    Formats a duration in seconds into a human-readable string (e.g., '2h 34m 12s').
    """
    s = int(seconds)
    hours, remainder = divmod(s, 3600)
    minutes, secs = divmod(remainder, 60)
    parts = []
    if hours > 0:
        parts.append(f"{hours}h")
    if minutes > 0:
        parts.append(f"{minutes}m")
    if secs > 0 or not parts:
        parts.append(f"{secs}s")
    return " ".join(parts)
