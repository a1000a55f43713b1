"""
Core application engine for managing people in memory.

This package contains the primary logic. The `PeopleStore` owns the ordered
list of people for the session; loading and saving it is left to the storage layer.
"""

from .store import DEFAULT_CAPACITY, PeopleStore

__all__ = ["DEFAULT_CAPACITY", "PeopleStore"]
