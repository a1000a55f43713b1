"""
Data Models Layer.

This package contains the models that define the core data structures
used throughout the application: people, configuration and session statistics.
"""

from .config import BookConfig
from .person import Person
from .stats import SessionStats

__all__ = ["BookConfig", "Person", "SessionStats"]
