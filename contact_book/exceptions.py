"""
Defines custom exceptions for the application to allow for more specific error handling.
"""


class ContactBookError(Exception):
    """Base exception for all application-specific errors."""


class ConfigurationError(ContactBookError):
    """Raised for issues related to configuration loading or validation."""


class PersistenceError(ContactBookError):
    """Raised when the people file cannot be written."""


class PersonNotFoundError(ContactBookError):
    """Raised when no person matches the requested first name."""


class InvalidSelectionError(ContactBookError):
    """Raised when an ordinal selection falls outside the list of matches."""
