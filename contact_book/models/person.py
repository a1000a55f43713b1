"""
Pydantic model for a single contact entry.
"""

from pydantic import BaseModel


class Person(BaseModel):
    """One person in the contact book."""

    first_name: str
    last_name: str
    phone_number: str
    age: int

    class Config:
        """Pydantic model configuration."""

        frozen = True

    def to_line(self) -> str:
        """Serializes the person as one line of the people file."""
        return f"{self.first_name} {self.last_name} {self.phone_number} {self.age}\n"

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
