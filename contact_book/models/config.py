"""
Pydantic model for application configuration.
"""

from pydantic import BaseModel, Field, field_validator

DEFAULT_DATA_FILE = "people.txt"
DEFAULT_MAX_PEOPLE = 1000


class BookConfig(BaseModel):
    """A validated configuration model for the application."""

    data_file: str = DEFAULT_DATA_FILE
    # 0 disables the cap
    max_people: int = DEFAULT_MAX_PEOPLE
    show_summary: bool = True

    # Internal fields not loaded from INI file
    config_path: str = Field("", repr=False)

    class Config:
        """Pydantic model configuration."""

        validate_assignment = True
        str_strip_whitespace = True

    @field_validator("data_file")
    @classmethod
    def validate_data_file(cls, v: str) -> str:
        if not v:
            raise ValueError("Data file path cannot be empty.")
        return v

    @field_validator("max_people")
    @classmethod
    def validate_max_people(cls, v: int) -> int:
        """Ensures the cap is a non-negative number."""
        if v < 0:
            raise ValueError("max_people must be 0 (unbounded) or a positive number.")
        return v

    @property
    def capacity(self) -> int | None:
        """The store capacity, or None when unbounded."""
        return self.max_people or None

    @classmethod
    def get_ini_keys(cls) -> set[str]:
        """Returns a set of all keys that are expected in the INI file."""
        internal_fields = {"config_path"}
        return {key for key in cls.model_fields if key not in internal_fields}
