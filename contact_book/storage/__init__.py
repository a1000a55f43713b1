"""
Storage Layer.

This package handles all data persistence: the flat people file and the
INI configuration file.
"""

from .config_manager import ConfigManager
from .people_file import PeopleFile

__all__ = ["ConfigManager", "PeopleFile"]
