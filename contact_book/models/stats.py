"""
Dataclass for tracking what happened during one interactive session.
"""

import time
from dataclasses import dataclass, field


@dataclass
class SessionStats:
    """Counts the operations performed between startup and exit."""

    people_loaded: int = 0
    people_added: int = 0
    people_deleted: int = 0
    searches: int = 0
    listings: int = 0
    rejected_inputs: int = 0
    saved: bool = False
    _started_at: float = field(default_factory=time.monotonic, repr=False)

    @property
    def duration_s(self) -> float:
        return time.monotonic() - self._started_at

    @property
    def has_changes(self) -> bool:
        """True when the in-memory list differs from what was loaded."""
        return self.people_added > 0 or self.people_deleted > 0
