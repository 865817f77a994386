# Re-export common types
from .resident import Resident
from .roster import Roster

__all__ = [
    "Resident",
    "Roster",
]
