from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple


@dataclass
class Resident:
    id: int
    preferences: Tuple[int, ...]
    assigned_track: int | None = None

    def __post_init__(self) -> None:
        # Preferences never change after construction
        self.preferences = tuple(self.preferences)

    @classmethod
    def from_fields(cls, resident_id: int, preferences: Sequence[int]) -> "Resident":
        return cls(id=resident_id, preferences=tuple(preferences))
