from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Tuple

from .resident import Resident


def position_to_track(position: int) -> int:
    return position + 1


@dataclass
class Roster:
    """Working order of residents. The resident at position ``i`` holds track ``i + 1``."""

    residents: List[Resident] = field(default_factory=list)

    @classmethod
    def of(cls, residents: Iterable[Resident]) -> "Roster":
        return cls(list(residents))

    def __len__(self) -> int:
        return len(self.residents)

    def __getitem__(self, position: int) -> Resident:
        return self.residents[position]

    def __iter__(self) -> Iterator[Resident]:
        return iter(self.residents)

    def swap(self, i: int, j: int) -> None:
        self.residents[i], self.residents[j] = self.residents[j], self.residents[i]

    def placements(self) -> Iterator[Tuple[int, Resident]]:
        # (track, resident) in position order
        for pos, r in enumerate(self.residents):
            yield position_to_track(pos), r

    def order(self) -> List[int]:
        return [r.id for r in self.residents]

    def by_id(self) -> List[Resident]:
        return sorted(self.residents, key=lambda r: r.id)
