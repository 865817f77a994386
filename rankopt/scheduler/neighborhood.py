from __future__ import annotations

from typing import List, Tuple

Pair = Tuple[int, int]


def unique_pairs(n: int) -> List[Pair]:
    # All (i, j) with 0 <= i < j < n, ascending i then j
    pairs: List[Pair] = []
    for i in range(n):
        for j in range(i + 1, n):
            pairs.append((i, j))
    return pairs
