from __future__ import annotations

from rankopt.scheduler.neighborhood import unique_pairs


def test_pairs_in_ascending_order() -> None:
    assert unique_pairs(4) == [(0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3)]


def test_pair_count() -> None:
    for n in range(0, 12):
        pairs = unique_pairs(n)
        assert len(pairs) == n * (n - 1) // 2
        assert all(0 <= i < j < n for i, j in pairs)
        assert len(set(pairs)) == len(pairs)


def test_degenerate_sizes() -> None:
    assert unique_pairs(0) == []
    assert unique_pairs(1) == []
