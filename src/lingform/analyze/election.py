"""Weighted rank voting."""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from typing import Generic, TypeVar

T = TypeVar("T", bound=Hashable)


class Election(Generic[T]):
    """Borda-style election: rank r earns weight * (max_rank + 1 - r) points.

    Ranks past `max_rank` earn nothing. Ties go to the candidate that
    received a vote first.
    """

    def __init__(self, max_rank: int = 5) -> None:
        if max_rank < 1:
            raise ValueError(f"max_rank must be at least 1, got {max_rank}")
        self.max_rank = max_rank
        self._tally: dict[T, float] = {}

    def vote(self, candidate: T, rank: int, weight: float = 1.0) -> None:
        if rank < 1:
            raise ValueError(f"rank must be at least 1, got {rank}")
        if rank > self.max_rank or weight <= 0:
            return
        points = weight * (self.max_rank + 1 - rank)
        self._tally[candidate] = self._tally.get(candidate, 0.0) + points

    def vote_ranking(self, candidates: Iterable[T], weight: float = 1.0) -> None:
        """Vote an ordered ranking; repeated candidates keep their best rank."""
        seen: set[T] = set()
        rank = 0
        for candidate in candidates:
            if candidate in seen:
                continue
            seen.add(candidate)
            rank += 1
            self.vote(candidate, rank, weight)

    def results(self) -> list[tuple[T, float]]:
        """Candidates with their share of all points, best first."""
        total = sum(self._tally.values())
        if total <= 0:
            return []
        ranked = sorted(self._tally.items(), key=lambda item: item[1], reverse=True)
        return [(candidate, points / total) for candidate, points in ranked]

    def winner(self) -> T | None:
        results = self.results()
        return results[0][0] if results else None

    def __len__(self) -> int:
        return len(self._tally)
