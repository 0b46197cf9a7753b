"""Deduplicated candidate collections with truncation selection."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

import numpy as np

from genetic_fn.candidate import Candidate, SampleRange
from genetic_fn.config import DEFAULT_DIMENSION
from genetic_fn.evolution import evolve_candidates
from genetic_fn.objective import Objective


class Population:
    """
    An immutable set of candidates.

    Members are unique under candidate canonical equality. Iteration follows
    insertion order, so a seeded generator reproduces a run exactly.
    """

    __slots__ = ("_members",)

    def __init__(self, candidates: Iterable[Candidate] = ()) -> None:
        self._members: dict[Candidate, None] = dict.fromkeys(candidates)

    @classmethod
    def random(
        cls,
        n: int,
        sample_range: SampleRange | tuple[float, float],
        length: int = DEFAULT_DIMENSION,
        rng: np.random.Generator | None = None,
    ) -> Population:
        """Sample until exactly ``n`` distinct candidates have been collected."""
        if length == 0 and n > 1:
            raise ValueError("Only one distinct zero-length candidate exists")
        sample_range = SampleRange.coerce(sample_range)
        rng = rng if rng is not None else np.random.default_rng()

        members: dict[Candidate, None] = {}
        while len(members) < n:
            members[Candidate.random(sample_range, length, rng)] = None
        return cls(members)

    @property
    def dimension(self) -> int | None:
        for candidate in self._members:
            return len(candidate)
        return None

    def rank_select(self, n: int, objective: Objective) -> list[Candidate]:
        """Top ``n`` members by descending fitness; ties keep iteration order."""
        scored = [(candidate.fitness(objective), candidate) for candidate in self]
        scored.sort(key=lambda pair: pair[0], reverse=True)
        return [candidate for _, candidate in scored[:n]]

    def fittest_population(self, n: int, objective: Objective) -> Population:
        return Population(self.rank_select(n, objective))

    def evolve(
        self,
        mutation_probability: float,
        rng: np.random.Generator,
        keep_parents: bool = False,
    ) -> Population:
        return Population(
            evolve_candidates(self, mutation_probability, rng, keep_parents)
        )

    def best_fitness(self, objective: Objective) -> float:
        if not self._members:
            raise ValueError("Cannot rank an empty population")
        return self.rank_select(1, objective)[0].fitness(objective)

    def __iter__(self) -> Iterator[Candidate]:
        return iter(self._members)

    def __len__(self) -> int:
        return len(self._members)

    def __contains__(self, candidate: object) -> bool:
        return candidate in self._members

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Population):
            return NotImplemented
        return self._members.keys() == other._members.keys()

    def __repr__(self) -> str:
        return f"Population(size={len(self._members)})"

    def __str__(self) -> str:
        body = ",\n\t".join(str(candidate) for candidate in self._members)
        return f"Population([\n\t{body}\n])"
