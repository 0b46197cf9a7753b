"""The per-generation variation step: all-pairs crossover, then mutation."""

from __future__ import annotations

import itertools
from collections.abc import Iterable, Iterator, Sequence

import numpy as np

from genetic_fn.candidate import Candidate


def crossover_pairs(candidates: Sequence[Candidate]) -> Iterator[Candidate]:
    """Cross every unordered pair of distinct members exactly once."""
    for first, second in itertools.combinations(candidates, 2):
        yield first.crossover(second)


def evolve_candidates(
    candidates: Iterable[Candidate],
    mutation_probability: float,
    rng: np.random.Generator,
    keep_parents: bool = False,
) -> list[Candidate]:
    """
    Produce the next generation's raw offspring.

    A population of ``m`` members yields ``m * (m - 1) / 2`` children, each
    mutated independently with ``mutation_probability``. With
    ``keep_parents`` the parents are returned ahead of the children so the
    following selection can retain them. Duplicates are left in place; the
    caller collapses them.
    """
    parents = list(candidates)
    offspring = [
        child.mutate(mutation_probability, rng) for child in crossover_pairs(parents)
    ]
    if keep_parents:
        return parents + offspring
    return offspring
