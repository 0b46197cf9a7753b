"""End-to-end timing of the generational driver."""

from __future__ import annotations

import sys
import time
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

import numpy as np

from genetic_fn.candidate import SampleRange
from genetic_fn.config import DEFAULT_DIMENSION, DEFAULT_MUTATION_PROBABILITY
from genetic_fn.driver import evolve_population
from genetic_fn.objective import Objective
from genetic_fn.population import Population


@dataclass(slots=True, frozen=True)
class BenchmarkResult:
    n_generations: int
    size_generation: int
    workers: int
    elapsed_ms: int
    best_fitness: float


def is_free_threaded() -> bool:
    checker = getattr(sys, "_is_gil_enabled", None)
    if checker is None:
        return False
    return not bool(checker())


def benchmark_population(
    n_generations: int,
    size_generation: int,
    objective: Objective,
    workers: int,
    sample_range: SampleRange | tuple[float, float],
    *,
    dimension: int = DEFAULT_DIMENSION,
    mutation_probability: float = DEFAULT_MUTATION_PROBABILITY,
    elitism: bool = False,
    rng: np.random.Generator | None = None,
) -> tuple[int, float]:
    """
    Evolve a fresh random population and time it.

    The initial population has ``size_generation`` members. Returns the wall
    time in whole milliseconds and the fitness of the best final candidate.
    """
    rng = rng if rng is not None else np.random.default_rng()
    initial = Population.random(size_generation, sample_range, dimension, rng)

    started = time.perf_counter()
    final = evolve_population(
        initial,
        n_generations,
        size_generation,
        objective,
        workers,
        mutation_probability=mutation_probability,
        rng=rng,
        elitism=elitism,
    )
    elapsed_ms = int((time.perf_counter() - started) * 1000)
    if len(final) == 0:
        raise ValueError(
            f"Population died out after {n_generations} generations "
            f"with size_generation={size_generation}"
        )
    return elapsed_ms, final.best_fitness(objective)


def sweep(
    generation_counts: Iterable[int],
    sizes: Iterable[int],
    objective: Objective,
    workers: int,
    sample_range: SampleRange | tuple[float, float],
    **kwargs,
) -> Iterator[BenchmarkResult]:
    sizes = list(sizes)
    for n_generations in generation_counts:
        for size_generation in sizes:
            elapsed_ms, best_fitness = benchmark_population(
                n_generations, size_generation, objective, workers, sample_range, **kwargs
            )
            yield BenchmarkResult(
                n_generations=n_generations,
                size_generation=size_generation,
                workers=workers,
                elapsed_ms=elapsed_ms,
                best_fitness=best_fitness,
            )
