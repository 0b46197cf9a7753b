"""Tunables and run configuration."""

from __future__ import annotations

import math
from dataclasses import dataclass

# ---------------------------------------------------------------------------
# Candidate identity and variation
# ---------------------------------------------------------------------------
CANONICAL_DECIMALS: int = 10        # digits kept when comparing candidates
MUTATION_FACTOR_LOW: float = 0.8
MUTATION_FACTOR_HIGH: float = 1.2

# ---------------------------------------------------------------------------
# Run defaults
# ---------------------------------------------------------------------------
DEFAULT_MUTATION_PROBABILITY: float = 0.5
DEFAULT_DIMENSION: int = 3
DEFAULT_SAMPLE_RANGE: tuple[float, float] = (-150.0, 150.0)
DEFAULT_GENERATIONS: int = 260
DEFAULT_SIZE_GENERATION: int = 20
DEFAULT_WORKERS: int = 0

# Benchmark sweep grids: (start, stop inclusive, step)
SINGLE_SWEEP_GENERATIONS: tuple[int, int, int] = (10, 510, 250)
SINGLE_SWEEP_SIZES: tuple[int, int, int] = (10, 40, 10)
MULTI_SWEEP_GENERATIONS: tuple[int, int, int] = (10, 1100, 750)
MULTI_SWEEP_SIZES: tuple[int, int, int] = (10, 80, 10)
MULTI_SWEEP_WORKERS: int = 8


@dataclass(slots=True, frozen=True)
class EvolutionConfig:
    n_generations: int
    size_generation: int
    workers: int = DEFAULT_WORKERS
    mutation_probability: float = DEFAULT_MUTATION_PROBABILITY
    elitism: bool = False

    @property
    def generations_per_worker(self) -> int:
        """Generations each worker runs; the full count when running single-worker."""
        if self.workers == 0:
            return self.n_generations
        return math.ceil(self.n_generations / self.workers)

    def validate(self) -> None:
        if self.n_generations < 0:
            raise ValueError("n_generations must be >= 0")
        if self.size_generation < 1:
            raise ValueError("size_generation must be >= 1")
        if self.workers < 0:
            raise ValueError("workers must be >= 0")
        if not 0.0 <= self.mutation_probability <= 1.0:
            raise ValueError("mutation_probability must be within [0, 1]")


def inclusive_steps(grid: tuple[int, int, int]) -> range:
    start, stop, step = grid
    return range(start, stop + 1, step)
