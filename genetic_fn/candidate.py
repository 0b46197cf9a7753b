"""
Candidate solutions: fixed-length real vectors with rounded identity.

Two candidates are the same point when every coordinate agrees to
``CANONICAL_DECIMALS`` places. Equality and hashing both go through the
canonical string, so float noise from averaging never produces two set
members for one point.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Self

import numpy as np

from genetic_fn.config import (
    CANONICAL_DECIMALS,
    MUTATION_FACTOR_HIGH,
    MUTATION_FACTOR_LOW,
)
from genetic_fn.exceptions import DimensionMismatchError, EmptyRangeError

if TYPE_CHECKING:
    from genetic_fn.objective import Objective


def to_canonical_string(value: float, precision: int = CANONICAL_DECIMALS) -> str:
    text = f"{value:.{precision}f}"
    # -1e-12 and 1e-12 round to the same point
    if text.startswith("-") and not text.strip("-0."):
        return text[1:]
    return text


@dataclass(slots=True, frozen=True)
class SampleRange:
    """Half-open interval ``[low, high)`` for uniform sampling."""

    low: float
    high: float

    @classmethod
    def coerce(cls, value: SampleRange | tuple[float, float]) -> SampleRange:
        if isinstance(value, SampleRange):
            return value
        low, high = value
        return cls(float(low), float(high))

    @property
    def is_empty(self) -> bool:
        if not (math.isfinite(self.low) and math.isfinite(self.high)):
            return True
        return not self.low < self.high

    def sample(self, rng: np.random.Generator, size: int) -> np.ndarray:
        if self.is_empty:
            raise EmptyRangeError(self.low, self.high)
        return rng.uniform(self.low, self.high, size=size)


@dataclass(slots=True, frozen=True, eq=False, init=False)
class Candidate:
    values: tuple[float, ...]
    _key: str = field(init=False, repr=False)

    def __init__(self, values: Iterable[float]) -> None:
        object.__setattr__(self, "values", tuple(float(v) for v in values))
        object.__setattr__(
            self, "_key", "".join(to_canonical_string(v) for v in self.values)
        )

    @classmethod
    def random(
        cls,
        sample_range: SampleRange | tuple[float, float],
        length: int,
        rng: np.random.Generator,
    ) -> Self:
        """Draw ``length`` coordinates uniformly from ``sample_range``."""
        drawn = SampleRange.coerce(sample_range).sample(rng, length)
        return cls(drawn.tolist())

    def canonical_form(self) -> str:
        return self._key

    def arguments(self) -> list[float]:
        return list(self.values)

    def mutate(self, probability: float, rng: np.random.Generator) -> Self:
        """
        With ``probability``, scale one random coordinate by a factor in
        ``[0.8, 1.2)`` other than exactly 1.0. Otherwise return ``self``.

        A coordinate equal to 0.0 stays 0.0 under scaling, so mutating it
        yields a candidate equal to the original.
        """
        if rng.random() >= probability or not self.values:
            return self

        factor = rng.uniform(MUTATION_FACTOR_LOW, MUTATION_FACTOR_HIGH)
        while factor == 1.0:
            factor = rng.uniform(MUTATION_FACTOR_LOW, MUTATION_FACTOR_HIGH)

        idx_to_mutate = int(rng.integers(len(self.values)))
        return type(self)(
            value * factor if idx == idx_to_mutate else value
            for idx, value in enumerate(self.values)
        )

    def crossover(self, other: Candidate) -> Self:
        """Coordinate-wise mean of two candidates of equal length."""
        if len(self.values) != len(other.values):
            raise DimensionMismatchError(len(self.values), len(other.values))
        return type(self)(
            (mine + theirs) / 2.0 for mine, theirs in zip(self.values, other.values)
        )

    def fitness(self, objective: Objective) -> float:
        return objective.evaluate(self.values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Candidate):
            return NotImplemented
        return len(self.values) == len(other.values) and self._key == other._key

    def __hash__(self) -> int:
        return hash((len(self.values), self._key))

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[float]:
        return iter(self.values)

    def __str__(self) -> str:
        return f"Candidate({list(self.values)})"
