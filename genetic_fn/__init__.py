"""Set-based genetic algorithm for maximising real-valued functions."""

from genetic_fn.candidate import Candidate, SampleRange
from genetic_fn.config import EvolutionConfig
from genetic_fn.driver import GenerationalDriver, evolve_population
from genetic_fn.exceptions import (
    ArityError,
    DimensionMismatchError,
    EmptyRangeError,
    GeneticFnError,
    WorkerError,
)
from genetic_fn.objective import Objective
from genetic_fn.population import Population

__all__ = [
    "ArityError",
    "Candidate",
    "DimensionMismatchError",
    "EmptyRangeError",
    "EvolutionConfig",
    "GenerationalDriver",
    "GeneticFnError",
    "Objective",
    "Population",
    "SampleRange",
    "WorkerError",
    "evolve_population",
]
