"""
Generational driver.

Runs evolve + truncation selection for a fixed number of generations,
either inline or as independent islands on a thread pool whose best
candidates are merged into one population at the end.
"""

from __future__ import annotations

import time
from concurrent.futures import ThreadPoolExecutor

import numpy as np
from loguru import logger

from genetic_fn.candidate import Candidate
from genetic_fn.config import DEFAULT_MUTATION_PROBABILITY, EvolutionConfig
from genetic_fn.exceptions import WorkerError
from genetic_fn.objective import Objective
from genetic_fn.population import Population


class GenerationalDriver:
    def __init__(
        self,
        objective: Objective,
        config: EvolutionConfig,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.objective = objective
        self.config = config
        self.rng = rng if rng is not None else np.random.default_rng()

    def step(self, population: Population, rng: np.random.Generator) -> Population:
        """One generation: evolve, then keep the ``size_generation`` fittest."""
        evolved = population.evolve(
            self.config.mutation_probability, rng, keep_parents=self.config.elitism
        )
        return evolved.fittest_population(self.config.size_generation, self.objective)

    def _run_generations(
        self,
        population: Population,
        generations: int,
        rng: np.random.Generator,
        label: str,
    ) -> Population:
        progress_step = max(1, min(generations // 20, 1000))
        for gen in range(1, generations + 1):
            population = self.step(population, rng)
            if gen == 1 or gen % progress_step == 0:
                logger.debug(
                    "{}: gen={}/{} size={}", label, gen, generations, len(population)
                )
        return population

    def _run_worker(
        self, worker_index: int, population: Population, rng: np.random.Generator
    ) -> list[Candidate]:
        final = self._run_generations(
            population,
            self.config.generations_per_worker,
            rng,
            label=f"worker {worker_index}",
        )
        best = final.rank_select(self.config.size_generation, self.objective)
        logger.debug("Worker {} returned {} candidates", worker_index, len(best))
        return best

    def _run_islands(self, population: Population) -> Population:
        workers = self.config.workers
        worker_rngs = self.rng.spawn(workers)

        # Population is immutable, so every worker can start from the same value.
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = [
                executor.submit(self._run_worker, idx, population, worker_rng)
                for idx, worker_rng in enumerate(worker_rngs)
            ]

        merged: list[Candidate] = []
        for idx, future in enumerate(futures):
            exc = future.exception()
            if exc is not None:
                logger.error("Worker {} failed: {}", idx, exc)
                raise WorkerError(idx, str(exc)) from exc
            merged.extend(future.result())
        return Population(merged)

    def run(self, population: Population) -> Population:
        cfg = self.config
        logger.info(
            "Evolving {} candidates: generations={} size={} workers={}",
            len(population),
            cfg.n_generations,
            cfg.size_generation,
            cfg.workers,
        )
        start_time = time.perf_counter()

        if cfg.workers == 0:
            result = self._run_generations(
                population, cfg.n_generations, self.rng, label="main"
            )
        else:
            result = self._run_islands(population)

        logger.info(
            "Evolution finished in {:.3f}s with {} candidates",
            time.perf_counter() - start_time,
            len(result),
        )
        return result


def evolve_population(
    initial_population: Population,
    n_generations: int,
    size_generation: int,
    objective: Objective,
    workers: int = 0,
    *,
    mutation_probability: float = DEFAULT_MUTATION_PROBABILITY,
    rng: np.random.Generator | None = None,
    elitism: bool = False,
) -> Population:
    config = EvolutionConfig(
        n_generations=n_generations,
        size_generation=size_generation,
        workers=workers,
        mutation_probability=mutation_probability,
        elitism=elitism,
    )
    return GenerationalDriver(objective, config, rng).run(initial_population)
