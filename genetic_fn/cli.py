#!/usr/bin/env python3
"""Command-line entry point: evolve a benchmark objective and report."""

from __future__ import annotations

import argparse
import json
import sys
import time

import numpy as np

from genetic_fn.benchmark import BenchmarkResult, is_free_threaded, sweep
from genetic_fn.candidate import SampleRange
from genetic_fn.config import (
    DEFAULT_DIMENSION,
    DEFAULT_GENERATIONS,
    DEFAULT_MUTATION_PROBABILITY,
    DEFAULT_SAMPLE_RANGE,
    DEFAULT_SIZE_GENERATION,
    DEFAULT_WORKERS,
    MULTI_SWEEP_GENERATIONS,
    MULTI_SWEEP_SIZES,
    MULTI_SWEEP_WORKERS,
    SINGLE_SWEEP_GENERATIONS,
    SINGLE_SWEEP_SIZES,
    EvolutionConfig,
    inclusive_steps,
)
from genetic_fn.driver import GenerationalDriver
from genetic_fn.functions import OBJECTIVES
from genetic_fn.logger_setup import setup_logger
from genetic_fn.population import Population


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Maximise a benchmark function with a set-based genetic algorithm."
    )
    parser.add_argument(
        "--generations",
        type=int,
        default=DEFAULT_GENERATIONS,
        help=f"Number of generations (default: {DEFAULT_GENERATIONS})",
    )
    parser.add_argument(
        "--size",
        type=int,
        default=DEFAULT_SIZE_GENERATION,
        help=f"Candidates kept per generation (default: {DEFAULT_SIZE_GENERATION})",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=DEFAULT_WORKERS,
        help="Island worker threads. 0 runs everything on the calling thread.",
    )
    parser.add_argument("--low", type=float, default=DEFAULT_SAMPLE_RANGE[0])
    parser.add_argument("--high", type=float, default=DEFAULT_SAMPLE_RANGE[1])
    parser.add_argument(
        "--dimension",
        type=int,
        default=DEFAULT_DIMENSION,
        help=f"Length of each candidate vector (default: {DEFAULT_DIMENSION})",
    )
    parser.add_argument(
        "--mutation",
        type=float,
        default=DEFAULT_MUTATION_PROBABILITY,
        help="Probability that an offspring is mutated.",
    )
    parser.add_argument(
        "--elitism",
        action="store_true",
        help="Let parents compete with their offspring during selection.",
    )
    parser.add_argument(
        "--objective",
        choices=sorted(OBJECTIVES),
        default="hartman3",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for deterministic runs",
    )
    parser.add_argument(
        "--sweep",
        action="store_true",
        help="Time the single- and multi-worker grids instead of one run.",
    )
    parser.add_argument("--json", action="store_true", help="Emit results as JSON.")
    parser.add_argument("--log-level", default="WARNING")
    return parser.parse_args(argv)


def _print_human_report(
    *,
    config: EvolutionConfig,
    final: Population,
    best_values: list[float],
    best_fitness: float,
    elapsed: float,
    seed: int | None,
) -> None:
    print("=" * 72)
    print("Evolution Results")
    print("=" * 72)
    print(f"Best candidate: {best_values}")
    print(f"Best fitness: {best_fitness:.8f}")
    print(f"Final population size: {len(final)}")
    print(f"Elapsed: {elapsed:.2f}s")
    print(f"Generations: {config.n_generations} | Size: {config.size_generation}")
    print(f"Workers: {config.workers} | Elitism: {config.elitism}")
    print(f"Free-threaded runtime: {is_free_threaded()}")
    if seed is not None:
        print(f"Seed: {seed}")
    print("=" * 72)


def _print_sweep_row(result: BenchmarkResult) -> None:
    print(
        f"n_generations: {result.n_generations}, "
        f"size_generation: {result.size_generation}, "
        f"time: {result.elapsed_ms} ms, "
        f"maximal function value: {result.best_fitness:.8f}, "
        f"n_jobs: {result.workers}"
    )


def _run_sweep(args: argparse.Namespace, rng: np.random.Generator) -> int:
    objective = OBJECTIVES[args.objective]()
    sample_range = SampleRange(args.low, args.high)
    options = dict(
        dimension=args.dimension,
        mutation_probability=args.mutation,
        elitism=args.elitism,
        rng=rng,
    )

    results = list(
        sweep(
            inclusive_steps(SINGLE_SWEEP_GENERATIONS),
            inclusive_steps(SINGLE_SWEEP_SIZES),
            objective,
            0,
            sample_range,
            **options,
        )
    )
    workers = args.workers if args.workers > 0 else MULTI_SWEEP_WORKERS
    results.extend(
        sweep(
            inclusive_steps(MULTI_SWEEP_GENERATIONS),
            inclusive_steps(MULTI_SWEEP_SIZES),
            objective,
            workers,
            sample_range,
            **options,
        )
    )

    if args.json:
        print(
            json.dumps(
                [
                    {
                        "n_generations": r.n_generations,
                        "size_generation": r.size_generation,
                        "workers": r.workers,
                        "elapsed_ms": r.elapsed_ms,
                        "best_fitness": r.best_fitness,
                    }
                    for r in results
                ],
                indent=2,
            )
        )
    else:
        for result in results:
            _print_sweep_row(result)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)

    if args.dimension < 1:
        raise SystemExit("--dimension must be >= 1")
    if SampleRange(args.low, args.high).is_empty:
        raise SystemExit("--low must be smaller than --high")
    if args.size < 3 and args.generations > 0 and not args.elitism:
        # two survivors leave one child, which has no partner to cross with
        raise SystemExit("--size must be >= 3 unless --elitism is set")

    config = EvolutionConfig(
        n_generations=args.generations,
        size_generation=args.size,
        workers=args.workers,
        mutation_probability=args.mutation,
        elitism=args.elitism,
    )
    try:
        config.validate()
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc

    setup_logger(args.log_level)
    rng = np.random.default_rng(args.seed)

    if args.sweep:
        return _run_sweep(args, rng)

    objective = OBJECTIVES[args.objective]()
    if objective.arity is not None and objective.arity != args.dimension:
        raise SystemExit(
            f"--objective {args.objective} needs --dimension {objective.arity}"
        )

    initial = Population.random(
        config.size_generation, (args.low, args.high), args.dimension, rng
    )
    initial_best = initial.best_fitness(objective)

    started = time.perf_counter()
    final = GenerationalDriver(objective, config, rng).run(initial)
    elapsed = time.perf_counter() - started

    if len(final) == 0:
        raise SystemExit("Population died out: no offspring survived selection")

    best = final.rank_select(1, objective)[0]
    best_fitness = best.fitness(objective)

    if args.json:
        report = {
            "best_candidate": best.arguments(),
            "best_fitness": best_fitness,
            "initial_best_fitness": initial_best,
            "population_size": len(final),
            "elapsed_seconds": elapsed,
            "n_generations": config.n_generations,
            "size_generation": config.size_generation,
            "workers": config.workers,
            "elitism": config.elitism,
            "seed": args.seed,
            "free_threaded_runtime": is_free_threaded(),
            "python": sys.version.split()[0],
        }
        print(json.dumps(report, indent=2))
    else:
        _print_human_report(
            config=config,
            final=final,
            best_values=best.arguments(),
            best_fitness=best_fitness,
            elapsed=elapsed,
            seed=args.seed,
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
