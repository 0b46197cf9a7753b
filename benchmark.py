#!/usr/bin/env python3
"""
Quick benchmark of the generational driver on the negated Hartmann 3-D function.
Times one single-worker run and one island run and reports throughput.
"""

import datetime
import os
import sys

import numpy as np

from genetic_fn.benchmark import benchmark_population, is_free_threaded
from genetic_fn.functions import negated_hartman

BENCHMARK_CONFIG = {
    "n_generations": 200,
    "size_generation": 30,
    "sample_range": (-150.0, 150.0),
    "island_workers": os.cpu_count() or 4,
    "seed": 7,
}


def print_system_info():
    """Print relevant system information."""
    print("=" * 60)
    print("SYSTEM INFORMATION")
    print("=" * 60)
    print(f"Python {sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    print(f"CPU cores: {os.cpu_count()}")
    if is_free_threaded():
        print("Mode: Free-threaded Python (no GIL), islands run in parallel")
    else:
        print("Mode: Standard Python (GIL enabled)")
    print()


def run_benchmark():
    """Run both driver modes and print timings."""
    print("=" * 60)
    print("BENCHMARK CONFIGURATION")
    print("=" * 60)
    for key, value in BENCHMARK_CONFIG.items():
        print(f"{key}: {value}")
    print()

    objective = negated_hartman()
    rng = np.random.default_rng(BENCHMARK_CONFIG["seed"])
    size = BENCHMARK_CONFIG["size_generation"]
    generations = BENCHMARK_CONFIG["n_generations"]

    rows = []
    for workers in (0, BENCHMARK_CONFIG["island_workers"]):
        elapsed_ms, best_fitness = benchmark_population(
            generations,
            size,
            objective,
            workers,
            BENCHMARK_CONFIG["sample_range"],
            rng=rng,
        )
        rows.append((workers, elapsed_ms, best_fitness))

    print("=" * 60)
    print("BENCHMARK RESULTS")
    print("=" * 60)
    # every generation crosses all pairs of the survivors
    evaluations_per_generation = size * (size - 1) // 2
    for workers, elapsed_ms, best_fitness in rows:
        total_generations = generations if workers == 0 else -(-generations // workers) * workers
        evaluations = evaluations_per_generation * total_generations
        rate = evaluations / (elapsed_ms / 1000) if elapsed_ms > 0 else float("inf")
        print(f"workers={workers:3d} time={elapsed_ms:7d} ms best={best_fitness:.8f} "
              f"evals/s={rate:,.0f}")
    print("=" * 60)
    return rows


def main():
    """Main benchmark entry point."""
    print()
    print_system_info()

    try:
        rows = run_benchmark()
    except KeyboardInterrupt:
        print("\n\nBenchmark interrupted by user")
        return 1

    with open("benchmark_results.txt", "a") as f:
        timestamp = datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        for workers, elapsed_ms, best_fitness in rows:
            f.write(f"{timestamp} | Python {sys.version_info.major}.{sys.version_info.minor} | "
                    f"workers={workers} | Time: {elapsed_ms} ms | Fitness: {best_fitness}\n")

    print("Results appended to benchmark_results.txt")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
