"""Benchmark objectives."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from genetic_fn.exceptions import ArityError
from genetic_fn.objective import Objective

# ---------------------------------------------------------------------------
# Hartmann 3-D constants (one row per term)
# ---------------------------------------------------------------------------
HARTMAN_ALPHA = np.array([1.0, 1.2, 3.0, 3.2])
HARTMAN_A = np.array(
    [
        [3.0, 10.0, 30.0],
        [0.1, 10.0, 35.0],
        [3.0, 10.0, 30.0],
        [0.1, 10.0, 35.0],
    ]
)
HARTMAN_P = np.array(
    [
        [0.3689, 0.1170, 0.2673],
        [0.4699, 0.4387, 0.7470],
        [0.1091, 0.8732, 0.5547],
        [0.0381, 0.5743, 0.8828],
    ]
)
HARTMAN_MINIMUM = (0.114614, 0.555649, 0.852547)


def hartman_inner_function(idx: int, x: float, y: float, z: float) -> float:
    point = np.array([x, y, z])
    return float(-np.sum(HARTMAN_A[idx] * (point - HARTMAN_P[idx]) ** 2))


def hartman_3_dimensional(x: float, y: float, z: float) -> float:
    """Hartmann 3-D function; global minimum of about -3.86278 at HARTMAN_MINIMUM."""
    point = np.array([x, y, z])
    inner = -np.sum(HARTMAN_A * (point - HARTMAN_P) ** 2, axis=1)
    return float(-np.sum(HARTMAN_ALPHA * np.exp(inner)))


def triple_multiplication(values: Sequence[float]) -> float:
    if len(values) != 3:
        raise ArityError(expected=3, actual=len(values))
    return values[0] * values[1] * values[2]


def negated_hartman() -> Objective:
    """Hartmann 3-D flipped for maximisation."""
    return Objective.from_coordinates(lambda x, y, z: -hartman_3_dimensional(x, y, z))


OBJECTIVES = {
    "hartman3": negated_hartman,
    "triple": lambda: Objective(triple_multiplication, arity=3),
}
