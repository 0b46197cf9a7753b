import dataclasses

import numpy as np
import pytest

from genetic_fn.candidate import Candidate, SampleRange, to_canonical_string
from genetic_fn.exceptions import DimensionMismatchError, EmptyRangeError
from genetic_fn.functions import triple_multiplication
from genetic_fn.objective import Objective


def test_rounded_string_pads_digits() -> None:
    assert to_canonical_string(1.57, 3) == "1.570"
    assert to_canonical_string(1.572, 3) == "1.572"


def test_rounded_string_rounds() -> None:
    assert to_canonical_string(2.38493, 2) == "2.38"


def test_canonical_form_concatenates_components() -> None:
    assert Candidate([1.0, -2.5]).canonical_form() == "1.0000000000-2.5000000000"


def test_negative_zero_collapses() -> None:
    assert Candidate([-1e-12]) == Candidate([1e-12])
    assert hash(Candidate([-0.0])) == hash(Candidate([0.0]))


def test_empty_candidates_are_equal() -> None:
    assert Candidate([]) == Candidate([])
    assert hash(Candidate([])) == hash(Candidate([]))


def test_equal_candidates() -> None:
    assert Candidate([1.0, 2.0, 3.0]) == Candidate([1.0, 2.0, 3.0])
    assert Candidate([1.0, 3.0, 3.0]) != Candidate([1.0, 2.0, 3.0])


def test_equal_after_rounding() -> None:
    assert Candidate([1.00000000001, 2.0, 3.0]) == Candidate([1.0, 2.0, 3.0])


def test_different_after_rounding() -> None:
    assert Candidate([1.0000000001, 2.0, 3.0]) != Candidate([1.0, 2.0, 3.0])


def test_different_length() -> None:
    assert Candidate([1.0000000001]) != Candidate([1.0, 2.0, 3.0])
    assert Candidate([1.0, 2.0]) != Candidate([1.0, 2.0, 0.0])


def test_hash_follows_rounding() -> None:
    assert hash(Candidate([1.0, 2.0, 3.0])) == hash(Candidate([1.0, 2.0, 3.0]))
    assert hash(Candidate([1.00000000001, 2.0, 3.0])) == hash(Candidate([1.0, 2.0, 3.0]))
    assert len({Candidate([1.00000000001, 2.0, 3.0]), Candidate([1.0, 2.0, 3.0])}) == 1
    assert len({Candidate([1.0000000001, 2.0, 3.0]), Candidate([1.0, 2.0, 3.0])}) == 2


def test_candidate_is_frozen() -> None:
    candidate = Candidate([1.0, 2.0])
    with pytest.raises(dataclasses.FrozenInstanceError):
        candidate.values = (3.0, 4.0)  # type: ignore[misc]


def test_str() -> None:
    assert str(Candidate([1.1, 2.2, 3.3])) == "Candidate([1.1, 2.2, 3.3])"


def test_arguments_returns_copy() -> None:
    candidate = Candidate([1, 2, 3])
    args = candidate.arguments()
    args[0] = 99.0
    assert candidate.arguments() == [1.0, 2.0, 3.0]
    assert len(candidate) == 3
    assert list(candidate) == [1.0, 2.0, 3.0]


def test_fitness() -> None:
    objective = Objective(triple_multiplication)
    assert Candidate([2.0, 3.0, 5.0]).fitness(objective) == 30.0


def test_random_within_range() -> None:
    rng = np.random.default_rng(0)
    candidate = Candidate.random((3.0, 10.0), 5, rng)
    assert len(candidate) == 5
    assert all(3.0 <= value < 10.0 for value in candidate)


def test_random_empty_range() -> None:
    rng = np.random.default_rng(0)
    with pytest.raises(EmptyRangeError):
        Candidate.random((1.0, 1.0), 3, rng)


@pytest.mark.parametrize(
    "low, high, empty",
    [(0.0, 1.0, False), (1.0, 1.0, True), (2.0, 1.0, True), (0.0, float("inf"), True)],
)
def test_sample_range_is_empty(low: float, high: float, empty: bool) -> None:
    assert SampleRange(low, high).is_empty is empty


def test_crossover_averages() -> None:
    child = Candidate([12.0, 3.0, 9.0]).crossover(Candidate([7.0, 6.0, 13.0]))
    assert child == Candidate([9.5, 4.5, 11.0])
    assert child.values == (9.5, 4.5, 11.0)


@pytest.mark.parametrize("seed", range(5))
def test_crossover_with_itself(seed: int) -> None:
    candidate = Candidate.random((-150.0, 150.0), 4, np.random.default_rng(seed))
    assert candidate.crossover(candidate) == candidate


def test_crossover_length_mismatch() -> None:
    with pytest.raises(DimensionMismatchError) as excinfo:
        Candidate([1.0, 2.0]).crossover(Candidate([1.0, 2.0, 3.0]))
    assert excinfo.value.left == 2
    assert excinfo.value.right == 3


def test_no_mutation_applied() -> None:
    rng = np.random.default_rng(0)
    candidate = Candidate([1.0, 2.0, 3.0])
    for _ in range(50):
        assert candidate.mutate(0.0, rng) == candidate


@pytest.mark.parametrize("seed", range(6))
def test_mutation_changes_exactly_one_value(seed: int) -> None:
    rng = np.random.default_rng(seed)
    original = Candidate([1.0, 2.0, 3.0])
    mutated = original.mutate(1.0, rng)
    unchanged = sum(
        before == after for before, after in zip(original.values, mutated.values)
    )
    assert unchanged == 2
    changed = [
        after / before
        for before, after in zip(original.values, mutated.values)
        if before != after
    ]
    assert 0.8 <= changed[0] < 1.2


def test_mutating_empty_candidate() -> None:
    rng = np.random.default_rng(0)
    assert Candidate([]).mutate(1.0, rng) == Candidate([])


@pytest.mark.parametrize(
    "value, precision, expected",
    [(-1e-5, 3, "0.000"), (-1e-12, 10, "0.0000000000"), (-0.0, 2, "0.00"), (-0.5, 1, "-0.5")],
)
def test_negative_zero_folds_at_any_precision(
    value: float, precision: int, expected: str
) -> None:
    assert to_canonical_string(value, precision) == expected


def test_mutating_zero_coordinates_leaves_candidate_equal() -> None:
    rng = np.random.default_rng(0)
    zeros = Candidate([0.0, 0.0, 0.0])
    assert zeros.mutate(1.0, rng) == zeros
