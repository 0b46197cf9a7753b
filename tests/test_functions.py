import pytest

from genetic_fn.functions import (
    HARTMAN_MINIMUM,
    OBJECTIVES,
    hartman_3_dimensional,
    hartman_inner_function,
    negated_hartman,
    triple_multiplication,
)


def test_hartman_origin() -> None:
    assert hartman_3_dimensional(0.0, 0.0, 0.0) == pytest.approx(-0.06797411659013469)


def test_hartman_global_minimum() -> None:
    assert hartman_3_dimensional(*HARTMAN_MINIMUM) == pytest.approx(-3.8627797869493365)


@pytest.mark.parametrize(
    "idx, expected",
    [
        (0, -12.393535091668001),
        (1, -0.5392994225046004),
        (2, -3.6698626508680015),
        (3, -0.036097577544599975),
    ],
)
def test_hartman_inner_terms(idx: int, expected: float) -> None:
    assert hartman_inner_function(idx, *HARTMAN_MINIMUM) == pytest.approx(expected)


def test_negated_hartman_is_maximised_at_minimum() -> None:
    objective = negated_hartman()
    assert objective.arity == 3
    assert objective.evaluate(HARTMAN_MINIMUM) == pytest.approx(3.8627797869493365)
    assert objective.evaluate(HARTMAN_MINIMUM) > objective.evaluate((0.0, 0.0, 0.0))


def test_triple_multiplication() -> None:
    assert triple_multiplication([1.0, 2.0, 3.0]) == 6.0


def test_registered_objectives() -> None:
    assert set(OBJECTIVES) == {"hartman3", "triple"}
    assert OBJECTIVES["triple"]().evaluate([2.0, 3.0, 5.0]) == 30.0
