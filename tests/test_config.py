import pytest

from genetic_fn.config import EvolutionConfig, inclusive_steps


def test_generations_per_worker() -> None:
    assert EvolutionConfig(10, 5).generations_per_worker == 10
    assert EvolutionConfig(10, 5, workers=3).generations_per_worker == 4
    assert EvolutionConfig(9, 5, workers=3).generations_per_worker == 3
    assert EvolutionConfig(0, 5, workers=3).generations_per_worker == 0


def test_defaults() -> None:
    config = EvolutionConfig(5, 5)
    assert config.workers == 0
    assert config.mutation_probability == 0.5
    assert config.elitism is False
    config.validate()


@pytest.mark.parametrize(
    "kwargs",
    [
        dict(n_generations=-1, size_generation=5),
        dict(n_generations=5, size_generation=0),
        dict(n_generations=5, size_generation=5, workers=-2),
        dict(n_generations=5, size_generation=5, mutation_probability=1.5),
    ],
)
def test_validate_rejects(kwargs: dict) -> None:
    with pytest.raises(ValueError):
        EvolutionConfig(**kwargs).validate()


def test_inclusive_steps() -> None:
    assert list(inclusive_steps((10, 510, 250))) == [10, 260, 510]
    assert list(inclusive_steps((10, 40, 10))) == [10, 20, 30, 40]
