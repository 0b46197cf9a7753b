"""Exception hierarchy for the genetic optimizer."""


class GeneticFnError(Exception):
    """Base for all genetic_fn exceptions."""

    pass


class ArityError(GeneticFnError, ValueError):
    """An objective was called with a vector of the wrong length."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Objective expects {expected} arguments but received {actual}"
        )


class EmptyRangeError(GeneticFnError, ValueError):
    """A sampling range contains no values."""

    def __init__(self, low: float, high: float) -> None:
        self.low = low
        self.high = high
        super().__init__(f"Cannot sample from empty range [{low}, {high})")


class DimensionMismatchError(GeneticFnError, ValueError):
    """Two candidates of different length were combined."""

    def __init__(self, left: int, right: int) -> None:
        self.left = left
        self.right = right
        super().__init__(
            f"Cannot crossover a candidate with {left} elements "
            f"when the other candidate has {right} elements"
        )


class WorkerError(GeneticFnError):
    """A worker failed during a multi-worker run."""

    def __init__(self, worker_index: int, message: str) -> None:
        self.worker_index = worker_index
        super().__init__(f"Worker {worker_index} failed: {message}")
