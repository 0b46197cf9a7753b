"""Objective wrapper around the function being maximised."""

from __future__ import annotations

import inspect
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Self

from genetic_fn.exceptions import ArityError


@dataclass(slots=True, frozen=True)
class Objective:
    """
    A scalar function to maximise.

    The wrapped callable receives the candidate's values as a tuple and must
    be pure: workers share one instance and call it concurrently without
    locking. When ``arity`` is given, vectors of any other length are
    rejected with :class:`ArityError` before the callable runs.
    """

    fn: Callable[[tuple[float, ...]], float]
    arity: int | None = None

    @classmethod
    def from_coordinates(cls, fn: Callable[..., float]) -> Self:
        """Wrap ``fn(x, y, ...)`` taking one positional argument per coordinate."""
        params = inspect.signature(fn).parameters.values()
        arity = sum(
            1
            for p in params
            if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD)
        )
        return cls(fn=lambda values: fn(*values), arity=arity)

    def evaluate(self, values: Sequence[float]) -> float:
        if self.arity is not None and len(values) != self.arity:
            raise ArityError(expected=self.arity, actual=len(values))
        return float(self.fn(tuple(values)))

    def __call__(self, values: Sequence[float]) -> float:
        return self.evaluate(values)
