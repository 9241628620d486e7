"""Partial morphisms and bottom."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, NoReturn, TypeVar

A = TypeVar("A")


class Undefined(Exception):
    """Raised when a morphism has no value for its input (bottom).

    The offending input is kept on ``value`` for debugging.
    """

    def __init__(self, value: object, message: str = "undefined") -> None:
        self.value = value
        super().__init__(message)

    def __repr__(self) -> str:
        return f"Undefined({super().__repr__()}, value={self.value!r})"


def undefined(x: Any) -> NoReturn:
    """Bottom: a morphism that never produces a value.

    Usable at any type, e.g. as ``f: bool -> bool`` with ``f x = undefined``.
    """
    raise Undefined(x)


def is_total_on(f: Callable[[A], Any], samples: Iterable[A]) -> bool:
    """Check whether ``f`` produces a value for every sample.

    Only ``Undefined`` counts as bottom here; any other exception raised by
    ``f`` propagates.
    """
    for sample in samples:
        try:
            f(sample)
        except Undefined:
            return False
    return True
