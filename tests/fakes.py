from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


def increment(x: int) -> int:
    return x + 1


def double(x: int) -> int:
    return x * 2


def square(x: int) -> int:
    return x * x


def diverge(x: int) -> int:
    # never returns; Python surfaces unbounded recursion as RecursionError
    return diverge(x)


class Boom(Exception):
    pass


def explode(x: Any) -> Any:
    raise Boom(x)


@dataclass
class Recording:
    """Callable that records every input it sees."""

    fn: Any = increment
    calls: list[Any] = field(default_factory=list)

    def __call__(self, x: Any) -> Any:
        self.calls.append(x)
        return self.fn(x)
