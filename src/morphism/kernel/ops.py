"""Application forms and n-ary composition built on the kernel arrow."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from morphism.kernel.arrow import Morphism, describe

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")


def apply(a: A, transform: Callable[[A], B]) -> B:
    """Apply ``transform`` to ``a`` with both given up front.

    This is the uncurried twin of ``curry_unary``:
    ``apply(a, t) == curry_unary(t)(a)``.
    """
    return transform(a)


def curry_unary(transform: Callable[[A], B]) -> Morphism[A, B]:
    """Defer the argument of ``transform``.

    The returned morphism only delegates; it is extensionally equal to
    ``transform``.
    """
    def deferred(a: A) -> B:
        return transform(a)

    return Morphism(deferred, describe(transform))


def apply_composed(a: A, f: Callable[[A], B], g: Callable[[B], C]) -> C:
    """Evaluate ``g`` after ``f`` on ``a`` in one call.

    Same result as ``compose(f, g)(a)``.
    """
    b = f(a)
    return g(b)


def compose_all(*fs: Callable[[Any], Any]) -> Morphism[Any, Any]:
    """Compose left to right: ``compose_all(f, g, h)`` runs ``f``, then ``g``, then ``h``.

    With no arguments this is the identity morphism. Stages run in a flat
    loop, so pipeline length does not add to stack depth.
    """
    if not fs:
        return Morphism.id()
    stages = tuple(fs)

    def pipeline(a: Any) -> Any:
        for fn in stages:
            a = fn(a)
        return a

    return Morphism(pipeline, " ∘ ".join(describe(fn) for fn in reversed(stages)))
