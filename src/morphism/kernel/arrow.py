"""Morphism value - identity and composition in the category of functions."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
T = TypeVar("T")


def identity(x: T) -> T:
    """Return ``x`` unchanged. The unit of composition for every type."""
    return x


def describe(fn: Callable[..., Any]) -> str:
    """Display name of a callable, used when rendering composites."""
    if isinstance(fn, Morphism):
        return fn.name
    return getattr(fn, "__name__", None) or repr(fn)


@dataclass(frozen=True)
class Morphism(Generic[A, B]):
    """An arrow ``A -> B`` backed by a plain callable.

    Morphisms are immutable values. The wrapped callable is captured
    read-only, so one morphism can take part in any number of compositions.
    Compatibility of domain and codomain is a matter for the type checker;
    nothing is validated at runtime.
    """

    _fn: Callable[[A], B]
    _name: str | None = None

    def __call__(self, a: A) -> B:
        return self._fn(a)

    @property
    def name(self) -> str:
        if self._name is not None:
            return self._name
        return describe(self._fn)

    def __repr__(self) -> str:
        return f"Morphism({self.name})"

    @staticmethod
    def id() -> Morphism[T, T]:
        """The identity morphism."""
        return Morphism(identity, "id")

    def then(self, g: Callable[[B], C]) -> Morphism[A, C]:
        """Apply ``g`` to the output of this morphism (``g ∘ self``)."""
        return compose(self, g)

    def after(self, f: Callable[[C], A]) -> Morphism[C, B]:
        """Apply this morphism to the output of ``f`` (``self ∘ f``)."""
        return compose(f, self)

    def __rshift__(self, g: Callable[[B], C]) -> Morphism[A, C]:
        return self.then(g)

    def __rrshift__(self, f: Callable[[C], A]) -> Morphism[C, B]:
        return self.after(f)

    def __lshift__(self, f: Callable[[C], A]) -> Morphism[C, B]:
        return self.after(f)

    def __rlshift__(self, g: Callable[[B], C]) -> Morphism[A, C]:
        return self.then(g)


def compose(f: Callable[[A], B], g: Callable[[B], C]) -> Morphism[A, C]:
    """Compose ``f: A -> B`` with ``g: B -> C`` into ``g ∘ f: A -> C``.

    The composite evaluates ``f`` first and feeds its result to ``g``.
    Whatever ``f`` or ``g`` raise escapes unchanged, and ``g`` is never
    reached when ``f`` does not return.
    """
    def composite(a: A) -> C:
        b = f(a)
        return g(b)

    return Morphism(composite, f"{describe(g)} ∘ {describe(f)}")
