"""Error types for law checking."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from morphism.laws.result import LawResult


class LawViolation(Exception):
    """Raised when a categorical law fails for some input.

    The failing ``LawResult`` is kept so the counterexample can be inspected.
    """

    def __init__(self, result: LawResult) -> None:
        self.result = result
        super().__init__(
            f"{result.law} violated at {result.counterexample!r}: "
            f"{result.left!r} != {result.right!r}"
        )

    def __repr__(self) -> str:
        return f"LawViolation({super().__repr__()}, law={self.result.law!r})"
