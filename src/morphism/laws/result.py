"""Law check records."""

from __future__ import annotations

from typing import Any, Self

from pydantic import BaseModel

from morphism.laws.errors import LawViolation


class LawResult(BaseModel):
    """Outcome of checking one law over a set of samples.

    Attributes:
        law: Name of the law, e.g. "left_identity"
        holds: Whether both sides agreed on every checked sample
        checked: Number of samples evaluated
        counterexample: First input on which the sides disagreed
        left: Output of the left-hand side on the counterexample
        right: Output of the right-hand side on the counterexample
    """
    law: str
    holds: bool
    checked: int
    counterexample: Any | None = None
    left: Any | None = None
    right: Any | None = None

    @classmethod
    def passed(cls, law: str, checked: int) -> Self:
        return cls(law=law, holds=True, checked=checked)

    @classmethod
    def violated(cls, law: str, checked: int, counterexample: Any, left: Any, right: Any) -> Self:
        return cls(
            law=law,
            holds=False,
            checked=checked,
            counterexample=counterexample,
            left=left,
            right=right,
        )

    def raise_if_violated(self) -> Self:
        if not self.holds:
            raise LawViolation(self)
        return self
