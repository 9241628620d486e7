"""Kernel layer - morphisms, identity and composition."""

from morphism.kernel.arrow import Morphism, compose, identity
from morphism.kernel.ops import apply, apply_composed, compose_all, curry_unary
from morphism.kernel.partial import Undefined, is_total_on, undefined
from morphism.kernel.trace import Evidence, Trace, traced

__all__ = [
    "Morphism",
    "identity",
    "compose",
    # Application forms
    "apply",
    "apply_composed",
    "compose_all",
    "curry_unary",
    # Partiality
    "Undefined",
    "undefined",
    "is_total_on",
    # Tracing
    "Evidence",
    "Trace",
    "traced",
]
