from .kernel import (
    Evidence,
    Morphism,
    Trace,
    Undefined,
    apply,
    apply_composed,
    compose,
    compose_all,
    curry_unary,
    identity,
    is_total_on,
    traced,
    undefined,
)
from .laws import LawConfig, LawResult, LawViolation, check_category_laws

__all__ = [
    # Core
    "identity",
    "compose",
    "curry_unary",
    "Morphism",
    # Application forms
    "apply",
    "apply_composed",
    "compose_all",
    # Partiality
    "Undefined",
    "undefined",
    "is_total_on",
    # Laws
    "LawConfig",
    "LawResult",
    "LawViolation",
    "check_category_laws",
    # Tracing
    "Evidence",
    "Trace",
    "traced",
]
