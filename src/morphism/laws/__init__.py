"""Executable category laws for function composition."""

from morphism.laws.checks import (
    DEFAULT_SAMPLES,
    LawConfig,
    check_associativity,
    check_category_laws,
    check_left_identity,
    check_right_identity,
)
from morphism.laws.errors import LawViolation
from morphism.laws.result import LawResult

__all__ = [
    "DEFAULT_SAMPLES",
    "LawConfig",
    "LawResult",
    "LawViolation",
    "check_left_identity",
    "check_right_identity",
    "check_associativity",
    "check_category_laws",
]
