"""Law checkers for identity and composition.

Composition in the category of functions satisfies:

1. Left identity: compose(identity, f) == f
2. Right identity: compose(f, identity) == f
3. Associativity: compose(compose(f, g), h) == compose(f, compose(g, h))

Equality here is extensional, so each checker evaluates both sides on a set
of sample inputs. Errors raised by the morphisms under test propagate; a
diverging or failing morphism never produces a verdict.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from morphism.kernel.arrow import compose, identity
from morphism.laws.result import LawResult

logger = logging.getLogger(__name__)

DEFAULT_SAMPLES: tuple[int, ...] = tuple(range(-5, 6))


def _same(a: Any, b: Any) -> bool:
    """Equality that also accepts the identical object (e.g. NaN)."""
    return a is b or a == b


@dataclass(frozen=True)
class LawConfig:
    samples: Iterable[Any] = DEFAULT_SAMPLES
    equals: Callable[[Any, Any], bool] = _same


def _check(
    law: str,
    lhs: Callable[[Any], Any],
    rhs: Callable[[Any], Any],
    config: LawConfig | None,
) -> LawResult:
    config = config or LawConfig()
    checked = 0
    for sample in config.samples:
        left = lhs(sample)
        right = rhs(sample)
        checked += 1
        if not config.equals(left, right):
            logger.warning("%s violated at %r: %r != %r", law, sample, left, right)
            return LawResult.violated(law, checked, sample, left, right)
    logger.debug("%s holds on %d samples", law, checked)
    return LawResult.passed(law, checked)


def check_left_identity(f: Callable[[Any], Any], config: LawConfig | None = None) -> LawResult:
    """compose(identity, f) agrees with f on every sample."""
    return _check("left_identity", compose(identity, f), f, config)


def check_right_identity(f: Callable[[Any], Any], config: LawConfig | None = None) -> LawResult:
    """compose(f, identity) agrees with f on every sample."""
    return _check("right_identity", compose(f, identity), f, config)


def check_associativity(
    f: Callable[[Any], Any],
    g: Callable[[Any], Any],
    h: Callable[[Any], Any],
    config: LawConfig | None = None,
) -> LawResult:
    """Both bracketings of f, g, h agree on every sample."""
    return _check(
        "associativity",
        compose(compose(f, g), h),
        compose(f, compose(g, h)),
        config,
    )


def check_category_laws(
    f: Callable[[Any], Any],
    g: Callable[[Any], Any],
    h: Callable[[Any], Any],
    config: LawConfig | None = None,
) -> list[LawResult]:
    """Run all three laws. The identity laws are checked on ``f``."""
    if config is not None:
        # samples may be a one-shot iterator; each law needs its own pass
        config = LawConfig(samples=tuple(config.samples), equals=config.equals)
    return [
        check_left_identity(f, config),
        check_right_identity(f, config),
        check_associativity(f, g, h, config),
    ]
