from __future__ import annotations

import logging

from morphism import (
    LawConfig,
    Morphism,
    Trace,
    apply,
    apply_composed,
    check_category_laws,
    compose,
    curry_unary,
    identity,
    traced,
)

logging.basicConfig(level=logging.DEBUG)


def increment_by_one(value: int) -> int:
    return value + 1


def main() -> None:
    # A -> B, argument given up front or deferred
    print("apply:", apply(5, increment_by_one))  # 6
    print("curry_unary:", curry_unary(increment_by_one)(5))  # 6

    # g after f
    print("apply_composed:", apply_composed(10, increment_by_one, increment_by_one))  # 12
    print("compose:", compose(increment_by_one, increment_by_one)(10))  # 12

    # identity is neutral on both sides
    print("left id:", compose(identity, increment_by_one)(10))  # 11
    print("right id:", compose(increment_by_one, identity)(10))  # 11

    inc = Morphism(increment_by_one, "inc")
    pipeline = inc >> str >> len
    print(f"{pipeline!r}:", pipeline(99))  # 3

    for result in check_category_laws(inc, inc, inc, LawConfig(samples=range(-100, 100))):
        print(f"{result.law}: holds={result.holds} over {result.checked} samples")

    trace = Trace()
    traced(compose(traced(inc, trace), traced(inc, trace)), trace, "twice")(0)
    for event in trace.events:
        print(event.id, event.parent_id, event.action, event.morphism)


if __name__ == "__main__":
    main()
