import pytest

from morphism import compose, curry_unary, identity
from fakes import Boom, Recording, diverge, double, explode, increment, square


def test_identity_returns_input_unchanged() -> None:
    assert identity(5) == 5
    assert identity("s") == "s"
    obj = object()
    assert identity(obj) is obj


def test_compose_applies_f_then_g() -> None:
    assert compose(increment, increment)(10) == 12
    assert compose(increment, double)(3) == 8
    assert compose(double, increment)(3) == 7


def test_compose_with_identity_on_either_side() -> None:
    assert compose(identity, increment)(10) == 11
    assert compose(increment, identity)(10) == 11


def test_compose_changes_types() -> None:
    to_str = compose(increment, str)
    assert to_str(41) == "42"
    assert compose(to_str, len)(99) == 3


def test_associativity_on_samples() -> None:
    left = compose(compose(increment, double), square)
    right = compose(increment, compose(double, square))
    for x in range(-10, 11):
        assert left(x) == right(x)


def test_curry_unary_is_extensionally_equal() -> None:
    curried = curry_unary(increment)
    for x in range(-3, 4):
        assert curried(x) == increment(x)
    assert curry_unary(increment)(5) == 6


def test_error_in_f_propagates_and_skips_g() -> None:
    g = Recording()
    with pytest.raises(Boom) as excinfo:
        compose(explode, g)(7)
    assert excinfo.value.args == (7,)
    assert g.calls == []


def test_error_in_g_propagates_after_f() -> None:
    f = Recording()
    with pytest.raises(Boom) as excinfo:
        compose(f, explode)(1)
    assert f.calls == [1]
    assert excinfo.value.args == (2,)


def test_same_exception_object_escapes() -> None:
    err = Boom("original")

    def fail(_: int) -> int:
        raise err

    with pytest.raises(Boom) as excinfo:
        compose(increment, fail)(0)
    assert excinfo.value is err


def test_divergence_in_f_propagates_regardless_of_g() -> None:
    g = Recording()
    with pytest.raises(RecursionError):
        compose(diverge, g)(1)
    assert g.calls == []


def test_composites_are_reusable() -> None:
    f = Recording(double)
    twice = compose(f, increment)
    assert [twice(x) for x in (1, 2, 3)] == [3, 5, 7]
    assert compose(twice, twice)(1) == 7
    assert f.calls == [1, 2, 3, 1, 3]
