import pytest

from morphism import Morphism, apply, apply_composed, compose, compose_all, curry_unary
from fakes import Boom, Recording, double, explode, increment, square


def test_apply_matches_curried_form() -> None:
    assert apply(5, increment) == 6
    assert apply(5, increment) == curry_unary(increment)(5)


def test_apply_composed_matches_compose() -> None:
    assert apply_composed(10, increment, increment) == 12
    for x in range(-4, 5):
        assert apply_composed(x, increment, double) == compose(increment, double)(x)


def test_compose_all_runs_left_to_right() -> None:
    pipeline = compose_all(increment, double, square)
    assert pipeline(1) == 16
    assert pipeline(-1) == 0


def test_compose_all_empty_is_identity() -> None:
    nothing = compose_all()
    assert isinstance(nothing, Morphism)
    assert nothing(42) == 42
    assert nothing("s") == "s"


def test_compose_all_single() -> None:
    assert compose_all(increment)(1) == 2


def test_compose_all_names_the_composite() -> None:
    assert compose_all(increment, double).name == "double ∘ increment"


def test_compose_all_long_pipeline() -> None:
    pipeline = compose_all(*([increment] * 5000))
    assert pipeline(0) == 5000


def test_compose_all_propagates_errors_and_stops() -> None:
    after = Recording()
    with pytest.raises(Boom):
        compose_all(increment, explode, after)(1)
    assert after.calls == []
