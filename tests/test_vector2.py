import math
import os
import random
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from pyvecmath import (
    DegenerateVectorError, ShapeMismatchError, Vector2, VectorDomainError
)


def test_components_are_coerced_to_float():
    v = Vector2(1, 2)
    assert isinstance(v.x, float) and isinstance(v.y, float)
    assert v == Vector2(1.0, 2.0)
    assert Vector2() == Vector2(0.0, 0.0)


def test_str_and_repr():
    v = Vector2(1, 2.5)
    assert str(v) == "<1.00, 2.50>"
    assert repr(v) == "Vector2(x=1.0, y=2.5)"


def test_slots_reject_unknown_attributes():
    with pytest.raises(AttributeError):
        Vector2().z = 1.0


def test_operators_return_new_vectors():
    a = Vector2(1, 2)
    b = Vector2(3, 4)
    assert a + b == Vector2(4, 6)
    assert b - a == Vector2(2, 2)
    assert a * 2 == Vector2(2, 4)
    assert 2 * a == Vector2(2, 4)
    assert Vector2(2, 4) / 2 == Vector2(1, 2)
    assert -a == Vector2(-1, -2)
    assert a == Vector2(1, 2)


def test_division_by_zero():
    with pytest.raises(ValueError, match="Cannot divide by zero."):
        Vector2(1, 1) / 0


def test_vector_times_vector_is_not_supported():
    with pytest.raises(TypeError):
        Vector2(1, 1) * Vector2(1, 1)


def test_iteration_and_length():
    assert list(Vector2(1, 2)) == [1.0, 2.0]
    assert len(Vector2()) == 2


def test_xy_bulk_access():
    v = Vector2()
    v.xy = (3, 4)
    assert v.xy == (3.0, 4.0)
    with pytest.raises(ShapeMismatchError):
        v.xy = (1, 2, 3)
    assert v == Vector2(3, 4)


def test_from_sequence():
    assert Vector2.from_sequence([5, 6]) == Vector2(5, 6)
    with pytest.raises(ShapeMismatchError) as excinfo:
        Vector2.from_sequence([1])
    assert excinfo.value.expected == 2
    assert excinfo.value.got == 1


def test_magnitude():
    v = Vector2(3, 4)
    assert v.magnitude == 5.0
    assert v.magnitude_squared == 25.0
    assert Vector2().magnitude == 0.0


def test_magnitude_special_values():
    assert math.isnan(Vector2(math.nan, math.inf).magnitude)
    assert Vector2(math.inf, 1).magnitude == math.inf
    big = Vector2(1e200, 1e200).magnitude
    assert math.isfinite(big)
    assert big == pytest.approx(math.sqrt(2) * 1e200)


def test_predicates():
    assert Vector2().is_zero()
    assert not Vector2(0, 1e-300).is_zero()
    assert Vector2(math.nan, 0).is_nan()
    assert Vector2(math.inf, 0).is_infinite()
    assert not Vector2(math.inf, math.nan).is_infinite()
    assert Vector2(1, 2).satisfy_equality(Vector2(1, 2))
    assert Vector2(1, -2).satisfy_opposition(Vector2(-1, 2))
    assert not Vector2(1, 2).satisfy_opposition(Vector2(1, 2))


def test_angle_x_range():
    assert Vector2(1, 0).angle_x == 0.0
    assert math.copysign(1.0, Vector2(1, -0.0).angle_x) == 1.0
    assert Vector2(0, 1).angle_x == pytest.approx(math.pi / 2)
    assert Vector2(-1, -0.0).angle_x == pytest.approx(math.pi)
    assert Vector2(0, -1).angle_x == pytest.approx(3 * math.pi / 2)
    for _ in range(100):
        angle = Vector2(random.uniform(-1, 1), random.uniform(-1, 1)).angle_x
        assert 0.0 <= angle < 2 * math.pi


def test_angle_y_is_counter_clockwise_from_y_axis():
    assert Vector2(0, 1).angle_y == 0.0
    assert Vector2(-1, 0).angle_y == pytest.approx(math.pi / 2)
    assert Vector2(0, -1).angle_y == pytest.approx(math.pi)
    assert Vector2(1, 0).angle_y == pytest.approx(3 * math.pi / 2)


@pytest.mark.parametrize("r, theta", [(2.0, 0.5), (1.0, 3.0), (3.0, 5.0), (0.5, 6.0)])
def test_polar_round_trip(r, theta):
    v = Vector2.from_polar_coords(r, theta)
    assert v.magnitude == pytest.approx(r)
    assert v.angle_x == pytest.approx(theta % (2 * math.pi))


def test_dot():
    assert Vector2(1, 2).dot(Vector2(3, 4)) == 11.0


def test_angle_between_is_signed():
    assert Vector2(1, 0).angle_between(Vector2(0, 1)) == math.pi / 2
    assert Vector2(0, 1).angle_between(Vector2(1, 0)) == -math.pi / 2
    assert Vector2(1, 0).angle_between(Vector2(-1, 0)) == math.pi
    assert Vector2(-1, 0).angle_between(Vector2(1, 0)) == math.pi


def test_angle_between_zero_vector_raises():
    with pytest.raises(DegenerateVectorError):
        Vector2(1, 0).angle_between(Vector2())
    with pytest.raises(DegenerateVectorError):
        Vector2().angle_between(Vector2(1, 0))


def test_distances():
    a = Vector2(0, 0)
    b = Vector2(1, 1)
    assert a.distance(b) == pytest.approx(math.sqrt(2))
    assert a.distance_squared(b) == 2.0
    assert a.distance_manhattan(b) == 2.0
    assert a.distance_chebyshev(b) == 1.0


def test_minkowski():
    a = Vector2(0, 0)
    b = Vector2(1, 1)
    assert a.distance_minkowski(b, 1) == 2.0
    assert a.distance_minkowski(b, 2) == pytest.approx(math.sqrt(2))
    assert a.distance_minkowski(b, 100) == pytest.approx(1.0, rel=1e-2)
    assert a.distance_minkowski(b, math.inf) == 1.0
    for p in (0, -1):
        with pytest.raises(VectorDomainError):
            a.distance_minkowski(b, p)


def test_triangle_inequality():
    rng = random.Random(7)
    for _ in range(200):
        a, b, c = (Vector2(rng.uniform(-10, 10), rng.uniform(-10, 10)) for _ in range(3))
        for metric in ("distance", "distance_manhattan", "distance_chebyshev"):
            ab = getattr(a, metric)(b)
            bc = getattr(b, metric)(c)
            ac = getattr(a, metric)(c)
            assert ac <= ab + bc + 1e-9


def test_in_place_arithmetic_chains():
    v = Vector2(1, 2)
    result = v.add(Vector2(3, 4)).subtract(Vector2(1, 1)).scale(2)
    assert result is v
    assert v == Vector2(6, 10)
    assert v.negate() == Vector2(-6, -10)
    assert v.zero().is_zero()


def test_copy_and_clone():
    v = Vector2(1, 2)
    clone = v.clone()
    assert clone == v and clone is not v
    target = Vector2()
    assert target.copy(v) is target
    assert target == Vector2(1, 2)


def test_lerp_clamps_t():
    assert Vector2(0, 0).lerp(Vector2(10, 10), 0.5) == Vector2(5, 5)
    assert Vector2(0, 0).lerp(Vector2(10, 10), 2.0) == Vector2(10, 10)
    assert Vector2(0, 0).lerp(Vector2(10, 10), -1.0) == Vector2(0, 0)


def test_normalize_is_idempotent():
    v = Vector2(3, 4).normalize()
    assert tuple(v) == pytest.approx((0.6, 0.8))
    again = v.clone().normalize()
    assert again.magnitude == pytest.approx(1.0)
    assert tuple(again) == pytest.approx(tuple(v))


def test_normalize_zero_stays_zero():
    assert Vector2().normalize() == Vector2()


def test_set_magnitude_and_limits():
    assert tuple(Vector2(3, 4).set_magnitude(10)) == pytest.approx((6, 8))
    assert Vector2(3, 4).limit_max(1).magnitude == pytest.approx(1.0)
    assert Vector2(3, 4).limit_max(10) == Vector2(3, 4)
    assert Vector2(3, 4).limit_min(10).magnitude == pytest.approx(10.0)
    assert Vector2(3, 4).limit_min(1) == Vector2(3, 4)
    assert Vector2(3, 4).clamp(1, 2).magnitude == pytest.approx(2.0)
    assert Vector2(0.3, 0.4).clamp(1, 2).magnitude == pytest.approx(1.0)


def test_look_at_keeps_magnitude():
    v = Vector2(3, 4).look_at(Vector2(0, 2))
    assert v == Vector2(0, 5)


def test_look_at_zero_target_leaves_vector_unchanged():
    assert Vector2(3, 4).look_at(Vector2()) == Vector2(3, 4)


def test_project():
    assert Vector2(2, 3).project(Vector2(5, 0)) == Vector2(2, 0)
    assert tuple(Vector2(1, 0).project(Vector2(1, 1))) == pytest.approx((0.5, 0.5))
    assert Vector2(2, 3).project(Vector2()).is_zero()


def test_set_angles():
    assert tuple(Vector2(3, 4).set_angle_x(math.pi / 2)) == pytest.approx((0, 5), abs=1e-12)
    assert tuple(Vector2(3, 4).set_angle_y(0.0)) == pytest.approx((0, 5), abs=1e-12)
    assert tuple(Vector2(0, 2).set_angle_y(math.pi / 2)) == pytest.approx((-2, 0), abs=1e-12)


def test_rotate_z():
    assert tuple(Vector2(1, 0).rotate_z(math.pi / 2)) == pytest.approx((0, 1), abs=1e-12)
    v = Vector2(1.5, -2.5)
    v.rotate_z(0.7).rotate_z(-0.7)
    assert tuple(v) == pytest.approx((1.5, -2.5))


def test_turns_are_exact():
    assert Vector2(1, 2).turn_left() == Vector2(-2, 1)
    assert Vector2(1, 2).turn_right() == Vector2(2, -1)
    assert Vector2(1, 2).turn_left().turn_right() == Vector2(1, 2)


def test_random():
    rng = random.Random(42)
    v = Vector2.random(rng=rng)
    assert isinstance(v, Vector2)
    assert v.magnitude == pytest.approx(1.0)
    w = Vector2(0, 5)
    assert w.random(rng) is w
    assert w.magnitude == pytest.approx(5.0)


def test_angle_between_extreme_scales():
    assert Vector2(1e-200, 0).angle_between(Vector2(0, 1e-200)) == math.pi / 2
    assert Vector2(5e-324, 0).angle_between(Vector2(0, -5e-324)) == -math.pi / 2
    assert Vector2(1e200, 0).angle_between(Vector2(1e200, 1e200)) == pytest.approx(math.pi / 4)
    assert Vector2(-1e300, 0).angle_between(Vector2(1e300, 0)) == math.pi


def test_project_extreme_scales():
    assert Vector2(1, 1).project(Vector2(1e-200, 0)) == Vector2(1, 0)
    assert Vector2(1e200, 1e200).project(Vector2(0, 1e200)) == Vector2(0, 1e200)


def test_minkowski_tiny_order_overflows_to_inf():
    assert Vector2(1, 1).distance_minkowski(Vector2(0, 0), 1e-300) == math.inf
    assert Vector2(1, 0).distance_minkowski(Vector2(0, 0), 1e-300) == 1.0
