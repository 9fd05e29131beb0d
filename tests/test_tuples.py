"""Tests for homogeneous tuples (points and vectors sharing one representation)."""
import logging
import math

import pytest

from raytracer.algebra import Point, Tuple, TupleKind, Vector, point, raw, vector, zero
from raytracer.algebra.utils import approximately_equal


def test_tuple_with_w_one_is_point():
    a = raw(4.3, -4.2, 3.1, 1.0)
    assert a.x == pytest.approx(4.3)
    assert a.y == pytest.approx(-4.2)
    assert a.z == pytest.approx(3.1)
    assert a.kind is TupleKind.POINT
    assert a.is_point and not a.is_vector


def test_tuple_with_w_zero_is_vector():
    a = raw(4.3, -4.2, 3.1, 0.0)
    assert a.kind is TupleKind.VECTOR
    assert a.is_vector and not a.is_point


def test_other_w_is_invalid():
    assert raw(1, 2, 3, 2).kind is TupleKind.INVALID
    assert raw(1, 2, 3, 0.5).kind is TupleKind.INVALID


def test_factories():
    assert point(4, -4, 3) == raw(4, -4, 3, 1)
    assert vector(4, -4, 3) == raw(4, -4, 3, 0)
    assert zero() == vector(0, 0, 0)
    assert zero().w == 0.0


def test_components_are_single_precision():
    assert vector(0.1, 0, 0).x != 0.1
    assert approximately_equal(vector(0.1, 0, 0).x, 0.1)


def test_tuples_are_immutable():
    v = vector(1, 2, 3)
    with pytest.raises(AttributeError):
        v.x = 5.0


def test_equal_tuples():
    assert vector(4, -4, 3) == vector(4, -4, 3)
    assert vector(4, -4, 3) == vector(4 + 1e-7, -4, 3)


def test_unequal_tuples():
    assert vector(4, -4, 3) != vector(4, -5, 3)


def test_same_coordinates_different_kind_are_not_equal():
    assert point(1, 2, 3) != vector(1, 2, 3)
    assert raw(1, 2, 3, 2) != point(1, 2, 3)
    assert raw(1, 2, 3, 2) != vector(1, 2, 3)


def test_tuple_is_not_equal_to_other_types():
    assert vector(1, 2, 3) != (1, 2, 3, 0)


def test_tuples_are_not_hashable():
    with pytest.raises(TypeError):
        hash(vector(1, 2, 3))


def test_add_vector_to_point():
    assert point(3, -2, 5) + vector(-2, 3, 1) == point(1, 1, 6)


def test_add_points_is_invalid():
    result = point(1, 0, 0) + point(0, 1, 0)
    assert result.kind is TupleKind.INVALID
    assert result.w == 2.0


def test_subtract_points():
    assert point(3, 2, 1) - point(5, 6, 7) == vector(-2, -4, -6)


def test_subtract_vector_from_point():
    assert point(3, 2, 1) - vector(5, 6, 7) == point(-2, -4, -6)


def test_subtract_vectors():
    assert vector(3, 2, 1) - vector(5, 6, 7) == vector(-2, -4, -6)


def test_subtract_from_zero_vector():
    assert zero() - vector(1, -2, 3) == vector(-1, 2, -3)


def test_negate():
    assert -raw(1, -2, 3, -4) == raw(-1, 2, -3, 4)
    assert -vector(1, -2, 3) == vector(-1, 2, -3)


def test_multiply_by_scalar():
    assert vector(1, -2, 3) * 3.5 == vector(3.5, -7, 10.5)
    assert 3.5 * vector(1, -2, 3) == vector(3.5, -7, 10.5)


def test_multiply_by_fraction():
    assert vector(1, -2, 3) * 0.5 == vector(0.5, -1, 1.5)


def test_scaling_point_is_invalid():
    assert (point(1, 2, 3) * 2).kind is TupleKind.INVALID
    assert (-point(1, 2, 3)).kind is TupleKind.INVALID


def test_divide_by_scalar():
    assert raw(1, -2, 3, -4) / 2 == raw(0.5, -1, 1.5, -2)


def test_divide_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        vector(1, 2, 3) / 0


def test_operands_are_not_mutated():
    p = point(3, -2, 5)
    v = vector(-2, 3, 1)
    _ = p + v
    _ = v * 2
    assert p == point(3, -2, 5)
    assert v == vector(-2, 3, 1)


@pytest.mark.parametrize("v, expected", [
    (vector(1, 0, 0), 1.0),
    (vector(0, 1, 0), 1.0),
    (vector(0, 0, 1), 1.0),
    (vector(1, 2, 3), math.sqrt(14)),
    (vector(-1, -2, -3), math.sqrt(14)),
    (vector(1, -2, 3), math.sqrt(14)),
])
def test_magnitude(v, expected):
    assert approximately_equal(v.magnitude(), expected)


def test_magnitude_of_point_includes_w():
    assert approximately_equal(point(0, 0, 0).magnitude(), 1.0)


def test_normalize():
    assert vector(4, 0, 0).normalize() == vector(1, 0, 0)
    s = math.sqrt(14)
    assert vector(1, 2, 3).normalize() == vector(1 / s, 2 / s, 3 / s)


@pytest.mark.parametrize("v", [
    vector(1, 2, 3),
    vector(-0.3, 7.5, 100),
    vector(1e-3, 0, 0),
])
def test_normalized_vector_has_unit_length(v):
    assert approximately_equal(v.normalize().magnitude(), 1.0)


def test_normalize_zero_is_zero():
    assert zero().normalize() == zero()


def test_dot_product():
    assert vector(1, 2, 3).dot(vector(2, 3, 4)) == 20.0


def test_dot_product_is_symmetric_and_scales():
    a = vector(1, 2, 3)
    b = vector(2, 3, 4)
    assert approximately_equal(a.dot(b), b.dot(a))
    assert approximately_equal((a * 3.5).dot(b), 3.5 * a.dot(b))


def test_dot_of_non_vectors_logs_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="raytracer.algebra.tuples"):
        point(1, 2, 3).dot(vector(1, 0, 0))
    assert "non-vector" in caplog.text


def test_dot_of_vectors_does_not_log(caplog):
    with caplog.at_level(logging.WARNING, logger="raytracer.algebra.tuples"):
        vector(1, 2, 3).dot(vector(1, 0, 0))
    assert caplog.records == []


def test_cross_product():
    a = vector(1, 2, 3)
    b = vector(2, 3, 4)
    assert a.cross(b) == vector(-1, 2, -1)
    assert b.cross(a) == vector(1, -2, 1)


def test_cross_product_is_anti_commutative():
    a = vector(0.5, -1.25, 3)
    b = vector(-2, 4, 0.75)
    assert a.cross(b) == -(b.cross(a))


def test_cross_product_always_returns_vector():
    assert point(1, 2, 3).cross(point(2, 3, 4)).kind is TupleKind.VECTOR


def test_point_vector_addition_is_associative():
    p = point(1, 2, 3)
    v1 = vector(0.5, -1, 2)
    v2 = vector(-3, 0.25, 1)
    assert (p + v1) + v2 == p + (v1 + v2)
    assert p - p == vector(0, 0, 0)


def test_as_point_and_as_vector():
    assert point(1, 2, 3).as_point() == Point(1, 2, 3)
    assert vector(1, 2, 3).as_vector() == Vector(1, 2, 3)


def test_conversion_to_wrong_kind_raises():
    with pytest.raises(ValueError, match="vector"):
        vector(1, 2, 3).as_point()
    with pytest.raises(ValueError, match="invalid"):
        raw(1, 2, 3, 2).as_vector()


def test_tuple_constructor_accepts_integers():
    t = Tuple(1, 2, 3, 1)
    assert isinstance(t.x, float)


def test_package_exports_tuple_factories():
    import raytracer.algebra as algebra
    from raytracer.algebra import tuples

    assert algebra.vector is tuples.vector
    assert algebra.point is tuples.point
    assert algebra.vector(1, 2, 3).kind is TupleKind.VECTOR


def test_magnitude_beyond_f32_range_is_infinite(recwarn):
    assert vector(3e38, 3e38, 0).magnitude() == math.inf
    assert len(recwarn) == 0
