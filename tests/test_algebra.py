import math

import pytest

from pixelkit.algebra import (
    Matrix4,
    Origin,
    Ortho,
    Point2,
    Vector2,
    Vector3,
    Vector4,
)


def test_vector4_dot():
    v1 = Vector4(1, 3, -5, 4)
    v2 = Vector4(4, -2, -1, 3)
    assert v1 * v2 == 15


def test_translation_vector3():
    m = Matrix4.from_translation(Vector3(8.0, 8.0, 0.0))
    assert m * Vector3(1.0, 1.0, 0.0) == Vector3(9.0, 9.0, 0.0)


def test_translation_vector4():
    m = Matrix4.from_translation(Vector3(8.0, 8.0, 0.0))
    assert m * Vector4(1.0, 1.0, 0.0, 1.0) == Vector4(9.0, 9.0, 0.0, 1.0)


def test_translation_point2():
    m = Matrix4.from_translation(Vector3(8.0, 8.0, 0.0))
    assert m * Point2(1.0, 1.0) == Point2(9.0, 9.0)


def test_identity_is_neutral():
    m = Matrix4.from_translation(Vector3(3.0, -2.0, 5.0))
    assert Matrix4.identity() * m == m
    assert m * Matrix4.identity() == m
    v = Vector4(1.5, 2.5, 3.5, 1.0)
    assert Matrix4.identity() * v == v


def test_matrix_product_composes_translations():
    a = Matrix4.from_translation(Vector3(1.0, 2.0, 0.0))
    b = Matrix4.from_translation(Vector3(4.0, 8.0, 0.0))
    p = Point2(0.5, 0.25)
    assert (a * b) * p == a * (b * p)


def test_from_scale_equals_nonuniform():
    assert Matrix4.from_scale(2.0) == Matrix4.from_nonuniform_scale(2.0, 2.0, 2.0)


def test_scale_keeps_homogeneous_coordinate():
    v = Vector4(1.0, 2.0, 3.0, 1.0)
    scaled = Matrix4.from_nonuniform_scale(3.0, 3.0, 3.0) * v
    assert scaled.w == v.w
    assert Vector4(scaled.x, scaled.y, scaled.z, 0.0) == Vector4(v.x, v.y, v.z, 0.0) * 3.0


def test_row_out_of_range():
    with pytest.raises(IndexError):
        Matrix4.identity().row(4)


def test_row_and_columns_are_transposed():
    m = Matrix4.from_translation(Vector3(8.0, 9.0, 0.0))
    assert m.row(0).w == m.w.x
    assert m.to_list()[3] == [8.0, 9.0, 0.0, 1]


def test_ortho_top_left_corner():
    m = Matrix4.ortho(64, 32, Origin.TOP_LEFT)
    assert m * Point2(0.0, 0.0) == Point2(-1.0, 1.0)


def test_ortho_origins_flip_y():
    tl = Matrix4.ortho(64, 32, Origin.TOP_LEFT)
    bl = Matrix4.ortho(64, 32, Origin.BOTTOM_LEFT)
    for p in (Point2(0.0, 0.0), Point2(10.0, 7.0), Point2(64.0, 32.0)):
        a, b = tl * p, bl * p
        assert a.x == b.x
        assert a.y == pytest.approx(-b.y)


def test_ortho_struct_matches_ortho_constructor():
    o = Ortho(left=0.0, right=10.0, bottom=20.0, top=0.0, near=-1.0, far=1.0)
    assert o.to_matrix() == Matrix4.ortho(10, 20, Origin.TOP_LEFT)


def test_normalize_has_unit_length():
    v = Vector2(3.0, -7.0).normalize()
    assert v.magnitude() == pytest.approx(1.0)


def test_normalize_zero_is_nan():
    v = Vector2.zero().normalize()
    assert math.isnan(v.x) is True
    assert math.isnan(v.y) is True


def test_distance_is_symmetric():
    a, b = Vector2(1.0, 2.0), Vector2(-4.0, 6.5)
    assert a.distance(b) == pytest.approx(b.distance(a))
    assert a.distance(a) == 0


def test_zero_vector():
    assert Vector2.zero().is_zero()
    assert not Vector2(1, 0).is_zero()


def test_vector_arithmetic_round_trip():
    a, b = Vector2(1, 2), Vector2(5, -3)
    assert (a + b) - b == a
    assert a * 2 == a + a


def test_extend_chain():
    assert Vector2(1, 2).extend(3) == Vector3(1, 2, 3)
    assert Vector3(1, 2, 3).extend(4) == Vector4(1, 2, 3, 4)


def test_map():
    assert Vector2(1.6, 2.2).map(math.floor) == Vector2(1, 2)
    assert Point2(1.6, 2.2).map(math.floor) == Point2(1, 2)


def test_point_arithmetic():
    p, q = Point2(3, 5), Point2(1, 1)
    d = p - q
    assert isinstance(d, Vector2)
    assert q + d == p
    assert p - d == q
    assert (p * 4) / 4 == p


def test_vector4_add_and_list():
    a, b = Vector4(1, 2, 3, 4), Vector4(4, 3, 2, 1)
    assert (a + b).to_list() == [5, 5, 5, 5]
    assert (a * 2) == a + a