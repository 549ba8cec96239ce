import math

import pytest

from gfcsprites.geometry import Rectangle, Vector


def test_vector_add_sub_round_trip():
    a = Vector(1.5, -2.0)
    b = Vector(4.0, 7.25)
    assert (a + b) - b == a


def test_vector_negation_cancels():
    a = Vector(3.0, -8.0)
    assert a + (-a) == Vector(0.0, 0.0)


def test_vector_scalar_mul_div_round_trip():
    a = Vector(2.0, 6.0)
    assert (a * 4) / 4 == a
    assert 4 * a == a * 4


def test_vector_elementwise_mul():
    a = Vector(2.0, 3.0)
    b = Vector(5.0, 7.0)
    assert (a * b) / b == a


def test_vector_length_pythagorean():
    assert Vector(3, 4).length() == pytest.approx(5.0)


@pytest.mark.parametrize("x,y", [(1, 0), (3, 4), (-2.5, 7), (0.01, -0.03)])
def test_normalized_has_unit_length_and_same_direction(x, y):
    v = Vector(x, y)
    n = v.normalized()
    assert n.length() == pytest.approx(1.0)
    assert math.atan2(n.y, n.x) == pytest.approx(math.atan2(y, x))


def test_normalized_zero_vector():
    assert Vector(0, 0).normalized() == Vector(0.0, 0.0)


def test_vector_unpacks():
    x, y = Vector(9.0, -1.0)
    assert (x, y) == (9.0, -1.0)


def test_rectangle_center_is_midpoint():
    r = Rectangle(10, 20, 30, 40)
    assert r.center_x() * 2 == r.left + r.right
    assert r.center_y() * 2 == r.bottom + r.top


def test_rectangle_intersects_overlap_symmetric():
    a = Rectangle(0, 0, 10, 10)
    b = Rectangle(5, 5, 10, 10)
    assert a.intersects(b)
    assert b.intersects(a)


def test_rectangle_disjoint():
    a = Rectangle(0, 0, 10, 10)
    b = Rectangle(20, 0, 5, 5)
    assert not a.intersects(b)
    assert not b.intersects(a)


def test_rectangle_contained_intersects():
    outer = Rectangle(0, 0, 100, 100)
    inner = Rectangle(40, 40, 2, 2)
    assert outer.intersects(inner)


def test_grow_shrink_round_trip():
    r = Rectangle(5, 5, 20, 30)
    assert r.grow(1, 2, 3, 4).grow(-1, -2, -3, -4) == r


def test_grow_moves_edges():
    r = Rectangle(5, 5, 20, 30)
    g = r.grow(0, -1, 0, -1)
    assert g.left == r.left
    assert g.right == r.right
    assert g.top == r.top - 1
    assert g.bottom == r.bottom + 1