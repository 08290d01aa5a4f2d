import math

import pytest

from doomview.matrix import Mat4
from doomview.vector import Vec3


def test_mul():
    a = Mat4(4.0, 8.0, 1.0, 6.0,
             9.0, 4.0, 2.0, 1.0,
             4.0, 3.0, 9.0, 3.0,
             2.0, 4.0, 9.0, 4.0)
    b = Mat4(8.0, 6.0, 5.0, 7.0,
             1.0, 7.0, 3.0, 2.0,
             1.0, 6.0, 7.0, 4.0,
             2.0, 5.0, 2.0, 6.0)
    exp_ab = Mat4(53.0, 116.0, 63.0, 84.0,
                  80.0, 99.0, 73.0, 85.0,
                  50.0, 114.0, 98.0, 88.0,
                  37.0, 114.0, 93.0, 82.0)
    assert a * b == exp_ab


def _sample():
    return Mat4(*range(1, 17))


def test_get_is_row_major_view():
    m = _sample()
    assert m.get(0, 0) == 1.0
    assert m.get(0, 3) == 4.0
    assert m.get(3, 0) == 13.0
    assert m.get(2, 1) == 10.0


def test_index_returns_column():
    m = _sample()
    assert m[0] == (1.0, 5.0, 9.0, 13.0)
    assert m[3] == (4.0, 8.0, 12.0, 16.0)


def test_index_out_of_range():
    with pytest.raises(IndexError):
        _sample()[4]
    with pytest.raises(IndexError):
        _sample().get(4, 0)


def test_wrong_number_of_values():
    with pytest.raises(TypeError):
        Mat4(1.0, 2.0)


def test_identity_is_neutral():
    m = _sample()
    assert m * Mat4.identity() == m
    assert Mat4.identity() * m == m


def test_transposed():
    m = _sample()
    t = m.transposed()
    assert t.get(0, 3) == 13.0
    assert t.get(3, 0) == 4.0
    assert t.transposed() == m


def test_add_and_sub():
    m = _sample()
    assert (m + m).get(1, 2) == 14.0
    assert m - m == Mat4(*([0.0] * 16))
    assert (m + Mat4.identity()) - Mat4.identity() == m


def test_translation_column():
    t = Mat4.translation(Vec3(4.0, 5.0, 6.0))
    assert t[3] == (4.0, 5.0, 6.0, 1.0)
    assert t * Mat4.translation(Vec3(-4.0, -5.0, -6.0)) == Mat4.identity()


def test_euler_rotation_zero_is_identity():
    assert Mat4.euler_rotation(0.0, 0.0, 0.0) == Mat4.identity()


def test_axis_rotation_quarter_turn_about_z():
    r = Mat4.axis_rotation(Vec3(0.0, 0.0, 1.0), math.pi / 2)
    expected = Mat4(0.0, -1.0, 0.0, 0.0,
                    1.0, 0.0, 0.0, 0.0,
                    0.0, 0.0, 1.0, 0.0,
                    0.0, 0.0, 0.0, 1.0)
    assert r.approx_eq(expected, 1e-12)


def test_rotation_is_orthonormal():
    r = Mat4.euler_rotation(0.3, -0.7, 1.1)
    assert (r * r.transposed()).approx_eq(Mat4.identity(), 1e-12)


def test_perspective_values():
    p = Mat4.perspective(90.0, 2.0, 1.0, 3.0)
    assert p.get(1, 1) == pytest.approx(1.0, rel=1e-8)
    assert p.get(0, 0) == pytest.approx(0.5, rel=1e-8)
    assert p.get(2, 2) == pytest.approx(-2.0)
    assert p.get(2, 3) == pytest.approx(-3.0)
    assert p.get(3, 2) == -1.0
    assert p.get(3, 3) == 0.0


def test_approx_eq_tolerance():
    a = Mat4.identity()
    b = a + Mat4(*([1e-3] * 16))
    assert a.approx_eq(b, 1e-2)
    assert not a.approx_eq(b, 1e-4)


def test_repr_has_four_rows():
    text = repr(Mat4.identity())
    assert text.startswith("[")
    assert text.endswith("]")
    assert text.count(";") == 3