import math

import pytest

from doomview.sphere import ContactInfo, Sphere
from doomview.vector import Vec3

FLOOR = (Vec3(-10.0, 0.0, -10.0), Vec3(0.0, 0.0, 10.0), Vec3(10.0, 0.0, -10.0))
UP = Vec3(0.0, 1.0, 0.0)


def test_falling_onto_floor_touches_plane():
    sphere = Sphere(Vec3(0.0, 2.0, 0.0), 1.0)
    vel = Vec3(0.0, -4.0, 0.0)
    contact = sphere.sweep_triangle(FLOOR, UP, vel)
    assert contact is not None
    moved = sphere.center + vel * contact.time
    assert moved.y - sphere.radius == pytest.approx(0.0)
    assert tuple(contact.normal) == pytest.approx((0.0, 1.0, 0.0))


def test_contact_info_fields():
    info = ContactInfo(time=0.5, normal=UP)
    assert info == ContactInfo(0.5, Vec3(0.0, 1.0, 0.0))


def test_zero_velocity_has_no_contact():
    sphere = Sphere(Vec3(0.0, 2.0, 0.0), 1.0)
    assert sphere.sweep_triangle(FLOOR, UP, Vec3.zero()) is None


def test_moving_away_from_front_face_has_no_contact():
    sphere = Sphere(Vec3(0.0, 2.0, 0.0), 1.0)
    assert sphere.sweep_triangle(FLOOR, UP, Vec3(0.0, 3.0, 0.0)) is None
    assert sphere.sweep_triangle(FLOOR, UP, Vec3(3.0, 0.0, 0.0)) is None


def test_sphere_behind_plane_has_no_contact():
    sphere = Sphere(Vec3(0.0, -3.0, 0.0), 1.0)
    assert sphere.sweep_triangle(FLOOR, UP, Vec3(0.0, -1.0, 0.0)) is None


def test_missing_the_triangle_has_no_contact():
    sphere = Sphere(Vec3(50.0, 2.0, 50.0), 1.0)
    assert sphere.sweep_triangle(FLOOR, UP, Vec3(0.0, -4.0, 0.0)) is None


def test_moving_into_wall():
    wall = (Vec3(0.0, -5.0, -5.0), Vec3(0.0, 5.0, 0.0), Vec3(0.0, -5.0, 5.0))
    normal = Vec3(-1.0, 0.0, 0.0)
    sphere = Sphere(Vec3(-3.0, 0.0, 0.0), 1.0)
    vel = Vec3(4.0, 0.0, 0.0)
    contact = sphere.sweep_triangle(wall, normal, vel)
    assert contact is not None
    moved = sphere.center + vel * contact.time
    assert moved.x + sphere.radius == pytest.approx(0.0)
    assert tuple(contact.normal) == pytest.approx(tuple(normal))


def test_head_on_vertex_contact():
    triangle = (Vec3(0.0, 0.0, 0.0), Vec3(1.0, 0.0, 0.0), Vec3(0.0, 0.0, 1.0))
    sphere = Sphere(Vec3(-1.0, 1.0, -1.0), 1.0)
    vel = Vec3(2.0, -2.0, 2.0)
    contact = sphere.sweep_triangle(triangle, UP, vel)
    assert contact is not None
    moved = sphere.center + vel * contact.time
    assert moved.norm() == pytest.approx(sphere.radius)
    assert contact.normal.norm() == pytest.approx(1.0)
    expected = Vec3(-1.0, 1.0, -1.0) / math.sqrt(3.0)
    assert tuple(contact.normal) == pytest.approx(tuple(expected))


def test_contact_time_scales_inversely_with_velocity():
    sphere = Sphere(Vec3(0.0, 2.0, 0.0), 1.0)
    slow = sphere.sweep_triangle(FLOOR, UP, Vec3(0.0, -2.0, 0.0))
    fast = sphere.sweep_triangle(FLOOR, UP, Vec3(0.0, -4.0, 0.0))
    assert slow is not None and fast is not None
    assert slow.time == pytest.approx(2.0 * fast.time)