"""Spheres and swept sphere-triangle collision tests."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from doomview.vector import Vec2, Vec3


@dataclass(frozen=True)
class ContactInfo:
    """First contact of a swept shape: fraction of the sweep and contact normal."""

    time: float
    normal: Vec3


@dataclass(frozen=True)
class Sphere:
    center: Vec3
    radius: float

    def sweep_triangle(
        self, triangle: Sequence[Vec3], normal: Vec3, vel: Vec3
    ) -> ContactInfo | None:
        """Sweep the sphere by `vel` against a one-sided triangle.

        Returns the earliest contact, with time as a fraction of `vel`, or
        None when the sphere does not touch the front of the triangle.
        """
        center, radius = self.center, self.radius
        speed = vel.norm()
        if speed == 0.0:
            return None
        nvel = vel / speed
        normal_dot_nvel = normal.dot(nvel)
        if normal_dot_nvel >= 0.0:
            return None

        v0, v1, v2 = triangle
        contact_normal = Vec3.zero()
        collision = False
        min_distance = 1e4
        intercept = -normal.dot(v0)

        # Sphere against plane.
        signed_plane_distance = normal.dot(center) + intercept
        if signed_plane_distance < -radius:
            return None
        if signed_plane_distance >= radius:
            distance = -(signed_plane_distance - radius) / normal_dot_nvel
            on_plane = center + nvel * distance
            if _is_point_inside_triangle((v0, v1, v2), on_plane):
                min_distance = distance
                contact_normal = normal
                collision = True

        # Sphere against vertices.
        for vertex in (v0, v1, v2):
            d = _intersect_sphere_line(center, radius, vertex, vertex - nvel)
            if d is not None and 0.0 <= d < min_distance:
                min_distance = d
                contact_normal = center - (vertex - nvel * d)
                collision = True

        # Sphere against edges.
        for e1, e2 in ((v0, v1), (v1, v2), (v2, v0)):
            edge = e2 - e1
            edge_squared = edge.squared_norm()
            if edge_squared == 0.0:
                continue
            edge_normal = nvel.cross(edge).normalized()
            edge_distance = edge_normal.dot(center) - edge_normal.dot(e1)
            if abs(edge_distance) > radius:
                continue

            circle_radius = math.sqrt(max(0.0, radius * radius - edge_distance * edge_distance))
            circle_center = center - edge_normal * edge_distance
            disp = edge * ((circle_center - e1).dot(edge) / edge_squared)
            on_line = e1 + disp
            to_line = (on_line - circle_center).normalized()
            candidate = to_line * circle_radius + circle_center

            ax, ay, az = (abs(c) for c in edge_normal)
            if ax > ay and ax > az:
                dim1, dim2 = 1, 2
            elif ay > az:
                dim1, dim2 = 0, 2
            else:
                dim1, dim2 = 0, 1

            ahead = candidate + nvel
            t = _intersect_line_line(
                Vec2(candidate[dim1], candidate[dim2]),
                Vec2(ahead[dim1], ahead[dim2]),
                Vec2(e1[dim1], e1[dim2]),
                Vec2(e2[dim1], e2[dim2]),
            )
            if t is None or not 0.0 <= t < min_distance:
                continue
            intersection = candidate + nvel * t
            if (e1 - intersection).dot(e2 - intersection) > 0.0:
                continue
            min_distance = t
            contact_normal = center - candidate
            collision = True

        if not collision:
            return None
        return ContactInfo(time=min_distance / speed, normal=contact_normal.normalized())


def _intersect_sphere_line(center: Vec3, radius: float, p1: Vec3, p2: Vec3) -> float | None:
    edge = p2 - p1
    a = edge.squared_norm()
    if a == 0.0:
        return None
    b = 2.0 * edge.dot(p1 - center)
    c = center.squared_norm() + p1.squared_norm() - 2.0 * center.dot(p1) - radius * radius
    return _lowest_quadratic_root(a, b, c)


def _lowest_quadratic_root(a: float, b: float, c: float) -> float | None:
    discriminant = b * b - 4.0 * a * c
    if discriminant < 0.0:
        return None
    root = math.sqrt(discriminant)
    return min((-b + root) / (2.0 * a), (-b - root) / (2.0 * a))


def _intersect_line_line(p1: Vec2, p2: Vec2, p3: Vec2, p4: Vec2) -> float | None:
    d1 = p2 - p1
    d2 = p3 - p4
    denom = d2[1] * d1[0] - d2[0] * d1[1]
    if denom == 0.0:
        return None
    dist = d2[0] * (p1[1] - p3[1]) - d2[1] * (p1[0] - p3[0])
    return dist / denom


def _is_point_inside_triangle(verts: Sequence[Vec3], point: Vec3) -> bool:
    v0, v1, v2 = verts
    u = v1 - v0
    v = v2 - v0
    n = u.cross(v)
    w = point - v0
    n2 = n.squared_norm()
    if n2 == 0.0:
        return False
    gamma = u.cross(w).dot(n) / n2
    beta = w.cross(v).dot(n) / n2
    alpha = 1.0 - gamma - beta
    return 0.0 <= alpha <= 1.0 and 0.0 <= gamma <= 1.0 and 0.0 <= beta <= 1.0