"""Collision volume of a level, organised as a BSP tree of triangle chunks."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Optional, Sequence, Union

from doomview.line import Line2
from doomview.sphere import ContactInfo, Sphere
from doomview.vector import Vec2, Vec3


class Branch(Enum):
    """Side of a BSP partition a child hangs from."""

    POSITIVE = "positive"
    NEGATIVE = "negative"


@dataclass(frozen=True)
class _NodeRef:
    index: int


@dataclass(frozen=True)
class _LeafRef:
    index: int


_Child = Optional[Union[_NodeRef, _LeafRef]]


@dataclass
class _Chunk:
    tri_start: int
    tri_end: int


@dataclass(frozen=True)
class _Triangle:
    v1: int
    v2: int
    v3: int
    normal: int


@dataclass
class _Node:
    partition: Line2
    positive: _Child = None
    negative: _Child = None

    def children_touched(self, sphere: Sphere, vel: Vec3) -> Iterator[_Child]:
        """Children on whose side the swept sphere may pass."""
        cx, _, cz = sphere.center
        radius = sphere.radius
        dist1 = self.partition.signed_distance(Vec2(cx, cz))
        dist2 = self.partition.signed_distance(Vec2(cx + vel[0], cz + vel[2]))
        if dist1 >= -radius or dist2 >= -radius:
            yield self.positive
        if dist1 <= radius or dist2 <= radius:
            yield self.negative


class World:
    """Static collision geometry built by walking a level's BSP tree."""

    def __init__(self) -> None:
        self._nodes: list[_Node] = []
        self._chunks: list[_Chunk] = []
        self._triangles: list[_Triangle] = []
        self._verts: list[Vec3] = []
        self._build_stack: list[int] = []

    def sweep_sphere(self, sphere: Sphere, vel: Vec3) -> ContactInfo | None:
        """Earliest contact of `sphere` moved by `vel`, or None if it hits nothing."""
        if not self._nodes:
            raise RuntimeError("world has no BSP root")
        best: ContactInfo | None = None
        best_time = math.inf
        stack = [0]
        while stack:
            node = self._nodes[stack.pop()]
            for child in node.children_touched(sphere, vel):
                if child is None:
                    continue
                if isinstance(child, _NodeRef):
                    stack.append(child.index)
                    continue
                chunk = self._chunks[child.index]
                for triangle in self._triangles[chunk.tri_start:chunk.tri_end]:
                    contact = self._sweep_triangle(sphere, vel, triangle)
                    if contact is not None and not best_time < contact.time:
                        best, best_time = contact, contact.time
        if best is not None and best_time < math.inf:
            return best
        return None

    def _sweep_triangle(
        self, sphere: Sphere, vel: Vec3, triangle: _Triangle
    ) -> ContactInfo | None:
        verts = self._verts
        corners = (verts[triangle.v1], verts[triangle.v2], verts[triangle.v3])
        return sphere.sweep_triangle(corners, verts[triangle.normal], vel)

    def _link_child(self, child: _Child, branch: Branch) -> None:
        if not self._build_stack:
            raise RuntimeError("cannot link a child without an open BSP node")
        parent = self._nodes[self._build_stack[-1]]
        if branch is Branch.POSITIVE:
            if parent.positive is not None:
                raise RuntimeError("positive child already linked")
            parent.positive = child
        else:
            if parent.negative is not None:
                raise RuntimeError("negative child already linked")
            parent.negative = child

    def _add_polygon(self, verts: Iterable[Vec3], normal: Vec3) -> None:
        vert_start = len(self._verts)
        self._verts.extend(verts)
        vert_end = len(self._verts)
        self._verts.append(normal)
        self._triangles.extend(
            _Triangle(vert_start, i - 1, i, vert_end) for i in range(vert_start + 2, vert_end)
        )

    def visit_bsp_root(self, line: Line2) -> None:
        self._nodes.append(_Node(line))
        self._build_stack.append(len(self._nodes) - 1)

    def visit_bsp_node(self, line: Line2, branch: Branch) -> None:
        index = len(self._nodes)
        self._link_child(_NodeRef(index), branch)
        self._nodes.append(_Node(line))
        self._build_stack.append(index)

    def visit_bsp_leaf(self, branch: Branch) -> None:
        index = len(self._chunks)
        self._link_child(_LeafRef(index), branch)
        start = len(self._triangles)
        self._chunks.append(_Chunk(start, start))

    def visit_bsp_leaf_end(self) -> None:
        if not self._chunks:
            raise RuntimeError("missing chunk on end")
        self._chunks[-1].tri_end = len(self._triangles)

    def visit_bsp_node_end(self) -> None:
        if not self._build_stack:
            raise RuntimeError("too many calls to visit_bsp_node_end")
        self._build_stack.pop()

    def visit_floor_sky_poly(self, points: Sequence[Vec2], height: float) -> None:
        self._add_polygon(
            (Vec3(p[0], height, p[1]) for p in points), Vec3(0.0, 1.0, 0.0)
        )

    def visit_ceil_sky_poly(self, points: Sequence[Vec2], height: float) -> None:
        self._add_polygon(
            (Vec3(p[0], height, p[1]) for p in reversed(points)), Vec3(0.0, -1.0, 0.0)
        )

    def visit_floor_poly(self, points, height, light_info, tex_name) -> None:
        self.visit_floor_sky_poly(points, height)

    def visit_ceil_poly(self, points, height, light_info, tex_name) -> None:
        self.visit_ceil_sky_poly(points, height)

    def visit_wall_quad(
        self,
        verts,
        tex_start,
        tex_end,
        height_range,
        light_info,
        scroll,
        tex_name,
        blocking,
    ) -> None:
        if blocking:
            self.visit_sky_quad(verts, height_range)

    def visit_sky_quad(self, verts: tuple[Vec2, Vec2], height_range: tuple[float, float]) -> None:
        v1, v2 = verts
        low, high = height_range
        edge = (v2 - v1).normalized()
        normal = Vec3(-edge[1], 0.0, edge[0])
        self._add_polygon(
            (
                Vec3(v1[0], low, v1[1]),
                Vec3(v2[0], low, v2[1]),
                Vec3(v2[0], high, v2[1]),
                Vec3(v1[0], high, v1[1]),
            ),
            normal,
        )