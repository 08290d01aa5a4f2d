"""4x4 matrices for homogeneous 3D transforms."""

from __future__ import annotations

import math
from typing import Iterable

from doomview.vector import Vec3

_PI = 3.1415926538


class Mat4:
    """A 4x4 matrix stored in column-major order.

    The constructor takes the sixteen elements in row-major (reading) order.
    Indexing with a single integer yields a column.
    """

    __slots__ = ("_data",)

    def __init__(self, *values: float) -> None:
        if len(values) != 16:
            raise TypeError(f"Mat4 takes 16 values, got {len(values)}")
        rows = [values[r * 4:r * 4 + 4] for r in range(4)]
        self._data = tuple(float(rows[r][c]) for c in range(4) for r in range(4))

    @classmethod
    def _from_columns(cls, data: Iterable[float]) -> Mat4:
        matrix = cls.__new__(cls)
        matrix._data = tuple(float(x) for x in data)
        return matrix

    @classmethod
    def identity(cls) -> Mat4:
        return cls(
            1.0, 0.0, 0.0, 0.0,
            0.0, 1.0, 0.0, 0.0,
            0.0, 0.0, 1.0, 0.0,
            0.0, 0.0, 0.0, 1.0,
        )

    @classmethod
    def perspective(
        cls, fov_degrees: float, aspect_ratio: float, near: float, far: float
    ) -> Mat4:
        """Perspective projection from a horizontal field of view in degrees."""
        fov = (_PI * fov_degrees) / 180.0
        f = 1.0 / math.tan(fov * 0.5)
        return cls(
            f / aspect_ratio, 0.0, 0.0, 0.0,
            0.0, f, 0.0, 0.0,
            0.0, 0.0, (far + near) / (near - far), 2.0 * far * near / (near - far),
            0.0, 0.0, -1.0, 0.0,
        )

    @classmethod
    def axis_rotation(cls, axis: Vec3, angle_radians: float) -> Mat4:
        """Rotation by `angle_radians` around the unit vector `axis`."""
        ca = math.cos(angle_radians)
        sa = math.sin(angle_radians)
        nca = 1.0 - ca
        ux, uy, uz = axis
        return cls(
            ca + ux * ux * nca, ux * uy * nca - uz * sa, ux * uz * nca + uy * sa, 0.0,
            uy * ux * nca + uz * sa, ca + uy * uy * nca, uy * uz * nca - ux * sa, 0.0,
            uz * ux * nca - uy * sa, uz * uy * nca + ux * sa, ca + uz * uz * nca, 0.0,
            0.0, 0.0, 0.0, 1.0,
        )

    @classmethod
    def euler_rotation(cls, yaw: float, pitch: float, roll: float) -> Mat4:
        """Rotation from the three Euler angles."""
        ca, sa = math.cos(pitch), math.sin(pitch)
        cb, sb = math.cos(yaw), math.sin(yaw)
        cc, sc = math.cos(roll), math.sin(roll)
        return cls(
            cb * cc, -cb * sc, sb, 0.0,
            sa * sb * cc + ca * sc, -sa * sb * sc + ca * cc, -sa * cb, 0.0,
            -ca * sb * cc + sa * sc, ca * sb * sc + sa * cc, ca * cb, 0.0,
            0.0, 0.0, 0.0, 1.0,
        )

    @classmethod
    def translation(cls, by: Vec3) -> Mat4:
        """Translation mapping points `p` to `p + by`."""
        x, y, z = by
        return cls(
            1.0, 0.0, 0.0, x,
            0.0, 1.0, 0.0, y,
            0.0, 0.0, 1.0, z,
            0.0, 0.0, 0.0, 1.0,
        )

    def transposed(self) -> Mat4:
        return Mat4(*self._data)

    def get(self, row: int, column: int) -> float:
        if not (0 <= row < 4 and 0 <= column < 4):
            raise IndexError(f"matrix index ({row}, {column}) out of range")
        return self._data[column * 4 + row]

    def approx_eq(self, other: Mat4, tol: float) -> bool:
        return all(abs(x - y) <= tol for x, y in zip(self._data, other._data))

    def __getitem__(self, column: int) -> tuple[float, ...]:
        if not 0 <= column < 4:
            raise IndexError(f"column index {column} out of range")
        return self._data[column * 4:column * 4 + 4]

    def __iter__(self):
        return (self[c] for c in range(4))

    def __mul__(self, other: Mat4) -> Mat4:
        if not isinstance(other, Mat4):
            return NotImplemented
        l, r = self._data, other._data
        return Mat4._from_columns(
            sum(l[k * 4 + row] * r[col * 4 + k] for k in range(4))
            for col in range(4)
            for row in range(4)
        )

    def __add__(self, other: Mat4) -> Mat4:
        if not isinstance(other, Mat4):
            return NotImplemented
        return Mat4._from_columns(a + b for a, b in zip(self._data, other._data))

    def __sub__(self, other: Mat4) -> Mat4:
        if not isinstance(other, Mat4):
            return NotImplemented
        return Mat4._from_columns(a - b for a, b in zip(self._data, other._data))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mat4):
            return NotImplemented
        return self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        rows = (
            " ".join(f"{self.get(r, c):10.3e}" for c in range(4)) for r in range(4)
        )
        return "[" + ";\n ".join(rows) + "]"