"""Small fixed-size vectors of floats."""

from __future__ import annotations

import math
from typing import Iterator


class Vector:
    """An immutable vector of floats supporting the usual linear operations."""

    __slots__ = ("_components",)
    dimension: int | None = None

    def __init__(self, *components: float) -> None:
        if self.dimension is not None and len(components) != self.dimension:
            raise TypeError(
                f"{type(self).__name__} takes {self.dimension} components, "
                f"got {len(components)}"
            )
        self._components = tuple(float(c) for c in components)

    @classmethod
    def zero(cls) -> Vector:
        if cls.dimension is None:
            raise TypeError("zero() needs a vector type of fixed dimension")
        return cls(*([0.0] * cls.dimension))

    def _check(self, other: object) -> bool:
        return type(other) is type(self)

    def __len__(self) -> int:
        return len(self._components)

    def __iter__(self) -> Iterator[float]:
        return iter(self._components)

    def __getitem__(self, index: int) -> float:
        if not -len(self) <= index < len(self):
            raise IndexError(
                f"index out of bounds: the len is {len(self)} but the index is {index}"
            )
        return self._components[index]

    def __add__(self, other: Vector) -> Vector:
        if not self._check(other):
            return NotImplemented
        return type(self)(*(a + b for a, b in zip(self, other)))

    def __sub__(self, other: Vector) -> Vector:
        if not self._check(other):
            return NotImplemented
        return type(self)(*(a - b for a, b in zip(self, other)))

    def __mul__(self, scalar: float) -> Vector:
        if isinstance(scalar, Vector):
            return NotImplemented
        return type(self)(*(a * scalar for a in self))

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector:
        if isinstance(scalar, Vector):
            return NotImplemented
        return type(self)(*(a / scalar for a in self))

    def __neg__(self) -> Vector:
        return type(self)(*(-a for a in self))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return type(other) is type(self) and self._components == other._components

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._components))

    def __lt__(self, other: Vector) -> bool:
        if not self._check(other):
            return NotImplemented
        return self._components < other._components

    def __le__(self, other: Vector) -> bool:
        if not self._check(other):
            return NotImplemented
        return self._components <= other._components

    def __gt__(self, other: Vector) -> bool:
        if not self._check(other):
            return NotImplemented
        return self._components > other._components

    def __ge__(self, other: Vector) -> bool:
        if not self._check(other):
            return NotImplemented
        return self._components >= other._components

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(c) for c in self)})"

    def dot(self, other: Vector) -> float:
        """Inner product with a vector of the same type."""
        if not self._check(other):
            raise TypeError(
                f"cannot take dot product of {type(self).__name__} "
                f"and {type(other).__name__}"
            )
        return sum(a * b for a, b in zip(self, other))

    def squared_norm(self) -> float:
        return self.dot(self)

    def norm(self) -> float:
        return math.sqrt(self.squared_norm())

    def normalized(self) -> Vector:
        """Unit vector in the same direction, or the zero vector if this is zero."""
        norm = self.norm()
        if norm == 0.0:
            return type(self)(*([0.0] * len(self)))
        return self / norm

    def is_zero(self) -> bool:
        return all(c == 0.0 for c in self)


class Vec2(Vector):
    """Two-dimensional vector."""

    __slots__ = ()
    dimension = 2

    def __init__(self, x: float, y: float) -> None:
        super().__init__(x, y)

    @property
    def x(self) -> float:
        return self._components[0]

    @property
    def y(self) -> float:
        return self._components[1]

    def cross(self, other: Vec2) -> float:
        """The z component of the 3D cross product of the two vectors."""
        if not self._check(other):
            raise TypeError("cross product needs two Vec2 values")
        return self.x * other.y - self.y * other.x

    def angle(self) -> float:
        return math.atan2(self.x, self.y)

    def normal(self) -> Vec2:
        """This vector rotated by a quarter turn counter-clockwise."""
        return Vec2(-self.y, self.x)

    def swapped(self) -> Vec2:
        return Vec2(self.y, self.x)


class Vec3(Vector):
    """Three-dimensional vector."""

    __slots__ = ()
    dimension = 3

    def __init__(self, x: float, y: float, z: float) -> None:
        super().__init__(x, y, z)

    @property
    def x(self) -> float:
        return self._components[0]

    @property
    def y(self) -> float:
        return self._components[1]

    @property
    def z(self) -> float:
        return self._components[2]

    def cross(self, other: Vec3) -> Vec3:
        if not self._check(other):
            raise TypeError("cross product needs two Vec3 values")
        lx, ly, lz = self
        rx, ry, rz = other
        return Vec3(ly * rz - lz * ry, lz * rx - lx * rz, lx * ry - ly * rx)


class Vec4(Vector):
    """Four-dimensional vector."""

    __slots__ = ()
    dimension = 4

    def __init__(self, x: float, y: float, z: float, w: float) -> None:
        super().__init__(x, y, z, w)

    @property
    def x(self) -> float:
        return self._components[0]

    @property
    def y(self) -> float:
        return self._components[1]

    @property
    def z(self) -> float:
        return self._components[2]

    @property
    def w(self) -> float:
        return self._components[3]