"""A camera holding a perspective projection and a view transform."""

from __future__ import annotations

from doomview.matrix import Mat4
from doomview.vector import Vec3


class Camera:
    """Position and orientation of a viewer plus its perspective projection.

    A new camera sits at the origin looking along (0, 0, -1).
    """

    def __init__(self, fov: float, aspect_ratio: float, near: float, far: float) -> None:
        self._position = Vec3.zero()
        self._yaw = 0.0
        self._pitch = 0.0
        self._roll = 0.0
        self._modelview = Mat4.identity()
        self._dirty = True

        self._fov = fov
        self._aspect_ratio = aspect_ratio
        self._near = near
        self._far = far
        self._projection = Mat4.perspective(fov, aspect_ratio, near, far)

    def modelview(self) -> Mat4:
        """The modelview matrix, recomputed only after the view has changed."""
        if self._dirty:
            self._dirty = False
            self._modelview = Mat4.euler_rotation(
                self._yaw, self._pitch, self._roll
            ) * Mat4.translation(-self._position)
        return self._modelview

    @property
    def projection(self) -> Mat4:
        return self._projection

    @property
    def position(self) -> Vec3:
        return self._position

    @position.setter
    def position(self, value: Vec3) -> None:
        self._position = value
        self._dirty = True

    @property
    def yaw(self) -> float:
        """Rotation around the Y (bottom to top) axis."""
        return self._yaw

    @yaw.setter
    def yaw(self, value: float) -> None:
        self._yaw = value
        self._dirty = True

    @property
    def pitch(self) -> float:
        """Rotation around the X (left to right) axis."""
        return self._pitch

    @pitch.setter
    def pitch(self, value: float) -> None:
        self._pitch = value
        self._dirty = True

    @property
    def roll(self) -> float:
        """Rotation around the Z (back to front) axis."""
        return self._roll

    @roll.setter
    def roll(self, value: float) -> None:
        self._roll = value
        self._dirty = True

    @property
    def fov(self) -> float:
        return self._fov

    @property
    def aspect_ratio(self) -> float:
        return self._aspect_ratio

    @property
    def near(self) -> float:
        return self._near

    @property
    def far(self) -> float:
        return self._far

    def move_by(self, by: Vec3) -> Camera:
        """Move the camera by a relative vector."""
        self.position = self._position + by
        return self

    def update_perspective(
        self,
        fov: float | None = None,
        aspect_ratio: float | None = None,
        near: float | None = None,
        far: float | None = None,
    ) -> Camera:
        """Change projection parameters; those passed as None stay as they are."""
        if fov is not None:
            self._fov = fov
        if aspect_ratio is not None:
            self._aspect_ratio = aspect_ratio
        if near is not None:
            self._near = near
        if far is not None:
            self._far = far
        self._projection = Mat4.perspective(
            self._fov, self._aspect_ratio, self._near, self._far
        )
        return self