"""Vertex records and the builders that collect them for the renderer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterator, TypeVar

from doomview.vector import Vec2, Vec3


@dataclass(frozen=True)
class Bounds:
    """Placement of a texture inside an atlas."""

    pos: Vec2
    size: Vec2
    num_frames: int
    row_height: int


@dataclass(frozen=True)
class StaticVertex:
    """Vertex of a flat or wall surface."""

    a_pos: tuple[float, float, float]
    a_atlas_uv: tuple[float, float]
    a_tile_uv: tuple[float, float]
    a_tile_size: tuple[float, float]
    a_scroll_rate: float
    a_row_height: float
    a_num_frames: int
    a_light: int


@dataclass(frozen=True)
class SpriteVertex:
    """Vertex of a camera-facing sprite quad."""

    a_pos: tuple[float, float, float]
    a_atlas_uv: tuple[float, float]
    a_tile_uv: tuple[float, float]
    a_tile_size: tuple[float, float]
    a_local_x: float
    a_num_frames: int
    a_light: int


@dataclass(frozen=True)
class SkyVertex:
    """Vertex of a sky surface."""

    a_pos: tuple[float, float, float]


def _as_byte(value: int) -> int:
    """Truncate an integer to an unsigned byte."""
    return int(value) & 0xFF


def _light_index(light_info: int) -> int:
    if not 0 <= light_info <= 0xFF:
        raise ValueError(f"light index {light_info} does not fit in a byte")
    return light_info


_V = TypeVar("_V")


class _VertexList(Generic[_V]):
    def __init__(self) -> None:
        self._vertices: list[_V] = []

    @property
    def vertices(self) -> tuple[_V, ...]:
        return tuple(self._vertices)

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self) -> Iterator[_V]:
        return iter(self._vertices)


class FlatBufferBuilder(_VertexList[StaticVertex]):
    """Collects floor and ceiling vertices."""

    def push(self, xz: Vec2, y: float, light_info: int, bounds: Bounds) -> FlatBufferBuilder:
        self._vertices.append(
            StaticVertex(
                a_pos=(xz[0], y, xz[1]),
                a_atlas_uv=(bounds.pos[0], bounds.pos[1]),
                a_tile_uv=(-xz[0] * 100.0, -xz[1] * 100.0),
                a_tile_size=(bounds.size[0], bounds.size[1]),
                a_scroll_rate=0.0,
                a_row_height=float(bounds.row_height),
                a_num_frames=_as_byte(bounds.num_frames),
                a_light=_light_index(light_info),
            )
        )
        return self


class WallBufferBuilder(_VertexList[StaticVertex]):
    """Collects wall vertices."""

    def push(
        self,
        xz: Vec2,
        y: float,
        tile_u: float,
        tile_v: float,
        light_info: int,
        scroll_rate: float,
        bounds: Bounds,
    ) -> WallBufferBuilder:
        self._vertices.append(
            StaticVertex(
                a_pos=(xz[0], y, xz[1]),
                a_atlas_uv=(bounds.pos[0], bounds.pos[1]),
                a_tile_uv=(tile_u, tile_v),
                a_tile_size=(bounds.size[0], bounds.size[1]),
                a_scroll_rate=scroll_rate,
                a_row_height=float(bounds.row_height),
                a_num_frames=_as_byte(bounds.num_frames),
                a_light=_light_index(light_info),
            )
        )
        return self


class DecorBufferBuilder(_VertexList[SpriteVertex]):
    """Collects decoration sprite vertices."""

    def push(
        self,
        pos: Vec3,
        local_x: float,
        tile_u: float,
        tile_v: float,
        bounds: Bounds,
        light_info: int,
    ) -> DecorBufferBuilder:
        self._vertices.append(
            SpriteVertex(
                a_pos=(pos[0], pos[1], pos[2]),
                a_atlas_uv=(bounds.pos[0], bounds.pos[1]),
                a_tile_uv=(tile_u, tile_v),
                a_tile_size=(bounds.size[0], bounds.size[1]),
                a_local_x=local_x,
                a_num_frames=1,
                a_light=_light_index(light_info),
            )
        )
        return self


class SkyBufferBuilder(_VertexList[SkyVertex]):
    """Collects sky vertices."""

    def push(self, xz: Vec2, y: float) -> SkyBufferBuilder:
        self._vertices.append(SkyVertex(a_pos=(xz[0], y, xz[1])))
        return self