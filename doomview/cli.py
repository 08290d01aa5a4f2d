"""Command-line option parsing that decides what the program should do."""

from __future__ import annotations

import getopt
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence, Union

from doomview.errors import GeneralError

DEFAULT_WAD = "doom1.wad"
DEFAULT_METADATA = "doom.toml"
DEFAULT_RESOLUTION = "1280x720"
DEFAULT_FOV = "64"
DEFAULT_LEVEL = "0"

_BRIEF = "doomview 0.0.7: A Doom I/II Renderer."

_UNSIGNED = re.compile(r"\+?[0-9]+")
_U32_LIMIT = 2**32


@dataclass(frozen=True)
class _Option:
    short: str
    long: str
    hint: str
    description: str

    @property
    def takes_value(self) -> bool:
        return bool(self.hint)


_OPTIONS = (
    _Option("i", "iwad", "FILE", f"initial WAD file to use [default='{DEFAULT_WAD}']"),
    _Option("m", "metadata", "FILE", f"path to TOML metadata file [default='{DEFAULT_METADATA}']"),
    _Option("r", "resolution", "WIDTHxHEIGHT", "the size of the game window [default=1280x720]"),
    _Option("l", "level", "N", "the index of the level to render [default=0]"),
    _Option("f", "fov", "FOV", "horizontal field of view [default=65]"),
    _Option("", "check", "", "load metadata and all levels in WAD, then exit"),
    _Option(
        "",
        "list-levels",
        "",
        "list the names and indices of all the levels in the WAD, then exit",
    ),
    _Option("h", "help", "", "print this help message and exit"),
)


@dataclass(frozen=True)
class GameConfig:
    """Everything needed to start a game session."""

    wad_file: Path
    metadata_file: Path
    level_index: int
    fov: float
    width: int
    height: int


@dataclass(frozen=True)
class DisplayHelp:
    text: str


@dataclass(frozen=True)
class Check:
    wad_file: Path
    metadata_file: Path


@dataclass(frozen=True)
class ListLevelNames:
    wad_file: Path
    metadata_file: Path


@dataclass(frozen=True)
class Play:
    config: GameConfig


RunMode = Union[DisplayHelp, Check, ListLevelNames, Play]


def _usage() -> str:
    def left(option: _Option) -> str:
        short = f"-{option.short}, " if option.short else "    "
        text = f"{short}--{option.long}"
        return f"{text} {option.hint}" if option.hint else text

    lefts = [left(option) for option in _OPTIONS]
    width = max(len(text) for text in lefts)
    lines = [
        f"    {text.ljust(width)}    {option.description}"
        for text, option in zip(lefts, _OPTIONS)
    ]
    return "\n".join([_BRIEF, "", "Options:", *lines])


def _parse_unsigned(text: str, limit: int | None = None) -> int | None:
    if not _UNSIGNED.fullmatch(text):
        return None
    value = int(text)
    if limit is not None and value >= limit:
        return None
    return value


def _parse_float(text: str) -> float | None:
    if not text or "_" in text or text != text.strip():
        return None
    try:
        return float(text)
    except ValueError:
        return None


def parse_window_size(size_str: str) -> tuple[int, int]:
    """Parse a ``WIDTHxHEIGHT`` string into a pair of integers."""
    width_str, sep, height_str = size_str.partition("x")
    if sep and width_str and height_str:
        width = _parse_unsigned(width_str, _U32_LIMIT)
        height = _parse_unsigned(height_str, _U32_LIMIT)
        if width is not None and height is not None:
            return width, height
    raise GeneralError("invalid window size (WIDTHxHEIGHT)")


def parse_run_mode(args: Sequence[str]) -> RunMode:
    """Decide the run mode from the command-line arguments after the program name."""
    short_spec = "".join(
        o.short + (":" if o.takes_value else "") for o in _OPTIONS if o.short
    )
    long_spec = [o.long + ("=" if o.takes_value else "") for o in _OPTIONS]
    try:
        pairs, _free = getopt.gnu_getopt(list(args), short_spec, long_spec)
    except getopt.GetoptError as exc:
        raise GeneralError(str(exc)) from exc

    by_flag = {f"-{o.short}": o.long for o in _OPTIONS if o.short}
    by_flag.update({f"--{o.long}": o.long for o in _OPTIONS})
    values: dict[str, str] = {}
    present: set[str] = set()
    for flag, value in pairs:
        name = by_flag[flag]
        present.add(name)
        values.setdefault(name, value)

    if "help" in present:
        return DisplayHelp(_usage())

    wad = Path(values.get("iwad", DEFAULT_WAD))
    metadata = Path(values.get("metadata", DEFAULT_METADATA))

    if "check" in present:
        return Check(wad_file=wad, metadata_file=metadata)
    if "list-levels" in present:
        return ListLevelNames(wad_file=wad, metadata_file=metadata)

    width, height = parse_window_size(values.get("resolution", DEFAULT_RESOLUTION))
    fov = _parse_float(values.get("fov", DEFAULT_FOV))
    if fov is None:
        raise GeneralError("invalid value for fov")
    level = _parse_unsigned(values.get("level", DEFAULT_LEVEL))
    if level is None:
        raise GeneralError("invalid value for level")

    return Play(
        GameConfig(
            wad_file=wad,
            metadata_file=metadata,
            level_index=level,
            fov=fov,
            width=width,
            height=height,
        )
    )