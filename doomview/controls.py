"""Input state tracking and gesture polling."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Union

from doomview.vector import Vec2

NUM_SCAN_CODES = 512


@dataclass(frozen=True)
class NoGesture:
    """A gesture that never fires."""


@dataclass(frozen=True)
class KeyHold:
    """Fires while the key is held down."""

    scancode: int


@dataclass(frozen=True)
class KeyTrigger:
    """Fires on the update in which the key went down."""

    scancode: int


@dataclass(frozen=True)
class ButtonHold:
    button: int


@dataclass(frozen=True)
class ButtonTrigger:
    button: int


@dataclass(frozen=True)
class AnyOf:
    """Fires if any of the sub-gestures fires."""

    gestures: tuple = field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, "gestures", tuple(self.gestures))


@dataclass(frozen=True)
class AllOf:
    """Fires if every sub-gesture fires."""

    gestures: tuple = field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, "gestures", tuple(self.gestures))


@dataclass(frozen=True)
class QuitTrigger:
    """Fires on the update in which quitting was requested."""


Gesture = Union[
    NoGesture, KeyHold, KeyTrigger, ButtonHold, ButtonTrigger, AnyOf, AllOf, QuitTrigger
]


@dataclass(frozen=True)
class NoAnalog:
    """A two-axis input that is always zero."""


@dataclass(frozen=True)
class MouseLook:
    """Relative mouse motion scaled by a sensitivity."""

    sensitivity: float


@dataclass(frozen=True)
class GestureAxes:
    """Two axes driven by gestures, each giving +step or -step."""

    xpos: Gesture
    xneg: Gesture
    ypos: Gesture
    yneg: Gesture
    step: float


Analog2d = Union[NoAnalog, MouseLook, GestureAxes]


@dataclass(frozen=True)
class QuitEvent:
    pass


@dataclass(frozen=True)
class KeyDown:
    scancode: int


@dataclass(frozen=True)
class KeyUp:
    scancode: int


@dataclass(frozen=True)
class MouseMotion:
    xrel: float
    yrel: float


Event = Union[QuitEvent, KeyDown, KeyUp, MouseMotion]


def _check_scancode(scancode: int) -> int:
    if not 0 <= scancode < NUM_SCAN_CODES:
        raise ValueError(f"scancode {scancode} out of range")
    return scancode


class GameController:
    """Tracks key and mouse state across updates and answers gesture queries."""

    def __init__(self) -> None:
        self._update_index = 1
        # Each key maps to (is_down, update index of the last change).
        self._keys: list[tuple[bool, int]] = [(False, 0)] * NUM_SCAN_CODES
        self._quit_requested_index = 0
        self._mouse_enabled = True
        self._mouse_rel = Vec2(0.0, 0.0)

    @property
    def mouse_enabled(self) -> bool:
        return self._mouse_enabled

    def set_mouse_enabled(self, enable: bool) -> None:
        self._mouse_enabled = enable

    def update(self, events: Iterable[Event]) -> None:
        """Start a new update and apply the events received since the last one."""
        self._update_index += 1
        self._mouse_rel = Vec2(0.0, 0.0)
        for event in events:
            if isinstance(event, QuitEvent):
                self._quit_requested_index = self._update_index
            elif isinstance(event, KeyDown):
                self._keys[_check_scancode(event.scancode)] = (True, self._update_index)
            elif isinstance(event, KeyUp):
                self._keys[_check_scancode(event.scancode)] = (False, self._update_index)
            elif isinstance(event, MouseMotion):
                if self._mouse_enabled:
                    self._mouse_rel = Vec2(float(event.xrel), float(event.yrel))
                else:
                    self._mouse_rel = Vec2(0.0, 0.0)

    def poll_gesture(self, gesture: Gesture) -> bool:
        if isinstance(gesture, QuitTrigger):
            return self._quit_requested_index == self._update_index
        if isinstance(gesture, KeyHold):
            down, _ = self._keys[_check_scancode(gesture.scancode)]
            return down
        if isinstance(gesture, KeyTrigger):
            down, index = self._keys[_check_scancode(gesture.scancode)]
            return down and index == self._update_index
        if isinstance(gesture, AnyOf):
            return any(self.poll_gesture(sub) for sub in gesture.gestures)
        if isinstance(gesture, AllOf):
            return all(self.poll_gesture(sub) for sub in gesture.gestures)
        if isinstance(gesture, NoGesture):
            return False
        raise ValueError(f"unsupported gesture type: {type(gesture).__name__}")

    def poll_analog2d(self, motion: Analog2d) -> Vec2:
        if isinstance(motion, MouseLook):
            return self._mouse_rel * motion.sensitivity
        if isinstance(motion, GestureAxes):
            return Vec2(
                self._axis(motion.xpos, motion.xneg, motion.step),
                self._axis(motion.ypos, motion.yneg, motion.step),
            )
        if isinstance(motion, NoAnalog):
            return Vec2(0.0, 0.0)
        raise ValueError(f"unsupported analog input: {type(motion).__name__}")

    def _axis(self, positive: Gesture, negative: Gesture, step: float) -> float:
        if self.poll_gesture(positive):
            return step
        if self.poll_gesture(negative):
            return -step
        return 0.0