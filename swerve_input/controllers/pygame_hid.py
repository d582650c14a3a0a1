from __future__ import annotations
import logging
import os
from typing import Dict, Optional, Tuple

import pygame

from swerve_input.controllers.mapping import DeviceMap
from swerve_input.controllers.types import AxisType, Gamepad, GamepadAxis, Hand, Joystick
from swerve_input.utils import stick_bearing_degrees, stick_bearing_radians, stick_magnitude

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

log = logging.getLogger(__name__)


class _PygameDevice:
    """
    Lazily opened pygame joystick handle.

    A missing or unplugged device never raises: reads return 0.0 / False and
    the next read tries to open the device again.
    """

    def __init__(self, index: int, axis_map: Dict[str, int], button_map: Dict[str, int]) -> None:
        self.index = index
        self.axis_map = axis_map
        self.button_map = button_map
        self.js: Optional[pygame.joystick.JoystickType] = None
        self._warned = False

    def _warn_once(self, msg: str) -> None:
        if not self._warned:
            log.warning("joystick %d: %s", self.index, msg)
            self._warned = True

    def _open(self) -> Optional[pygame.joystick.JoystickType]:
        if self.js is not None:
            return self.js
        try:
            if not pygame.get_init():
                pygame.init()
            pygame.joystick.init()
            pygame.event.pump()
            if pygame.joystick.get_count() <= self.index:
                self._warn_once("not found. Is it on and connected?")
                return None
            js = pygame.joystick.Joystick(self.index)
            js.init()
        except pygame.error as e:
            self._warn_once(f"open failed: {e}")
            return None

        log.info("joystick %d: opened %s", self.index, js.get_name())
        self.js = js
        self._warned = False
        return js

    def _lost(self, e: Exception) -> None:
        self._warn_once(f"read failed: {e}")
        self.js = None

    def read_axes(self, *names: str) -> Tuple[float, ...]:
        """
        Read several axes from one event pump, so an x/y pair is a single sample.
        """
        zeros = tuple(0.0 for _ in names)
        js = self._open()
        if js is None:
            return zeros
        try:
            pygame.event.pump()
            count = js.get_numaxes()
            out = []
            for name in names:
                idx = self.axis_map.get(name)
                out.append(float(js.get_axis(idx)) if idx is not None and idx < count else 0.0)
            return tuple(out)
        except pygame.error as e:
            self._lost(e)
            return zeros

    def read_axis(self, name: str) -> float:
        return self.read_axes(name)[0]

    def read_button_index(self, idx: int) -> bool:
        js = self._open()
        if js is None or idx < 0:
            return False
        try:
            pygame.event.pump()
            if idx >= js.get_numbuttons():
                return False
            return bool(js.get_button(idx))
        except pygame.error as e:
            self._lost(e)
            return False


class PygameJoystick(Joystick):
    """
    Flight joystick read through pygame. Raw values, no deadzone.
    """
    DEFAULT_AXIS_MAP = {
        "x": 0,
        "y": 1,
        "z": 2,
        "twist": 2,
        "throttle": 3,
    }

    def __init__(self, index: int = 0, device_map: Optional[DeviceMap] = None):
        device_map = device_map or DeviceMap()
        axis_map = dict(self.DEFAULT_AXIS_MAP)
        axis_map.update(device_map.axes)
        self.dev = _PygameDevice(index, axis_map, dict(device_map.buttons))

    def get_x(self) -> float:
        return self.dev.read_axis("x")

    def get_y(self) -> float:
        return self.dev.read_axis("y")

    def get_xy(self) -> Tuple[float, float]:
        x, y = self.dev.read_axes("x", "y")
        return x, y

    def get_axis(self, axis: AxisType) -> float:
        return self.dev.read_axis(AxisType(axis).value)

    def magnitude(self) -> float:
        return stick_magnitude(*self.get_xy())

    def direction_degrees(self) -> float:
        return stick_bearing_degrees(*self.get_xy())

    def direction_radians(self) -> float:
        return stick_bearing_radians(*self.get_xy())

    def raw_button(self, number: int) -> bool:
        # pygame counts from 0, the stick labels from 1
        idx = self.dev.button_map.get(str(number), number - 1)
        return self.dev.read_button_index(idx)


class PygameGamepad(Gamepad):
    """
    Xbox-style gamepad read through pygame.
    Defaults match the Linux xpad driver layout.
    """
    DEFAULT_AXIS_MAP = {
        "left_x": 0,
        "left_y": 1,
        "left_trigger": 2,
        "right_x": 3,
        "right_y": 4,
        "right_trigger": 5,
    }

    DEFAULT_BUTTON_MAP = {
        "a": 0,
        "b": 1,
        "x": 2,
        "y": 3,
        "lb": 4,
        "rb": 5,
        "view": 6,
        "menu": 7,
    }

    def __init__(self, index: int = 0, device_map: Optional[DeviceMap] = None):
        device_map = device_map or DeviceMap()
        axis_map = dict(self.DEFAULT_AXIS_MAP)
        axis_map.update(device_map.axes)
        button_map = dict(self.DEFAULT_BUTTON_MAP)
        button_map.update(device_map.buttons)
        self.dev = _PygameDevice(index, axis_map, button_map)

    def get_x(self, hand: Hand) -> float:
        return self.dev.read_axis(f"{Hand(hand).value}_x")

    def get_y(self, hand: Hand) -> float:
        return self.dev.read_axis(f"{Hand(hand).value}_y")

    def get_xy(self, hand: Hand) -> Tuple[float, float]:
        side = Hand(hand).value
        x, y = self.dev.read_axes(f"{side}_x", f"{side}_y")
        return x, y

    def get_axis(self, axis: GamepadAxis) -> float:
        return self.dev.read_axis(GamepadAxis(axis).value)

    def magnitude(self, hand: Hand) -> float:
        return stick_magnitude(*self.get_xy(hand))

    def direction_degrees(self, hand: Hand) -> float:
        return stick_bearing_degrees(*self.get_xy(hand))

    def direction_radians(self, hand: Hand) -> float:
        return stick_bearing_radians(*self.get_xy(hand))

    def bumper(self, hand: Hand) -> bool:
        name = "lb" if Hand(hand) == Hand.LEFT else "rb"
        return self.dev.read_button_index(self.dev.button_map[name])

    def raw_button(self, number: int) -> bool:
        # 1-based like the joystick; YAML may remap by number, e.g. `6: 9`
        idx = self.dev.button_map.get(str(number), number - 1)
        return self.dev.read_button_index(idx)
