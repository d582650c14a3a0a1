from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

from swerve_input.controllers.types import Gamepad, GamepadAxis, Hand, Joystick, StickSource, AxisType


@dataclass
class DualJoystickSource(StickSource):
    """
    Two flight sticks. Device identity encodes the side:
      - LEFT  -> movement joystick
      - RIGHT -> rotation / heading joystick
    """
    movement: Joystick
    rotation: Joystick
    shift_button: int = 2

    def _stick(self, hand: Hand) -> Joystick:
        return self.movement if hand == Hand.LEFT else self.rotation

    def get_x(self, hand: Hand) -> float:
        return self._stick(hand).get_x()

    def get_y(self, hand: Hand) -> float:
        return self._stick(hand).get_y()

    def get_xy(self, hand: Hand) -> Tuple[float, float]:
        return self._stick(hand).get_xy()

    def magnitude(self, hand: Hand) -> float:
        return self._stick(hand).magnitude()

    def direction_degrees(self, hand: Hand) -> float:
        return self._stick(hand).direction_degrees()

    def direction_radians(self, hand: Hand) -> float:
        return self._stick(hand).direction_radians()

    def rotation_axis(self) -> float:
        return self.rotation.get_axis(AxisType.X)

    def shift_held(self) -> bool:
        return self.movement.raw_button(self.shift_button)


@dataclass
class GamepadSource(StickSource):
    """
    One gamepad; left stick moves, right stick rotates, right bumper shifts.
    """
    pad: Gamepad

    def get_x(self, hand: Hand) -> float:
        return self.pad.get_x(hand)

    def get_y(self, hand: Hand) -> float:
        return self.pad.get_y(hand)

    def get_xy(self, hand: Hand) -> Tuple[float, float]:
        return self.pad.get_xy(hand)

    def magnitude(self, hand: Hand) -> float:
        return self.pad.magnitude(hand)

    def direction_degrees(self, hand: Hand) -> float:
        return self.pad.direction_degrees(hand)

    def direction_radians(self, hand: Hand) -> float:
        return self.pad.direction_radians(hand)

    def rotation_axis(self) -> float:
        return self.pad.get_axis(GamepadAxis.RIGHT_X)

    def shift_held(self) -> bool:
        return self.pad.bumper(Hand.RIGHT)
