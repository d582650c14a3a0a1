from __future__ import annotations
from enum import Enum
from typing import Protocol, Tuple


class ControlScheme(str, Enum):
    """
    How the right-hand input is read.

      - HALO_DRIVE: right stick X is a rotation rate (like driving in Halo)
      - ANGLE_DRIVE: right stick points the robot heading (top-down shooter style)

    The left-hand input is always the movement vector.
    """
    HALO_DRIVE = "halo"
    ANGLE_DRIVE = "angle"


class InputSource(str, Enum):
    DUAL_JOYSTICK = "dual_joystick"
    GAMEPAD = "gamepad"


class Hand(str, Enum):
    LEFT = "left"
    RIGHT = "right"


class AxisType(str, Enum):
    X = "x"
    Y = "y"
    Z = "z"
    TWIST = "twist"
    THROTTLE = "throttle"


class GamepadAxis(str, Enum):
    LEFT_X = "left_x"
    LEFT_Y = "left_y"
    LEFT_TRIGGER = "left_trigger"
    RIGHT_X = "right_x"
    RIGHT_Y = "right_y"
    RIGHT_TRIGGER = "right_trigger"


class Joystick(Protocol):
    """
    Single-stick flight joystick.

    Axes are raw floats, nominally [-1.0, 1.0], Y up is -1.0.
    Button numbers are 1-based, matching the labels on the stick.
    """
    def get_x(self) -> float: ...
    def get_y(self) -> float: ...
    def get_xy(self) -> Tuple[float, float]: ...
    def get_axis(self, axis: AxisType) -> float: ...
    def magnitude(self) -> float: ...
    def direction_degrees(self) -> float: ...
    def direction_radians(self) -> float: ...
    def raw_button(self, number: int) -> bool: ...


class Gamepad(Protocol):
    """
    Dual-stick gamepad, sticks addressed by hand.
    """
    def get_x(self, hand: Hand) -> float: ...
    def get_y(self, hand: Hand) -> float: ...
    def get_xy(self, hand: Hand) -> Tuple[float, float]: ...
    def get_axis(self, axis: GamepadAxis) -> float: ...
    def magnitude(self, hand: Hand) -> float: ...
    def direction_degrees(self, hand: Hand) -> float: ...
    def direction_radians(self, hand: Hand) -> float: ...
    def bumper(self, hand: Hand) -> bool: ...
    def raw_button(self, number: int) -> bool: ...


class StickSource(Protocol):
    """
    Logical left/right sticks, whatever hardware backs them.
    """
    def get_x(self, hand: Hand) -> float: ...
    def get_y(self, hand: Hand) -> float: ...
    def get_xy(self, hand: Hand) -> Tuple[float, float]: ...
    def magnitude(self, hand: Hand) -> float: ...
    def direction_degrees(self, hand: Hand) -> float: ...
    def direction_radians(self, hand: Hand) -> float: ...
    def rotation_axis(self) -> float: ...
    def shift_held(self) -> bool: ...
