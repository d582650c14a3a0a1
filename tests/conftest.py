from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Optional, Set, Tuple

import pytest

from swerve_input.controllers.swerve_controller import SwerveController
from swerve_input.controllers.types import AxisType, GamepadAxis, Hand
from swerve_input.utils import stick_bearing_degrees, stick_bearing_radians, stick_magnitude


@dataclass
class FakeJoystick:
    x: float = 0.0
    y: float = 0.0
    axes: Dict[AxisType, float] = field(default_factory=dict)
    buttons: Set[int] = field(default_factory=set)
    mag: Optional[float] = None  # force a raw magnitude reading

    def get_x(self) -> float:
        return self.x

    def get_y(self) -> float:
        return self.y

    def get_xy(self) -> Tuple[float, float]:
        return self.x, self.y

    def get_axis(self, axis: AxisType) -> float:
        if axis == AxisType.X:
            return self.x
        if axis == AxisType.Y:
            return self.y
        return self.axes.get(axis, 0.0)

    def magnitude(self) -> float:
        return stick_magnitude(self.x, self.y) if self.mag is None else self.mag

    def direction_degrees(self) -> float:
        return stick_bearing_degrees(self.x, self.y)

    def direction_radians(self) -> float:
        return stick_bearing_radians(self.x, self.y)

    def raw_button(self, number: int) -> bool:
        return number in self.buttons


@dataclass
class FakeStick:
    x: float = 0.0
    y: float = 0.0
    mag: Optional[float] = None


@dataclass
class FakeGamepad:
    left: FakeStick = field(default_factory=FakeStick)
    right: FakeStick = field(default_factory=FakeStick)
    bumpers: Set[Hand] = field(default_factory=set)

    def _stick(self, hand: Hand) -> FakeStick:
        return self.left if hand == Hand.LEFT else self.right

    def get_x(self, hand: Hand) -> float:
        return self._stick(hand).x

    def get_y(self, hand: Hand) -> float:
        return self._stick(hand).y

    def get_xy(self, hand: Hand) -> Tuple[float, float]:
        s = self._stick(hand)
        return s.x, s.y

    def get_axis(self, axis: GamepadAxis) -> float:
        return {
            GamepadAxis.LEFT_X: self.left.x,
            GamepadAxis.LEFT_Y: self.left.y,
            GamepadAxis.RIGHT_X: self.right.x,
            GamepadAxis.RIGHT_Y: self.right.y,
        }.get(axis, 0.0)

    def magnitude(self, hand: Hand) -> float:
        s = self._stick(hand)
        return stick_magnitude(s.x, s.y) if s.mag is None else s.mag

    def direction_degrees(self, hand: Hand) -> float:
        s = self._stick(hand)
        return stick_bearing_degrees(s.x, s.y)

    def direction_radians(self, hand: Hand) -> float:
        s = self._stick(hand)
        return stick_bearing_radians(s.x, s.y)

    def bumper(self, hand: Hand) -> bool:
        return hand in self.bumpers

    def raw_button(self, number: int) -> bool:
        return False


@pytest.fixture
def movement() -> FakeJoystick:
    return FakeJoystick()


@pytest.fixture
def rotation() -> FakeJoystick:
    return FakeJoystick()


@pytest.fixture
def pad() -> FakeGamepad:
    return FakeGamepad()


@pytest.fixture
def controller(movement, rotation, pad) -> SwerveController:
    return SwerveController(movement, rotation, pad)
