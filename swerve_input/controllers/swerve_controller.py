"""
SwerveController - stick input -> swerve drive vectors.

Two control schemes share the left stick as the movement vector:
  - Halo Drive: right stick X sets how fast the robot spins.
  - Angle Drive: right stick points where the robot should face.

Input comes from two flight joysticks (movement + rotation) or from one
gamepad. Reads go straight to the device with no caching, so changing
`input_source` or `drive_scheme` applies on the next query.

Direction reads follow the stick bearing convention in `swerve_input.utils`:
0 deg = stick forward, clockwise positive, [0, 360).
"""
from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Union

from swerve_input import config
from swerve_input.controllers.mapping import device_map, load_device_maps
from swerve_input.controllers.pygame_hid import PygameGamepad, PygameJoystick
from swerve_input.controllers.sources import DualJoystickSource, GamepadSource
from swerve_input.controllers.types import ControlScheme, Gamepad, Hand, InputSource, Joystick, StickSource
from swerve_input.utils import cutoff
from swerve_input.vector import SwerveVector

DEADBAND = 0.18


class SwerveController:

    def __init__(
        self,
        movement: Joystick,
        rotation: Joystick,
        gamepad: Gamepad,
        *,
        input_source: Union[InputSource, str] = InputSource.GAMEPAD,
        drive_scheme: Union[ControlScheme, str] = ControlScheme.HALO_DRIVE,
        shift_button: int = 2,
    ) -> None:
        self._sources: Dict[InputSource, StickSource] = {
            InputSource.DUAL_JOYSTICK: DualJoystickSource(movement, rotation, shift_button),
            InputSource.GAMEPAD: GamepadSource(gamepad),
        }
        self.input_source = input_source
        self.drive_scheme = drive_scheme

    @classmethod
    def from_config(cls, map_file: Optional[str] = None) -> "SwerveController":
        """
        Build pygame-backed devices from `swerve_input.config`.
        Devices are opened on first read, so this works with nothing plugged in.
        """
        map_file = config.DEVICE_MAP_FILE if map_file is None else map_file
        maps = load_device_maps(Path(map_file)) if map_file else None

        return cls(
            PygameJoystick(config.MOVEMENT_JOYSTICK_INDEX, device_map(maps, "joystick")),
            PygameJoystick(config.ROTATION_JOYSTICK_INDEX, device_map(maps, "joystick")),
            PygameGamepad(config.GAMEPAD_INDEX, device_map(maps, "gamepad")),
            input_source=config.SWERVE_INPUT_SOURCE,
            drive_scheme=config.SWERVE_DRIVE_SCHEME,
            shift_button=config.SHIFT_BUTTON,
        )

    # ---- mode flags ----
    @property
    def input_source(self) -> InputSource:
        return self._input_source

    @input_source.setter
    def input_source(self, value: Union[InputSource, str]) -> None:
        # raises ValueError for anything outside the enum
        self._input_source = InputSource(value)

    @property
    def drive_scheme(self) -> ControlScheme:
        return self._drive_scheme

    @drive_scheme.setter
    def drive_scheme(self, value: Union[ControlScheme, str]) -> None:
        self._drive_scheme = ControlScheme(value)

    @property
    def source(self) -> StickSource:
        return self._sources[self._input_source]

    # ---- generic stick reads ----
    def magnitude(self, hand: Hand) -> float:
        """
        Length of the stick deflection for `hand`, 0.0 inside the deadband.

        Hard cutoff: below DEADBAND reads exactly 0.0, at or above it the raw
        magnitude comes through unscaled.
        """
        return cutoff(self.source.magnitude(hand), DEADBAND)

    def direction_degrees(self, hand: Hand) -> float:
        """
        Stick bearing in degrees. No deadband, so a centred stick may be noisy;
        pair it with `magnitude()`.
        """
        return self.source.direction_degrees(hand)

    def direction_radians(self, hand: Hand) -> float:
        return self.source.direction_radians(hand)

    # ---- Halo Drive ----
    def halo_rotation_rate(self) -> float:
        """
        Rotation rate from the right stick X axis.

        The deadband compares the signed value, so every negative reading
        comes back as 0.0 as well.
        """
        return cutoff(self.source.rotation_axis(), DEADBAND)

    def halo_velocity_vector(self) -> SwerveVector:
        return self._velocity_vector()

    # ---- Angle Drive ----
    def angle_drive_heading(self) -> float:
        """
        Heading in degrees from the right stick. Always resolves to a bearing;
        a centred stick reads 0.
        """
        return self.source.direction_degrees(Hand.RIGHT)

    def angle_velocity_vector(self) -> SwerveVector:
        return self._velocity_vector()

    # ---- shared ----
    def high_gear_enabled(self) -> bool:
        # shift to high gear if the button is not held down
        return not self.source.shift_held()

    def _velocity_vector(self) -> SwerveVector:
        x, y = self.source.get_xy(Hand.LEFT)
        v = SwerveVector(x, y)
        if v.get_mag() < DEADBAND:
            v.set_mag(0.0)
        return v
