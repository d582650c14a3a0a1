from __future__ import annotations
from dataclasses import dataclass

from swerve_input.controllers.swerve_controller import SwerveController
from swerve_input.controllers.types import ControlScheme
from swerve_input.drive.types import SwerveCommand


@dataclass
class SwerveCommandMapper:
    controller: SwerveController

    def map(self) -> SwerveCommand:
        c = self.controller
        scheme = c.drive_scheme

        if scheme == ControlScheme.HALO_DRIVE:
            v = c.halo_velocity_vector()
            return SwerveCommand(
                scheme=scheme,
                mag=v.get_mag(),
                angle=v.get_bearing(),
                rotation=c.halo_rotation_rate(),
                high_gear=c.high_gear_enabled(),
            )

        v = c.angle_velocity_vector()
        return SwerveCommand(
            scheme=scheme,
            mag=v.get_mag(),
            angle=v.get_bearing(),
            heading=c.angle_drive_heading(),
            high_gear=c.high_gear_enabled(),
        )
