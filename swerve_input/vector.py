from __future__ import annotations

import math

from swerve_input.utils import normalize_degrees, normalize_radians, stick_bearing_radians


class SwerveVector:
    """
    Planar vector built from a raw stick (x, y) reading.

    Stored in polar form so the magnitude can be zeroed after deadbanding
    without losing the angle. The angle is the plain atan2(y, x) of the raw
    components, wrapped into [0, 360).

    The bearing is the same direction in the stick frame used by every
    direction read (0 = forward, clockwise), taken from the raw components.
    """

    def __init__(self, x: float, y: float) -> None:
        self._mag = math.hypot(x, y)
        self._angle = normalize_radians(math.atan2(y, x))
        self._bearing = stick_bearing_radians(x, y)

    @property
    def x(self) -> float:
        return self._mag * math.cos(self._angle)

    @property
    def y(self) -> float:
        return self._mag * math.sin(self._angle)

    def get_mag(self) -> float:
        return self._mag

    def set_mag(self, mag: float) -> None:
        # angle is kept so a zeroed vector still remembers where it pointed
        self._mag = mag

    def get_angle(self) -> float:
        """Angle in degrees, [0, 360)."""
        return normalize_degrees(math.degrees(self._angle))

    def get_angle_radians(self) -> float:
        return self._angle

    def get_bearing(self) -> float:
        """Stick-frame bearing in degrees, [0, 360). Survives set_mag()."""
        return normalize_degrees(math.degrees(self._bearing))

    def __repr__(self) -> str:
        return f"SwerveVector(mag={self._mag:.3f}, angle={self.get_angle():.1f})"
