from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from swerve_input.controllers.types import ControlScheme


@dataclass(frozen=True)
class SwerveCommand:
    """
    One control cycle worth of driver intent.

    Both angles share the stick bearing frame: 0 = forward, clockwise
    positive, degrees in [0, 360).

    mag:      0..1 movement speed
    angle:    movement bearing
    rotation: Halo Drive spin rate, None in Angle Drive
    heading:  Angle Drive target bearing, None in Halo Drive
    """
    scheme: ControlScheme
    mag: float
    angle: float
    rotation: Optional[float] = None
    heading: Optional[float] = None
    high_gear: bool = True
    src: str = "sticks"


@dataclass(frozen=True)
class BridgeConfig:
    """
    stop_on_disconnect: send one zero-velocity command when reading the
      controller raises. The pygame devices return 0 / False instead of
      raising, so this only fires for other device implementations.
    """
    hz: float = 50.0
    stop_on_disconnect: bool = True
