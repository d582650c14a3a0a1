from __future__ import annotations
import json
from dataclasses import dataclass

from swerve_input.drive.types import SwerveCommand


@dataclass
class PrintOnlyProtocol:
    """
    Stand-in for a real drivetrain link. Prints one JSON object per command.
    "ang" and "hdg" are stick-frame bearings (0 = forward, clockwise).
    """
    seq: int = 1

    def _next(self) -> int:
        s = self.seq
        self.seq += 1
        return s

    def send_swerve(self, cmd: SwerveCommand) -> int:
        obj = {
            "v": 1,
            "type": "swv",
            "scheme": cmd.scheme.value,
            "mag": round(cmd.mag, 3),
            "ang": round(cmd.angle, 1),
            "rot": None if cmd.rotation is None else round(cmd.rotation, 3),
            "hdg": None if cmd.heading is None else round(cmd.heading, 1),
            "gear": "high" if cmd.high_gear else "low",
            "src": cmd.src,
            "seq": self._next(),
        }
        print(json.dumps(obj))
        return obj["seq"]
