from __future__ import annotations
import logging
import time
from dataclasses import dataclass
from typing import Protocol

from swerve_input.controllers.types import ControlScheme
from swerve_input.drive.mapping import SwerveCommandMapper
from swerve_input.drive.types import BridgeConfig, SwerveCommand

log = logging.getLogger(__name__)


class CommandSink(Protocol):
    def send_swerve(self, cmd: SwerveCommand) -> int: ...


@dataclass
class SwerveBridge:
    """
    Polls the mapper at a fixed rate and forwards every command to the sink.
    """
    mapper: SwerveCommandMapper
    sink: CommandSink
    cfg: BridgeConfig

    def _send_stop(self) -> None:
        scheme = self.mapper.controller.drive_scheme
        # zero velocity, hold rotation at 0 in Halo Drive
        rotation = 0.0 if scheme == ControlScheme.HALO_DRIVE else None
        self.sink.send_swerve(SwerveCommand(scheme=scheme, mag=0.0, angle=0.0, rotation=rotation, src="failsafe"))

    def step(self) -> SwerveCommand:
        try:
            cmd = self.mapper.map()
        except Exception:
            if self.cfg.stop_on_disconnect:
                log.warning("controller read failed, sending stop")
                self._send_stop()
            raise

        self.sink.send_swerve(cmd)
        return cmd

    def run_forever(self) -> None:
        period = 1.0 / max(1.0, self.cfg.hz)
        log.info("bridge running at %.1f Hz", 1.0 / period)

        while True:
            loop_start = time.time()

            self.step()

            # Maintain rate
            elapsed = time.time() - loop_start
            sleep_s = period - elapsed
            if sleep_s > 0:
                time.sleep(sleep_s)
