import logging

from swerve_input import config
from swerve_input.controllers.swerve_controller import SwerveController
from swerve_input.drive.bridge import SwerveBridge
from swerve_input.drive.mapping import SwerveCommandMapper
from swerve_input.drive.types import BridgeConfig
from swerve_input.protocol.print_protocol import PrintOnlyProtocol


def main() -> None:
    logging.basicConfig(
        level=config.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    controller = SwerveController.from_config()
    print(f"Starting swerve demo: source={controller.input_source.value} scheme={controller.drive_scheme.value}")
    print("Move the sticks to see output. Ctrl+C to exit.\n")

    # pygame reads fall back to 0, so the failsafe stop is for devices that raise
    cfg = BridgeConfig(hz=config.DRIVE_HZ, stop_on_disconnect=config.STOP_ON_DISCONNECT)
    bridge = SwerveBridge(SwerveCommandMapper(controller), PrintOnlyProtocol(), cfg)

    try:
        bridge.run_forever()
    except KeyboardInterrupt:
        print("\nStopped.")


if __name__ == "__main__":
    main()
