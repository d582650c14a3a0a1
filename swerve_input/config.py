from __future__ import annotations

import os


def env_bool(name: str, default: bool) -> bool:
    v = os.getenv(name)
    if v is None:
        return default
    return v.strip().lower() in ("1", "true", "yes", "y", "on")


def env_int(name: str, default: int) -> int:
    v = os.getenv(name)
    return default if v is None else int(v)


def env_float(name: str, default: float) -> float:
    v = os.getenv(name)
    return default if v is None else float(v)


def env_str(name: str, default: str) -> str:
    v = os.getenv(name)
    return default if v is None else v


# ============================
# Input devices (pygame joystick indices, 0-based)
# ============================
MOVEMENT_JOYSTICK_INDEX = env_int("MOVEMENT_JOYSTICK_INDEX", 0)
ROTATION_JOYSTICK_INDEX = env_int("ROTATION_JOYSTICK_INDEX", 1)
GAMEPAD_INDEX = env_int("GAMEPAD_INDEX", 0)

# 1-based, as printed on the movement joystick
SHIFT_BUTTON = env_int("SHIFT_BUTTON", 2)

# optional YAML with axes/buttons overrides, "" = built-in maps
DEVICE_MAP_FILE = env_str("DEVICE_MAP_FILE", "")

# ============================
# Control modes
# ============================
SWERVE_INPUT_SOURCE = env_str("SWERVE_INPUT_SOURCE", "gamepad")  # gamepad | dual_joystick
SWERVE_DRIVE_SCHEME = env_str("SWERVE_DRIVE_SCHEME", "halo")     # halo | angle

# ============================
# Bridge loop behavior
# ============================
DRIVE_HZ = env_float("DRIVE_HZ", 50.0)
# only custom devices raise on read; pygame devices fall back to 0
STOP_ON_DISCONNECT = env_bool("STOP_ON_DISCONNECT", True)

LOG_LEVEL = env_str("LOG_LEVEL", "INFO")
