import math

# ----------------------------
# Utilities
# ----------------------------
def cutoff(x: float, threshold: float) -> float:
    """
    Hard deadband: anything below `threshold` reads as 0.0, everything else
    passes through unchanged. The comparison is signed, so negative inputs
    are always cut.
    """
    return 0.0 if x < threshold else x


def normalize_radians(rad: float) -> float:
    """
    Wrap an angle into [0, 2pi).
    """
    rad = rad % math.tau
    # -1e-20 % tau rounds up to tau
    return 0.0 if rad >= math.tau else rad


def normalize_degrees(deg: float) -> float:
    """
    Wrap an angle into [0, 360).
    """
    deg = deg % 360.0
    return 0.0 if deg >= 360.0 else deg


def stick_magnitude(x: float, y: float) -> float:
    return math.hypot(x, y)


def stick_bearing_radians(x: float, y: float) -> float:
    """
    Bearing of a stick deflection, in radians within [0, 2pi).

    Convention (shared by every direction read in this package):
      - 0 = stick pushed forward, i.e. raw Y = -1.0 (HID axes report up as negative)
      - clockwise positive: right = pi/2, back = pi, left = 3pi/2
      - a centred stick has bearing 0
    """
    if x == 0.0 and y == 0.0:
        return 0.0
    return normalize_radians(math.atan2(x, -y))


def stick_bearing_degrees(x: float, y: float) -> float:
    return normalize_degrees(math.degrees(stick_bearing_radians(x, y)))
