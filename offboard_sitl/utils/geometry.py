"""
Small 3D vector helpers shared by trajectories, setpoints and telemetry.

The harness works in a vehicle-local frame with x east, y north, z up.
MAVSDK speaks NED, so conversions live here too.
"""

import math
from typing import Tuple

Vector3 = Tuple[float, float, float]

ORIGIN: Vector3 = (0.0, 0.0, 0.0)


def subtract(a: Vector3, b: Vector3) -> Vector3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def distance(a: Vector3, b: Vector3) -> float:
    """Euclidean distance between two points."""
    return math.dist(a, b)


def enu_to_ned(v: Vector3) -> Vector3:
    x, y, z = v
    return (y, x, -z)


def ned_to_enu(v: Vector3) -> Vector3:
    north, east, down = v
    return (east, north, -down)
