"""
Ellipse path generator.

The ellipse stands in the vertical x-z plane (rotated about the
horizontal axis), so altitude changes along the path.
"""

import math

from offboard_sitl.utils.geometry import Vector3
from .sweep import AngleSweepTrajectory


class EllipseTrajectory(AngleSweepTrajectory):
    MAJOR_M = 5.0
    MINOR_M = 2.0
    CENTER_ALT_M = 2.5

    first_angle_deg = 0
    last_angle_deg = 360
    start_point = (0.0, 0.0, CENTER_ALT_M)

    def position(self, angle_deg: int) -> Vector3:
        theta = angle_deg * math.pi / 180.0
        return (
            self.MAJOR_M * math.cos(theta),
            0.0,
            self.CENTER_ALT_M + self.MINOR_M * math.sin(theta),
        )
