"""
Figure-8 path generator (lemniscate of Gerono).

This module provides a pure mathematical reference path
for the offboard control test.

No PX4 / MAVSDK code here.
"""

import math

from offboard_sitl.utils.geometry import Vector3
from .sweep import AngleSweepTrajectory


class Figure8Trajectory(AngleSweepTrajectory):
    A_M = 5.0   # vertical tangent size
    ALTITUDE_M = 1.0

    first_angle_deg = -180
    last_angle_deg = 180
    start_point = (0.0, 0.0, ALTITUDE_M)

    def position(self, angle_deg: int) -> Vector3:
        """
        x(θ) = a * cos θ
        y(θ) = a * sin θ * cos θ
        """
        theta = angle_deg * math.pi / 180.0
        return (
            self.A_M * math.cos(theta),
            self.A_M * math.sin(theta) * math.cos(theta),
            self.ALTITUDE_M,
        )
