"""
Circular path generator.

Pure mathematical reference path for the offboard control test.
No PX4 / MAVSDK code here.
"""

import math

from offboard_sitl.utils.geometry import Vector3
from .sweep import AngleSweepTrajectory


class CircleTrajectory(AngleSweepTrajectory):
    # TODO: let the user set the radius once the test accepts amplitude parameters
    RADIUS_M = 5.0
    ALTITUDE_M = 1.0

    first_angle_deg = 0
    last_angle_deg = 360
    start_point = (RADIUS_M, 0.0, ALTITUDE_M)

    def position(self, angle_deg: int) -> Vector3:
        """
        x(θ) = R * cos θ
        y(θ) = R * sin θ
        z    = altitude
        """
        theta = angle_deg * math.pi / 180.0
        return (
            self.RADIUS_M * math.cos(theta),
            self.RADIUS_M * math.sin(theta),
            self.ALTITUDE_M,
        )
