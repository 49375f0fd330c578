"""
Square path: four corners visited in order, then back to the first one.

Unlike the swept paths, every corner is a waypoint of its own.
"""

from typing import Iterator

from offboard_sitl.utils.geometry import Vector3


class SquareTrajectory:
    HALF_WIDTH_M = 2.0
    ALTITUDE_M = 1.0

    FIRST_STEP = 1
    LAST_CORNER_STEP = 5
    COMPLETION_STEP = 6   # reached after the 5th corner is confirmed

    def corner(self, step: int) -> Vector3:
        """Corner targeted at ``step`` (1..5)."""
        w = self.HALF_WIDTH_M
        z = self.ALTITUDE_M

        if step == 1:
            return (w, w, z)
        if step == 2:
            return (-w, w, z)
        if step == 3:
            return (-w, -w, z)
        if step == 4:
            return (w, -w, z)
        if step == 5:
            return (w, w, z)
        raise ValueError(f"Square path has no corner for step {step}")

    def corners(self) -> Iterator[Vector3]:
        for step in range(self.FIRST_STEP, self.LAST_CORNER_STEP + 1):
            yield self.corner(step)
