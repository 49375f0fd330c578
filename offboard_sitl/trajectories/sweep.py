"""
Common base for paths swept by an integer angle in degrees.

Pure mathematical reference paths for the offboard control test.
No PX4 / MAVSDK code here.
"""

from typing import Iterator, Tuple

from offboard_sitl.utils.geometry import Vector3


class AngleSweepTrajectory:
    first_angle_deg: int = 0
    last_angle_deg: int = 360

    # Approached (and gated) before the sweep starts
    start_point: Vector3 = (0.0, 0.0, 0.0)

    def position(self, angle_deg: int) -> Vector3:
        raise NotImplementedError

    def angles(self) -> range:
        """Inclusive integer-degree domain of the sweep."""
        return range(self.first_angle_deg, self.last_angle_deg + 1)

    def samples(self) -> Iterator[Tuple[int, Vector3]]:
        """
        Lazily yield ``(angle, point)`` pairs over the whole domain.

        Every call starts again from the first angle.
        """
        for angle in self.angles():
            yield angle, self.position(angle)
