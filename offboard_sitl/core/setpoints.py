"""
Offboard setpoints and the sinks that publish them.

A setpoint is a 3D vector in the vehicle-local frame tagged with the
control mode it belongs to: an absolute position in position mode, or a
velocity in velocity mode. Publishing is fire-and-forget.
"""

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional

from mavsdk import System
from mavsdk.offboard import PositionNedYaw, VelocityNedYaw

from offboard_sitl.core.modes import ControlMode
from offboard_sitl.utils.geometry import Vector3, enu_to_ned, subtract


@dataclass(frozen=True)
class Setpoint:
    mode: ControlMode
    vector: Vector3
    timestamp: float = field(default_factory=time.time)


def command_toward(mode: ControlMode, target: Vector3, current: Vector3) -> Optional[Setpoint]:
    """
    Build the setpoint that drives the vehicle toward ``target``.

    Position mode commands the target itself. Velocity mode commands
    ``target - current`` (unit gain, no clamping). Acceleration mode has
    no command and yields None.
    """
    if mode is ControlMode.POSITION:
        return Setpoint(mode, target)
    if mode is ControlMode.VELOCITY:
        return Setpoint(mode, subtract(target, current))
    if mode is ControlMode.ACCELERATION:
        return None
    raise ValueError(f"Unhandled control mode: {mode!r}")


class SetpointSink(ABC):
    """Destination for offboard setpoints."""

    @abstractmethod
    async def publish(self, setpoint: Setpoint) -> None:
        ...


class MavsdkSetpointSink(SetpointSink):
    """
    Streams setpoints to PX4 through MAVSDK offboard.

    Vectors are converted from the local ENU frame to NED. The last
    published setpoint is recorded on ``state`` (if given) so the
    telemetry logger can write it next to the measured position.
    """

    def __init__(self, drone: System, state: Optional[Any] = None, yaw_deg: float = 0.0):
        self.drone = drone
        self.state = state
        self.yaw_deg = yaw_deg

    async def publish(self, setpoint: Setpoint) -> None:
        north, east, down = enu_to_ned(setpoint.vector)

        if setpoint.mode is ControlMode.POSITION:
            await self.drone.offboard.set_position_ned(
                PositionNedYaw(north, east, down, self.yaw_deg)
            )
        elif setpoint.mode is ControlMode.VELOCITY:
            await self.drone.offboard.set_velocity_ned(
                VelocityNedYaw(north, east, down, self.yaw_deg)
            )
        else:
            raise ValueError(f"No offboard setpoint for control mode: {setpoint.mode.value}")

        if self.state is not None:
            self.state.last_setpoint = setpoint
