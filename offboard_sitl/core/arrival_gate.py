"""
Waypoint arrival gate ("wait and move").

The gate keeps commanding the vehicle toward a target until the reported
position is within a fixed tolerance of it. ``ArrivalGate`` has no
timeout and blocks for as long as the vehicle fails to converge while the
test is running. ``BoundedArrivalGate`` gives up after a fixed time.
"""

import asyncio

from loguru import logger

from offboard_sitl.core.modes import ControlMode
from offboard_sitl.core.setpoints import SetpointSink, command_toward
from offboard_sitl.utils.geometry import Vector3, distance
from offboard_sitl.utils.shared_state import SharedState

ARRIVAL_THRESHOLD_M = 0.1
GATE_RATE_HZ = 10.0


class ArrivalTimeout(Exception):
    pass


class ArrivalGate:
    def __init__(
        self,
        sink: SetpointSink,
        state: SharedState,
        mode: ControlMode,
        *,
        threshold_m: float = ARRIVAL_THRESHOLD_M,
        rate_hz: float = GATE_RATE_HZ,
    ):
        self.sink = sink
        self.state = state
        self.mode = mode
        self.threshold_m = threshold_m
        self.dt = 1.0 / rate_hz

    async def wait_and_move(self, target: Vector3) -> None:
        """
        Poll until ``target`` is reached, publishing a setpoint each tick.

        The setpoint is published on the arriving tick as well. Returns at
        once, publishing nothing, in acceleration mode.
        """
        arrived = False

        while self.state.running and not arrived:
            current = self.state.position.latest()

            if distance(target, current) <= self.threshold_m:
                arrived = True

            setpoint = command_toward(self.mode, target, current)
            if setpoint is None:
                return

            await self.sink.publish(setpoint)
            await asyncio.sleep(self.dt)


class BoundedArrivalGate(ArrivalGate):
    """Arrival gate that raises ``ArrivalTimeout`` instead of blocking forever."""

    def __init__(self, sink: SetpointSink, state: SharedState, mode: ControlMode, *, timeout_s: float, **kwargs):
        super().__init__(sink, state, mode, **kwargs)
        self.timeout_s = timeout_s

    async def wait_and_move(self, target: Vector3) -> None:
        try:
            await asyncio.wait_for(super().wait_and_move(target), self.timeout_s)
        except asyncio.TimeoutError as e:
            current = self.state.position.latest()
            logger.error(
                f"Waypoint {target} not reached within {self.timeout_s:.1f}s "
                f"(last position {current}, distance {distance(target, current):.2f} m)"
            )
            raise ArrivalTimeout(f"Waypoint {target} not reached within {self.timeout_s}s") from e
