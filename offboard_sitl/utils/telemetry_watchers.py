import asyncio

from mavsdk import System
from .geometry import ned_to_enu
from .shared_state import SharedState

async def watch_position(drone: System, state: SharedState):
    async for data in drone.telemetry.position_velocity_ned():
        pos = data.position
        state.position.update(ned_to_enu((pos.north_m, pos.east_m, pos.down_m)))

        if not state.running:
            break

async def watch_flight_mode(drone: System, state: SharedState):
    async for mode in drone.telemetry.flight_mode():
        state.flight_mode = mode
        if not state.running:
            break

async def wait_for_position_fix(state: SharedState, sleep_s: float = 0.05) -> bool:
    while not state.position.has_fix and state.running:
        await asyncio.sleep(sleep_s)
    return state.position.has_fix
