import asyncio
from loguru import logger
from mavsdk import System

async def connect_px4(system_address: str) -> System:
    drone = System()
    await drone.connect(system_address=system_address)

    logger.info(f"Waiting for drone to connect on {system_address}...")
    async for state in drone.core.connection_state():
        if state.is_connected:
            logger.info("-- Connected!")
            break

    return drone

async def wait_armable(drone: System, sleep_s: float = 0.5) -> None:
    logger.info("Waiting for drone to be armable...")
    async for health in drone.telemetry.health():
        if health.is_armable and health.is_local_position_ok:
            logger.info("Drone health OK. Ready to arm!")
            break
        await asyncio.sleep(sleep_s)
