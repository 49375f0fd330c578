import asyncio
from loguru import logger
from mavsdk import System
from mavsdk.action import ActionError
from mavsdk.offboard import PositionNedYaw, OffboardError

async def prestream_position_setpoints(drone: System, down_m: float, yaw_deg: float = 0.0, n: int = 20):
    """PX4 requires setpoints to be streamed before starting offboard."""
    for _ in range(n):
        await drone.offboard.set_position_ned(PositionNedYaw(0.0, 0.0, down_m, yaw_deg))
        await asyncio.sleep(0.05)

async def arm_and_takeoff(drone: System, altitude_m: float, climb_s: float = 5.0) -> bool:
    try:
        await drone.action.set_takeoff_altitude(altitude_m)
        await drone.action.arm()
        logger.info("Armed")
        await drone.action.takeoff()
    except ActionError as e:
        logger.error(f"Arm/takeoff failed: {e._result.result}")
        return False

    logger.info(f"Taking off to {altitude_m:.1f} m...")
    await asyncio.sleep(climb_s)
    return True

async def start_offboard(drone: System) -> bool:
    try:
        await drone.offboard.start()
        logger.info("Offboard started!")
        return True
    except OffboardError as e:
        logger.error(f"Failed to start offboard: {e._result.result}")
        return False

async def stop_offboard_and_land(drone: System, sleep_s: float = 5.0):
    try:
        await drone.offboard.stop()
    except OffboardError as e:
        logger.warning(f"Failed to stop offboard: {e._result.result}")

    logger.info("Landing...")
    await drone.action.land()
    await asyncio.sleep(sleep_s)
