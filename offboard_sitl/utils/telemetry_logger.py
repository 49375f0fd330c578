import asyncio
import csv
import time
from pathlib import Path
from typing import Optional

from loguru import logger

from .shared_state import SharedState

# offboard_sitl/utils/telemetry_logger.py -> repo_root = parents[2]
DEFAULT_LOGS_DIR = Path(__file__).resolve().parents[2] / "logs"

CSV_HEADER = [
    "t",
    "x_m", "y_m", "z_m",
    "flight_mode",
    "sp_mode", "sp_x", "sp_y", "sp_z",
]


async def log_telemetry_csv(
    state: SharedState,
    filename: str,
    logs_dir: Optional[Path] = None,
    rate_hz: float = 10.0,
) -> Path:
    """
    Logs vehicle position and the active setpoint to a CSV file.

    By default the file goes to the project-level `logs/` directory,
    independent of the current working directory. Rows are only written
    once a position fix is available. Returns the path of the log.
    """
    logs_dir = DEFAULT_LOGS_DIR if logs_dir is None else Path(logs_dir)
    logs_dir.mkdir(parents=True, exist_ok=True)

    log_path = logs_dir / filename

    logger.info(f"Telemetry logger started → {log_path}")

    with open(log_path, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(CSV_HEADER)

        t0 = time.time()

        while state.running:
            now = time.time() - t0

            if state.position.has_fix:
                x, y, z = state.position.latest()

                mode_str = ""
                if state.flight_mode is not None:
                    mode_str = getattr(state.flight_mode, "name", str(state.flight_mode))

                sp_mode = sp_x = sp_y = sp_z = ""
                setpoint = state.last_setpoint
                if setpoint is not None:
                    sp_mode = setpoint.mode.value
                    sp_x, sp_y, sp_z = (f"{v:.3f}" for v in setpoint.vector)

                writer.writerow([
                    f"{now:.3f}",
                    f"{x:.3f}", f"{y:.3f}", f"{z:.3f}",
                    mode_str,
                    sp_mode, sp_x, sp_y, sp_z,
                ])

            await asyncio.sleep(1.0 / rate_hz)

    logger.info(f"Telemetry logger stopped → {log_path}")
    return log_path
