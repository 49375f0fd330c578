import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple


@dataclass
class PX4Config:
    system_address: str = "udpin://0.0.0.0:14540"   # SITL default
    takeoff_alt_m: float = 2.5
    offboard_rate_hz: float = 10.0         # 0.1s


@dataclass
class OffboardTestConfig:
    mode: str = "position"
    shape: str = "square"
    rate_hz: float = 10.0
    arrival_threshold_m: float = 0.1
    arrival_timeout_s: Optional[float] = None   # None waits forever
    log_filename: Optional[str] = None
    logs_dir: Optional[Path] = None             # None: <repo>/logs
    log_level: str = "INFO"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    defaults = OffboardTestConfig()
    parser = argparse.ArgumentParser(
        description="SITL offboard control test: fly a square, circle, eight or ellipse path."
    )
    parser.add_argument(
        "--connection",
        default=PX4Config.system_address,
        help="MAVSDK system address (default: %(default)s)",
    )
    parser.add_argument(
        "--mode",
        default=defaults.mode,
        help="Setpoint control mode: position, velocity or acceleration",
    )
    parser.add_argument(
        "--shape",
        default=defaults.shape,
        help="Path shape: square, circle, eight or ellipse",
    )
    parser.add_argument(
        "--takeoff-alt-m",
        type=float,
        default=PX4Config.takeoff_alt_m,
    )
    parser.add_argument(
        "--arrival-timeout-s",
        type=float,
        default=None,
        help="Give up waiting for a waypoint after this many seconds (default: wait forever)",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="CSV filename for telemetry, written under logs/",
    )
    parser.add_argument("--log-level", default=defaults.log_level)
    return parser.parse_args(argv)


def configs_from_args(args: argparse.Namespace) -> Tuple[PX4Config, OffboardTestConfig]:
    px4 = PX4Config(
        system_address=args.connection,
        takeoff_alt_m=args.takeoff_alt_m,
    )
    test = OffboardTestConfig(
        mode=args.mode,
        shape=args.shape,
        rate_hz=px4.offboard_rate_hz,
        arrival_timeout_s=args.arrival_timeout_s,
        log_filename=args.log_file,
        log_level=args.log_level,
    )
    return px4, test
