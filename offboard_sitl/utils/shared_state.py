import threading
import time
from dataclasses import dataclass, field
from typing import Any, Optional

from .geometry import ORIGIN, Vector3


class PositionCell:
    """
    Latest vehicle position, written by the telemetry watcher and read by
    the test runner. Reads return a whole snapshot, never a torn one.
    Until the first update the cell reads as the origin.
    """

    def __init__(self, initial: Vector3 = ORIGIN):
        self._lock = threading.Lock()
        self._value = initial
        self._updated_at: Optional[float] = None

    def update(self, position: Vector3) -> None:
        with self._lock:
            self._value = position
            self._updated_at = time.time()

    def latest(self) -> Vector3:
        with self._lock:
            return self._value

    @property
    def has_fix(self) -> bool:
        with self._lock:
            return self._updated_at is not None


@dataclass
class SharedState:
    # Latest telemetry snapshots (local ENU frame)
    position: PositionCell = field(default_factory=PositionCell)
    flight_mode: Optional[Any] = None

    # Last setpoint handed to the autopilot
    last_setpoint: Optional[Any] = None

    # Cleared to request shutdown
    running: bool = True
