"""Shared fixtures: in-memory setpoint sinks and loguru capture."""

from typing import List, Optional

import pytest
from loguru import logger

from offboard_sitl.core.modes import ControlMode
from offboard_sitl.core.setpoints import Setpoint, SetpointSink
from offboard_sitl.utils.geometry import Vector3
from offboard_sitl.utils.shared_state import SharedState


def add(a: Vector3, b: Vector3) -> Vector3:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


class RecordingSink(SetpointSink):
    """
    Records published setpoints together with the vehicle position at the
    moment of publishing.

    With ``follow=True`` the simulated vehicle jumps straight to where the
    setpoint sends it (position = target, or position + velocity * 1 s).
    With ``stop_after`` the run is stopped after that many publications.
    """

    def __init__(self, state: SharedState, follow: bool = False, stop_after: Optional[int] = None):
        self.state = state
        self.follow = follow
        self.stop_after = stop_after
        self.published: List[Setpoint] = []
        self.positions: List[Vector3] = []

    @property
    def vectors(self) -> List[Vector3]:
        return [sp.vector for sp in self.published]

    async def publish(self, setpoint: Setpoint) -> None:
        current = self.state.position.latest()
        self.published.append(setpoint)
        self.positions.append(current)

        if self.follow:
            if setpoint.mode is ControlMode.POSITION:
                self.state.position.update(setpoint.vector)
            elif setpoint.mode is ControlMode.VELOCITY:
                self.state.position.update(add(current, setpoint.vector))

        if self.stop_after is not None and len(self.published) >= self.stop_after:
            self.state.running = False


@pytest.fixture
def state() -> SharedState:
    return SharedState()


@pytest.fixture
def recording_sink(state):
    return RecordingSink(state)


@pytest.fixture
def following_sink(state):
    return RecordingSink(state, follow=True)


@pytest.fixture
def log_records():
    records = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)


def messages(records, level: str) -> List[str]:
    return [r["message"] for r in records if r["level"].name == level]


@pytest.fixture
def error_messages(log_records):
    return lambda: messages(log_records, "ERROR")


@pytest.fixture
def info_messages(log_records):
    return lambda: messages(log_records, "INFO")


@pytest.fixture
def sink_factory(state):
    return lambda **kwargs: RecordingSink(state, **kwargs)
