"""
Control mode and path shape selection.

Both are chosen once from string parameters at start-up. An unknown
token is a configuration error; ``acceleration`` is a known token that
the autopilot firmware does not support yet.
"""

from enum import Enum


class ConfigurationError(ValueError):
    """Raised when a mode or shape parameter is not a known token."""


class ControlMode(Enum):
    POSITION = "position"
    VELOCITY = "velocity"
    ACCELERATION = "acceleration"

    @property
    def supported(self) -> bool:
        return self is not ControlMode.ACCELERATION


class PathShape(Enum):
    SQUARE = "square"
    CIRCLE = "circle"
    EIGHT = "eight"
    ELLIPSE = "ellipse"


def parse_control_mode(name: str) -> ControlMode:
    for mode in ControlMode:
        if mode.value == name:
            return mode
    raise ConfigurationError(f"Control mode: wrong/unexistant control mode name {name}")


def parse_path_shape(name: str) -> PathShape:
    for shape in PathShape:
        if shape.value == name:
            return shape
    raise ConfigurationError(f"Path shape: wrong/unexistant path shape name {name}")
