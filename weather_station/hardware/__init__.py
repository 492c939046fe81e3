"""
Hardware Layer

- base.py - Abstract sensor/actuator interfaces and the GroveBoard bundle
- grove.py - UPM driver implementations
- platform.py - Supported board check
"""

from .base import (
    TemperatureSensor,
    LightSensor,
    GasSensor,
    Button,
    Led,
    Display,
    GroveBoard,
)
from .grove import create_grove_board
from .platform import check_platform

__all__ = [
    "TemperatureSensor",
    "LightSensor",
    "GasSensor",
    "Button",
    "Led",
    "Display",
    "GroveBoard",
    "create_grove_board",
    "check_platform",
]
