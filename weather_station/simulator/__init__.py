"""
Station Simulator

Virtual Grove devices for running and testing without a board.
"""

from .virtual_lcd import VirtualLcd, VirtualLed
from .virtual_sensors import (
    VirtualButton,
    VirtualGasSensor,
    VirtualLightSensor,
    VirtualTemperatureSensor,
)
from .virtual_station import SimulationConfig, VirtualStation

__all__ = [
    "VirtualLcd",
    "VirtualLed",
    "VirtualButton",
    "VirtualGasSensor",
    "VirtualLightSensor",
    "VirtualTemperatureSensor",
    "SimulationConfig",
    "VirtualStation",
]
