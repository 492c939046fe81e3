"""
Virtual Station Simulation

Combines the virtual sensors, LEDs and LCD into a GroveBoard so the
polling cycle can run on any machine.
"""

import random
from dataclasses import dataclass
from typing import Optional

from ..common.logging_setup import get_service_logger
from ..hardware.base import GroveBoard
from .virtual_lcd import VirtualLcd, VirtualLed
from .virtual_sensors import (
    VirtualButton,
    VirtualGasSensor,
    VirtualLightSensor,
    VirtualTemperatureSensor,
)

logger = get_service_logger("simulator")


@dataclass
class SimulationConfig:
    """Starting values for the virtual sensors"""
    temperature_c: int = 22
    light_lux: int = 300
    gas_sample: int = 120
    seed: Optional[int] = None


class VirtualStation:
    """
    Simulated Grove Starter Kit.

    Scripted readings can be queued on each sensor with push(); once a
    script runs out the sensor drifts randomly.
    """

    def __init__(self, config: Optional[SimulationConfig] = None):
        self.config = config or SimulationConfig()
        rng = random.Random(self.config.seed)

        self.temperature = VirtualTemperatureSensor(self.config.temperature_c, rng=rng)
        self.light = VirtualLightSensor(self.config.light_lux, rng=rng)
        self.gas = VirtualGasSensor(self.config.gas_sample, rng=rng)
        self.button = VirtualButton()

        self.red_led = VirtualLed("red")
        self.green_led = VirtualLed("green")
        self.blue_led = VirtualLed("blue")
        self.lcd = VirtualLcd()

        logger.info(
            f"Virtual station initialized (temp={self.config.temperature_c}C, "
            f"light={self.config.light_lux}lux, gas={self.config.gas_sample})"
        )

    def board(self) -> GroveBoard:
        """Device bundle for the polling cycle"""
        return GroveBoard(
            temperature=self.temperature,
            light=self.light,
            gas=self.gas,
            button=self.button,
            red_led=self.red_led,
            green_led=self.green_led,
            blue_led=self.blue_led,
            display=self.lcd,
        )
