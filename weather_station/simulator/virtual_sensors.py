"""
Virtual Grove Sensors

Simulated temperature, light, gas and button inputs for running the
station without a board.

Each sensor plays back a script of values first, then drifts with a
bounded random walk so long simulations stay plausible.
"""

import random
from collections import deque
from typing import Iterable, Optional

from ..common.logging_setup import get_service_logger
from ..hardware.base import Button, GasSensor, LightSensor, TemperatureSensor

logger = get_service_logger("simulator")


class _ScriptedValue:
    """Scripted values followed by a bounded random walk"""

    def __init__(
        self,
        initial: float,
        low: float,
        high: float,
        step: float,
        rng: random.Random,
        script: Optional[Iterable[float]] = None,
    ):
        self.current = initial
        self.low = low
        self.high = high
        self.step = step
        self._rng = rng
        self._script: deque[float] = deque(script or [])

    def push(self, *values: float) -> None:
        self._script.extend(values)

    def next(self) -> float:
        if self._script:
            self.current = self._script.popleft()
        elif self.step > 0:
            drift = self._rng.uniform(-self.step, self.step)
            self.current = max(self.low, min(self.high, self.current + drift))
        return self.current


class VirtualTemperatureSensor(TemperatureSensor):
    """Grove temperature sensor, degrees Celsius"""

    def __init__(
        self,
        initial_c: int = 22,
        script: Optional[Iterable[int]] = None,
        rng: Optional[random.Random] = None,
    ):
        self._value = _ScriptedValue(
            initial_c, low=10, high=40, step=1.0, rng=rng or random.Random(), script=script
        )
        self.reads = 0

    def push(self, *values: int) -> None:
        self._value.push(*values)

    def value(self) -> int:
        self.reads += 1
        return int(self._value.next())


class VirtualLightSensor(LightSensor):
    """Grove light sensor, lux"""

    def __init__(
        self,
        initial_lux: int = 300,
        script: Optional[Iterable[int]] = None,
        rng: Optional[random.Random] = None,
    ):
        self._value = _ScriptedValue(
            initial_lux, low=0, high=1000, step=25.0, rng=rng or random.Random(), script=script
        )
        self.reads = 0

    def push(self, *values: int) -> None:
        self._value.push(*values)

    def value(self) -> int:
        self.reads += 1
        return int(self._value.next())


class VirtualGasSensor(GasSensor):
    """
    Grove air quality sensor (TP401-like).

    ppm is a linear scale of the last raw sample.
    """

    def __init__(
        self,
        initial_sample: int = 120,
        script: Optional[Iterable[int]] = None,
        ppm_per_count: float = 0.5,
        rng: Optional[random.Random] = None,
        sensor_name: str = "TP401",
    ):
        self._value = _ScriptedValue(
            initial_sample, low=0, high=1023, step=15.0, rng=rng or random.Random(), script=script
        )
        self.ppm_per_count = ppm_per_count
        self.sensor_name = sensor_name
        self._last_sample = int(initial_sample)

    def push(self, *values: int) -> None:
        self._value.push(*values)

    def name(self) -> str:
        return self.sensor_name

    def sample(self) -> int:
        self._last_sample = int(self._value.next())
        return self._last_sample

    def ppm(self) -> float:
        return round(self._last_sample * self.ppm_per_count, 2)


class VirtualButton(Button):
    """Push button that stays pressed for a number of reads"""

    def __init__(self):
        self._pressed_reads = 0

    def press(self, reads: int = 1) -> None:
        """Hold the button down for the next `reads` reads."""
        self._pressed_reads = reads
        logger.info(f"Virtual button pressed for {reads} read(s)")

    def value(self) -> int:
        if self._pressed_reads > 0:
            self._pressed_reads -= 1
            return 1
        return 0
