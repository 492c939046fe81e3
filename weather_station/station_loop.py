"""
Station Loop - Polling and Display Cycle

Each cycle:
1. Reads temperature, tracks min/max (button press resets them)
2. Shows temperature and min/max on the LCD
3. Tints the backlight from cold blue to warm red
4. Blinks the LEDs to show a sample was taken
5. Shows the light sensor value
6. Warms up the gas sensor, classifies air quality, shows the result

Every delay blocks the single thread. An interrupted delay is logged
and the cycle carries on.
"""

import time
from typing import Optional

from .algorithm import (
    TemperatureTracker,
    classify_air_quality,
    fade_to_color,
    temperature_fade,
)
from .common.config import StationConfig
from .common.logging_setup import get_service_logger, log_sensor_read
from .common.timing import Sleeper, wait_ms
from .hardware.base import GroveBoard
from .state import AirQualityReading, CycleReadings

logger = get_service_logger("loop")


class StationLoop:
    """
    Drives the Grove board.

    The loop runs until stop() is called or, when max_cycles is set,
    until that many cycles have completed.
    """

    def __init__(
        self,
        board: GroveBoard,
        config: Optional[StationConfig] = None,
        sleep: Sleeper = time.sleep,
    ):
        self.board = board
        self.config = config or StationConfig()
        self.tracker = TemperatureTracker()
        self._sleep = sleep
        self._running = False
        self.cycle_count = 0
        self.last_readings: Optional[CycleReadings] = None
        self._interrupted = 0

    def _wait(self, duration_ms: int) -> None:
        if not wait_ms(duration_ms, self._sleep):
            self._interrupted += 1

    def _update_temperature(self, readings: CycleReadings) -> None:
        board = self.board
        display = board.display
        timing = self.config.timing

        temperature = board.temperature.value()
        pressed = board.button.value() == 1
        min_c, max_c = self.tracker.update(temperature, reset=pressed)
        log_sensor_read(logger, "temperature", temperature, "C")
        if pressed:
            logger.info(f"Button pressed - min/max reset to {temperature}C")

        display.set_cursor(0, 0)
        display.write(f"Temp {temperature}    ")
        display.set_cursor(1, 0)
        display.write(f"Min {min_c} Max {max_c}    ")

        fade = temperature_fade(temperature, self.config.temperature_range)
        color = fade_to_color(fade)

        # Sampling indicator
        for led in board.leds:
            led.on()
        self._wait(timing.led_blink_ms)
        for led in board.leds:
            led.off()

        display.set_color(color.red, color.green, color.blue)
        self._wait(timing.hold_ms)
        display.clear()

        readings.temperature_c = temperature
        readings.min_temperature_c = min_c
        readings.max_temperature_c = max_c
        readings.button_pressed = pressed
        readings.fade = fade
        readings.color = color

    def _update_light(self, readings: CycleReadings) -> None:
        display = self.board.display
        timing = self.config.timing

        light_value = self.board.light.value()
        log_sensor_read(logger, "light", light_value, "lux")

        display.clear()
        self._wait(timing.light_settle_ms)

        display.set_cursor(0, 0)
        display.write("light value ")
        display.set_cursor(1, 2)
        display.write("in lux: ")
        display.write(str(light_value))

        self._wait(timing.hold_ms)
        display.clear()

        readings.light_value = light_value

    def _update_air_quality(self, readings: CycleReadings) -> None:
        gas = self.board.gas
        display = self.board.display
        timing = self.config.timing

        sensor_name = gas.name()
        logger.info(sensor_name)
        logger.info("Heating sensor for 3 minutes...")
        for i in range(timing.gas_warmup_iterations):
            logger.info(f"Please wait, {i * 30} seconds have passed...")
            self._wait(timing.gas_warmup_interval_ms)
        logger.info("Air sensor ready!")

        raw = gas.sample()
        ppm = gas.ppm()
        label = classify_air_quality(raw, self.config.air_quality)
        air = AirQualityReading(sensor_name=sensor_name, raw=raw, ppm=ppm, label=label)
        logger.info(
            f"{air.summary()}  {label}",
            extra={"air_raw": raw, "air_ppm": ppm, "air_label": label},
        )

        display.set_cursor(0, 0)
        display.write(label)
        display.set_cursor(1, 0)
        display.write(air.summary())

        self._wait(timing.hold_ms)
        display.clear()

        readings.air_quality = air

    def run_cycle(self) -> CycleReadings:
        """Run one polling-and-display cycle."""
        self._interrupted = 0
        self.cycle_count += 1
        readings = CycleReadings(cycle=self.cycle_count)

        self.board.display.clear()
        self._update_temperature(readings)
        self._update_light(readings)
        self._update_air_quality(readings)

        readings.interrupted_waits = self._interrupted
        self.last_readings = readings
        details = readings.to_dict()
        # "timestamp" belongs to the log record itself
        details["cycle_timestamp"] = details.pop("timestamp")
        logger.debug(f"Cycle {self.cycle_count} complete", extra=details)
        return readings

    def run(self, max_cycles: Optional[int] = None) -> None:
        """
        Run cycles until stopped.

        Args:
            max_cycles: Stop after this many cycles (None = forever, 0 or less = none)
        """
        logger.info("Starting station loop...")
        self._running = True
        completed = 0

        while self._running and (max_cycles is None or completed < max_cycles):
            if completed:
                self._wait(self.config.timing.cycle_interval_ms)
                if not self._running:
                    break
            self.run_cycle()
            completed += 1

        self._running = False
        logger.info(f"Station loop stopped after {completed} cycle(s)")

    def stop(self) -> None:
        """Stop after the current cycle."""
        self._running = False

    def get_status(self) -> dict:
        return {
            "running": self._running,
            "cycle_count": self.cycle_count,
            "min_temperature_c": self.tracker.min_temperature,
            "max_temperature_c": self.tracker.max_temperature,
            "last_readings": self.last_readings.to_dict() if self.last_readings else None,
        }
