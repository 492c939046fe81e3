"""
Grove Starter Kit Drivers

Wraps the UPM vendor drivers behind the station's hardware boundary.

Hardware:
- Grove Red LED (GroveLed) on D4
- Grove Green LED (GroveLed) on D3
- Grove Blue LED (GroveLed) on D2
- Grove Button (GroveButton) on D5
- Grove Temperature Sensor (GroveTemp) on A0
- Grove Light Sensor (GroveLight) on A1
- Grove Air Quality Sensor (TP401) on A2
- Grove RGB LCD (JHD1313M1) on I2C bus 0

The UPM Python bindings come with the board image (Intel IoT / Eclipse
UPM packages) and are imported only when a board is built.
"""

from ..common.config import PinMapping
from ..common.exceptions import HardwareError
from ..common.logging_setup import get_service_logger
from .base import (
    Button,
    Display,
    GasSensor,
    GroveBoard,
    Led,
    LightSensor,
    TemperatureSensor,
)

logger = get_service_logger("hardware")


def _load_upm():
    """Import the UPM driver modules."""
    try:
        from upm import pyupm_gas, pyupm_grove, pyupm_jhd1313m1
    except ImportError as e:
        raise HardwareError(
            f"UPM bindings not available ({e}). Install the upm packages for this board",
            device="upm",
        ) from e
    return pyupm_grove, pyupm_gas, pyupm_jhd1313m1


class GroveTemperature(TemperatureSensor):
    def __init__(self, driver):
        self._driver = driver

    def value(self) -> int:
        return int(self._driver.value())


class GroveLightSensor(LightSensor):
    def __init__(self, driver):
        self._driver = driver

    def value(self) -> int:
        return int(self._driver.value())


class GroveGasSensor(GasSensor):
    def __init__(self, driver):
        self._driver = driver

    def name(self) -> str:
        return self._driver.name()

    def sample(self) -> int:
        return int(self._driver.getSample())

    def ppm(self) -> float:
        return float(self._driver.getPPM())


class GroveButtonInput(Button):
    def __init__(self, driver):
        self._driver = driver

    def value(self) -> int:
        return int(self._driver.value())


class GroveLedOutput(Led):
    def __init__(self, driver):
        self._driver = driver

    def on(self) -> None:
        self._driver.on()

    def off(self) -> None:
        self._driver.off()


class Jhd1313m1Display(Display):
    """JHD1313M1 RGB backlight LCD"""

    def __init__(self, driver):
        self._driver = driver

    def clear(self) -> None:
        self._driver.clear()

    def set_cursor(self, row: int, column: int) -> None:
        self._driver.setCursor(row, column)

    def write(self, text: str) -> None:
        self._driver.write(text)

    def set_color(self, red: int, green: int, blue: int) -> None:
        self._driver.setColor(red, green, blue)


def create_grove_board(pins: PinMapping) -> GroveBoard:
    """
    Instantiate every Grove driver on its port.

    Raises:
        HardwareError: UPM bindings missing
    """
    grove, gas, jhd1313m1 = _load_upm()

    logger.info(
        f"Opening Grove devices: LEDs D{pins.red_led}/D{pins.green_led}/D{pins.blue_led}, "
        f"button D{pins.button}, temp A{pins.temperature_sensor}, "
        f"light A{pins.light_sensor}, gas A{pins.gas_sensor}, LCD i2c-{pins.lcd_i2c_bus}"
    )

    return GroveBoard(
        temperature=GroveTemperature(grove.GroveTemp(pins.temperature_sensor)),
        light=GroveLightSensor(grove.GroveLight(pins.light_sensor)),
        gas=GroveGasSensor(gas.TP401(pins.gas_sensor)),
        button=GroveButtonInput(grove.GroveButton(pins.button)),
        red_led=GroveLedOutput(grove.GroveLed(pins.red_led)),
        green_led=GroveLedOutput(grove.GroveLed(pins.green_led)),
        blue_led=GroveLedOutput(grove.GroveLed(pins.blue_led)),
        display=Jhd1313m1Display(
            jhd1313m1.Jhd1313m1(pins.lcd_i2c_bus, pins.lcd_address, pins.rgb_address)
        ),
    )
