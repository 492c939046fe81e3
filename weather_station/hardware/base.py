"""
Hardware Boundary

Abstract read/write interfaces for every sensor and actuator the
station drives. Grove (UPM) drivers and the simulator both implement
these.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


class TemperatureSensor(ABC):
    """Analog temperature sensor"""

    @abstractmethod
    def value(self) -> int:
        """Temperature in degrees Celsius"""
        pass


class LightSensor(ABC):
    """Analog light sensor"""

    @abstractmethod
    def value(self) -> int:
        """Approximate illuminance in lux"""
        pass


class GasSensor(ABC):
    """Analog air quality sensor"""

    @abstractmethod
    def name(self) -> str:
        pass

    @abstractmethod
    def sample(self) -> int:
        """Raw ADC sample"""
        pass

    @abstractmethod
    def ppm(self) -> float:
        """Estimated concentration in parts per million"""
        pass


class Button(ABC):
    """Digital push button"""

    @abstractmethod
    def value(self) -> int:
        """1 while pressed, 0 otherwise"""
        pass


class Led(ABC):
    """Digital LED"""

    @abstractmethod
    def on(self) -> None:
        pass

    @abstractmethod
    def off(self) -> None:
        pass


class Display(ABC):
    """Two-row character LCD with an RGB backlight"""

    @abstractmethod
    def clear(self) -> None:
        pass

    @abstractmethod
    def set_cursor(self, row: int, column: int) -> None:
        pass

    @abstractmethod
    def write(self, text: str) -> None:
        pass

    @abstractmethod
    def set_color(self, red: int, green: int, blue: int) -> None:
        pass


@dataclass
class GroveBoard:
    """Device handles owned by the polling cycle"""
    temperature: TemperatureSensor
    light: LightSensor
    gas: GasSensor
    button: Button
    red_led: Led
    green_led: Led
    blue_led: Led
    display: Display

    @property
    def leds(self) -> list[Led]:
        return [self.red_led, self.green_led, self.blue_led]
