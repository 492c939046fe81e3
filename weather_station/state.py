"""
Station State Dataclasses

Data structures for one polling cycle.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any


@dataclass(frozen=True)
class BacklightColor:
    """LCD backlight color, each component 0..255"""
    red: int
    green: int
    blue: int

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.red, self.green, self.blue)


@dataclass
class AirQualityReading:
    """Gas sensor result"""
    sensor_name: str
    raw: int
    ppm: float
    label: str

    def summary(self) -> str:
        return f"raw: {self.raw} ppm: {self.ppm}"


@dataclass
class CycleReadings:
    """Everything one polling cycle measured and derived"""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    cycle: int = 0

    # Temperature
    temperature_c: int = 0
    min_temperature_c: int = 0
    max_temperature_c: int = 0
    button_pressed: bool = False
    fade: float = 0.0
    color: BacklightColor = field(default_factory=lambda: BacklightColor(0, 0, 255))

    # Light
    light_value: int = 0

    # Gas
    air_quality: AirQualityReading | None = None

    # Execution
    interrupted_waits: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging"""
        return {
            "timestamp": self.timestamp.isoformat(),
            "cycle": self.cycle,
            "temperature_c": self.temperature_c,
            "min_temperature_c": self.min_temperature_c,
            "max_temperature_c": self.max_temperature_c,
            "button_pressed": self.button_pressed,
            "fade": self.fade,
            "color": self.color.as_tuple(),
            "light_value": self.light_value,
            "air_raw": self.air_quality.raw if self.air_quality else None,
            "air_ppm": self.air_quality.ppm if self.air_quality else None,
            "air_label": self.air_quality.label if self.air_quality else None,
            "interrupted_waits": self.interrupted_waits,
        }
