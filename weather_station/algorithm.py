"""
Station Algorithms

Pure computations behind the display:

    fade = clamp((t - range_min) / (range_max - range_min), 0, 1)
    color = (255 * fade, 64 * fade, 255 * (1 - fade))   truncated
    air quality = first tier whose threshold exceeds the raw sample
"""

from .common.config import AirQualityThresholds, TemperatureRange
from .state import BacklightColor

FRESH_AIR = "Fresh Air"
NORMAL_INDOOR_AIR = "Normal Indoor Air"
LOW_POLLUTION = "Low Pollution"
HIGH_POLLUTION = "High Pollution - Action Recommended"
VERY_HIGH_POLLUTION = "Very High Pollution - Take Action Immediately"

AIR_QUALITY_LABELS = [
    FRESH_AIR,
    NORMAL_INDOOR_AIR,
    LOW_POLLUTION,
    HIGH_POLLUTION,
    VERY_HIGH_POLLUTION,
]

# Component scale at fade == 1.0
RED_SCALE = 255
GREEN_SCALE = 64
BLUE_SCALE = 255


def classify_air_quality(
    value: int,
    thresholds: AirQualityThresholds | None = None,
) -> str:
    """Map a raw gas sample onto one of the five air quality labels."""
    limits = (thresholds or AirQualityThresholds()).as_list()
    for limit, label in zip(limits, AIR_QUALITY_LABELS):
        if value < limit:
            return label
    return VERY_HIGH_POLLUTION


def temperature_fade(
    temperature: float,
    temperature_range: TemperatureRange | None = None,
) -> float:
    """
    Position of a temperature inside the range, clamped to [0.0, 1.0].
    """
    bounds = temperature_range or TemperatureRange()
    if temperature <= bounds.min_c:
        return 0.0
    if temperature >= bounds.max_c:
        return 1.0
    return (temperature - bounds.min_c) / (bounds.max_c - bounds.min_c)


def fade_to_color(fade: float) -> BacklightColor:
    """Blend from cold blue (0.0) to warm orange-red (1.0)."""
    return BacklightColor(
        red=int(RED_SCALE * fade),
        green=int(GREEN_SCALE * fade),
        blue=int(BLUE_SCALE * (1 - fade)),
    )


class TemperatureTracker:
    """
    Running minimum and maximum temperature.

    Both are unset until the first sample. Pressing the button while a
    sample is taken resets them to that sample.
    """

    def __init__(self):
        self.min_temperature: int | None = None
        self.max_temperature: int | None = None

    def update(self, temperature: int, reset: bool = False) -> tuple[int, int]:
        """Record a sample and return (min, max)."""
        if reset or self.min_temperature is None or self.max_temperature is None:
            self.min_temperature = temperature
            self.max_temperature = temperature
        else:
            if temperature < self.min_temperature:
                self.min_temperature = temperature
            if temperature > self.max_temperature:
                self.max_temperature = temperature
        return self.min_temperature, self.max_temperature

    def reset(self) -> None:
        self.min_temperature = None
        self.max_temperature = None
