"""
Configuration Dataclasses

Type-safe configuration structures for the weather station.
Defaults match the Grove Starter Kit wiring, so the station runs
without any configuration file.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .exceptions import ConfigError


@dataclass
class PinMapping:
    """Grove Base Shield ports and the LCD bus"""
    red_led: int = 4          # D4
    green_led: int = 3        # D3
    blue_led: int = 2         # D2
    button: int = 5           # D5
    temperature_sensor: int = 0  # A0
    light_sensor: int = 1     # A1
    gas_sensor: int = 2       # A2
    lcd_i2c_bus: int = 0
    lcd_address: int = 0x3E
    rgb_address: int = 0x62


@dataclass
class TemperatureRange:
    """Temperature range (C) mapped onto the backlight fade"""
    min_c: int = 18
    max_c: int = 31


@dataclass
class AirQualityThresholds:
    """Upper bounds (exclusive) of the first four air quality tiers"""
    fresh_air: int = 50
    normal_indoor: int = 200
    low_pollution: int = 400
    high_pollution: int = 600

    def as_list(self) -> list[int]:
        return [self.fresh_air, self.normal_indoor, self.low_pollution, self.high_pollution]


@dataclass
class TimingSettings:
    """Delays in milliseconds"""
    led_blink_ms: int = 50
    hold_ms: int = 3000
    light_settle_ms: int = 1000
    gas_warmup_iterations: int = 6
    # 30000 gives the full three minute warm-up
    gas_warmup_interval_ms: int = 300
    cycle_interval_ms: int = 1000


@dataclass
class StationConfig:
    """Complete station configuration"""
    name: str = "Grove Weather Station"
    pins: PinMapping = field(default_factory=PinMapping)
    temperature_range: TemperatureRange = field(default_factory=TemperatureRange)
    air_quality: AirQualityThresholds = field(default_factory=AirQualityThresholds)
    timing: TimingSettings = field(default_factory=TimingSettings)
    log_level: str = "INFO"


def _section(data: dict[str, Any], key: str) -> dict[str, Any]:
    """A nested mapping; an empty YAML section (None) counts as empty."""
    section = data.get(key)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ConfigError(f"'{key}' must be a mapping, got {type(section).__name__}")
    return section


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def load_station_config(data: dict[str, Any] | None) -> StationConfig:
    """Load StationConfig from dictionary (e.g., from a YAML file)"""
    data = data or {}
    defaults = StationConfig()

    pins_data = _section(data, "pins")
    pin_defaults = defaults.pins
    pins = PinMapping(
        red_led=pins_data.get("red_led", pin_defaults.red_led),
        green_led=pins_data.get("green_led", pin_defaults.green_led),
        blue_led=pins_data.get("blue_led", pin_defaults.blue_led),
        button=pins_data.get("button", pin_defaults.button),
        temperature_sensor=pins_data.get("temperature_sensor", pin_defaults.temperature_sensor),
        light_sensor=pins_data.get("light_sensor", pin_defaults.light_sensor),
        gas_sensor=pins_data.get("gas_sensor", pin_defaults.gas_sensor),
        lcd_i2c_bus=pins_data.get("lcd_i2c_bus", pin_defaults.lcd_i2c_bus),
        lcd_address=pins_data.get("lcd_address", pin_defaults.lcd_address),
        rgb_address=pins_data.get("rgb_address", pin_defaults.rgb_address),
    )

    range_data = _section(data, "temperature_range")
    temperature_range = TemperatureRange(
        min_c=range_data.get("min_c", defaults.temperature_range.min_c),
        max_c=range_data.get("max_c", defaults.temperature_range.max_c),
    )

    air_data = _section(data, "air_quality")
    air_defaults = defaults.air_quality
    air_quality = AirQualityThresholds(
        fresh_air=air_data.get("fresh_air", air_defaults.fresh_air),
        normal_indoor=air_data.get("normal_indoor", air_defaults.normal_indoor),
        low_pollution=air_data.get("low_pollution", air_defaults.low_pollution),
        high_pollution=air_data.get("high_pollution", air_defaults.high_pollution),
    )

    timing_data = _section(data, "timing")
    timing_defaults = defaults.timing
    timing = TimingSettings(
        led_blink_ms=timing_data.get("led_blink_ms", timing_defaults.led_blink_ms),
        hold_ms=timing_data.get("hold_ms", timing_defaults.hold_ms),
        light_settle_ms=timing_data.get("light_settle_ms", timing_defaults.light_settle_ms),
        gas_warmup_iterations=timing_data.get(
            "gas_warmup_iterations", timing_defaults.gas_warmup_iterations
        ),
        gas_warmup_interval_ms=timing_data.get(
            "gas_warmup_interval_ms", timing_defaults.gas_warmup_interval_ms
        ),
        cycle_interval_ms=timing_data.get("cycle_interval_ms", timing_defaults.cycle_interval_ms),
    )

    return StationConfig(
        name=data.get("name", defaults.name),
        pins=pins,
        temperature_range=temperature_range,
        air_quality=air_quality,
        timing=timing,
        log_level=data.get("log_level", defaults.log_level),
    )


def load_config_file(config_path: str | Path) -> StationConfig:
    """
    Load and validate configuration from a YAML file.

    Raises:
        ConfigError: File missing, unparsable, or invalid
    """
    path = Path(config_path)
    if not path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Error parsing {config_path}: {e}") from e

    if data is not None and not isinstance(data, dict):
        raise ConfigError(f"{config_path} must contain a mapping")

    config = load_station_config(data)
    is_valid, errors = validate_config(config)
    if not is_valid:
        raise ConfigError(f"{len(errors)} error(s) in {config_path}", errors)
    return config


def validate_config(config: StationConfig) -> tuple[bool, list[str]]:
    """
    Validate configuration.

    Returns:
        Tuple of (is_valid, list of error messages)
    """
    errors: list[str] = []

    # Every numeric setting must be an int before the range checks apply
    sections = {
        "pins": config.pins,
        "temperature_range": config.temperature_range,
        "air_quality": config.air_quality,
        "timing": config.timing,
    }
    for section_name, section in sections.items():
        for name, value in vars(section).items():
            if not _is_int(value):
                errors.append(
                    f"{section_name}.{name} must be an integer, got {value!r}"
                )
    if errors:
        return False, errors

    if config.temperature_range.min_c >= config.temperature_range.max_c:
        errors.append(
            f"temperature_range.min_c ({config.temperature_range.min_c}) must be "
            f"below max_c ({config.temperature_range.max_c})"
        )

    thresholds = config.air_quality.as_list()
    if thresholds[0] < 0:
        errors.append("air_quality thresholds cannot be negative")
    if any(a >= b for a, b in zip(thresholds, thresholds[1:])):
        errors.append(f"air_quality thresholds must be strictly increasing: {thresholds}")

    for name, value in vars(config.timing).items():
        if value < 0:
            errors.append(f"timing.{name} cannot be negative")

    leds = [config.pins.red_led, config.pins.green_led, config.pins.blue_led]
    if len(set(leds)) != len(leds):
        errors.append(f"LED ports must be distinct: {leds}")

    return len(errors) == 0, errors
