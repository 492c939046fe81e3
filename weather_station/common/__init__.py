"""
Common Utilities

Shared modules used across the station:
- config.py - Configuration dataclasses
- exceptions.py - Custom exception classes
- logging_setup.py - Structured logging setup
- timing.py - Blocking delays
"""

from .config import (
    StationConfig,
    PinMapping,
    TemperatureRange,
    AirQualityThresholds,
    TimingSettings,
    load_station_config,
    load_config_file,
    validate_config,
)
from .exceptions import (
    WeatherStationError,
    ConfigError,
    HardwareError,
    UnsupportedPlatformError,
)
from .logging_setup import (
    setup_logging,
    get_service_logger,
    set_log_level,
    log_sensor_read,
)
from .timing import wait_ms

__all__ = [
    # Config
    "StationConfig",
    "PinMapping",
    "TemperatureRange",
    "AirQualityThresholds",
    "TimingSettings",
    "load_station_config",
    "load_config_file",
    "validate_config",
    # Exceptions
    "WeatherStationError",
    "ConfigError",
    "HardwareError",
    "UnsupportedPlatformError",
    # Logging
    "setup_logging",
    "get_service_logger",
    "set_log_level",
    "log_sensor_read",
    # Timing
    "wait_ms",
]
