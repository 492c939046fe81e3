"""
Custom Exception Classes for the Weather Station

Hierarchical exception structure for startup and hardware errors.
"""


class WeatherStationError(Exception):
    """Base exception for all weather station errors"""

    def __init__(self, message: str, recoverable: bool = True):
        self.message = message
        self.recoverable = recoverable
        super().__init__(message)


class ConfigError(WeatherStationError):
    """Configuration-related errors"""

    def __init__(self, message: str, errors: list[str] | None = None):
        self.errors = errors or []
        super().__init__(f"Config Error: {message}", recoverable=False)


class HardwareError(WeatherStationError):
    """Sensor, actuator or vendor binding errors"""

    def __init__(
        self,
        message: str,
        device: str | None = None,
        recoverable: bool = False,
    ):
        self.device = device
        super().__init__(f"Hardware Error: {message}", recoverable)


class UnsupportedPlatformError(HardwareError):
    """Running on a board the Grove wiring was not written for"""

    def __init__(self, platform: int | None):
        self.platform = platform
        super().__init__(f"Unsupported platform ({platform})", device="platform")
