"""
Platform check.

The Grove wiring only exists on the Intel Galileo (gen 1 and 2) and
the Edison (fab C) breakout.
"""

from ..common.exceptions import HardwareError, UnsupportedPlatformError
from ..common.logging_setup import get_service_logger

logger = get_service_logger("platform")

SUPPORTED_PLATFORM_NAMES = [
    "INTEL_GALILEO_GEN1",
    "INTEL_GALILEO_GEN2",
    "INTEL_EDISON_FAB_C",
]


def _load_mraa():
    try:
        import mraa
    except ImportError as e:
        raise HardwareError(
            f"mraa bindings not available ({e}). Install the mraa package for this board",
            device="mraa",
        ) from e
    return mraa


def supported_platforms(mraa) -> set[int]:
    return {getattr(mraa, name) for name in SUPPORTED_PLATFORM_NAMES}


def check_platform(mraa=None) -> int:
    """
    Verify the running board is supported.

    Args:
        mraa: mraa module (imported when not given)

    Returns:
        The platform type

    Raises:
        UnsupportedPlatformError: Board is not a Galileo or Edison
    """
    if mraa is None:
        mraa = _load_mraa()

    platform = mraa.getPlatformType()
    if platform not in supported_platforms(mraa):
        raise UnsupportedPlatformError(platform)

    logger.info(f"Platform {platform} supported")
    return platform
