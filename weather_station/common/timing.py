"""
Blocking delays.

The station runs on a single thread; every wait halts it.
"""

import time
from typing import Callable

from .logging_setup import get_service_logger

logger = get_service_logger("timing")

Sleeper = Callable[[float], None]


def wait_ms(duration_ms: int, sleep: Sleeper = time.sleep) -> bool:
    """
    Block for duration_ms milliseconds.

    An interrupted wait is logged and treated as complete.

    Returns:
        True if the full wait elapsed, False if it was interrupted
    """
    try:
        sleep(duration_ms / 1000)
    # time.sleep retries after signals (PEP 475); only injected sleepers raise this
    except InterruptedError as e:
        logger.error(f"Sleep interrupted: {e!r}")
        return False
    return True
