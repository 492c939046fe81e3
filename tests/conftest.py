import logging

import pytest

from weather_station.common.logging_setup import setup_logging
from weather_station.simulator import SimulationConfig, VirtualStation


class RecordingSleep:
    """Stands in for time.sleep and records every requested delay"""

    def __init__(self, interrupt_on: set[int] | None = None):
        self.calls: list[float] = []
        self.interrupt_on = interrupt_on or set()

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)
        if len(self.calls) - 1 in self.interrupt_on:
            raise InterruptedError("woken up")


@pytest.fixture
def station():
    return VirtualStation(SimulationConfig(seed=0))


@pytest.fixture
def recording_sleep():
    return RecordingSleep()


@pytest.fixture
def station_logs(capfd):
    """
    Point station loggers at the streams capfd captures.

    Handlers keep the stdout/stderr they were created with, so they are
    rebuilt inside the test and restored afterwards.
    """
    saved = {}

    def bind(*services: str, level: str = "DEBUG") -> None:
        for service in services:
            logger = logging.getLogger(f"weather_station.{service}")
            saved.setdefault(service, (logger.handlers[:], logger.level))
            setup_logging(service, level, json_format=False)

    yield bind

    for service, (handlers, level) in saved.items():
        logger = logging.getLogger(f"weather_station.{service}")
        logger.handlers[:] = handlers
        logger.setLevel(level)
