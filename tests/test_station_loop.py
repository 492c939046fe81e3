"""
Polling cycle tests against the virtual station.

The cycle runs with a recording sleep so the delay sequence can be
checked without waiting.
"""

import json
import logging

import pytest

from weather_station.common.config import StationConfig, TimingSettings
from weather_station.common.logging_setup import JsonFormatter
from weather_station.station_loop import StationLoop

from conftest import RecordingSleep

# led blink, temp hold, light settle, light hold, 6 x warm-up, gas hold
CYCLE_DELAYS = [0.05, 3.0, 1.0, 3.0] + [0.3] * 6 + [3.0]


def test_cycle_display_sequence(station, recording_sleep):
    station.temperature.push(31)
    station.light.push(420)
    station.gas.push(120)
    loop = StationLoop(station.board(), sleep=recording_sleep)

    readings = loop.run_cycle()

    assert station.lcd.writes() == [
        "Temp 31    ",
        "Min 31 Max 31    ",
        "light value ",
        "in lux: ",
        "420",
        "Normal Indoor Air",
        "raw: 120 ppm: 60.0",
    ]
    assert station.lcd.color == (255, 64, 0)
    # Every screen ends cleared
    assert station.lcd.history[0] == ("clear", ())
    assert station.lcd.history[-1] == ("clear", ())
    assert station.lcd.lines() == ["", ""]

    assert readings.temperature_c == 31
    assert readings.light_value == 420
    assert readings.air_quality.raw == 120
    assert readings.air_quality.label == "Normal Indoor Air"
    assert readings.interrupted_waits == 0


def test_cycle_delay_sequence(station, recording_sleep):
    loop = StationLoop(station.board(), sleep=recording_sleep)
    loop.run_cycle()
    assert recording_sleep.calls == pytest.approx(CYCLE_DELAYS)


def test_rows_and_cursor_positions(station, recording_sleep):
    station.temperature.push(20)
    loop = StationLoop(station.board(), sleep=recording_sleep)
    loop.run_cycle()

    cursors = [args for op, args in station.lcd.history if op == "set_cursor"]
    assert cursors == [(0, 0), (1, 0), (0, 0), (1, 2), (0, 0), (1, 0)]


def test_leds_blink_before_backlight(station):
    snapshots = []

    def sleep(seconds):
        snapshots.append(
            (seconds, station.red_led.is_on, station.green_led.is_on, station.blue_led.is_on)
        )

    station.temperature.push(18)
    loop = StationLoop(station.board(), sleep=sleep)
    loop.run_cycle()

    # LEDs are on only during the 50ms blink
    assert snapshots[0] == (0.05, True, True, True)
    assert all(not any(s[1:]) for s in snapshots[1:])
    for led in (station.red_led, station.green_led, station.blue_led):
        assert led.history == [True, False]

    # The backlight is set after the blink, cold blue at 18C
    assert station.lcd.color == (0, 0, 255)


def test_min_max_and_button_reset(station, recording_sleep):
    station.temperature.push(22, 27, 19, 24)
    loop = StationLoop(station.board(), sleep=recording_sleep)

    first = loop.run_cycle()
    second = loop.run_cycle()
    third = loop.run_cycle()
    assert (first.min_temperature_c, first.max_temperature_c) == (22, 22)
    assert (second.min_temperature_c, second.max_temperature_c) == (22, 27)
    assert (third.min_temperature_c, third.max_temperature_c) == (19, 27)

    station.button.press()
    fourth = loop.run_cycle()
    assert fourth.button_pressed
    assert (fourth.min_temperature_c, fourth.max_temperature_c) == (24, 24)
    assert "Min 24 Max 24    " in station.lcd.writes()


def test_interrupted_wait_continues(station):
    # Interrupt the LED blink and the first warm-up wait
    sleep = RecordingSleep(interrupt_on={0, 4})
    station.gas.push(700)
    loop = StationLoop(station.board(), sleep=sleep)

    readings = loop.run_cycle()

    assert readings.interrupted_waits == 2
    assert len(sleep.calls) == len(CYCLE_DELAYS)
    assert station.red_led.history == [True, False]
    assert readings.air_quality.label == "Very High Pollution - Take Action Immediately"


def test_run_stops_after_max_cycles(station, recording_sleep):
    loop = StationLoop(station.board(), sleep=recording_sleep)
    loop.run(max_cycles=2)

    assert loop.cycle_count == 2
    # One inter-cycle wait between the two cycles
    assert recording_sleep.calls == pytest.approx(CYCLE_DELAYS + [1.0] + CYCLE_DELAYS)
    assert loop.get_status()["running"] is False


def test_stop_ends_loop_after_current_cycle(station):
    loop = None

    def sleep(seconds):
        if seconds == 1.0 and loop.cycle_count == 1:
            loop.stop()

    loop = StationLoop(station.board(), sleep=sleep)
    loop.run()
    # light settle (1.0s) in cycle 1 requests the stop
    assert loop.cycle_count == 1


def test_custom_timing(station, recording_sleep):
    config = StationConfig(
        timing=TimingSettings(
            led_blink_ms=10,
            hold_ms=100,
            light_settle_ms=20,
            gas_warmup_iterations=2,
            gas_warmup_interval_ms=30000,
        )
    )
    loop = StationLoop(station.board(), config, sleep=recording_sleep)
    loop.run_cycle()
    assert recording_sleep.calls == pytest.approx([0.01, 0.1, 0.02, 0.1, 30.0, 30.0, 0.1])


def test_status_reports_last_readings(station, recording_sleep):
    station.temperature.push(25)
    loop = StationLoop(station.board(), sleep=recording_sleep)
    assert loop.get_status()["last_readings"] is None

    loop.run_cycle()
    status = loop.get_status()
    assert status["cycle_count"] == 1
    assert status["min_temperature_c"] == 25
    assert status["last_readings"]["temperature_c"] == 25
    assert status["last_readings"]["color"] == (137, 34, 117)


@pytest.mark.parametrize("max_cycles", [0, -3])
def test_run_with_no_cycles_touches_nothing(station, recording_sleep, max_cycles):
    loop = StationLoop(station.board(), sleep=recording_sleep)
    loop.run(max_cycles=max_cycles)

    assert loop.cycle_count == 0
    assert recording_sleep.calls == []
    assert station.lcd.history == []


def test_single_cycle_has_no_trailing_interval(station, recording_sleep):
    loop = StationLoop(station.board(), sleep=recording_sleep)
    loop.run(max_cycles=1)
    assert recording_sleep.calls == pytest.approx(CYCLE_DELAYS)


class _RecordList(logging.Handler):
    def __init__(self):
        super().__init__(logging.DEBUG)
        self.records: list[logging.LogRecord] = []

    def emit(self, record):
        self.records.append(record)


def test_cycle_log_keeps_record_timestamp(station, recording_sleep):
    logger = logging.getLogger("weather_station.loop")
    handler = _RecordList()
    previous_level = logger.level
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    try:
        readings = StationLoop(station.board(), sleep=recording_sleep).run_cycle()
    finally:
        logger.removeHandler(handler)
        logger.setLevel(previous_level)

    record = next(r for r in handler.records if r.getMessage() == "Cycle 1 complete")
    assert record.cycle_timestamp == readings.timestamp.isoformat()
    assert not hasattr(record, "timestamp")

    logged = json.loads(JsonFormatter().format(record))
    assert logged["cycle_timestamp"] == readings.timestamp.isoformat()
