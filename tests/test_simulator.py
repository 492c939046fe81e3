"""
Virtual device behaviour.
"""

import random

from weather_station.simulator import (
    SimulationConfig,
    VirtualButton,
    VirtualGasSensor,
    VirtualLcd,
    VirtualLed,
    VirtualStation,
    VirtualTemperatureSensor,
)


def test_scripted_then_bounded_drift():
    sensor = VirtualTemperatureSensor(initial_c=39, script=[12, 38], rng=random.Random(1))
    assert sensor.value() == 12
    assert sensor.value() == 38
    for _ in range(200):
        assert 10 <= sensor.value() <= 40
    assert sensor.reads == 202


def test_gas_ppm_follows_last_sample():
    gas = VirtualGasSensor(script=[300], ppm_per_count=0.25)
    assert gas.name() == "TP401"
    assert gas.sample() == 300
    assert gas.ppm() == 75.0


def test_button_held_for_reads():
    button = VirtualButton()
    assert button.value() == 0
    button.press(reads=2)
    assert [button.value() for _ in range(3)] == [1, 1, 0]


def test_lcd_buffer_and_cursor():
    lcd = VirtualLcd()
    lcd.set_cursor(1, 2)
    lcd.write("in lux: ")
    lcd.write("512")
    assert lcd.line(1) == "  in lux: 512"

    lcd.set_cursor(0, 0)
    lcd.write("x" * 20)
    assert lcd.line(0) == "x" * 16

    lcd.clear()
    assert lcd.lines() == ["", ""]
    assert lcd.writes() == ["in lux: ", "512", "x" * 20]


def test_led_blink_count():
    led = VirtualLed("red")
    for _ in range(3):
        led.on()
        led.off()
    assert led.blink_count == 3
    assert not led.is_on


def test_station_is_reproducible_with_seed():
    a = VirtualStation(SimulationConfig(seed=42))
    b = VirtualStation(SimulationConfig(seed=42))
    assert [a.temperature.value() for _ in range(10)] == [b.temperature.value() for _ in range(10)]

    board = a.board()
    assert board.display is a.lcd
    assert board.leds == [a.red_led, a.green_led, a.blue_led]


def test_simulator_logs_reach_stdout(station_logs, capfd):
    station_logs("simulator")

    station = VirtualStation(SimulationConfig(seed=1))
    station.button.press(2)
    station.lcd.write("Temp 20")

    out, err = capfd.readouterr()
    assert "Virtual station initialized" in out
    assert "Virtual button pressed for 2 read(s)" in out
    assert "LCD: ['Temp 20', '']" in out
    assert "Virtual" not in err
