#!/usr/bin/env python3
"""
Grove Weather Station - Main Entry Point

Usage:
    weather-station                      # Run on a Galileo / Edison board
    weather-station --config my.yaml     # Override wiring or timings
    weather-station --simulate           # Run against virtual devices
    weather-station --dry-run            # Print config and exit

The station will:
1. Check the board is a supported Intel platform
2. Open the Grove sensors, LEDs and LCD
3. Poll the sensors and update the display forever
"""

import argparse
import sys
import time

from . import __version__
from .common.config import StationConfig, load_config_file
from .common.exceptions import ConfigError, HardwareError, UnsupportedPlatformError
from .common.logging_setup import get_service_logger, set_log_level
from .hardware.base import GroveBoard
from .hardware.grove import create_grove_board
from .hardware.platform import check_platform
from .simulator import SimulationConfig, VirtualStation
from .station_loop import StationLoop

logger = get_service_logger("main")


def print_config_summary(config: StationConfig, simulate: bool = False):
    """Print a summary of the configuration."""
    print("\n" + "=" * 60)
    print(f"  {config.name.upper()}")
    print("=" * 60)

    pins = config.pins
    print(f"\n  Wiring:{' (simulated)' if simulate else ''}")
    print(f"    - LEDs: red D{pins.red_led}, green D{pins.green_led}, blue D{pins.blue_led}")
    print(f"    - Button: D{pins.button}")
    print(f"    - Temperature: A{pins.temperature_sensor}")
    print(f"    - Light: A{pins.light_sensor}")
    print(f"    - Gas: A{pins.gas_sensor}")
    print(
        f"    - LCD: i2c-{pins.lcd_i2c_bus} "
        f"(lcd 0x{pins.lcd_address:02X}, rgb 0x{pins.rgb_address:02X})"
    )

    temp_range = config.temperature_range
    print(f"\n  Backlight range: {temp_range.min_c}C - {temp_range.max_c}C")
    print(f"  Air quality tiers: {config.air_quality.as_list()}")

    timing = config.timing
    warmup_s = timing.gas_warmup_iterations * timing.gas_warmup_interval_ms / 1000
    print(f"\n  Timing:")
    print(f"    - Hold: {timing.hold_ms}ms")
    print(f"    - Gas warm-up: {warmup_s:g}s")
    print(f"    - Cycle interval: {timing.cycle_interval_ms}ms")

    print("=" * 60 + "\n")


def _no_wait(_seconds: float) -> None:
    pass


def build_board(config: StationConfig, simulate: bool, seed: int | None = None) -> GroveBoard:
    """
    Create the device bundle.

    Raises:
        UnsupportedPlatformError: Not a Galileo / Edison board
        HardwareError: Vendor bindings missing
    """
    if simulate:
        logger.info("Simulation mode: ON")
        return VirtualStation(SimulationConfig(seed=seed)).board()

    check_platform()
    return create_grove_board(config.pins)


def _cycle_count(value: str) -> int:
    cycles = int(value)
    if cycles < 0:
        raise argparse.ArgumentTypeError(f"must be 0 or more, got {cycles}")
    return cycles


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="weather-station",
        description="Grove Weather Station",
    )
    parser.add_argument(
        "--config", "-c",
        type=str,
        default=None,
        help="Path to YAML configuration file (default: built-in wiring)"
    )
    parser.add_argument(
        "--simulate",
        action="store_true",
        help="Use virtual sensors and LCD instead of the Grove board"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for the simulator"
    )
    parser.add_argument(
        "--fast",
        action="store_true",
        help="Skip all delays (useful with --simulate)"
    )
    parser.add_argument(
        "--cycles",
        type=_cycle_count,
        default=None,
        help="Stop after this many cycles (default: run forever)"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print configuration and exit without touching the board"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose (debug) logging"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    try:
        config = load_config_file(args.config) if args.config else StationConfig()
    except ConfigError as e:
        logger.error(e.message)
        for error in e.errors:
            logger.error(f"Configuration error: {error}")
        return 1

    if args.verbose:
        set_log_level("DEBUG")
    elif args.config:
        set_log_level(config.log_level)

    print_config_summary(config, simulate=args.simulate)

    if args.dry_run:
        print("Dry run mode - exiting without starting the station")
        return 0

    try:
        board = build_board(config, args.simulate, args.seed)
    except UnsupportedPlatformError as e:
        logger.error("Unsupported platform, exiting", extra={"platform": e.platform})
        return 1
    except HardwareError as e:
        logger.error(e.message)
        return 1

    sleep = _no_wait if args.fast else time.sleep
    loop = StationLoop(board, config, sleep=sleep)

    logger.info("Starting station...")
    print("Press Ctrl+C to stop\n")

    try:
        loop.run(max_cycles=args.cycles)
    except KeyboardInterrupt:
        print("\nStopped by user")

    return 0


if __name__ == "__main__":
    sys.exit(main())
