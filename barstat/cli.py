"""Command-line entry point.

One invocation reads one metric and prints it in the format of the
running bar, or flips that metric's display mode when the bar module is
clicked.
"""

import argparse
import logging
import sys
from typing import Dict, List, Optional

from barstat.core.config import (
    SystemConfig,
    config_summary,
    load_config,
    validate_config,
)
from barstat.core.exceptions import BarstatError
from barstat.core.interfaces import MetricKind
from barstat.display.classifier import classify
from barstat.display.presenter import Presenter
from barstat.sensors import create_default_sensors
from barstat.state.mode_store import ModeStore
from barstat.utils.logging_config import setup_logging

logger = logging.getLogger(__name__)

USAGE_HINT = (
    "Enter one of the arguments:\n"
    "--cpu to get information about the processor\n"
    "--ram to get information about RAM\n"
    "--gpu to get information about the graphics card"
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="barstat",
        description="CPU, RAM and GPU status for polybar and waybar"
    )

    metric = parser.add_mutually_exclusive_group()
    metric.add_argument("--cpu", action="store_true", help="show processor load or temperature")
    metric.add_argument("--ram", "--memory", dest="ram", action="store_true", help="show memory usage")
    metric.add_argument("--gpu", action="store_true", help="show graphics card load or temperature")

    parser.add_argument(
        "--click", "--toggle", dest="click", action="store_true",
        help="switch between utilization and temperature instead of printing"
    )
    parser.add_argument("--normal-color", help="text color below critical level")
    parser.add_argument("--critical-color", help="text color at critical level")
    parser.add_argument("--config", help="path to a YAML config file")
    parser.add_argument("--debug", action="store_true", help="verbose logging")

    return parser


def execute(
    args: argparse.Namespace,
    config: SystemConfig,
    sensors: Dict,
    store: ModeStore
) -> Optional[str]:
    """Run one read or toggle and return the text to print, if any."""
    modes = store.load()
    presenter = Presenter(config.session_type, config.colors)

    if args.cpu:
        if args.click:
            new_mode = store.toggle(MetricKind.CPU)
            logger.info(f"CPU display mode switched to {new_mode.value}")
            return None

        sample = sensors["cpu"].read()
        classification = classify(sample.utilization_percent, sample.temperature_celsius)
        return presenter.render_cpu(sample, modes[MetricKind.CPU], classification)

    if args.ram:
        sample = sensors["ram"].read()
        return presenter.render_memory(sample)

    if args.gpu:
        if args.click:
            new_mode = store.toggle(MetricKind.GPU)
            logger.info(f"GPU display mode switched to {new_mode.value}")
            return None

        sample = sensors["gpu"].read()
        classification = classify(sample.utilization_percent, sample.temperature_celsius)
        return presenter.render_gpu(sample, modes[MetricKind.GPU], classification)

    return None


def main(argv: Optional[List[str]] = None) -> int:
    """Main application entry point."""
    args = build_parser().parse_args(argv)

    if not (args.cpu or args.ram or args.gpu):
        print(USAGE_HINT)
        return 0

    try:
        config = load_config(args.config)
    except BarstatError as e:
        setup_logging()
        logger.error(f"Configuration error: {e}")
        return 1

    if args.debug:
        config.debug_mode = True
    if args.normal_color:
        config.colors.normal = args.normal_color
    if args.critical_color:
        config.colors.critical = args.critical_color

    # Setup logging
    setup_logging(config.debug_mode, config.log_level, config.log_file)

    # Validate configuration
    errors = validate_config(config)
    if errors:
        logger.error("Configuration errors:")
        for error in errors:
            logger.error(f"  - {error}")
        return 1

    logger.debug(f"Effective configuration: {config_summary(config)}")

    try:
        sensors = create_default_sensors(config)
        store = ModeStore(config.state.mode_file)
        output = execute(args, config, sensors, store)
    except BarstatError as e:
        logger.error(f"Fatal error: {e}", exc_info=config.debug_mode)
        return 1

    if output is not None:
        sys.stdout.write(output)
        sys.stdout.flush()

    return 0


def run():
    """Console script entry point."""
    sys.exit(main())


__all__ = ["main", "run", "execute", "build_parser", "USAGE_HINT"]
