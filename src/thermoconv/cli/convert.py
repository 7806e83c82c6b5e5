"""Command-line front end for the conversion engine."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Sequence

from thermoconv.catalog import describe
from thermoconv.conversion import ConversionFacade, linspace_temperatures, sample_curve
from thermoconv.domain import ConversionError, RangeLimits, SensorFamily, SensorType
from thermoconv.logging_config import configure_logging

logger = logging.getLogger(__name__)

EXIT_CONVERSION_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    """Create parser for the `thermoconv` command."""
    parser = argparse.ArgumentParser(
        prog="thermoconv",
        description="Convert between temperature and RTD resistance or thermocouple EMF.",
    )
    parser.add_argument(
        "--log-level",
        choices=("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"),
        default=None,
        help="Override THERMOCONV_LOG_LEVEL for this invocation.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    range_parser = subparsers.add_parser("range", help="Show temperature and signal limits.")
    range_parser.add_argument("sensor_type", help="Sensor name, e.g. PT100 or K.")

    forward_parser = subparsers.add_parser("forward", help="Temperature (°C) to signal.")
    forward_parser.add_argument("sensor_type")
    forward_parser.add_argument("temperature_c", type=float)

    inverse_parser = subparsers.add_parser("inverse", help="Signal (ohm or mV) to temperature.")
    inverse_parser.add_argument("sensor_type")
    inverse_parser.add_argument("signal", type=float)

    curve_parser = subparsers.add_parser("curve", help="Sample the forward curve.")
    curve_parser.add_argument("sensor_type")
    curve_parser.add_argument(
        "--points",
        type=int,
        default=None,
        help="Evenly spaced points across the domain; defaults to the chart grid.",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entrypoint; returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command == "curve" and args.points is not None and args.points < 2:
        parser.error("--points must be >= 2")
    configure_logging(args.log_level)

    facade = ConversionFacade()
    try:
        payload = run_command(args, facade)
    except ConversionError as exc:
        logger.info("conversion rejected", extra={"kind": exc.kind})
        _write_json(sys.stderr, {"error": exc.kind, "message": str(exc)})
        return EXIT_CONVERSION_ERROR

    _write_json(sys.stdout, payload)
    return 0


def run_command(args: argparse.Namespace, facade: ConversionFacade) -> dict[str, Any]:
    """Execute one parsed subcommand and return its JSON payload."""
    sensor = SensorType.parse(args.sensor_type)

    if args.command == "range":
        descriptor = describe(sensor)
        payload: dict[str, Any] = {
            "sensor_type": sensor.value,
            "family": descriptor.family.value,
            "unit": descriptor.unit.value,
            "standard": descriptor.standard,
            "temperature_c": _limits(descriptor.limits),
            "signal": _limits(facade.signal_range(sensor)),
            "nominal_alpha": descriptor.nominal_alpha,
            "tolerance": descriptor.tolerance,
        }
        if sensor.family is SensorFamily.THERMOCOUPLE:
            payload["calibrated_signal"] = _limits(facade.calibrated_signal_range(sensor))
        return payload

    if args.command == "forward":
        return {
            "sensor_type": sensor.value,
            "temperature_c": args.temperature_c,
            "signal": facade.to_signal(args.temperature_c, sensor),
            "unit": sensor.unit.value,
        }

    if args.command == "inverse":
        return {
            "sensor_type": sensor.value,
            "signal": args.signal,
            "unit": sensor.unit.value,
            "temperature_c": facade.to_temperature(args.signal, sensor),
        }

    if args.command == "curve":
        grid = None if args.points is None else linspace_temperatures(sensor, args.points)
        sample = sample_curve(sensor, grid, facade=facade)
        return {
            "sensor_type": sensor.value,
            "unit": sample.unit.value,
            "points": [
                {"temperature_c": t, "signal": s} for t, s in sample.pairs()
            ],
        }

    raise ValueError(f"unknown command: {args.command}")


def _limits(limits: RangeLimits) -> dict[str, float]:
    return {"min": limits.min, "max": limits.max}


def _write_json(stream: Any, payload: dict[str, Any]) -> None:
    stream.write(json.dumps(payload, indent=2, sort_keys=True, ensure_ascii=False))
    stream.write("\n")


if __name__ == "__main__":
    raise SystemExit(main())
