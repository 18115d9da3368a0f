#!/usr/bin/env python3
"""
check_watchdog15

Nagios/Icinga plugin reporting one climate sensor of an IT-Watchdogs
WatchDog 15/15P appliance (temperature, humidity, light, airflow, sound or
dewpoint) read over SNMP.

The status line is written to stdout, debug output (-d) goes to stderr.
Exit codes: 0 OK, 1 WARNING, 2 CRITICAL, 3 UNKNOWN.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from climate_check.config import CheckConfig, Settings, __version__, get_settings
from climate_check.models.range_spec import RangeParseError, parse_range
from climate_check.models.status import Status
from climate_check.services.check_runner import run_check
from climate_check.services.probes import ProbeSelectionError, select_probe

logger = logging.getLogger(__name__)

_EPILOG = """\
Ranges:
  'min:max'  a non-OK state is returned if the value is below min or
             above max; the bounds themselves are OK.
  'max:min'  a non-OK state is returned if the value reaches either bound.

Examples:
  Temperature in degrees Fahrenheit, CRITICAL below 50 or above 90,
  WARNING below 60 or above 80:
      %(prog)s -H 192.168.1.2 -C public -s f -p t -c 50:90 -w 60:80
      TEMP WARNING - 85°F is above 80 | 85

  Humidity:
      %(prog)s -H 192.168.1.2 -C public -p h
      HUMIDITY OK - 17%% | 17

Return status:
  exit code 0: OK
  exit code 1: WARNING
  exit code 2: CRITICAL
  exit code 3: UNKNOWN, OTHER
"""


class ArgumentError(Exception):
    """Raised for any problem with the command line."""


class _PluginArgumentParser(argparse.ArgumentParser):
    # argparse exits with 2 on errors, which Nagios reads as CRITICAL
    def error(self, message: str):
        raise ArgumentError(message)


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = _PluginArgumentParser(
        prog="check_watchdog15",
        description="Check a climate sensor of a WatchDog 15/15P over SNMP.",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )

    required = parser.add_argument_group("Required")
    required.add_argument(
        "-H",
        dest="host",
        metavar="HOST",
        help="Hostname or IP address",
    )
    required.add_argument(
        "-p",
        dest="probe",
        metavar="PROBE",
        help=(
            "Which probe to check, upper or lower case T,H,L,A,S or D: "
            "Temperature, Humidity, Light level, Airflow, Sound level or Dewpoint"
        ),
    )

    actions = parser.add_argument_group("Actions")
    actions.add_argument("-h", dest="help", action="store_true", help="show this help")
    actions.add_argument("-v", dest="version", action="store_true", help="show version")

    options = parser.add_argument_group("Options")
    options.add_argument(
        "-C",
        dest="community",
        default=settings.community,
        help=f"SNMP community string (default: {settings.community})",
    )
    options.add_argument(
        "-s",
        dest="scale",
        metavar="SCALE",
        help="Temperature scale C or F, required for temperature and dewpoint",
    )
    options.add_argument(
        "-c",
        dest="critical",
        metavar="CRIT_RANGE",
        help="Range which will not result in a CRITICAL status",
    )
    options.add_argument(
        "-w",
        dest="warning",
        metavar="WARN_RANGE",
        help="Range which will not result in a WARNING status",
    )
    options.add_argument(
        "-t",
        dest="timeout",
        type=int,
        default=settings.timeout_seconds,
        help=f"Timeout in seconds (default: {settings.timeout_seconds})",
    )
    options.add_argument(
        "-u",
        dest="unit",
        type=int,
        default=settings.sensor_unit,
        help=f"Sensor unit number, starting from 1 (default: {settings.sensor_unit})",
    )
    options.add_argument(
        "-d",
        dest="debug",
        action="store_true",
        help="Log debug output to stderr",
    )
    return parser


def configure_logging(debug: bool) -> None:
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("climate_check").setLevel(level)


def _parse_threshold(name: str, raw: Optional[str]):
    if raw is None:
        return None
    try:
        return parse_range(raw)
    except RangeParseError as exc:
        raise ArgumentError(f"Invalid value for {name}; {exc}") from exc


def config_from_args(args: argparse.Namespace) -> CheckConfig:
    """Validate the parsed arguments and freeze them into a CheckConfig."""
    if not args.host:
        raise ArgumentError("Hostname must be specified")
    if not args.probe:
        raise ArgumentError("Probe must be specified")

    try:
        probe = select_probe(args.probe, args.scale)
    except ProbeSelectionError as exc:
        raise ArgumentError(str(exc)) from exc

    critical = _parse_threshold("critical", args.critical)
    warning = _parse_threshold("warning", args.warning)

    try:
        return CheckConfig(
            host=args.host,
            probe=probe,
            community=args.community,
            critical=critical,
            warning=warning,
            timeout_seconds=args.timeout,
            sensor_unit=args.unit,
            debug=args.debug,
        )
    except ValidationError as exc:
        error = exc.errors()[0]
        field = ".".join(str(part) for part in error["loc"])
        raise ArgumentError(f"Invalid value for {field}: {error['msg']}") from exc


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    # -d has to work for exits that happen before the arguments are validated
    configure_logging("-d" in argv)

    try:
        settings = get_settings()
    except ValidationError as exc:
        message = f"UNKNOWN - Invalid environment configuration: {exc.errors()[0]['msg']}"
        print(message)
        logger.debug("%s - exit with status code %d", message, Status.UNKNOWN)
        return int(Status.UNKNOWN)

    parser = build_parser(settings)

    if "-h" in argv:
        parser.print_help()
        return int(Status.OK)

    try:
        args = parser.parse_args(argv)
        if args.help:
            parser.print_help()
            return int(Status.OK)
        if args.version:
            print(f"Version: {__version__}")
            return int(Status.OK)
        config = config_from_args(args)
    except ArgumentError as exc:
        parser.print_help()
        print(exc)
        logger.debug("%s - exit with status code %d", exc, Status.UNKNOWN)
        return int(Status.UNKNOWN)

    configure_logging(config.debug)
    logger.debug("Checking %s on %s", config.probe.label, config.host)

    result = run_check(config)
    print(result.message)
    return result.exit_code


def run() -> None:
    raise SystemExit(main())


if __name__ == "__main__":
    run()
