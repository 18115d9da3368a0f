import logging
import subprocess
from typing import Optional, Protocol

from climate_check.config import CheckConfig, get_settings
from climate_check.models.probe import Reading, TemperatureScale
from climate_check.services.probes import OID_TEMP_UNITS, TEMP_UNITS, TEMP_UNITS_INDEX

logger = logging.getLogger(__name__)

# Extra seconds granted to the snmpget process on top of the SNMP timeout
_PROCESS_GRACE_SECONDS = 2


class QueryError(RuntimeError):
    """Raised when the appliance could not be queried."""

    def __init__(self, host: str, reason: str) -> None:
        super().__init__(f"Error connecting to probe {host}: {reason}")
        self.host = host
        self.reason = reason


class SensorQuery(Protocol):
    def query(
        self, host: str, community: str, oid: str, unit: int, timeout: int
    ) -> float:
        """Return the raw sensor value or raise QueryError."""
        ...


class SnmpGetQuery:
    """
    Query a single OID with the net-snmp snmpget command.

    snmpget is called with -Oqv so that only the value is printed, and with
    -r 0 so that a dead host fails after one timeout instead of retrying.
    """

    def __init__(self, binary: Optional[str] = None) -> None:
        self.binary = binary or get_settings().snmpget_binary

    def build_command(
        self, host: str, community: str, oid: str, unit: int, timeout: int
    ) -> list:
        return [
            self.binary,
            "-Oqv",
            "-v2c",
            "-c",
            community,
            "-t",
            str(timeout),
            "-r",
            "0",
            host,
            f"{oid}{unit}",
        ]

    def query(
        self, host: str, community: str, oid: str, unit: int, timeout: int
    ) -> float:
        cmd = self.build_command(host, community, oid, unit, timeout)
        logger.debug("Running '%s'", subprocess.list2cmdline(cmd))

        try:
            result = subprocess.run(
                cmd,
                check=True,
                capture_output=True,
                text=True,
                timeout=timeout + _PROCESS_GRACE_SECONDS,
            )
        except FileNotFoundError as exc:
            raise QueryError(
                host, f"{self.binary} binary not found; install net-snmp"
            ) from exc
        except subprocess.TimeoutExpired as exc:
            raise QueryError(host, f"timeout after {timeout} seconds") from exc
        except subprocess.CalledProcessError as exc:
            raise QueryError(
                host,
                f"snmpget failed with return code {exc.returncode}: "
                f"{(exc.stderr or '').strip()}",
            ) from exc

        answer = result.stdout.strip()
        logger.debug("SNMP answer: ==> [%s]", answer)

        # MIB display hints may append a unit text, e.g. "310 Degrees Celsius"
        token = answer.split(" ", 1)[0].strip('"')
        try:
            return float(int(token))
        except ValueError as exc:
            raise QueryError(host, f"unexpected answer {answer!r}") from exc


def _to_scale(value: float, source: TemperatureScale, target: TemperatureScale) -> float:
    if source is target:
        return value
    if target is TemperatureScale.FAHRENHEIT:
        return round(value * 9 / 5 + 32, 1)
    return round((value - 32) * 5 / 9, 1)


def read_device_scale(query: SensorQuery, config: CheckConfig) -> TemperatureScale:
    """Ask the appliance which temperature unit its sensors report in."""
    raw = query.query(
        config.host,
        config.community,
        OID_TEMP_UNITS,
        TEMP_UNITS_INDEX,
        config.timeout_seconds,
    )
    try:
        return TEMP_UNITS[int(raw)]
    except KeyError as exc:
        raise QueryError(config.host, f"unknown temperature unit {raw:g}") from exc


def read_probe(query: SensorQuery, config: CheckConfig) -> Reading:
    """
    Fetch the configured probe and turn the raw value into a Reading.

    Temperatures come in the unit configured on the appliance and are
    converted when the probe asks for the other scale.
    """
    probe = config.probe
    raw = query.query(
        config.host,
        config.community,
        probe.oid,
        config.sensor_unit,
        config.timeout_seconds,
    )
    value = raw / probe.divisor

    if probe.scale is not None:
        device_scale = read_device_scale(query, config)
        logger.debug("Device reports temperatures in %s", device_scale.value)
        value = _to_scale(value, device_scale, probe.scale)

    return Reading(label=probe.label, value=value, unit=probe.unit)
