from typing import Dict, Optional, Tuple

from climate_check.models.probe import ProbeDefinition, TemperatureScale

# WatchDog 15 internal sensor table (IT-WATCHDOGS-MIB-V4), values are sent x10
OID_INTERNAL_TEMP = "1.3.6.1.4.1.17373.4.1.2.1.5."
OID_INTERNAL_HUMIDITY = "1.3.6.1.4.1.17373.4.1.2.1.6."
OID_INTERNAL_DEWPOINT = "1.3.6.1.4.1.17373.4.1.2.1.7."

# Temperature unit configured on the device (scalar, index 0): 0 = C, 1 = F
OID_TEMP_UNITS = "1.3.6.1.4.1.17373.4.1.1.7."
TEMP_UNITS_INDEX = 0
TEMP_UNITS = {0: TemperatureScale.CELSIUS, 1: TemperatureScale.FAHRENHEIT}

# Climate table (IT-WATCHDOGS-MIB-V3), values are sent unscaled
OID_CLIMATE_LIGHT = "1.3.6.1.4.1.17373.3.2.1.8."
OID_CLIMATE_AIRFLOW = "1.3.6.1.4.1.17373.3.2.1.9."
OID_CLIMATE_SOUND = "1.3.6.1.4.1.17373.3.2.1.10."

_C = TemperatureScale.CELSIUS
_F = TemperatureScale.FAHRENHEIT

# (probe code, scale) -> definition. Probes without a scale use None as key.
PROBE_TABLE: Dict[Tuple[str, Optional[TemperatureScale]], ProbeDefinition] = {
    ("T", _C): ProbeDefinition(label="TEMP", oid=OID_INTERNAL_TEMP, unit="°C", scale=_C),
    ("T", _F): ProbeDefinition(label="TEMP", oid=OID_INTERNAL_TEMP, unit="°F", scale=_F),
    ("H", None): ProbeDefinition(label="HUMIDITY", oid=OID_INTERNAL_HUMIDITY, unit="%"),
    ("L", None): ProbeDefinition(label="LIGHT", oid=OID_CLIMATE_LIGHT, divisor=1),
    ("A", None): ProbeDefinition(label="AIRFLOW", oid=OID_CLIMATE_AIRFLOW, divisor=1),
    ("S", None): ProbeDefinition(label="SOUND", oid=OID_CLIMATE_SOUND, divisor=1),
    ("D", _C): ProbeDefinition(label="DEWPOINT", oid=OID_INTERNAL_DEWPOINT, unit="°C", scale=_C),
    ("D", _F): ProbeDefinition(label="DEWPOINT", oid=OID_INTERNAL_DEWPOINT, unit="°F", scale=_F),
}

PROBE_CODES = list(dict.fromkeys(code for code, _ in PROBE_TABLE))


class ProbeSelectionError(ValueError):
    """Raised for an unknown probe code or a temperature probe without scale."""


def select_probe(code: Optional[str], scale: Optional[str] = None) -> ProbeDefinition:
    """
    Look up the probe definition for a probe code and an optional scale.

    Both arguments are case-insensitive. A scale given for a probe that does
    not need one is ignored.
    """
    code = (code or "").strip().upper()
    if code not in PROBE_CODES:
        raise ProbeSelectionError(
            "Invalid value for Probe, either "
            f"{','.join(PROBE_CODES[:-1])} or {PROBE_CODES[-1]} required!"
        )

    if (code, None) in PROBE_TABLE:
        return PROBE_TABLE[(code, None)]

    try:
        temperature_scale = TemperatureScale((scale or "").strip().upper())
    except ValueError as exc:
        raise ProbeSelectionError(
            "Invalid value for Scale, either F or C required!"
        ) from exc

    return PROBE_TABLE[(code, temperature_scale)]
