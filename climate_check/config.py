import os
from functools import lru_cache
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from climate_check.models.probe import ProbeDefinition
from climate_check.models.range_spec import RangeSpec

__version__ = "1.1.0"


class Settings(BaseModel):
    """Defaults for the check, overridable through the environment."""

    community: str = Field(
        default="public",
        description="SNMP community string of the appliance",
    )
    timeout_seconds: int = Field(
        default=10,
        ge=1,
        description="SNMP timeout in seconds",
    )
    sensor_unit: int = Field(
        default=1,
        ge=1,
        description="Index of the sensor unit, starting from 1",
    )
    snmpget_binary: str = Field(
        default="snmpget",
        description="Path or name of the net-snmp snmpget command",
    )

    @classmethod
    def from_env(cls) -> "Settings":
        values = {
            "community": os.getenv("WATCHDOG_COMMUNITY"),
            "timeout_seconds": os.getenv("WATCHDOG_TIMEOUT"),
            "sensor_unit": os.getenv("WATCHDOG_UNIT"),
            "snmpget_binary": os.getenv("SNMPGET_BINARY"),
        }
        # unset variables fall back to the field defaults
        return cls(**{key: value for key, value in values.items() if value})


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()


class CheckConfig(BaseModel):
    """Everything a single check run needs, built once from the command line."""

    model_config = ConfigDict(frozen=True)

    host: str = Field(..., min_length=1, description="Hostname or IP of the appliance")
    probe: ProbeDefinition
    community: str = "public"
    critical: Optional[RangeSpec] = None
    warning: Optional[RangeSpec] = None
    timeout_seconds: int = Field(default=10, ge=1)
    sensor_unit: int = Field(default=1, ge=1)
    debug: bool = False
