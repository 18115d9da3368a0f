from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field

from climate_check.models.status import Status


class TemperatureScale(str, Enum):
    CELSIUS = "C"
    FAHRENHEIT = "F"


def format_number(value: float) -> str:
    """Render 85.0 as '85' and 8.5 as '8.5' without exponent notation."""
    if value.is_integer():
        return str(int(value))
    return format(value, ".10g")


class ProbeDefinition(BaseModel):
    """One sensor of the appliance: what to call it, where to read it, its unit."""

    model_config = ConfigDict(frozen=True)

    label: str = Field(..., description="Label used in the status line, e.g. TEMP")
    oid: str = Field(
        ...,
        description="OID prefix of the sensor value; the unit index is appended",
    )
    unit: str = Field(default="", description="Unit suffix for display, e.g. °C")
    scale: Optional[TemperatureScale] = Field(
        default=None,
        description="Requested temperature scale; converted if the device uses the other one",
    )
    divisor: int = Field(
        default=10,
        ge=1,
        description="The raw SNMP integer is divided by this to get the value",
    )


class Reading(BaseModel):
    """A single scaled sensor value."""

    model_config = ConfigDict(frozen=True)

    label: str
    value: float
    unit: str = ""

    @property
    def display(self) -> str:
        return f"{format_number(self.value)}{self.unit}"


class CheckResult(BaseModel):
    """Outcome of one check run: the status and the line printed for it."""

    model_config = ConfigDict(frozen=True)

    status: Status
    message: str

    @computed_field
    @property
    def exit_code(self) -> int:
        return int(self.status)
