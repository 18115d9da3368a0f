from typing import Optional, Tuple

from climate_check.models.probe import CheckResult, Reading, format_number
from climate_check.models.range_spec import RangeSpec
from climate_check.models.status import Status


def _violation(value: float, spec: RangeSpec) -> Optional[Tuple[str, float]]:
    """Return (comparison, bound) for the first bound the value violates."""
    if spec.exclusive:
        if value >= spec.min:
            return "above or equal to", spec.min
        if value <= spec.max:
            return "below or equal to", spec.max
    else:
        if value < spec.min:
            return "below", spec.min
        if value > spec.max:
            return "above", spec.max
    return None


def evaluate(
    reading: Reading,
    critical: Optional[RangeSpec] = None,
    warning: Optional[RangeSpec] = None,
) -> CheckResult:
    """
    Compare a reading against the critical and warning ranges.

    The critical range is checked first, so a value violating both ranges is
    reported as CRITICAL.
    """
    perfdata = format_number(reading.value)

    for status, spec in ((Status.CRITICAL, critical), (Status.WARNING, warning)):
        if spec is None:
            continue
        violation = _violation(reading.value, spec)
        if violation is not None:
            comparison, bound = violation
            return CheckResult(
                status=status,
                message=(
                    f"{reading.label} {status.name} - {reading.display} "
                    f"is {comparison} {format_number(bound)} | {perfdata}"
                ),
            )

    return CheckResult(
        status=Status.OK,
        message=f"{reading.label} OK - {reading.display} | {perfdata}",
    )
