from typing import Optional

from fastapi import APIRouter, HTTPException, Query
from pydantic import ValidationError

from climate_check.config import CheckConfig, get_settings
from climate_check.models.probe import CheckResult
from climate_check.models.range_spec import RangeParseError, parse_range
from climate_check.services import check_runner
from climate_check.services.probes import ProbeSelectionError, select_probe

router = APIRouter()


@router.get(
    "/status",
    response_model=CheckResult,
    summary="Climate probe status",
)
def probe_status(
    host: str = Query(..., min_length=1, description="Hostname or IP of the appliance"),
    probe: str = Query(..., description="Probe code T,H,L,A,S or D"),
    scale: Optional[str] = Query(None, description="C or F for temperature and dewpoint"),
    critical: Optional[str] = Query(None, description="Critical range 'min:max'"),
    warning: Optional[str] = Query(None, description="Warning range 'min:max'"),
    community: Optional[str] = Query(None, description="SNMP community string"),
    unit: Optional[int] = Query(None, ge=1, description="Sensor unit number"),
    timeout: Optional[int] = Query(None, ge=1, description="SNMP timeout in seconds"),
) -> CheckResult:
    """
    Run the check once and return its status line and exit code.

    Invalid probe or range parameters are answered with HTTP 422. An
    unreachable appliance is not an HTTP error: the result is UNKNOWN. A
    broken environment configuration is answered with HTTP 503.
    """
    try:
        settings = get_settings()
    except ValidationError as exc:
        raise HTTPException(
            status_code=503,
            detail=f"Invalid environment configuration: {exc.errors()[0]['msg']}",
        ) from exc

    try:
        config = CheckConfig(
            host=host,
            probe=select_probe(probe, scale),
            community=community or settings.community,
            critical=parse_range(critical) if critical is not None else None,
            warning=parse_range(warning) if warning is not None else None,
            timeout_seconds=timeout or settings.timeout_seconds,
            sensor_unit=unit or settings.sensor_unit,
        )
    except (ProbeSelectionError, RangeParseError) as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=exc.errors()[0]["msg"]) from exc

    return check_runner.run_check(config)
