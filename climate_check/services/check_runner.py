import logging
from typing import Optional

from climate_check.config import CheckConfig
from climate_check.models.probe import CheckResult
from climate_check.models.status import Status
from climate_check.services.evaluator import evaluate
from climate_check.services.snmp_query import QueryError, SensorQuery, SnmpGetQuery, read_probe

logger = logging.getLogger(__name__)


def run_check(config: CheckConfig, query: Optional[SensorQuery] = None) -> CheckResult:
    """
    Read the configured probe once and evaluate it against the thresholds.

    Query failures are not retried and end up as UNKNOWN.
    """
    query = query or SnmpGetQuery()

    try:
        reading = read_probe(query, config)
    except QueryError as exc:
        logger.debug("Query failed: %s", exc)
        return CheckResult(
            status=Status.UNKNOWN,
            message=f"{config.probe.label} UNKNOWN - Error connecting to probe {config.host}",
        )

    result = evaluate(reading, critical=config.critical, warning=config.warning)
    logger.debug("%s - exit with status code %d", result.message, result.exit_code)
    return result
