import pytest

from climate_check.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Each test reads the environment anew instead of a cached Settings."""
    for name in ("WATCHDOG_COMMUNITY", "WATCHDOG_TIMEOUT", "WATCHDOG_UNIT", "SNMPGET_BINARY"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
