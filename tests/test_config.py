import pytest
from pydantic import ValidationError

from climate_check.config import CheckConfig, Settings, get_settings
from climate_check.services.probes import select_probe


def test_settings_defaults_without_env():
    settings = Settings.from_env()
    assert settings.community == "public"
    assert settings.timeout_seconds == 10
    assert settings.sensor_unit == 1
    assert settings.snmpget_binary == "snmpget"


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("WATCHDOG_COMMUNITY", "secret")
    monkeypatch.setenv("WATCHDOG_TIMEOUT", "5")
    monkeypatch.setenv("WATCHDOG_UNIT", "2")
    monkeypatch.setenv("SNMPGET_BINARY", "/usr/local/bin/snmpget")

    settings = Settings.from_env()
    assert settings.community == "secret"
    assert settings.timeout_seconds == 5
    assert settings.sensor_unit == 2
    assert settings.snmpget_binary == "/usr/local/bin/snmpget"


def test_settings_rejects_invalid_timeout(monkeypatch):
    monkeypatch.setenv("WATCHDOG_TIMEOUT", "0")
    with pytest.raises(ValidationError):
        Settings.from_env()


def test_get_settings_is_cached(monkeypatch):
    monkeypatch.setenv("WATCHDOG_COMMUNITY", "cached")
    s1 = get_settings()
    s2 = get_settings()
    assert s1 is s2
    assert s1.community == "cached"


def test_check_config_is_immutable():
    config = CheckConfig(host="wd15.local", probe=select_probe("h"))
    assert config.community == "public"
    assert config.critical is None

    with pytest.raises(ValidationError):
        config.host = "other.local"
