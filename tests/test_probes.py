import pytest

from climate_check.models.probe import TemperatureScale
from climate_check.services.probes import (
    OID_INTERNAL_HUMIDITY,
    OID_INTERNAL_TEMP,
    PROBE_CODES,
    PROBE_TABLE,
    ProbeSelectionError,
    select_probe,
)


def test_probe_codes_in_table_order():
    assert PROBE_CODES == ["T", "H", "L", "A", "S", "D"]


@pytest.mark.parametrize("code", ["t", "T"])
def test_temperature_celsius(code):
    probe = select_probe(code, "c")
    assert probe.label == "TEMP"
    assert probe.oid == OID_INTERNAL_TEMP
    assert probe.unit == "°C"
    assert probe.scale is TemperatureScale.CELSIUS


def test_temperature_fahrenheit_uses_celsius_source():
    probe = select_probe("T", "F")
    assert probe.oid == OID_INTERNAL_TEMP
    assert probe.unit == "°F"
    assert probe.scale is TemperatureScale.FAHRENHEIT


def test_dewpoint_fahrenheit():
    probe = select_probe("d", "f")
    assert probe.label == "DEWPOINT"
    assert probe.unit == "°F"


def test_humidity_ignores_scale():
    probe = select_probe("h", "F")
    assert probe.label == "HUMIDITY"
    assert probe.oid == OID_INTERNAL_HUMIDITY
    assert probe.unit == "%"
    assert probe.scale is None
    assert probe.divisor == 10


@pytest.mark.parametrize("code, label", [("L", "LIGHT"), ("A", "AIRFLOW"), ("S", "SOUND")])
def test_unitless_probes(code, label):
    probe = select_probe(code)
    assert probe.label == label
    assert probe.unit == ""
    assert probe.divisor == 1


@pytest.mark.parametrize("code", ["T", "D"])
@pytest.mark.parametrize("scale", [None, "", "K"])
def test_temperature_probes_require_scale(code, scale):
    with pytest.raises(ProbeSelectionError, match="either F or C required"):
        select_probe(code, scale)


@pytest.mark.parametrize("code", ["X", "", None, "TH"])
def test_unknown_probe_is_rejected(code):
    with pytest.raises(ProbeSelectionError, match="either T,H,L,A,S or D required"):
        select_probe(code, "C")


def test_every_table_entry_has_an_oid_prefix():
    for definition in PROBE_TABLE.values():
        assert definition.oid.endswith(".")
