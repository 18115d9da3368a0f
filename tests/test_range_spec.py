import pytest

from climate_check.models.range_spec import RangeParseError, RangeSpec, parse_range


def test_parse_inclusive_range():
    assert parse_range("50:90") == RangeSpec(min=50, max=90, exclusive=False)


def test_parse_reversed_range_is_exclusive():
    assert parse_range("90:50") == RangeSpec(min=90, max=50, exclusive=True)


def test_equal_bounds_are_inclusive():
    spec = parse_range("20:20")
    assert spec.exclusive is False


def test_parse_negative_and_decimal_bounds():
    spec = parse_range("-10.5:30")
    assert spec.min == -10.5
    assert spec.max == 30.0
    assert spec.exclusive is False


def test_missing_colon_is_rejected():
    with pytest.raises(RangeParseError, match="missing colon"):
        parse_range("50")


@pytest.mark.parametrize("raw", ["abc:90", "50:", ":90", "50:90:100", "nan:5"])
def test_non_numeric_bounds_are_rejected(raw):
    with pytest.raises(RangeParseError, match="is not a number"):
        parse_range(raw)


def test_range_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse_range("x")
