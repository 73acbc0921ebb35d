import pytest

from pocketledger.domain.errors import ValidationError
from pocketledger.domain.money import format_amount, parse_amount


def test_parse_amount_accepts_numbers_and_strings():
    assert parse_amount(12) == 12.0
    assert parse_amount(12.5) == 12.5
    assert parse_amount("12.50") == 12.5


def test_parse_amount_accepts_comma_decimal():
    assert parse_amount("12,5") == 12.5


@pytest.mark.parametrize(
    "value",
    [None, True, "", "   ", "abc", -0.01, float("nan"), float("inf"), "NaN", "sNaN", "-Infinity", [1]],
)
def test_parse_amount_rejects(value):
    with pytest.raises(ValidationError):
        parse_amount(value)


def test_format_amount_half_up():
    assert format_amount(2.675) == "2.68"
    assert format_amount(599.5505251527569) == "599.55"
    assert format_amount(0) == "0.00"
    assert format_amount(-400) == "-400.00"
