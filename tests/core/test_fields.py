from __future__ import annotations

import math

import pytest
from hypothesis import given, strategies as st

from tle_parser import TLEError, parse_eccentricity, parse_ugly_float
from tle_parser.core.fields import parse_decimal, parse_digit, parse_uint

digits = st.text(alphabet="0123456789", min_size=1, max_size=8)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("36258-4", 0.36258e-4),
        ("00000-0", 0.0),
        ("-36258-4", -0.36258e-4),
        (" 11606-4", 0.11606e-4),
        ("12345-10", 0.12345e-10),
    ],
)
def test_ugly_float_examples(raw: str, expected: float) -> None:
    assert parse_ugly_float(raw) == expected


@given(st.sampled_from(["", "-"]), digits, st.integers(min_value=0, max_value=9))
def test_ugly_float_law(sign: str, mantissa: str, exponent: int) -> None:
    value = parse_ugly_float(f"{sign}{mantissa}-{exponent}")
    magnitude = int(mantissa) * 10.0 ** -(len(mantissa) + exponent)
    assert abs(value) == pytest.approx(magnitude, rel=1e-12, abs=0.0)
    assert math.copysign(1.0, value) == (-1.0 if sign else 1.0)


@pytest.mark.parametrize(
    "raw",
    ["36258", "36258+4", "+36258-4", "3625a-4", "36258-", "-36258", "--1-1", "-", "", "1-2-3"],
)
def test_ugly_float_rejects_malformed(raw: str) -> None:
    with pytest.raises(TLEError):
        parse_ugly_float(raw)


def test_eccentricity_has_implied_leading_zero() -> None:
    assert parse_eccentricity("0003899") == 0.0003899
    assert parse_eccentricity("9999999") == 0.9999999


@pytest.mark.parametrize("raw", [" 003899", "000389", "-003899", "00038.9", "00038990"])
def test_eccentricity_requires_seven_digits(raw: str) -> None:
    with pytest.raises(TLEError):
        parse_eccentricity(raw)


def test_plain_numeric_parsers() -> None:
    assert parse_uint(" 999") == 999
    assert parse_uint("00005") == 5
    assert parse_digit("0") == 0
    assert parse_decimal(" .00000320") == 0.00000320
    assert parse_decimal("-.00002182") == -0.00002182
    assert parse_decimal(" 97.7009") == 97.7009


@pytest.mark.parametrize("raw", ["", "    ", "+5", "1_0", "12a", "٣"])
def test_uint_rejects_non_digits(raw: str) -> None:
    with pytest.raises(TLEError):
        parse_uint(raw)


@pytest.mark.parametrize("raw", ["", "inf", "nan", "1_0.5", "1e5", "."])
def test_decimal_rejects_non_decimals(raw: str) -> None:
    with pytest.raises(TLEError):
        parse_decimal(raw)
