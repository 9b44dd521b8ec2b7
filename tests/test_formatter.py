"""Tests del formateo de resultados."""

import math

import pytest

from core.formatter import format_result


# --- Formato normal ---

@pytest.mark.parametrize("value, expected", [
    (14.0, "14"),
    (3.75, "3.75"),
    (-2.5, "-2.5"),
    (0.0, "0"),
    (-0.0, "0"),
    (10000000.0, "10000000"),
    (1234567.891, "1234567.891"),
    (-1234567.891, "-1234567.891"),
])
def test_plain_results(value, expected):
    assert format_result(value) == expected


@pytest.mark.parametrize("value", [0.5, 3.75, 42.0, -17.25, 1234.5678, 0.001])
def test_plain_text_parses_back(value):
    text = format_result(value)
    assert "e" not in text
    assert float(text) == pytest.approx(value)


# --- Notación científica ---

def test_many_digits_use_scientific():
    assert format_result(123456789012.0) == "1.2346e+11"


def test_eleven_digits_with_decimals_use_scientific():
    assert format_result(1234567.8912) == "1.2346e+06"


def test_float_noise_uses_scientific():
    assert format_result(0.1 + 0.2) == "3.0000e-01"


def test_large_magnitude_uses_scientific():
    text = format_result(12345678.0)
    assert text.startswith("1.2346e+")
    assert float(text) == pytest.approx(12346000.0)


def test_tiny_magnitude_uses_scientific():
    assert format_result(1e-8) == "1.0000e-08"
    assert format_result(-3e-9) == "-3.0000e-09"


def test_scientific_mantissa_has_four_decimals():
    mantissa = format_result(98765432101.0).split("e")[0]
    assert len(mantissa.split(".")[1]) == 4


def test_custom_thresholds():
    assert format_result(1234.0, upper=1000) == "1.2340e+03"
    assert format_result(1234.0, upper=1000, precision=2) == "1.23e+03"


def test_non_finite_values():
    assert format_result(math.inf) == "inf"
    assert format_result(math.nan) == "nan"
