"""
Unit conversion tests.

Tests:
1-3.  to_millimeters (inch, mm, NaN pass-through)
4-5.  length_factor_mm (foot, meter)
6-7.  Unknown unit tags
8-12. parse_number (valid text, junk, blanks, negatives, non-finite)
"""

import math

import pytest

from tubeweight.calculators.units import (
    LinearUnit, RunUnit, length_factor_mm, parse_number, to_millimeters,
)


# ============================================================
# Linear conversion
# ============================================================

def test_inches_to_mm():
    assert to_millimeters(2, "in") == pytest.approx(50.8)
    assert to_millimeters(1, LinearUnit.INCH) == 25.4


def test_mm_unchanged():
    assert to_millimeters(42.5, "mm") == 42.5
    assert to_millimeters(0.0, LinearUnit.MILLIMETER) == 0.0


def test_nan_passes_through_conversion():
    """Converting NaN gives NaN: never raises, never zero."""
    assert math.isnan(to_millimeters(math.nan, "in"))
    assert math.isnan(to_millimeters(math.nan, "mm"))


# ============================================================
# Run-length factors
# ============================================================

def test_foot_factor():
    assert length_factor_mm("ft") == 304.8
    assert length_factor_mm(RunUnit.FOOT) == 304.8


def test_meter_factor():
    assert length_factor_mm("m") == 1000.0


def test_unknown_linear_unit_raises():
    with pytest.raises(ValueError, match="Unknown linear unit"):
        to_millimeters(1, "cm")


def test_unknown_run_unit_raises():
    """No fuzzy matching: 'meter' is not 'm'."""
    with pytest.raises(ValueError, match="Unknown run-length unit"):
        length_factor_mm("meter")


# ============================================================
# Raw text parsing
# ============================================================

def test_parse_number_valid_text():
    assert parse_number("2") == 2.0
    assert parse_number(" 50.8 ") == 50.8
    assert parse_number("1e1") == 10.0
    assert parse_number(3) == 3.0
    assert parse_number("0") == 0.0


def test_parse_number_junk_is_nan():
    assert math.isnan(parse_number("abc"))
    assert math.isnan(parse_number("2in"))
    assert math.isnan(parse_number("1,5"))


def test_parse_number_blank_is_nan_not_zero():
    assert math.isnan(parse_number(""))
    assert math.isnan(parse_number("   "))
    assert math.isnan(parse_number(None))


def test_parse_number_negative_is_nan():
    assert math.isnan(parse_number("-1"))
    assert math.isnan(parse_number(-0.5))


def test_parse_number_non_finite_is_nan():
    assert math.isnan(parse_number("inf"))
    assert math.isnan(parse_number("nan"))
    assert math.isnan(parse_number(float("inf")))
