"""
Unit normalization for tube dimensions.

Every linear dimension (outer size, wall thickness) is normalized to millimeters
before validation or geometry. Run length stays in its own unit (foot or meter);
length_factor_mm() gives the millimeters in one unit of run so weights can be
reported per foot or per meter.

All functions are pure. NaN goes in, NaN comes out. Nothing here raises for a
numeric value. Unknown unit tags raise ValueError.
"""

import enum
import math

MM_PER_INCH = 25.4
MM_PER_FOOT = 304.8
MM_PER_METER = 1000.0


class LinearUnit(str, enum.Enum):
    INCH = "in"
    MILLIMETER = "mm"


class RunUnit(str, enum.Enum):
    FOOT = "ft"
    METER = "m"


_MM_PER_LINEAR_UNIT = {
    LinearUnit.INCH: MM_PER_INCH,
    LinearUnit.MILLIMETER: 1.0,
}

_MM_PER_RUN_UNIT = {
    RunUnit.FOOT: MM_PER_FOOT,
    RunUnit.METER: MM_PER_METER,
}


def linear_unit(unit) -> LinearUnit:
    """Coerce 'in' / 'mm' (or a LinearUnit) to LinearUnit. Raises ValueError otherwise."""
    if isinstance(unit, LinearUnit):
        return unit
    try:
        return LinearUnit(unit)
    except ValueError:
        raise ValueError(
            f"Unknown linear unit: {unit!r}. "
            f"Available: {[u.value for u in LinearUnit]}"
        ) from None


def run_unit(unit) -> RunUnit:
    """Coerce 'ft' / 'm' (or a RunUnit) to RunUnit. Raises ValueError otherwise."""
    if isinstance(unit, RunUnit):
        return unit
    try:
        return RunUnit(unit)
    except ValueError:
        raise ValueError(
            f"Unknown run-length unit: {unit!r}. "
            f"Available: {[u.value for u in RunUnit]}"
        ) from None


def to_millimeters(value: float, unit) -> float:
    """Convert an inch or millimeter value to millimeters. NaN passes through."""
    return value * _MM_PER_LINEAR_UNIT[linear_unit(unit)]


def length_factor_mm(unit) -> float:
    """Millimeters in one foot (304.8) or one meter (1000) of run."""
    return _MM_PER_RUN_UNIT[run_unit(unit)]


def parse_number(raw) -> float:
    """
    Read a numeric value from raw user input.

    Returns the float if the input represents a finite, nonnegative number,
    otherwise NaN. None and blank strings are NaN, never zero.
    """
    if raw is None or isinstance(raw, bool):
        return math.nan
    if isinstance(raw, str):
        raw = raw.strip()
        if not raw:
            return math.nan
    try:
        value = float(raw)
    except (ValueError, TypeError):
        return math.nan
    if not math.isfinite(value) or value < 0:
        return math.nan
    return value
