"""
Display formatting for calculation results.

Sits outside the engine: it only reads the CalculationResult contract
(valid, weight_per_unit, unit_label, total_weight) and turns it into text
a form can show. NaN is shown as an em dash, never as 0.
"""

import math
from typing import Optional

from .calculators.tube_weight import CalculationResult
from .config import settings

PLACEHOLDER = "—"
INVALID_NOTE = "Enter valid dimensions (outer size must be > 2 × thickness)"
FOOTNOTE = "* Approximate industrial steel calculation (Density 7.85)"


def _fmt(value: float, decimals: Optional[int] = None) -> str:
    if decimals is None:
        decimals = settings.DISPLAY_DECIMALS
    if value is None or not math.isfinite(value):
        return PLACEHOLDER
    return f"{value:.{decimals}f}"


def _json_number(value: float):
    """JSON has no NaN, send null."""
    if value is None or not math.isfinite(value):
        return None
    return value


def validity_note(result: CalculationResult):
    """Guidance text for an invalid result, None when valid."""
    return None if result.valid else INVALID_NOTE


def present(result: CalculationResult, decimals: Optional[int] = None) -> dict:
    """Build the response payload for a result."""
    return {
        "valid": result.valid,
        "weight_per_unit": _json_number(result.weight_per_unit),
        "unit_label": result.unit_label,
        "total_weight": _json_number(result.total_weight),
        "display": {
            "weight_per_unit": f"{_fmt(result.weight_per_unit, decimals)} {result.unit_label}",
            "total_weight": f"{_fmt(result.total_weight, decimals)} kg",
        },
        "note": validity_note(result),
        "footnote": FOOTNOTE,
    }
