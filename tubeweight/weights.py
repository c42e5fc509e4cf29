# Steel weight constants and mass-per-length math.
# Density is fixed: one grade of carbon steel, 7850 kg/m³.

import math

from .calculators.profiles import Profile, Rectangle, Round, Square
from .calculators.units import length_factor_mm

STEEL_DENSITY_KG_PER_M3 = 7850.0
MM3_PER_M3 = 1.0e9
STEEL_DENSITY_KG_PER_MM3 = STEEL_DENSITY_KG_PER_M3 / MM3_PER_M3   # 7.85e-6

# The round-tube shop formula 0.02466 × (OD − T) × T kg/m (mm inputs) is
# π × 7.85e-3 rounded to four significant figures. Kept for comparison only.
ROUND_SHORTCUT_PUBLISHED_KG_PER_M = 0.02466


def weight_per_run_unit(area_mm2: float, run_unit) -> float:
    """
    Mass in kg of one foot or one meter of tube with the given metal area.
    NaN area gives NaN weight.
    """
    return area_mm2 * length_factor_mm(run_unit) * STEEL_DENSITY_KG_PER_MM3


def total_weight(weight_per_unit: float, run_length) -> float:
    """
    Total mass for a run length in the same unit as weight_per_unit.

    Returns NaN when no positive, finite run length was given, meaning
    "not requested", not an error.
    """
    if run_length is None:
        return math.nan
    if not (math.isfinite(run_length) and run_length > 0):
        return math.nan
    total = weight_per_unit * run_length
    return total if math.isfinite(total) else math.nan


def shortcut_factor(run_unit) -> float:
    """kg per mm² of wall-thickness product per run unit: ρ × mm-per-unit."""
    return STEEL_DENSITY_KG_PER_MM3 * length_factor_mm(run_unit)


def round_shortcut_factor(run_unit) -> float:
    """π × ρ × mm-per-unit, the derived form of the 0.02466 kg/m constant."""
    return math.pi * shortcut_factor(run_unit)


def shortcut_weight_per_run_unit(profile: Profile, run_unit) -> float:
    """
    Closed-form wall-thickness weight, mm dimensions in, kg per run unit out.

    Round:     π·ρ·f · T(OD − T)
    Square:    4·ρ·f · T(S − T)
    Rectangle: 2·ρ·f · T(W + H − 2T)

    Algebraically identical to cross_section_area() × ρ × f. Used to
    cross-check the exact path and to reproduce shop-floor tables.
    """
    if not isinstance(profile, (Round, Square, Rectangle)):
        raise TypeError(f"Not a tube profile: {profile!r}")

    t = profile.thickness
    factor = shortcut_factor(run_unit)
    if isinstance(profile, Round):
        return round_shortcut_factor(run_unit) * t * (profile.outer_diameter - t)
    if isinstance(profile, Square):
        return 4 * factor * t * (profile.side - t)
    return 2 * factor * t * (profile.width + profile.height - 2 * t)
