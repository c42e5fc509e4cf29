"""
Geometry for hollow tube sections: feasibility and exact metal area.

Both functions take a profile whose dimensions are already in millimeters.
The wall is removed from both sides of every outer dimension, so the bore is
outer − 2 × thickness; a profile is feasible only when that bore is strictly
positive.
"""

import math

from .profiles import Profile, Rectangle, Round, Square


def _all_finite(*values: float) -> bool:
    return all(math.isfinite(v) for v in values)


def is_valid_geometry(profile: Profile) -> bool:
    """
    True when the wall is positive and leaves a strictly positive bore.

    Any NaN or infinite dimension makes the profile invalid. Equality
    (outer == 2 × thickness) is invalid: a zero-area bore is not a tube.
    """
    if isinstance(profile, Round):
        outers = (profile.outer_diameter,)
    elif isinstance(profile, Square):
        outers = (profile.side,)
    elif isinstance(profile, Rectangle):
        outers = (profile.width, profile.height)
    else:
        raise TypeError(f"Not a tube profile: {profile!r}")

    t = profile.thickness
    if not _all_finite(t, *outers):
        return False
    if not t > 0:
        return False
    return all(outer > 2 * t for outer in outers)


def cross_section_area(profile: Profile) -> float:
    """
    Metal area in mm²: outer shape minus bore.

    Round:     (π/4)(OD² − ID²),  ID = OD − 2T
    Square:    S² − (S − 2T)²
    Rectangle: W·H − (W − 2T)(H − 2T)

    Only meaningful for profiles that passed is_valid_geometry(). Dimensions
    near the float limit can still overflow to inf or NaN here; the caller
    checks the result.
    """
    t = profile.thickness
    if isinstance(profile, Round):
        od = profile.outer_diameter
        bore = od - 2 * t
        return (math.pi / 4) * (od * od - bore * bore)
    if isinstance(profile, Square):
        s = profile.side
        bore = s - 2 * t
        return s * s - bore * bore
    if isinstance(profile, Rectangle):
        w, h = profile.width, profile.height
        return w * h - (w - 2 * t) * (h - 2 * t)
    raise TypeError(f"Not a tube profile: {profile!r}")
