"""
Tube weight calculator: the stateless pipeline.

parse → normalize to mm → validate → exact area → kg per run unit → total

Input: either typed Dimensions (calculate_tube_weight) or a raw form-fields
dict (TubeWeightCalculator.calculate). Output: a CalculationResult.

Nothing here raises for bad numbers. Unparseable text becomes NaN, infeasible
geometry becomes valid=False, a missing run length becomes a NaN total.
Unknown shape or unit tags raise ValueError.
"""

import logging
import math
from dataclasses import asdict, dataclass
from typing import Optional

from ..weights import total_weight, weight_per_run_unit
from .geometry import cross_section_area, is_valid_geometry
from .profiles import SHAPE_FIELDS, make_profile, shape
from .units import LinearUnit, RunUnit, linear_unit, parse_number, run_unit, to_millimeters

logger = logging.getLogger(__name__)

UNIT_LABELS = {
    RunUnit.FOOT: "kg/ft",
    RunUnit.METER: "kg/m",
}


@dataclass(frozen=True)
class Dimension:
    """A linear value tagged with its input unit."""
    value: float
    unit: LinearUnit = LinearUnit.MILLIMETER

    def to_mm(self) -> float:
        return to_millimeters(self.value, self.unit)


@dataclass(frozen=True)
class CalculationResult:
    valid: bool
    weight_per_unit: float
    unit_label: str
    total_weight: float

    def to_dict(self) -> dict:
        return asdict(self)


def invalid_result(length_unit) -> CalculationResult:
    return CalculationResult(
        valid=False,
        weight_per_unit=math.nan,
        unit_label=UNIT_LABELS[run_unit(length_unit)],
        total_weight=math.nan,
    )


def calculate_tube_weight(
    tube_shape,
    dimensions: dict,
    thickness: Dimension,
    run_length: Optional[float] = None,
    length_unit=RunUnit.METER,
) -> CalculationResult:
    """
    Weight per foot/meter and optional total for one tube.

    dimensions maps the shape's outer fields (see SHAPE_FIELDS) to Dimensions;
    a missing field counts as NaN. run_length is in length_unit.
    """
    tube_shape = shape(tube_shape)
    length_unit = run_unit(length_unit)

    outer_mm = {}
    for name in SHAPE_FIELDS[tube_shape]:
        dim = dimensions.get(name)
        outer_mm[name] = dim.to_mm() if dim is not None else math.nan
    profile = make_profile(tube_shape, outer_mm, thickness.to_mm())

    if not is_valid_geometry(profile):
        logger.debug("Infeasible %s profile: %s", tube_shape.value, profile)
        return invalid_result(length_unit)

    area_mm2 = cross_section_area(profile)
    per_unit = weight_per_run_unit(area_mm2, length_unit)
    if not (math.isfinite(per_unit) and per_unit > 0):
        logger.debug("Weight out of float range for %s profile: %s", tube_shape.value, profile)
        return invalid_result(length_unit)

    return CalculationResult(
        valid=True,
        weight_per_unit=per_unit,
        unit_label=UNIT_LABELS[length_unit],
        total_weight=total_weight(per_unit, run_length),
    )


class TubeWeightCalculator:
    """
    Form-fields entry point.

    Fields:
        shape                      round | square | rectangle
        outer_diameter / side / width / height   raw text for the active shape
        thickness                  raw text
        length                     optional raw text
        unit                       shared linear unit for every dimension
        <field>_unit               per-field override, e.g. thickness_unit
        length_unit                ft | m

    Fields belonging to other shapes are ignored.
    """

    def __init__(self, default_unit=LinearUnit.MILLIMETER, default_length_unit=RunUnit.METER):
        self.default_unit = linear_unit(default_unit)
        self.default_length_unit = run_unit(default_length_unit)

    def calculate(self, fields: dict) -> CalculationResult:
        tube_shape = shape(fields.get("shape"))
        shared_unit = self._unit(fields.get("unit"), self.default_unit)
        length_unit = run_unit(fields.get("length_unit") or self.default_length_unit)

        dimensions = {
            name: self._dimension(fields, name, shared_unit)
            for name in SHAPE_FIELDS[tube_shape]
        }
        thickness = self._dimension(fields, "thickness", shared_unit)

        return calculate_tube_weight(
            tube_shape,
            dimensions,
            thickness,
            run_length=self._run_length(fields.get("length")),
            length_unit=length_unit,
        )

    def _unit(self, value, default: LinearUnit) -> LinearUnit:
        return linear_unit(value) if value else default

    def _dimension(self, fields: dict, name: str, shared_unit: LinearUnit) -> Dimension:
        unit = self._unit(fields.get(f"{name}_unit"), shared_unit)
        return Dimension(parse_number(fields.get(name)), unit)

    def _run_length(self, raw) -> Optional[float]:
        """Blank length means no total requested."""
        if raw is None or (isinstance(raw, str) and not raw.strip()):
            return None
        return parse_number(raw)
