from pydantic import BaseModel
from typing import Optional, Union, List
from .calculators.profiles import Shape
from .calculators.units import LinearUnit, RunUnit

# Raw form input: text as typed, or a JSON number
RawValue = Optional[Union[float, str]]


class TubeWeightRequest(BaseModel):
    shape: Shape
    outer_diameter: RawValue = None
    side: RawValue = None
    width: RawValue = None
    height: RawValue = None
    thickness: RawValue = None
    length: RawValue = None

    # Shared selector for all dimensions; per-field units override it
    unit: Optional[LinearUnit] = None
    outer_diameter_unit: Optional[LinearUnit] = None
    side_unit: Optional[LinearUnit] = None
    width_unit: Optional[LinearUnit] = None
    height_unit: Optional[LinearUnit] = None
    thickness_unit: Optional[LinearUnit] = None
    length_unit: Optional[RunUnit] = None


class DisplayValues(BaseModel):
    weight_per_unit: str
    total_weight: str


class TubeWeightResponse(BaseModel):
    valid: bool
    weight_per_unit: Optional[float] = None
    unit_label: str
    total_weight: Optional[float] = None
    display: DisplayValues
    note: Optional[str] = None
    footnote: str


class ShapeInfo(BaseModel):
    shape: Shape
    fields: List[str]


class ShapesResponse(BaseModel):
    shapes: List[ShapeInfo]
    linear_units: List[LinearUnit]
    length_units: List[RunUnit]
