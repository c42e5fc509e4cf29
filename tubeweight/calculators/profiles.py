"""
Tube profiles: a closed tagged union over round, square and rectangle.

Profiles are immutable values. Once built by the orchestration step every
dimension is in millimeters.
"""

import enum
from dataclasses import dataclass
from typing import Union


class Shape(str, enum.Enum):
    ROUND = "round"
    SQUARE = "square"
    RECTANGLE = "rectangle"


@dataclass(frozen=True)
class Round:
    outer_diameter: float
    thickness: float


@dataclass(frozen=True)
class Square:
    side: float
    thickness: float


@dataclass(frozen=True)
class Rectangle:
    width: float
    height: float
    thickness: float


Profile = Union[Round, Square, Rectangle]

# Outer-dimension input fields per shape, in form order. Thickness is common to all.
SHAPE_FIELDS = {
    Shape.ROUND: ("outer_diameter",),
    Shape.SQUARE: ("side",),
    Shape.RECTANGLE: ("width", "height"),
}

_PROFILE_TYPES = {
    Shape.ROUND: Round,
    Shape.SQUARE: Square,
    Shape.RECTANGLE: Rectangle,
}


def shape(value) -> Shape:
    """Coerce 'round' / 'square' / 'rectangle' to Shape. Raises ValueError otherwise."""
    if isinstance(value, Shape):
        return value
    try:
        return Shape(value)
    except ValueError:
        raise ValueError(
            f"Unknown tube shape: {value!r}. "
            f"Available: {[s.value for s in Shape]}"
        ) from None


def make_profile(tube_shape, dimensions: dict, thickness: float) -> Profile:
    """Build the profile for a shape from its outer dimensions (already in mm)."""
    tube_shape = shape(tube_shape)
    kwargs = {name: dimensions[name] for name in SHAPE_FIELDS[tube_shape]}
    return _PROFILE_TYPES[tube_shape](thickness=thickness, **kwargs)
