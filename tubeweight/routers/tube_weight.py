"""
Tube weight API: one stateless calculation per request.

POST /api/tube-weight        : weight per foot/meter and total for one tube
GET  /api/tube-weight/shapes : shapes, their dimension fields and accepted units
"""

import logging

from fastapi import APIRouter, HTTPException

from .. import schemas
from ..calculators.profiles import SHAPE_FIELDS, Shape
from ..calculators.tube_weight import TubeWeightCalculator
from ..calculators.units import LinearUnit, RunUnit
from ..config import settings
from ..presenter import present

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tube-weight", tags=["tube-weight"])


@router.post("", response_model=schemas.TubeWeightResponse)
def calculate(request: schemas.TubeWeightRequest):
    """
    Compute tube weight from raw form values.

    Blank or non-numeric text is treated as missing; invalid geometry
    comes back as valid=false with null weights and a note.
    """
    try:
        calculator = TubeWeightCalculator(
            default_unit=settings.DEFAULT_UNIT,
            default_length_unit=settings.DEFAULT_LENGTH_UNIT,
        )
        result = calculator.calculate(request.model_dump(exclude_none=True))
    except ValueError as e:
        # Only reachable through a misconfigured DEFAULT_UNIT / DEFAULT_LENGTH_UNIT
        logger.error("Tube weight calculation rejected: %s", e)
        raise HTTPException(status_code=500, detail=str(e))

    return present(result)


@router.get("/shapes", response_model=schemas.ShapesResponse)
def list_shapes():
    return {
        "shapes": [
            {"shape": s, "fields": [*SHAPE_FIELDS[s], "thickness"]}
            for s in Shape
        ],
        "linear_units": list(LinearUnit),
        "length_units": list(RunUnit),
    }
