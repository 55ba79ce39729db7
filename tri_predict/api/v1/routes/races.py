"""
Race Catalog Routes

Standard triathlon distances and transition defaults.
"""

from typing import List

from fastapi import APIRouter

from tri_predict.features.triathlon import RACE_TYPES
from tri_predict.features.triathlon.schemas import RaceTypeInfo

router = APIRouter()


@router.get("", response_model=List[RaceTypeInfo])
async def list_race_types():
    """List supported race types, shortest first."""
    return [
        RaceTypeInfo(
            race_type=race_type,
            label=spec.label,
            swim_m=spec.distances.swim_m,
            bike_m=spec.distances.bike_m,
            run_m=spec.distances.run_m,
            t1_s=spec.t1_s,
            t2_s=spec.t2_s,
        )
        for race_type, spec in RACE_TYPES.items()
    ]
