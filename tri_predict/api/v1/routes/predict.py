"""
Prediction Routes

Endpoints for bike and triathlon time predictions.
"""

import logging

from fastapi import APIRouter, HTTPException

from tri_predict.config import settings
from tri_predict.features.bike import (
    BikePredictRequest,
    BikePredictionResponse,
    predict_race_time,
)
from tri_predict.features.bike.calculators import SolverConfig
from tri_predict.features.triathlon import (
    TriathlonPredictRequest,
    TriathlonPredictionResponse,
    calculate_triathlon_prediction,
)
from tri_predict.features.triathlon.models import LegResult
from tri_predict.shared.exceptions import PredictionError
from tri_predict.shared.formatters import format_time, format_speed_kmh

logger = logging.getLogger(__name__)

router = APIRouter()


def _solver_config() -> SolverConfig:
    return SolverConfig.from_settings(settings)


def _leg(result: LegResult) -> dict:
    return {
        "time_s": round(result.time_s, 1),
        "time_formatted": format_time(result.time_s),
        "factors": result.factors,
    }


@router.post("/bike", response_model=BikePredictionResponse)
async def predict_bike(request: BikePredictRequest):
    """
    Predict bike leg time over a segmented course.

    Solves the power balance per segment and sums segment times.
    """
    try:
        prediction = predict_race_time(
            [s.to_model() for s in request.segments],
            request.athlete.to_model(),
            request.conditions.to_model(),
            _solver_config(),
        )
    except PredictionError as e:
        logger.info(f"Bike prediction rejected: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    return {
        **prediction.to_dict(),
        "total_time_formatted": format_time(prediction.total_time_s),
        "average_speed_formatted": format_speed_kmh(prediction.average_speed_ms),
    }


@router.post("/triathlon", response_model=TriathlonPredictionResponse)
async def predict_triathlon(request: TriathlonPredictRequest):
    """
    Predict full triathlon time.

    Swim and run use pace projections, bike uses the physics model,
    transitions default to race-type estimates.
    """
    try:
        prediction = calculate_triathlon_prediction(request.to_model(), _solver_config())
    except PredictionError as e:
        logger.info(f"Triathlon prediction rejected: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    return {
        "race_type": prediction.race_type,
        "race_type_label": prediction.race_type_label,
        "total_time_s": round(prediction.total_time_s, 1),
        "total_time_formatted": format_time(prediction.total_time_s),
        "swim": _leg(prediction.swim),
        "t1_s": prediction.t1_s,
        "t1_formatted": format_time(prediction.t1_s),
        "bike": _leg(prediction.bike),
        "t2_s": prediction.t2_s,
        "t2_formatted": format_time(prediction.t2_s),
        "run": _leg(prediction.run),
    }
