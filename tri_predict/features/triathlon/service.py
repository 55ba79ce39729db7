"""
Triathlon Prediction Service

Orchestrates all legs:
- Swim pace projection
- Bike leg via the physics-based bike predictor
- Run projection with post-bike fatigue
- Transition estimates

This is the main entry point for full race predictions.
"""

import logging

from tri_predict.features.bike.calculators.solver import SolverConfig, DEFAULT_SOLVER_CONFIG
from tri_predict.features.triathlon.calculators import (
    calculate_swim_time,
    calculate_bike_time,
    calculate_run_time,
)
from tri_predict.features.triathlon.models import TriathlonWizardData, TriathlonPrediction
from tri_predict.features.triathlon.races import get_race_spec
from tri_predict.shared.constants import RaceType
from tri_predict.shared.exceptions import IncompleteProfileError, InvalidInputError

logger = logging.getLogger(__name__)


def calculate_triathlon_prediction(
    data: TriathlonWizardData,
    config: SolverConfig = DEFAULT_SOLVER_CONFIG
) -> TriathlonPrediction:
    """
    Predict total race time: swim + T1 + bike + T2 + run.

    Args:
        data: Wizard inputs (all three legs required)
        config: Solver budget for the bike leg

    Returns:
        TriathlonPrediction with per-leg results

    Raises:
        IncompleteProfileError: A leg section or its key input is missing
        InvalidInputError: Physically invalid values
    """
    missing = [
        name for name, leg in (("swim", data.swim), ("bike", data.bike), ("run", data.run))
        if leg is None
    ]
    if missing:
        raise IncompleteProfileError(f"Missing leg data: {', '.join(missing)}")

    race_type = RaceType(data.race_type)
    race = get_race_spec(race_type)

    swim = calculate_swim_time(data.swim, race.distances.swim_m)
    bike, bike_prediction = calculate_bike_time(data.bike, race.distances.bike_m, config)
    run = calculate_run_time(data.run, race)

    t1 = data.t1_s if data.t1_s is not None else race.t1_s
    t2 = data.t2_s if data.t2_s is not None else race.t2_s
    if t1 < 0 or t2 < 0:
        raise InvalidInputError("Transition times must be >= 0")

    total = swim.time_s + t1 + bike.time_s + t2 + run.time_s

    logger.debug(
        f"Triathlon prediction ({race_type.value}): swim={swim.time_s:.0f}s "
        f"bike={bike.time_s:.0f}s run={run.time_s:.0f}s total={total:.0f}s"
    )

    return TriathlonPrediction(
        race_type=race_type,
        race_type_label=race.label,
        swim=swim,
        t1_s=t1,
        bike=bike,
        t2_s=t2,
        run=run,
        total_time_s=total,
        bike_prediction=bike_prediction,
    )
