"""
Run Time Calculator.

Projects a recent test (5k/10k) to the race distance with Riegel's
formula, then adjusts for target intensity zone and post-bike fatigue.

References:
- Riegel, P. (1981) - Athletic records and human endurance.
  American Scientist 69(3):285-290
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping

from tri_predict.features.triathlon.models import RunData, LegResult
from tri_predict.features.triathlon.races import RaceTypeSpec
from tri_predict.shared.exceptions import IncompleteProfileError, InvalidInputError
from tri_predict.shared.formatters import format_pace
from tri_predict.shared.formulas import riegel_time


RIEGEL_EXPONENT = 1.06
THRESHOLD_ZONE = 4


@dataclass(frozen=True)
class RunZone:
    """Pace multiplier relative to threshold (zone 4)."""
    factor: float
    name: str


# =============================================================================
# Run Zone Pace Table
# =============================================================================
# Key: zone number, Value: pace multiplier (1.0 = threshold pace)

RUN_ZONE_PACE_FACTORS: Mapping[int, RunZone] = MappingProxyType({
    1: RunZone(1.35, "Easy/Recovery"),
    2: RunZone(1.20, "Endurance"),
    3: RunZone(1.10, "Marathon Pace"),
    4: RunZone(1.00, "Threshold"),
    5: RunZone(0.94, "VO2 Max"),
})


def calculate_run_time(data: RunData, race: RaceTypeSpec) -> LegResult:
    """
    Calculate run leg time.

    Args:
        data: Test result and target zone
        race: Race catalog entry (standard distance, fatigue factor)

    Returns:
        LegResult with time and applied factors

    Raises:
        IncompleteProfileError: Missing base test time or distance
        InvalidInputError: Non-positive values or unknown zone
    """
    if data.base_time_s is None or data.base_distance_m is None:
        raise IncompleteProfileError("Run base test time and distance are required")
    if data.base_time_s <= 0 or data.base_distance_m <= 0:
        raise InvalidInputError("Run base test time and distance must be > 0")

    distance = data.race_distance_m if data.race_distance_m is not None else race.distances.run_m
    if distance <= 0:
        raise InvalidInputError(f"Run distance must be > 0, got {distance}")

    zone = RUN_ZONE_PACE_FACTORS.get(data.run_zone)
    if zone is None:
        raise InvalidInputError(f"Run zone must be 1-5, got {data.run_zone}")

    factors: List[str] = []
    time_s = riegel_time(data.base_time_s, data.base_distance_m, distance, RIEGEL_EXPONENT)

    time_s *= zone.factor
    if data.run_zone == THRESHOLD_ZONE:
        factors.append(f"Zone {data.run_zone} ({zone.name})")
    else:
        pct = round(abs(zone.factor - 1) * 100)
        sign = "+" if zone.factor > 1 else "-"
        factors.append(f"Zone {data.run_zone} ({zone.name}): {sign}{pct}% pace")

    time_s *= race.run_fatigue_factor

    base_pace_s_km = data.base_time_s / data.base_distance_m * 1000
    factors.append(f"Base pace: {format_pace(base_pace_s_km)}")
    factors.append(f"Riegel formula (exponent {RIEGEL_EXPONENT})")
    factors.append(
        f"+{round((race.run_fatigue_factor - 1) * 100)}% post-bike fatigue ({race.label})"
    )

    return LegResult(time_s=time_s, factors=factors)
