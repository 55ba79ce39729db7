"""
Standard triathlon race catalog.

Fixed by federation convention: one table maps each race type to its
label, leg distances, default transitions and post-bike run fatigue.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from tri_predict.shared.constants import RaceType


@dataclass(frozen=True)
class RaceDistances:
    """Standard leg distances in meters."""
    swim_m: float
    bike_m: float
    run_m: float


@dataclass(frozen=True)
class RaceTypeSpec:
    """Everything a prediction needs to know about a race type."""
    label: str
    distances: RaceDistances
    t1_s: float
    t2_s: float
    run_fatigue_factor: float   # Run slowdown after the bike (1.04 = +4%)


RACE_TYPES: Mapping[RaceType, RaceTypeSpec] = MappingProxyType({
    RaceType.SPRINT: RaceTypeSpec(
        label="Sprint",
        distances=RaceDistances(swim_m=750, bike_m=20_000, run_m=5_000),
        t1_s=60, t2_s=45,
        run_fatigue_factor=1.02,
    ),
    RaceType.OLYMPIC: RaceTypeSpec(
        label="Olympic",
        distances=RaceDistances(swim_m=1_500, bike_m=40_000, run_m=10_000),
        t1_s=90, t2_s=60,
        run_fatigue_factor=1.04,
    ),
    RaceType.HALF: RaceTypeSpec(
        label="70.3 (Half Ironman)",
        distances=RaceDistances(swim_m=1_900, bike_m=90_000, run_m=21_100),
        t1_s=120, t2_s=90,
        run_fatigue_factor=1.06,
    ),
    RaceType.FULL: RaceTypeSpec(
        label="Ironman (Full)",
        distances=RaceDistances(swim_m=3_800, bike_m=180_000, run_m=42_200),
        t1_s=180, t2_s=120,
        run_fatigue_factor=1.10,
    ),
})


def get_race_spec(race_type: RaceType | str) -> RaceTypeSpec:
    """Catalog entry for a race type (enum or its string value)."""
    return RACE_TYPES[RaceType(race_type)]


def get_race_type_name(race_type: RaceType | str) -> str:
    """Human-readable race label, e.g. 'Olympic'."""
    return get_race_spec(race_type).label


def get_race_distances(race_type: RaceType | str) -> RaceDistances:
    """Standard swim/bike/run distances in meters."""
    return get_race_spec(race_type).distances
