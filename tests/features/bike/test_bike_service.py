"""
Tests for the bike race service (segment aggregator).
"""

import pytest

from tri_predict.features.bike import (
    AthleteProfile,
    EnvironmentConditions,
    RaceSegment,
    SegmentType,
    BikeRacePredictor,
    predict_race_time,
    calculate_course_stats,
    validate_course,
)
from tri_predict.features.bike.calculators import solve_velocity
from tri_predict.shared.exceptions import EmptyCourseError, InvalidInputError


# =============================================================================
# Test Data
# =============================================================================

# Hilly 20 km course: flat, climb, descent, false flat
HILLY_COURSE = [
    RaceSegment(distance_m=5000, grade=0.0),
    RaceSegment(distance_m=3000, grade=0.06),
    RaceSegment(distance_m=3000, grade=-0.06),
    RaceSegment(distance_m=9000, grade=0.01),
]


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def profile():
    return AthleteProfile(mass_kg=80.0, power_w=230.0, cda_m2=0.28, crr=0.004)


@pytest.fixture
def conditions():
    return EnvironmentConditions(temperature_c=22.0, altitude_m=300.0)


# =============================================================================
# Test Aggregation
# =============================================================================

class TestPredictRaceTime:
    """Tests for predict_race_time."""

    def test_empty_course(self, profile, conditions):
        with pytest.raises(EmptyCourseError):
            predict_race_time([], profile, conditions)

    def test_single_flat_segment(self, profile, conditions):
        """Time is distance over the solved velocity at wheel power."""
        prediction = predict_race_time([RaceSegment(40000, 0.0)], profile, conditions)

        wheel_power = profile.power_w * conditions.drivetrain_efficiency
        v = solve_velocity(wheel_power, profile, 0.0, conditions)

        assert prediction.total_time_s == pytest.approx(40000 / v)
        assert prediction.total_distance_m == 40000
        assert len(prediction.segments) == 1
        assert prediction.segments[0].velocity_ms == pytest.approx(v)

    def test_totals_are_sums(self, profile, conditions):
        prediction = predict_race_time(HILLY_COURSE, profile, conditions)

        assert prediction.total_time_s == pytest.approx(
            sum(s.time_s for s in prediction.segments)
        )
        assert prediction.total_distance_m == pytest.approx(20000)
        assert prediction.average_speed_ms == pytest.approx(
            prediction.total_distance_m / prediction.total_time_s
        )
        assert prediction.average_speed_kmh == pytest.approx(prediction.average_speed_ms * 3.6)

    def test_segments_in_order(self, profile, conditions):
        prediction = predict_race_time(HILLY_COURSE, profile, conditions)

        assert [s.index for s in prediction.segments] == [0, 1, 2, 3]
        assert [s.grade for s in prediction.segments] == [0.0, 0.06, -0.06, 0.01]
        # Climb slowest, descent fastest
        speeds = [s.velocity_ms for s in prediction.segments]
        assert speeds[1] == min(speeds)
        assert speeds[2] == max(speeds)

    def test_additivity(self, profile, conditions):
        """Splitting a course in two gives the same total time."""
        whole = predict_race_time(HILLY_COURSE, profile, conditions)
        first = predict_race_time(HILLY_COURSE[:2], profile, conditions)
        second = predict_race_time(HILLY_COURSE[2:], profile, conditions)

        assert first.total_time_s + second.total_time_s == pytest.approx(whole.total_time_s)

    def test_deterministic(self, profile, conditions):
        first = predict_race_time(HILLY_COURSE, profile, conditions)
        second = predict_race_time(HILLY_COURSE, profile, conditions)
        assert first == second

    def test_average_power_matches_wheel_power(self, profile, conditions):
        """Every segment is ridden at the same wheel power."""
        prediction = predict_race_time(HILLY_COURSE, profile, conditions)
        wheel_power = profile.power_w * conditions.drivetrain_efficiency
        assert prediction.average_power_w == pytest.approx(wheel_power, abs=1e-3)

    def test_elevation_gain(self, profile, conditions):
        prediction = predict_race_time(HILLY_COURSE, profile, conditions)
        # 3000 * 0.06 + 9000 * 0.01
        assert prediction.total_elevation_gain_m == pytest.approx(270.0)


# =============================================================================
# Test Conditions
# =============================================================================

class TestSegmentConditions:
    """Segment-level conditions override race-wide conditions."""

    def test_override_applies_to_one_segment(self, profile, conditions):
        windy = EnvironmentConditions(temperature_c=22.0, altitude_m=300.0, headwind_ms=6.0)
        course = [
            RaceSegment(10000, 0.0),
            RaceSegment(10000, 0.0, conditions=windy),
        ]
        prediction = predict_race_time(course, profile, conditions)
        calm, into_wind = prediction.segments

        assert into_wind.velocity_ms < calm.velocity_ms
        assert into_wind.time_s > calm.time_s

    def test_lower_efficiency_is_slower(self, profile):
        course = [RaceSegment(20000, 0.0)]
        efficient = predict_race_time(course, profile, EnvironmentConditions(drivetrain_efficiency=1.0))
        lossy = predict_race_time(course, profile, EnvironmentConditions(drivetrain_efficiency=0.9))
        assert lossy.total_time_s > efficient.total_time_s


# =============================================================================
# Test Errors
# =============================================================================

class TestErrors:
    """Segment failures fail the whole prediction and name the segment."""

    def test_zero_distance_segment(self, profile, conditions):
        course = [RaceSegment(1000, 0.0), RaceSegment(0, 0.0)]
        with pytest.raises(InvalidInputError) as exc_info:
            predict_race_time(course, profile, conditions)
        assert exc_info.value.segment_index == 1
        assert str(exc_info.value).startswith("Segment 1:")

    def test_bad_segment_conditions(self, profile, conditions):
        course = [
            RaceSegment(1000, 0.0),
            RaceSegment(1000, 0.0),
            RaceSegment(1000, 0.0, conditions=EnvironmentConditions(air_density=-1.0)),
        ]
        with pytest.raises(InvalidInputError) as exc_info:
            predict_race_time(course, profile, conditions)
        assert exc_info.value.segment_index == 2
        assert "Air density" in str(exc_info.value)

    def test_impossible_temperature_in_segment(self, profile, conditions):
        frozen = EnvironmentConditions(temperature_c=-273.15)
        course = [RaceSegment(1000, 0.0), RaceSegment(1000, 0.0, conditions=frozen)]
        with pytest.raises(InvalidInputError) as exc_info:
            predict_race_time(course, profile, conditions)
        assert exc_info.value.segment_index == 1
        assert "Temperature" in str(exc_info.value)

    def test_invalid_profile_tagged_with_first_segment(self, conditions):
        with pytest.raises(InvalidInputError) as exc_info:
            predict_race_time(HILLY_COURSE, AthleteProfile(mass_kg=80, power_w=0), conditions)
        assert exc_info.value.segment_index == 0

    def test_invalid_efficiency(self, profile):
        with pytest.raises(InvalidInputError, match="efficiency"):
            predict_race_time(
                [RaceSegment(1000, 0.0)], profile,
                EnvironmentConditions(drivetrain_efficiency=1.5)
            )

    def test_errors_are_value_errors(self, profile, conditions):
        with pytest.raises(ValueError):
            predict_race_time([], profile, conditions)


# =============================================================================
# Test Course Helpers
# =============================================================================

class TestCourseHelpers:
    """Tests for course stats, validation and segment types."""

    def test_course_stats(self):
        stats = calculate_course_stats([
            RaceSegment(1000, 0.05),
            RaceSegment(1000, -0.05),
            RaceSegment(2000, 0.0),
        ])
        assert stats.total_distance_m == pytest.approx(4000)
        assert stats.total_elevation_gain_m == pytest.approx(50.0)

    def test_validate_course(self):
        assert validate_course(HILLY_COURSE)
        assert not validate_course([])
        assert not validate_course(None)
        assert not validate_course([RaceSegment(1000, 0.0), RaceSegment(-5, 0.0)])

    def test_segment_type(self):
        assert RaceSegment(100, 0.05).segment_type == SegmentType.ASCENT
        assert RaceSegment(100, -0.05).segment_type == SegmentType.DESCENT
        assert RaceSegment(100, 0.005).segment_type == SegmentType.FLAT

    def test_from_ftp(self):
        profile = AthleteProfile.from_ftp(300, 80, 70, 8)
        assert profile.power_w == pytest.approx(240)
        assert profile.mass_kg == 78
        assert profile.cda_m2 == 0.30


# =============================================================================
# Test Predictor
# =============================================================================

class TestBikeRacePredictor:
    """Tests for the bound predictor."""

    def test_matches_function(self, profile, conditions):
        predictor = BikeRacePredictor(profile, conditions)
        assert predictor.predict(HILLY_COURSE) == predict_race_time(HILLY_COURSE, profile, conditions)

    def test_velocity_at_grade(self, profile, conditions):
        predictor = BikeRacePredictor(profile, conditions)
        prediction = predictor.predict([RaceSegment(1000, 0.04)])
        assert predictor.velocity_at_grade(0.04) == pytest.approx(prediction.segments[0].velocity_ms)
