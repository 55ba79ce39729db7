"""
Tests for shared formulas module.

Tests the physics and projection formulas used across calculators.
"""

import pytest

from tri_predict.shared.constants import GRAVITY
from tri_predict.shared.formulas import (
    air_density,
    aerodynamic_power,
    rolling_resistance_power,
    gravity_power,
    required_power,
    riegel_time,
)


# =============================================================================
# Test Air Density
# =============================================================================

class TestAirDensity:
    """Tests for air_density function."""

    def test_reference_conditions(self):
        """0 °C at sea level, dry air, is the 1.225 reference."""
        assert air_density(0.0, 0.0) == pytest.approx(1.225)

    def test_warmer_air_is_thinner(self):
        """20 °C should be ~1.141 kg/m^3."""
        rho = air_density(20.0, 0.0)
        assert rho == pytest.approx(1.225 * 273.15 / 293.15)
        assert rho < air_density(0.0, 0.0)

    def test_altitude_lowers_density(self):
        """Density should drop with altitude."""
        sea = air_density(20.0, 0.0)
        mountain = air_density(20.0, 2000.0)
        assert mountain < sea
        assert mountain == pytest.approx(sea * 0.789, rel=0.01)

    def test_humidity_lowers_density(self):
        """Humid air is lighter than dry air."""
        dry = air_density(30.0, 0.0, 0.0)
        humid = air_density(30.0, 0.0, 0.9)
        assert humid < dry
        # Effect is small (around 1-2%)
        assert humid > dry * 0.97


# =============================================================================
# Test Power Components
# =============================================================================

class TestPowerComponents:
    """Tests for aerodynamic, rolling and gravity power."""

    def test_aero_no_wind(self):
        """0.5 * 1.225 * 0.3 * 10^3 = 183.75 W."""
        assert aerodynamic_power(10.0, 1.225, 0.3) == pytest.approx(183.75)

    def test_aero_headwind_costs_more(self):
        """Headwind raises apparent airspeed."""
        calm = aerodynamic_power(10.0, 1.225, 0.3, 0.0)
        headwind = aerodynamic_power(10.0, 1.225, 0.3, 3.0)
        tailwind = aerodynamic_power(10.0, 1.225, 0.3, -3.0)
        assert headwind > calm > tailwind > 0

    def test_aero_headwind_formula(self):
        """Drag force on apparent airspeed times ground speed."""
        expected = 0.5 * 1.225 * 0.3 * (10.0 + 2.0) ** 2 * 10.0
        assert aerodynamic_power(10.0, 1.225, 0.3, 2.0) == pytest.approx(expected)

    def test_aero_strong_tailwind_pushes(self):
        """Tailwind faster than the rider gives negative drag power."""
        assert aerodynamic_power(5.0, 1.225, 0.3, -8.0) < 0

    def test_aero_zero_velocity(self):
        """Standing still costs nothing regardless of wind."""
        assert aerodynamic_power(0.0, 1.225, 0.3, 5.0) == 0.0

    def test_rolling(self):
        """Crr * m * g * v."""
        assert rolling_resistance_power(10.0, 75.0, 0.004) == pytest.approx(
            0.004 * 75.0 * GRAVITY * 10.0
        )

    def test_gravity_sign(self):
        """Climbing costs power, descending returns it."""
        assert gravity_power(5.0, 80.0, 0.05) > 0
        assert gravity_power(5.0, 80.0, -0.05) < 0
        assert gravity_power(5.0, 80.0, 0.0) == 0.0

    def test_required_power_is_sum(self):
        """Total is the sum of the three components."""
        v, m, grade, rho, cda, crr, wind = 9.0, 80.0, 0.02, 1.2, 0.28, 0.005, 1.5
        expected = (
            aerodynamic_power(v, rho, cda, wind)
            + rolling_resistance_power(v, m, crr)
            + gravity_power(v, m, grade)
        )
        assert required_power(v, m, grade, rho, cda, crr, wind) == pytest.approx(expected)


# =============================================================================
# Test Riegel
# =============================================================================

class TestRiegelTime:
    """Tests for riegel_time function."""

    def test_same_distance(self):
        """Same distance returns the base time."""
        assert riegel_time(1200.0, 5000.0, 5000.0) == pytest.approx(1200.0)

    def test_double_distance(self):
        """Doubling distance multiplies time by 2^1.06."""
        assert riegel_time(1200.0, 5000.0, 10000.0) == pytest.approx(1200.0 * 2 ** 1.06)

    def test_slower_than_linear(self):
        """Longer races are run at a slower pace."""
        assert riegel_time(1200.0, 5.0, 42.2) > 1200.0 * 42.2 / 5.0
