"""
Tests for display formatters.
"""

from tri_predict.shared.formatters import (
    format_time,
    format_pace,
    format_speed_kmh,
)


class TestFormatTime:
    """Tests for format_time."""

    def test_under_an_hour(self):
        assert format_time(125) == "2:05"

    def test_over_an_hour(self):
        assert format_time(3725) == "1:02:05"

    def test_rounds_seconds(self):
        assert format_time(59.6) == "1:00"

    def test_negative(self):
        assert format_time(-1) == "—"


class TestFormatPace:
    """Tests for format_pace."""

    def test_run_pace(self):
        assert format_pace(270) == "4:30 /km"

    def test_swim_pace(self):
        assert format_pace(95, "100m") == "1:35 /100m"

    def test_none(self):
        assert format_pace(None) == "—"


def test_format_speed_kmh():
    assert format_speed_kmh(10.0) == "36.0 km/h"
