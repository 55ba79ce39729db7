"""
Formatting utilities for display.

The core returns raw seconds and m/s; these helpers only feed API
responses.
"""


def format_time(seconds: float) -> str:
    """
    Format seconds as 'H:MM:SS' or 'M:SS'.

    Args:
        seconds: Duration in seconds (e.g., 3725)

    Returns:
        Formatted string (e.g., '1:02:05')
    """
    if seconds < 0:
        return "—"

    total = int(round(seconds))
    h = total // 3600
    m = (total % 3600) // 60
    s = total % 60

    if h > 0:
        return f"{h}:{m:02d}:{s:02d}"
    return f"{m}:{s:02d}"


def format_pace(seconds_per_unit: float | None, unit: str = "km") -> str:
    """
    Format pace as 'M:SS /unit'.

    Args:
        seconds_per_unit: Seconds per km (run) or per 100m (swim)
        unit: Unit label

    Returns:
        Formatted string (e.g., '4:30 /km')
    """
    if seconds_per_unit is None:
        return "—"

    total = int(round(seconds_per_unit))
    return f"{total // 60}:{total % 60:02d} /{unit}"


def format_speed_kmh(velocity_ms: float) -> str:
    """Format m/s as 'XX.X km/h'."""
    return f"{velocity_ms * 3.6:.1f} km/h"
