"""
Prediction errors.

All errors derive from ValueError so callers that treat bad input
generically keep working.
"""

from typing import Optional


class PredictionError(ValueError):
    """Base error for race-time predictions."""
    pass


class InvalidInputError(PredictionError):
    """Malformed or out-of-range physical input."""

    def __init__(self, message: str, segment_index: Optional[int] = None):
        self.segment_index = segment_index
        if segment_index is not None:
            message = f"Segment {segment_index}: {message}"
        super().__init__(message)


class EmptyCourseError(PredictionError):
    """Course has no segments."""
    pass


class IncompleteProfileError(PredictionError):
    """A required leg input is missing and no default can be synthesized."""
    pass
