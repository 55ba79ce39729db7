"""
Triathlon race-time prediction engine.

Physics-based bike leg prediction combined with pace-based swim/run
projections and transition estimates.
"""

__version__ = "0.1.0"
