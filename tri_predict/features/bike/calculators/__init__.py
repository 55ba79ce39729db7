"""
Bike calculators.

Components:
- solve_velocity: Power-balance velocity solver for one segment
- SolverConfig: Explicit iteration/tolerance budget
"""

from .solver import (
    SolverConfig,
    VelocitySolution,
    DEFAULT_SOLVER_CONFIG,
    solve_velocity,
    solve_velocity_detailed,
    validate_inputs,
)

__all__ = [
    "SolverConfig",
    "VelocitySolution",
    "DEFAULT_SOLVER_CONFIG",
    "solve_velocity",
    "solve_velocity_detailed",
    "validate_inputs",
]
