"""
Evaluation tools for the PowerPath scoring curve.

Modules:
- simulation: Monte Carlo estimate of questions-to-mastery by accuracy
"""

from .simulation import (
    SimulationResult,
    build_synthetic_pool,
    compare_with_lookup,
    run_attempt,
    simulate_questions_to_mastery,
)

__all__ = [
    "SimulationResult",
    "build_synthetic_pool",
    "compare_with_lookup",
    "run_attempt",
    "simulate_questions_to_mastery",
]
