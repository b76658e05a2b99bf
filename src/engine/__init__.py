"""
Adaptive engine components.

- scoring: Bounded score model and the expected-questions table
- difficulty: Score → target tier policy with fallback order
- selector: Exposure-aware multi-tier question selection
- stats: Display snapshots and observer notification
"""

from .scoring import (
    apply_answer,
    apply_correct,
    apply_incorrect,
    expected_questions_for_accuracy,
)
from .difficulty import DifficultyPolicy, fallback_order
from .selector import QuestionSelector
from .stats import StatsReporter, accuracy_percent, format_elapsed

__all__ = [
    "apply_answer",
    "apply_correct",
    "apply_incorrect",
    "expected_questions_for_accuracy",
    "DifficultyPolicy",
    "fallback_order",
    "QuestionSelector",
    "StatsReporter",
    "accuracy_percent",
    "format_elapsed",
]
