"""
Score model - bounded mastery score update.

Increments shrink as the score grows and penalties grow with it:
- correct:   delta = max(4, 14 - floor(score / 10)), capped at 100
- incorrect: delta from the score bracket below, floored at 0
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

try:
    from ..config import PowerPathConfig, config
except ImportError:
    from src.config import PowerPathConfig, config

logger = logging.getLogger(__name__)

# (inclusive lower bound, delta), checked top-down
DECREMENT_BRACKETS: Tuple[Tuple[int, int], ...] = (
    (90, -8),
    (80, -7),
    (70, -6),
    (50, -5),
    (40, -4),
    (30, -3),
    (20, -2),
)
DEFAULT_DECREMENT = -1


def correct_increment(score: int, settings: Optional[PowerPathConfig] = None) -> int:
    """Points gained for a correct answer at the given score."""
    settings = settings or config.powerpath
    return max(settings.min_increment, settings.base_increment - score // 10)


def incorrect_decrement(score: int) -> int:
    """Points lost (negative) for an incorrect answer at the given score."""
    for lower_bound, delta in DECREMENT_BRACKETS:
        if score >= lower_bound:
            return delta
    return DEFAULT_DECREMENT


def apply_correct(score: int, settings: Optional[PowerPathConfig] = None) -> Tuple[int, int]:
    """
    Apply a correct answer.

    Returns:
        (new_score, delta) where delta is the uncapped increment
    """
    settings = settings or config.powerpath
    delta = correct_increment(score, settings)
    return min(settings.max_score, score + delta), delta


def apply_incorrect(score: int, settings: Optional[PowerPathConfig] = None) -> Tuple[int, int]:
    """
    Apply an incorrect answer.

    Returns:
        (new_score, delta) where delta is the bracket penalty (negative)
    """
    settings = settings or config.powerpath
    delta = incorrect_decrement(score)
    return max(settings.min_score, score + delta), delta


def apply_answer(
    score: int, was_correct: bool, settings: Optional[PowerPathConfig] = None
) -> Tuple[int, int]:
    """Dispatch to apply_correct / apply_incorrect."""
    if was_correct:
        new_score, delta = apply_correct(score, settings)
    else:
        new_score, delta = apply_incorrect(score, settings)
    logger.debug("Score %d -> %d (delta %+d)", score, new_score, delta)
    return new_score, delta


# Accuracy percent → average questions to reach 100 (informational)
EXPECTED_QUESTIONS: Tuple[Tuple[int, float], ...] = (
    (100, 11),
    (99, 11.2),
    (95, 12.2),
    (90, 13.5),
    (80, 17.1),
    (70, 23.9),
    (60, 35.3),
    (50, 71.2),
)
EXPECTED_QUESTIONS_FLOOR = 100


def expected_questions_for_accuracy(accuracy_percent: float) -> float:
    """
    Estimated questions needed to reach a score of 100 at a given accuracy.

    Uses the highest tabulated accuracy not above the input; below 50% → 100.
    Not used for engine control flow.
    """
    for accuracy, questions in EXPECTED_QUESTIONS:
        if accuracy_percent >= accuracy:
            return questions
    return EXPECTED_QUESTIONS_FLOOR
