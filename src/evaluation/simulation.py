"""
Expected-questions simulation

Drives a real PowerPathEngine with a synthetic question pool and a
Bernoulli learner to estimate how many questions are needed to reach a
score of 100 at a given accuracy, and compares the estimate with the
engine's lookup table.

Informational only: nothing here feeds back into engine control flow.
"""

from __future__ import annotations

import random
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional, Sequence

import numpy as np
from scipy import stats

from ..engine.scoring import expected_questions_for_accuracy
from ..models.question import TIERS, Choice, Question
from ..orchestrator import PowerPathEngine


@dataclass
class SimulationResult:
    """Summary of questions-to-mastery over many simulated attempts."""

    accuracy: float  # 0-100
    trials: int
    completed_trials: int
    completion_rate: float  # completed / trials
    mean: float
    median: float
    std: float
    min: float
    max: float
    ci_low: float  # 95% confidence interval of the mean
    ci_high: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def build_synthetic_pool(per_tier: int = 20) -> List[Question]:
    """Create per_tier two-choice questions for each difficulty tier."""
    pool = []
    for tier in TIERS:
        for i in range(per_tier):
            pool.append(
                Question(
                    id=f"sim-{tier}-{i:03d}",
                    prompt=f"Synthetic {tier} question {i}",
                    choices=(Choice("A", "right", correct=True), Choice("B", "wrong")),
                    difficulty=tier,
                )
            )
    return pool


def run_attempt(
    accuracy: float,
    rng: random.Random,
    pool: Sequence[Question],
    max_questions: int = 500,
) -> Optional[int]:
    """
    Simulate one attempt.

    Args:
        accuracy: Probability (0-100) of answering correctly
        rng: Random source for answers, tier draws and shuffles
        pool: Quiz questions
        max_questions: Give up after this many answers

    Returns:
        Questions answered to reach 100, or None if max_questions was hit
    """
    engine = PowerPathEngine(quiz_questions=pool, rng=rng, validate=False)
    p_correct = accuracy / 100.0

    while engine.get_state().questions_answered < max_questions:
        question = engine.get_next_question()
        if question is None:
            break
        engine.record_answer(question.id, rng.random() < p_correct)
        if engine.is_complete():
            return engine.get_state().questions_answered
    return None


def simulate_questions_to_mastery(
    accuracy: float,
    trials: int = 500,
    seed: Optional[int] = 42,
    max_questions: int = 500,
    per_tier: int = 20,
) -> SimulationResult:
    """
    Estimate questions needed to reach 100 at a fixed accuracy.

    Args:
        accuracy: Learner accuracy in percent (0-100)
        trials: Number of simulated attempts
        seed: Seed for reproducible runs (None for fresh randomness)
        max_questions: Per-attempt cap; capped attempts count as incomplete
        per_tier: Synthetic pool size per tier

    Returns:
        SimulationResult over the completed attempts

    Raises:
        ValueError: If accuracy is outside [0, 100] or trials < 1
    """
    if not (0 <= accuracy <= 100):
        raise ValueError(f"accuracy must be in [0, 100], got {accuracy}")
    if trials < 1:
        raise ValueError(f"trials must be >= 1, got {trials}")

    rng = random.Random(seed)
    pool = build_synthetic_pool(per_tier)
    counts = [run_attempt(accuracy, rng, pool, max_questions) for _ in range(trials)]
    completed = np.array([c for c in counts if c is not None], dtype=float)

    if completed.size == 0:
        nan = float("nan")
        return SimulationResult(
            accuracy=accuracy, trials=trials, completed_trials=0, completion_rate=0.0,
            mean=nan, median=nan, std=nan, min=nan, max=nan, ci_low=nan, ci_high=nan,
        )

    mean = float(np.mean(completed))
    if completed.size > 1 and np.std(completed) > 0:
        ci_low, ci_high = stats.t.interval(
            0.95, completed.size - 1, loc=mean, scale=stats.sem(completed)
        )
    else:
        ci_low = ci_high = mean

    return SimulationResult(
        accuracy=accuracy,
        trials=trials,
        completed_trials=int(completed.size),
        completion_rate=completed.size / trials,
        mean=round(mean, 2),
        median=float(np.median(completed)),
        std=round(float(np.std(completed, ddof=1)) if completed.size > 1 else 0.0, 2),
        min=float(np.min(completed)),
        max=float(np.max(completed)),
        ci_low=round(float(ci_low), 2),
        ci_high=round(float(ci_high), 2),
    )


def compare_with_lookup(
    accuracies: Sequence[float] = (100, 90, 80, 70),
    trials: int = 300,
    seed: Optional[int] = 42,
) -> List[Dict[str, Any]]:
    """
    Compare simulated means with expected_questions_for_accuracy.

    Returns:
        One row per accuracy with simulated mean, lookup value and difference
    """
    rows = []
    for accuracy in accuracies:
        result = simulate_questions_to_mastery(accuracy, trials=trials, seed=seed)
        expected = expected_questions_for_accuracy(accuracy)
        rows.append({
            "accuracy": accuracy,
            "simulated_mean": result.mean,
            "lookup": expected,
            "difference": round(result.mean - expected, 2),
            "completion_rate": result.completion_rate,
        })
    return rows
