"""
Read-only snapshots of engine state for display layers.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Literal

Phase = Literal["guiding", "quiz"]


@dataclass(frozen=True)
class PowerPathState:
    """Full engine state at a point in time."""

    score: int
    questions_answered: int
    correct_answers: int
    accuracy: int
    is_complete: bool
    current_phase: Phase
    guiding_questions_remaining: int
    guiding_cursor: int
    attempt_number: int
    elapsed_time_ms: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class PowerPathStats:
    """Display-ready stats (score, accuracy, elapsed HH:MM:SS)."""

    score: int
    questions_answered: int
    accuracy: int
    time_elapsed: str
    is_complete: bool

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
