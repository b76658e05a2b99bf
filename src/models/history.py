"""
Answer history for the adaptive engine.

Two append-only views are kept: the global log spanning every attempt and
the log of the current attempt. Exposure checks against either view are a
single set build over that view.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Set, Tuple


@dataclass(frozen=True)
class HistoryEntry:
    """
    One recorded answer.

    Attributes:
        question_id: Answered question
        was_correct: Whether the answer was correct
        attempt_number: Attempt the answer belongs to (1-based)
        timestamp: Clock reading at record time (seconds)
    """

    question_id: str
    was_correct: bool
    attempt_number: int
    timestamp: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "question_id": self.question_id,
            "was_correct": self.was_correct,
            "attempt_number": self.attempt_number,
            "timestamp": self.timestamp,
        }


class QuestionHistory:
    """Global and per-attempt answer logs."""

    def __init__(self):
        self._all: List[HistoryEntry] = []
        self._attempt: List[HistoryEntry] = []

    @property
    def all_history(self) -> Tuple[HistoryEntry, ...]:
        return tuple(self._all)

    @property
    def attempt_history(self) -> Tuple[HistoryEntry, ...]:
        return tuple(self._attempt)

    def append(self, entry: HistoryEntry) -> None:
        self._all.append(entry)
        self._attempt.append(entry)

    def globally_seen_ids(self) -> Set[str]:
        """IDs of questions answered in any attempt."""
        return {entry.question_id for entry in self._all}

    def attempt_seen_ids(self) -> Set[str]:
        """IDs of questions answered in the current attempt."""
        return {entry.question_id for entry in self._attempt}

    def clear_attempt(self) -> None:
        self._attempt = []

    def clear_all(self) -> None:
        self._all = []
        self._attempt = []

    def __len__(self) -> int:
        return len(self._all)
