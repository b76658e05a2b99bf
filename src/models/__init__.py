"""
Data models for the PowerPath adaptive engine.

This module contains core data models:
- Question / Choice: Immutable question content with a difficulty tier
- HistoryEntry / QuestionHistory: Global and per-attempt answer logs
- PowerPathState / PowerPathStats: Read-only snapshots of engine state
"""

from .question import (
    TIERS,
    Choice,
    Difficulty,
    Question,
    convert_questions,
    normalize_quiz_questions,
    parse_difficulty,
)
from .history import HistoryEntry, QuestionHistory
from .state import Phase, PowerPathState, PowerPathStats

__all__ = [
    "TIERS",
    "Choice",
    "Difficulty",
    "Question",
    "convert_questions",
    "normalize_quiz_questions",
    "parse_difficulty",
    "HistoryEntry",
    "QuestionHistory",
    "Phase",
    "PowerPathState",
    "PowerPathStats",
]
