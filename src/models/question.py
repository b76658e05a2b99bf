"""
Question model for the adaptive engine.

Questions are immutable once loaded. Quiz questions carry a canonical
difficulty tier derived from free-form metadata; guiding questions are
served in input order and never consult the tier.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Literal, Mapping, Optional, Tuple

Difficulty = Literal["easy", "medium", "hard"]

TIERS: Tuple[Difficulty, ...] = ("easy", "medium", "hard")

_EASY_DESCRIPTORS = {"easy", "low"}
_HARD_DESCRIPTORS = {"hard", "high", "difficult"}


def parse_difficulty(descriptor: Any) -> Difficulty:
    """
    Map a free-form difficulty descriptor onto a tier.

    "easy"/"low" → easy, "hard"/"high"/"difficult" → hard (case-insensitive);
    anything else, including None or a non-string value, → medium.
    """
    if not descriptor:
        return "medium"
    lower = str(descriptor).strip().lower()
    if lower in _EASY_DESCRIPTORS:
        return "easy"
    if lower in _HARD_DESCRIPTORS:
        return "hard"
    return "medium"


@dataclass(frozen=True)
class Choice:
    """One answer option of a question."""

    id: str
    text: str
    correct: bool = False
    feedback: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Choice":
        return cls(
            id=str(data.get("id") or data.get("identifier") or ""),
            text=str(data.get("text", "")),
            correct=bool(data.get("correct", data.get("is_correct", False))),
            feedback=str(data.get("feedback") or ""),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "text": self.text,
            "correct": self.correct,
            "feedback": self.feedback,
        }


@dataclass(frozen=True)
class Question:
    """
    A guiding or quiz question.

    Attributes:
        id: Identifier, unique within its pool
        prompt: Question text
        choices: Ordered answer options
        difficulty: Tier (easy/medium/hard)
        human_approved: Whether the item is vetted content (None if unknown)
        metadata: Opaque descriptor mapping (dok, difficulty, ccss, ...)
    """

    id: str
    prompt: str = ""
    choices: Tuple[Choice, ...] = ()
    difficulty: Difficulty = "medium"
    human_approved: Optional[bool] = None
    metadata: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        # read-only copies; pool contents never change after load
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata or {})))
        object.__setattr__(self, "choices", tuple(self.choices))

    @property
    def is_human_approved(self) -> bool:
        return self.human_approved is True

    @property
    def correct_choice_ids(self) -> List[str]:
        return [choice.id for choice in self.choices if choice.correct]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Question":
        """
        Build a Question from a game-format item.

        The difficulty comes from metadata.difficulty when present, else from
        a top-level difficulty; humanApproved may live at either level.
        """
        metadata = dict(data.get("metadata") or {})
        human_approved = data.get("humanApproved", metadata.get("humanApproved"))
        return cls(
            id=str(data["id"]),
            prompt=str(data.get("prompt", "")),
            choices=tuple(Choice.from_dict(c) for c in data.get("choices") or ()),
            difficulty=parse_difficulty(metadata.get("difficulty") or data.get("difficulty")),
            human_approved=None if human_approved is None else bool(human_approved),
            metadata=metadata,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        data: Dict[str, Any] = {
            "id": self.id,
            "prompt": self.prompt,
            "choices": [c.to_dict() for c in self.choices],
            "difficulty": self.difficulty,
            "metadata": dict(self.metadata),
        }
        if self.human_approved is not None:
            data["humanApproved"] = self.human_approved
        return data


def normalize_quiz_question(question: Question) -> Question:
    """Re-derive the tier, preferring metadata["difficulty"] over the preset tier."""
    descriptor = (question.metadata or {}).get("difficulty") or question.difficulty
    tier = parse_difficulty(descriptor)
    if tier == question.difficulty:
        return question
    return replace(question, difficulty=tier)


def normalize_quiz_questions(questions: Iterable[Question]) -> List[Question]:
    return [normalize_quiz_question(q) for q in questions]


def convert_questions(items: Iterable[Mapping[str, Any]]) -> List[Question]:
    """Convert game-format items (dicts) to Questions; Question instances pass through."""
    return [item if isinstance(item, Question) else Question.from_dict(item) for item in items]
