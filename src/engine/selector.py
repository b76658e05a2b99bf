"""
Question selector - picks the next quiz question.

Waterfall, stopping at the first step that yields candidates:
1. Never answered in any attempt, walking the tier order
2. Not answered in the current attempt, walking the tier order
3. Any question, walking the tier order
4. Nothing (empty quiz pool)

Within the chosen candidates, human-approved items come first; each
partition is shuffled independently.
"""

from __future__ import annotations

import logging
import random
from typing import Dict, Iterable, List, Optional, Sequence, Set

try:
    from ..models.history import QuestionHistory
    from ..models.question import TIERS, Difficulty, Question
except ImportError:
    from src.models.history import QuestionHistory
    from src.models.question import TIERS, Difficulty, Question

logger = logging.getLogger(__name__)

STEP_GLOBAL_UNSEEN = "global_unseen"
STEP_ATTEMPT_UNSEEN = "attempt_unseen"
STEP_ANY = "any"


class QuestionSelector:
    """
    Multi-tier selection over a fixed quiz pool.

    Args:
        questions: Normalized quiz questions (never mutated)
        rng: Random source for tie-breaking shuffles
    """

    def __init__(self, questions: Sequence[Question], rng: Optional[random.Random] = None):
        self.questions = tuple(questions)
        self.rng = rng or random.Random()
        self._by_tier: Dict[Difficulty, List[Question]] = {tier: [] for tier in TIERS}
        for question in self.questions:
            self._by_tier[question.difficulty].append(question)

    def questions_for_tier(self, tier: Difficulty) -> List[Question]:
        return list(self._by_tier[tier])

    def counts(self) -> Dict[str, int]:
        counts = {tier: len(self._by_tier[tier]) for tier in TIERS}
        counts["total"] = len(self.questions)
        return counts

    def select(self, tier_order: Iterable[Difficulty], history: QuestionHistory) -> Optional[Question]:
        """
        Choose the next question.

        Args:
            tier_order: Target tier followed by its fallbacks
            history: Answer logs used for exposure checks

        Returns:
            A question, or None when the pool is empty
        """
        tier_order = list(tier_order)
        steps = (
            (STEP_GLOBAL_UNSEEN, history.globally_seen_ids()),
            (STEP_ATTEMPT_UNSEEN, history.attempt_seen_ids()),
            (STEP_ANY, set()),
        )

        for step, excluded in steps:
            for tier in tier_order:
                candidates = self._candidates(tier, excluded)
                if candidates:
                    logger.debug(
                        "Selected from tier=%s step=%s (%d candidate(s))",
                        tier, step, len(candidates),
                    )
                    return self.prioritize_human_approved(candidates)[0]

        logger.warning("Quiz pool is empty; no question to serve")
        return None

    def prioritize_human_approved(self, questions: Sequence[Question]) -> List[Question]:
        """Shuffle approved and non-approved items separately, approved first."""
        approved = [q for q in questions if q.is_human_approved]
        others = [q for q in questions if not q.is_human_approved]
        self.rng.shuffle(approved)
        self.rng.shuffle(others)
        return approved + others

    def _candidates(self, tier: Difficulty, excluded: Set[str]) -> List[Question]:
        return [q for q in self._by_tier[tier] if q.id not in excluded]
