"""
Difficulty policy - maps the current score onto a target tier.

score >= 90        → hard
50 <= score < 90   → medium (75%) or hard (25%)
score < 50         → easy
"""

from __future__ import annotations

import random
from typing import Dict, List, Optional, Tuple

try:
    from ..config import PowerPathConfig, config
    from ..models.question import Difficulty
except ImportError:
    from src.config import PowerPathConfig, config
    from src.models.question import Difficulty

FALLBACK_ORDER: Dict[Difficulty, Tuple[Difficulty, Difficulty, Difficulty]] = {
    "easy": ("easy", "medium", "hard"),
    "medium": ("medium", "hard", "easy"),
    "hard": ("hard", "medium", "easy"),
}


def fallback_order(primary: Difficulty) -> List[Difficulty]:
    """Primary tier first, then the remaining two in fixed order."""
    return list(FALLBACK_ORDER[primary])


class DifficultyPolicy:
    """
    Target-tier selection with an injectable random source.

    Args:
        rng: Random source for the medium/hard draw (seeded for tests)
        settings: Thresholds and medium probability (default: config.powerpath)
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        settings: Optional[PowerPathConfig] = None,
    ):
        self.rng = rng or random.Random()
        self.settings = settings or config.powerpath

    def target_tier(self, score: int) -> Difficulty:
        if score >= self.settings.hard_only_threshold:
            return "hard"
        if score >= self.settings.mixed_threshold:
            return "medium" if self.rng.random() < self.settings.medium_probability else "hard"
        return "easy"

    def fallback_order(self, primary: Difficulty) -> List[Difficulty]:
        return fallback_order(primary)

    def tier_order(self, score: int) -> List[Difficulty]:
        """Draw a target tier for the score and return its fallback order."""
        return self.fallback_order(self.target_tier(score))
