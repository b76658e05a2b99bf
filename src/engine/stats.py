"""
Stats reporter - display-ready snapshots and observer notification.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

try:
    from ..config import config
    from ..models.state import PowerPathStats, PowerPathState
except ImportError:
    from src.config import config
    from src.models.state import PowerPathStats, PowerPathState

logger = logging.getLogger(__name__)

StatsObserver = Callable[[PowerPathStats], None]


def accuracy_percent(correct_answers: int, questions_answered: int) -> int:
    """Rounded percentage of correct answers (0 before any answer)."""
    if questions_answered <= 0:
        return 0
    # round-half-up, matching a display percentage
    return int(100 * correct_answers / questions_answered + 0.5)


def format_elapsed(elapsed_ms: float) -> str:
    """
    Format milliseconds as zero-padded HH:MM:SS.

    Example:
        >>> format_elapsed(3_725_000)
        '01:02:05'
    """
    seconds = max(0, int(elapsed_ms // 1000))
    hours, remainder = divmod(seconds, 3600)
    minutes, secs = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


class StatsReporter:
    """
    Builds PowerPathStats and notifies the registered observer.

    Observer failures are logged and swallowed so that engine state and
    returned deltas stay valid.
    """

    def __init__(self, observer: Optional[StatsObserver] = None):
        self.observer = observer

    def snapshot(self, state: PowerPathState) -> PowerPathStats:
        return PowerPathStats(
            score=state.score,
            questions_answered=state.questions_answered,
            accuracy=state.accuracy,
            time_elapsed=format_elapsed(state.elapsed_time_ms),
            is_complete=state.is_complete,
        )

    def notify(self, state: PowerPathState) -> PowerPathStats:
        stats = self.snapshot(state)
        if config.logging.log_stats_updates:
            logger.debug("Stats update: %s", stats)
        if self.observer is None:
            return stats
        try:
            self.observer(stats)
        except Exception:
            logger.exception("Stats observer raised; engine state is unaffected")
        return stats
