"""
PowerPath Engine Orchestrator

Serves questions to a single learner and keeps a bounded mastery score:
1. Guiding questions, strictly in input order
2. Quiz questions, chosen adaptively from the score (difficulty policy +
   exposure-aware selection)
3. Completion once the score reaches 100

Score targets by accuracy (approximate questions to reach 100):
100% → 11, 90% → 13.5, 80% → 17.1, 70% → 23.9
"""

from __future__ import annotations

import logging
import random
import time
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Union

from .config import PowerPathConfig, config
from .engine.difficulty import DifficultyPolicy
from .engine.scoring import apply_answer, expected_questions_for_accuracy
from .engine.selector import QuestionSelector
from .engine.stats import StatsObserver, StatsReporter, accuracy_percent
from .exceptions import QuestionPoolError
from .models.history import HistoryEntry, QuestionHistory
from .models.question import Question, convert_questions, normalize_quiz_questions
from .models.state import Phase, PowerPathState, PowerPathStats
from .utils.validation import validate_question_pool

logger = logging.getLogger(__name__)

QuestionInput = Union[Question, Mapping[str, Any]]
Clock = Callable[[], float]


class PowerPathEngine:
    """
    Adaptive question engine for one learner and one session.

    Not safe for concurrent mutation; callers serialize record_answer and
    the reset operations.
    """

    def __init__(
        self,
        guiding_questions: Iterable[QuestionInput] = (),
        quiz_questions: Iterable[QuestionInput] = (),
        on_stats_update: Optional[StatsObserver] = None,
        rng: Optional[random.Random] = None,
        clock: Optional[Clock] = None,
        settings: Optional[PowerPathConfig] = None,
        validate: Optional[bool] = None,
    ):
        """
        Initialize the engine.

        Args:
            guiding_questions: Fixed-order questions served first
            quiz_questions: Adaptive pool (tiers re-derived from metadata)
            on_stats_update: Observer called with PowerPathStats after every change
            rng: Random source for tier draws and shuffles (default: seeded
                from config.powerpath.random_seed)
            clock: Seconds-returning time source (default: time.monotonic)
            settings: Score/difficulty settings (default: config.powerpath)
            validate: Schema-check raw dict items (default: settings.validate_pools)

        Raises:
            QuestionPoolError: If ids repeat within a pool, overlap across
                pools, or raw items fail schema validation
        """
        self.settings = settings or config.powerpath
        self.rng = rng or random.Random(self.settings.random_seed)
        self.clock: Clock = clock or time.monotonic

        should_validate = self.settings.validate_pools if validate is None else validate
        guiding_items = list(guiding_questions)
        quiz_items = list(quiz_questions)
        if should_validate:
            self._validate_raw_items(guiding_items, quiz_items)

        self._guiding: List[Question] = convert_questions(guiding_items)
        self._quiz: List[Question] = normalize_quiz_questions(convert_questions(quiz_items))
        self._check_pools()

        self.policy = DifficultyPolicy(rng=self.rng, settings=self.settings)
        self.selector = QuestionSelector(self._quiz, rng=self.rng)
        self.reporter = StatsReporter(on_stats_update)
        self._history = QuestionHistory()
        self._pool_ids = {q.id for q in self._guiding} | {q.id for q in self._quiz}

        self._score = 0
        self._questions_answered = 0
        self._correct_answers = 0
        self._guiding_cursor = 0
        self._attempt_number = 1
        self._start_time = self.clock()

        logger.debug(
            "PowerPath engine ready: %d guiding, %d quiz question(s) %s",
            len(self._guiding), len(self._quiz), self.selector.counts(),
        )

    # ==================== Pool checks ====================

    @staticmethod
    def _validate_raw_items(guiding_items: List[Any], quiz_items: List[Any]) -> None:
        errors: List[str] = []
        for name, items in (("guiding", guiding_items), ("quiz", quiz_items)):
            raw = [item for item in items if not isinstance(item, Question)]
            if raw:
                errors.extend(validate_question_pool(raw, pool_name=name).errors)
        if errors:
            raise QuestionPoolError("Invalid question pool", errors)

    def _check_pools(self) -> None:
        errors: List[str] = []
        for name, pool in (("guiding", self._guiding), ("quiz", self._quiz)):
            seen = set()
            for question in pool:
                if not question.id:
                    errors.append(f"{name}: question with empty id")
                elif question.id in seen:
                    errors.append(f"{name}: duplicate question id '{question.id}'")
                seen.add(question.id)

        overlap = {q.id for q in self._guiding} & {q.id for q in self._quiz}
        for question_id in sorted(overlap):
            errors.append(f"question id '{question_id}' is in both guiding and quiz pools")

        if errors:
            raise QuestionPoolError("Invalid question pool", errors)

    # ==================== State ====================

    @property
    def score(self) -> int:
        return self._score

    @property
    def attempt_number(self) -> int:
        return self._attempt_number

    @property
    def guiding_cursor(self) -> int:
        return self._guiding_cursor

    @property
    def history(self) -> QuestionHistory:
        return self._history

    @property
    def guiding_questions(self) -> tuple:
        return tuple(self._guiding)

    @property
    def quiz_questions(self) -> tuple:
        return tuple(self._quiz)

    def get_current_phase(self) -> Phase:
        """Derived from the guiding cursor: "guiding" until the guiding pool is exhausted."""
        return "guiding" if self._guiding_cursor < len(self._guiding) else "quiz"

    def is_complete(self) -> bool:
        return self._score >= self.settings.max_score

    def get_state(self) -> PowerPathState:
        """Read-only snapshot of the full engine state."""
        return PowerPathState(
            score=self._score,
            questions_answered=self._questions_answered,
            correct_answers=self._correct_answers,
            accuracy=accuracy_percent(self._correct_answers, self._questions_answered),
            is_complete=self.is_complete(),
            current_phase=self.get_current_phase(),
            guiding_questions_remaining=max(0, len(self._guiding) - self._guiding_cursor),
            guiding_cursor=self._guiding_cursor,
            attempt_number=self._attempt_number,
            elapsed_time_ms=int((self.clock() - self._start_time) * 1000),
        )

    def get_stats(self) -> PowerPathStats:
        """Display-ready stats (score, answered, accuracy, HH:MM:SS, complete)."""
        return self.reporter.snapshot(self.get_state())

    def get_question_counts(self) -> Dict[str, int]:
        """Quiz pool counts per tier plus total."""
        return self.selector.counts()

    @staticmethod
    def expected_questions_for_accuracy(accuracy_percent: float) -> float:
        """Informational lookup; see src.engine.scoring.EXPECTED_QUESTIONS."""
        return expected_questions_for_accuracy(accuracy_percent)

    # ==================== Serving ====================

    def get_next_question(self) -> Optional[Question]:
        """
        Get the next question to present.

        Returns:
            The guiding question at the cursor while guiding questions
            remain, otherwise an adaptively selected quiz question; None
            when complete or the quiz pool is empty.
        """
        if self.is_complete():
            return None

        if self.get_current_phase() == "guiding":
            return self._guiding[self._guiding_cursor]

        tier_order = self.policy.tier_order(self._score)
        logger.debug("Score %d → tier order %s", self._score, tier_order)
        return self.selector.select(tier_order, self._history)

    def record_answer(self, question_id: str, was_correct: bool) -> int:
        """
        Record an answer and update the score.

        The id is not checked against the last question served; unknown ids
        are accepted and logged.

        Args:
            question_id: Answered question
            was_correct: Whether the answer was correct

        Returns:
            The signed score delta applied

        Raises:
            ValueError: If question_id is empty
            TypeError: If was_correct is not a bool
        """
        if not isinstance(question_id, str) or not question_id.strip():
            raise ValueError("question_id must be a non-empty string")
        if not isinstance(was_correct, bool):
            raise TypeError(f"was_correct must be a bool, got {type(was_correct).__name__}")
        if question_id not in self._pool_ids:
            logger.warning("Recording answer for unknown question id '%s'", question_id)

        self._questions_answered += 1
        self._history.append(
            HistoryEntry(
                question_id=question_id,
                was_correct=was_correct,
                attempt_number=self._attempt_number,
                timestamp=self.clock(),
            )
        )

        if (
            self._guiding_cursor < len(self._guiding)
            and self._guiding[self._guiding_cursor].id == question_id
        ):
            self._guiding_cursor += 1

        was_complete = self.is_complete()
        self._score, delta = apply_answer(self._score, was_correct, self.settings)
        if was_correct:
            self._correct_answers += 1

        if self.is_complete() and not was_complete:
            logger.info(
                "PowerPath complete after %d question(s) (attempt %d)",
                self._questions_answered, self._attempt_number,
            )

        self.reporter.notify(self.get_state())
        return delta

    # ==================== Resets ====================

    def _reset_counters(self) -> None:
        self._score = 0
        self._questions_answered = 0
        self._correct_answers = 0
        self._guiding_cursor = 0
        self._start_time = self.clock()

    def reset_attempt(self) -> None:
        """Start a new attempt; global history still steers selection away from seen items."""
        self._reset_counters()
        self._history.clear_attempt()
        self._attempt_number += 1
        logger.info("Attempt reset; now on attempt %d", self._attempt_number)
        self.reporter.notify(self.get_state())

    def full_reset(self) -> None:
        """Reset everything, including global history and the attempt number."""
        self._reset_counters()
        self._history.clear_all()
        self._attempt_number = 1
        logger.info("Full reset; history cleared")
        self.reporter.notify(self.get_state())
