"""
Unit tests for the score model.

Tests:
- Increment formula and ceiling
- Decrement brackets and floor
- Expected-questions lookup table
"""

import random

import pytest

from src.engine.scoring import (
    apply_answer,
    apply_correct,
    apply_incorrect,
    correct_increment,
    expected_questions_for_accuracy,
    incorrect_decrement,
)


class TestCorrectAnswers:
    """Test suite for score increments."""

    def test_five_correct_from_zero(self):
        """Deltas follow max(4, 14 - floor(score/10))."""
        score = 0
        deltas = []
        for _ in range(5):
            score, delta = apply_correct(score)
            deltas.append(delta)
        assert deltas == [14, 13, 12, 11, 9]
        assert score == 59

    def test_increment_never_below_four(self):
        """Test the increment floor of four."""
        assert correct_increment(99) == 5
        assert correct_increment(100) == 4

    def test_caps_at_100(self):
        """At 96 a correct answer lands on 100, not 101."""
        new_score, delta = apply_correct(96)
        assert delta == 5
        assert new_score == 100

    def test_correct_at_ceiling_stays_at_ceiling(self):
        """Test a correct answer at 100 stays at 100."""
        assert apply_correct(100) == (100, 4)


class TestIncorrectAnswers:
    """Test suite for score decrements."""

    @pytest.mark.parametrize(
        "score,expected",
        [
            (100, -8), (90, -8), (89, -7), (80, -7), (79, -6), (70, -6),
            (69, -5), (50, -5), (49, -4), (40, -4), (39, -3), (30, -3),
            (29, -2), (20, -2), (19, -1), (0, -1),
        ],
    )
    def test_bracket_boundaries(self, score, expected):
        """Test decrement at each bracket boundary."""
        assert incorrect_decrement(score) == expected

    def test_floor_at_zero(self):
        """Score never drops below zero; the bracket delta is still reported."""
        assert apply_incorrect(0) == (0, -1)

    def test_regular_decrement(self):
        """Test decrements away from the floor."""
        assert apply_incorrect(90) == (82, -8)
        assert apply_incorrect(89) == (82, -7)


class TestScoreInvariant:
    """Score stays within [0, 100] for any answer sequence."""

    def test_random_sequences_stay_bounded(self):
        """Test random answer sequences stay bounded."""
        rng = random.Random(7)
        for _ in range(200):
            score = 0
            for _ in range(60):
                score, _ = apply_answer(score, rng.random() < 0.6)
                assert 0 <= score <= 100


class TestExpectedQuestions:
    """Test suite for the informational lookup table."""

    @pytest.mark.parametrize(
        "accuracy,expected",
        [(100, 11), (99, 11.2), (97, 12.2), (95, 12.2), (90, 13.5), (85, 17.1),
         (70, 23.9), (60, 35.3), (50, 71.2), (49, 100), (0, 100)],
    )
    def test_lookup(self, accuracy, expected):
        """Test lookup values for selected accuracies."""
        assert expected_questions_for_accuracy(accuracy) == expected
