"""
Shared pytest fixtures and configuration for PowerPath tests.

This file is automatically discovered by pytest and provides
fixtures available to all tests.
"""

import random
import sys
from pathlib import Path

import pytest

# Make the project root importable so tests can use `from src...`
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.models.question import Choice, Question


class FakeClock:
    """Controllable time source (seconds)."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def make_question(
    question_id: str,
    difficulty: str = "medium",
    human_approved=None,
    metadata=None,
) -> Question:
    """Build a two-choice question for tests."""
    return Question(
        id=question_id,
        prompt=f"Prompt for {question_id}",
        choices=(Choice("A", "right", correct=True), Choice("B", "wrong")),
        difficulty=difficulty,
        human_approved=human_approved,
        metadata=metadata or {},
    )


@pytest.fixture
def question_factory():
    """Fixture exposing make_question."""
    return make_question


@pytest.fixture
def rng():
    """Seeded random source for reproducible selection."""
    return random.Random(1234)


@pytest.fixture
def fake_clock():
    """Controllable clock starting at t=1000s."""
    return FakeClock()


@pytest.fixture
def guiding_pool():
    """Three guiding questions, one per content section."""
    return [make_question(f"g{i}") for i in range(1, 4)]


@pytest.fixture
def quiz_pool():
    """Quiz pool with four questions per tier."""
    pool = []
    for tier in ("easy", "medium", "hard"):
        for i in range(4):
            pool.append(make_question(f"{tier}-{i}", difficulty=tier))
    return pool


@pytest.fixture
def raw_quiz_item():
    """A game-format quiz item as delivered by the content layer."""
    return {
        "id": "quiz-001",
        "prompt": "What is the main idea of the passage?",
        "choices": [
            {"id": "A", "text": "Space is big", "feedback": "Yes", "correct": True},
            {"id": "B", "text": "Space is small", "feedback": "No", "correct": False},
        ],
        "metadata": {"difficulty": "HIGH", "dok": 2, "ccss": "RI.4.2", "humanApproved": True},
    }


# Pytest hooks for better test output


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "slow: mark test as slow running")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
