"""
Simulated PowerPath Session

Plays one attempt with a scripted learner: guiding questions first, then
adaptive quiz questions until the score reaches 100, then shows how a new
attempt avoids already-seen questions.
"""

import random
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from src.config import setup_logging
from src.orchestrator import PowerPathEngine


def build_items():
    guiding = [
        {
            "id": f"section-{i}",
            "prompt": f"What is section {i} mostly about?",
            "choices": [
                {"id": "A", "text": "The main idea", "correct": True},
                {"id": "B", "text": "A detail", "correct": False},
            ],
        }
        for i in range(1, 4)
    ]
    quiz = []
    for descriptor in ("low", "medium", "high"):
        for i in range(5):
            quiz.append({
                "id": f"quiz-{descriptor}-{i}",
                "prompt": f"{descriptor.title()} question {i}",
                "choices": [
                    {"id": "A", "text": "Correct", "correct": True},
                    {"id": "B", "text": "Incorrect", "correct": False},
                ],
                "metadata": {"difficulty": descriptor, "humanApproved": i % 2 == 0},
            })
    return guiding, quiz


def print_stats(stats):
    print(
        f"   score={stats.score:3d}  answered={stats.questions_answered:2d}  "
        f"accuracy={stats.accuracy:3d}%  elapsed={stats.time_elapsed}"
    )


def main():
    setup_logging("WARNING")
    guiding, quiz = build_items()
    learner = random.Random(2024)

    engine = PowerPathEngine(guiding, quiz, on_stats_update=print_stats, rng=random.Random(7))
    print("Question counts:", engine.get_question_counts())
    print()

    while not engine.is_complete():
        question = engine.get_next_question()
        if question is None:
            break
        correct = learner.random() < 0.8
        delta = engine.record_answer(question.id, correct)
        print(f"[{engine.get_current_phase():7s}] {question.id:16s} ({question.difficulty:6s}) "
              f"{'✓' if correct else '✗'} {delta:+d}")

    print()
    print("Complete!" if engine.is_complete() else "Pool exhausted.")
    print(f"Expected questions at 80% accuracy: {engine.expected_questions_for_accuracy(80)}")

    seen = engine.history.globally_seen_ids()
    engine.reset_attempt()
    for guiding_item in guiding:
        engine.record_answer(guiding_item["id"], True)
    next_question = engine.get_next_question()
    print(f"\nAttempt {engine.attempt_number} starts with {next_question.id} "
          f"(previously seen: {next_question.id in seen})")


if __name__ == "__main__":
    main()
