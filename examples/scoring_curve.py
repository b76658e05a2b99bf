"""
Scoring Curve Check

Compares simulated questions-to-mastery against the lookup table used by
PowerPathEngine.expected_questions_for_accuracy.
"""

import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from src.evaluation.simulation import compare_with_lookup


def main():
    print("=" * 64)
    print("POWERPATH 100 - QUESTIONS TO MASTERY BY ACCURACY")
    print("=" * 64)
    print(f"{'accuracy':>9} {'simulated':>10} {'lookup':>8} {'diff':>7} {'completed':>10}")
    for row in compare_with_lookup(accuracies=(100, 95, 90, 80, 70, 60), trials=300):
        print(
            f"{row['accuracy']:>8}% {row['simulated_mean']:>10.1f} {row['lookup']:>8} "
            f"{row['difference']:>+7.1f} {row['completion_rate']:>9.0%}"
        )


if __name__ == "__main__":
    main()
