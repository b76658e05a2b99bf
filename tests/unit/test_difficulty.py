"""
Unit tests for the difficulty policy.
"""

import random
import unittest
from unittest.mock import Mock

from src.config import PowerPathConfig
from src.engine.difficulty import DifficultyPolicy, fallback_order


class TestFallbackOrder(unittest.TestCase):
    """Test fixed fallback sequences."""

    def test_orders(self):
        """Test fallback order for each tier."""
        self.assertEqual(fallback_order("easy"), ["easy", "medium", "hard"])
        self.assertEqual(fallback_order("medium"), ["medium", "hard", "easy"])
        self.assertEqual(fallback_order("hard"), ["hard", "medium", "easy"])

    def test_returns_fresh_list(self):
        """Test callers cannot alter the shared order."""
        order = fallback_order("easy")
        order.append("x")
        self.assertEqual(fallback_order("easy"), ["easy", "medium", "hard"])


class TestTargetTier(unittest.TestCase):
    """Test score → tier targeting."""

    def setUp(self):
        """Set up test fixtures."""
        self.settings = PowerPathConfig(medium_probability=0.75, random_seed=None)

    def test_low_scores_are_easy(self):
        """Test scores below 50 target easy."""
        policy = DifficultyPolicy(rng=random.Random(0), settings=self.settings)
        for score in (0, 25, 49):
            self.assertEqual(policy.target_tier(score), "easy")

    def test_high_scores_are_hard(self):
        """Test scores of 90 and above target hard."""
        policy = DifficultyPolicy(rng=random.Random(0), settings=self.settings)
        for score in (90, 95, 100):
            self.assertEqual(policy.target_tier(score), "hard")

    def test_mid_scores_use_random_draw(self):
        """Test the mid band draws medium below the probability, else hard."""
        rng = Mock()
        policy = DifficultyPolicy(rng=rng, settings=self.settings)

        rng.random.return_value = 0.74
        self.assertEqual(policy.target_tier(50), "medium")

        rng.random.return_value = 0.75
        self.assertEqual(policy.target_tier(89), "hard")

    def test_deterministic_bands_do_not_consume_randomness(self):
        """Test easy and hard bands never draw."""
        rng = Mock()
        policy = DifficultyPolicy(rng=rng, settings=self.settings)
        policy.target_tier(10)
        policy.target_tier(95)
        rng.random.assert_not_called()

    def test_mid_band_mix_is_roughly_three_to_one(self):
        """Test the mid band mix over many draws."""
        policy = DifficultyPolicy(rng=random.Random(99), settings=self.settings)
        draws = [policy.target_tier(70) for _ in range(4000)]
        medium_share = draws.count("medium") / len(draws)
        self.assertGreater(medium_share, 0.70)
        self.assertLess(medium_share, 0.80)
        self.assertEqual(set(draws), {"medium", "hard"})

    def test_tier_order_starts_with_target(self):
        """Test tier order begins with the target tier."""
        policy = DifficultyPolicy(rng=random.Random(0), settings=self.settings)
        self.assertEqual(policy.tier_order(10), ["easy", "medium", "hard"])
        self.assertEqual(policy.tier_order(95), ["hard", "medium", "easy"])


if __name__ == "__main__":
    unittest.main()
