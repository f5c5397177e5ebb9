"""
Unit tests for pairing lookup tables and configuration.
"""

import unittest
from unittest.mock import patch
import sys
import os
import logging

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from pairing_config import (
    GENRE_WEIGHTS,
    KEYWORD_MODIFIERS,
    RATING_BONUS_TIERS,
    SPICE_LEVEL_THRESHOLDS,
    SPICE_LEVEL_NAMES,
    FOOD_RECOMMENDATIONS,
    DRINK_PAIRINGS,
    RESEARCH_INFO,
    DEFAULT_PROFILE,
    INSIGHT_TEXTS,
    TRAIT_LABELS,
    TRAIT_EMOJIS,
    LOG_LEVEL_ENV_VAR,
    configure_logging
)


class TestPairingConstants(unittest.TestCase):
    """Test lookup tables and their invariants."""

    def test_genre_weights_structure(self):
        """Test genre weight configuration."""
        self.assertEqual(len(GENRE_WEIGHTS), 17)
        for genre, weight in GENRE_WEIGHTS.items():
            self.assertIsInstance(genre, str)
            self.assertGreaterEqual(weight, 0)
            self.assertLessEqual(weight, 30)

        self.assertEqual(GENRE_WEIGHTS["Action"], 30)
        self.assertEqual(GENRE_WEIGHTS["Romance"], 0)

    def test_keyword_modifiers_structure(self):
        """Test keyword modifiers are lowercase and in range."""
        for keyword, modifier in KEYWORD_MODIFIERS.items():
            self.assertEqual(keyword, keyword.lower())
            self.assertIn(modifier, (3, 5, -10))

        self.assertEqual(KEYWORD_MODIFIERS["slow-burn"], -10)

    def test_tables_are_read_only(self):
        """Test lookup tables cannot be modified at runtime."""
        with self.assertRaises(TypeError):
            GENRE_WEIGHTS["Action"] = 0
        with self.assertRaises(TypeError):
            KEYWORD_MODIFIERS["new"] = 5
        with self.assertRaises(TypeError):
            FOOD_RECOMMENDATIONS[0] = ()
        with self.assertRaises(TypeError):
            DEFAULT_PROFILE["sensation_seeking"] = 0
        with self.assertRaises(TypeError):
            INSIGHT_TEXTS["spice"]["high"] = ""
        with self.assertRaises(TypeError):
            INSIGHT_TEXTS["comfort"] = {}
        with self.assertRaises(TypeError):
            TRAIT_LABELS["sensation_seeking"] = ""
        with self.assertRaises(TypeError):
            TRAIT_EMOJIS["comfort_seeking"] = ""

    def test_thresholds_descending(self):
        rating_thresholds = [threshold for threshold, _ in RATING_BONUS_TIERS]
        spice_thresholds = [threshold for threshold, _ in SPICE_LEVEL_THRESHOLDS]
        self.assertEqual(rating_thresholds, sorted(rating_thresholds, reverse=True))
        self.assertEqual(spice_thresholds, sorted(spice_thresholds, reverse=True))

    def test_food_and_names_cover_levels(self):
        self.assertEqual(len(SPICE_LEVEL_NAMES), 5)
        self.assertEqual(sorted(FOOD_RECOMMENDATIONS.keys()), [0, 1, 2, 3, 4])
        for dishes in FOOD_RECOMMENDATIONS.values():
            self.assertEqual(len(dishes), 4)

    def test_drinks_and_research(self):
        self.assertEqual(set(DRINK_PAIRINGS.keys()), {"spicy", "mild", "comfort"})
        self.assertIn("Byrnes", RESEARCH_INFO["citation"])
        self.assertTrue(RESEARCH_INFO["url"].startswith("https://"))


class TestConfigureLogging(unittest.TestCase):

    def setUp(self):
        self.root_level = logging.getLogger().level

    def tearDown(self):
        logging.getLogger().setLevel(self.root_level)

    def test_explicit_level(self):
        self.assertEqual(configure_logging("debug"), logging.DEBUG)
        self.assertEqual(logging.getLogger().level, logging.DEBUG)

    @patch.dict(os.environ, {LOG_LEVEL_ENV_VAR: "INFO"})
    def test_level_from_environment(self):
        self.assertEqual(configure_logging(), logging.INFO)

    @patch.dict(os.environ, {LOG_LEVEL_ENV_VAR: "chatty"})
    def test_unknown_level_falls_back(self):
        self.assertEqual(configure_logging(), logging.WARNING)


if __name__ == '__main__':
    unittest.main()
