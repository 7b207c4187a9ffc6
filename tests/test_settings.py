# tests/test_settings.py

"""Tests for the Settings configuration class."""

import json
import unittest
from pathlib import Path

from src.config.settings import Settings


class TestSettings(unittest.TestCase):
    """Verify Settings constants and the selector registry."""

    def test_threshold_percentage_default(self) -> None:
        """The discount threshold defaults to 40 percent."""
        self.assertIsInstance(Settings.THRESHOLD_PERCENTAGE, float)
        self.assertEqual(Settings.THRESHOLD_PERCENTAGE, 40.0)

    def test_description_lengths_ordered(self) -> None:
        """The minimal length sits below the sufficient length."""
        self.assertEqual(Settings.DESCRIPTION_SUFFICIENT_LENGTH, 100)
        self.assertEqual(Settings.DESCRIPTION_MINIMAL_LENGTH, 20)
        self.assertLess(
            Settings.DESCRIPTION_MINIMAL_LENGTH,
            Settings.DESCRIPTION_SUFFICIENT_LENGTH,
        )

    def test_fallback_selectors_order(self) -> None:
        """List items are tried before expander paragraphs."""
        self.assertEqual(
            Settings.DESCRIPTION_FALLBACK_SELECTORS,
            [".a-unordered-list .a-list-item", ".a-expander-content p"],
        )

    def test_path_constants_are_paths(self) -> None:
        """Path-typed settings are Path instances."""
        self.assertIsInstance(Settings.BASE_DIR, Path)
        self.assertIsInstance(Settings.SELECTORS_PATH, Path)
        self.assertIsInstance(Settings.LOGS_DIR, Path)

    def test_selectors_path_exists(self) -> None:
        """The selectors.json file must exist on disk."""
        self.assertTrue(Settings.SELECTORS_PATH.exists())

    def test_every_source_has_selectors(self) -> None:
        """Each registered source has a selector block."""
        with open(Settings.SELECTORS_PATH, encoding="utf-8") as f:
            selectors = json.load(f)
        for src in Settings.AVAILABLE_SOURCES:
            with self.subTest(src=src["id"]):
                self.assertIn(src["id"], selectors)
                self.assertIn("current_price", selectors[src["id"]])

    def test_default_source_registered(self) -> None:
        """DEFAULT_SOURCE is one of the available sources."""
        ids = {s["id"] for s in Settings.AVAILABLE_SOURCES}
        self.assertIn(Settings.DEFAULT_SOURCE, ids)


if __name__ == "__main__":
    unittest.main()
