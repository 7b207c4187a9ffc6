# tests/test_product_page_parser.py

"""Tests for building product snapshots from saved Amazon pages."""

import json
import tempfile
import unittest
from datetime import datetime
from pathlib import Path
from unittest.mock import patch

from src.extractors.product_page_parser import ProductPageParser, parse_price
from src.models.price_history_item import PriceHistoryItem
from src.parsing.soup_node_set import SoupNodeSet, load_document

FIXTURES_DIR = Path(__file__).parent / "fixtures"


class TestParsePrice(unittest.TestCase):
    """Defensive float parsing of extracted price text."""

    def test_plain(self) -> None:
        """Canonical text parses."""
        self.assertEqual(parse_price("1234.56"), 1234.56)

    def test_trailing_period(self) -> None:
        """'1234.' from a whole-part node parses."""
        self.assertEqual(parse_price("1234."), 1234.0)

    def test_malformed(self) -> None:
        """Multiple periods fall back to zero."""
        self.assertEqual(parse_price("1.2.3"), 0.0)

    def test_empty(self) -> None:
        """Empty text is zero."""
        self.assertEqual(parse_price(""), 0.0)


class TestProductPageParser(unittest.TestCase):
    """Parse fixture pages into ProductSnapshot objects."""

    def _load_fixture_doc(self, fixture_name: str) -> SoupNodeSet:
        """Load an HTML fixture file as a document."""
        with open(FIXTURES_DIR / fixture_name, encoding="utf-8") as f:
            return load_document(f.read())

    def setUp(self) -> None:
        """Create an Amazon parser."""
        self.parser = ProductPageParser("amazon")

    def test_full_page(self) -> None:
        """Every field is extracted from a complete page."""
        scraped_at = datetime(2026, 10, 1, 9, 30)
        product = self.parser.parse(
            self._load_fixture_doc("amazon_product.html"),
            url="https://www.amazon.com/dp/B0TEST",
            scraped_at=scraped_at,
        )
        self.assertEqual(
            product.title, "Insulated Stainless Steel Water Bottle, 32 oz"
        )
        self.assertEqual(product.current_price, 1234.0)
        self.assertEqual(product.original_price, 2245.0)
        self.assertEqual(product.currency, "$")
        self.assertEqual(product.discount_rate, 45.0)
        self.assertFalse(product.is_out_of_stock)
        self.assertEqual(
            product.image_url, "https://images.example.com/bottle-large.jpg"
        )
        self.assertEqual(product.url, "https://www.amazon.com/dp/B0TEST")
        self.assertTrue(product.description.startswith("Double-wall"))
        self.assertEqual(product.description.count("\n"), 1)
        self.assertEqual(
            product.price_history,
            [PriceHistoryItem(price=1234.0, date=scraped_at)],
        )
        self.assertEqual(product.lowest_price, 1234.0)
        self.assertEqual(product.highest_price, 1234.0)
        self.assertEqual(product.average_price, 1234.0)

    def test_out_of_stock_page(self) -> None:
        """List price stands in and unavailability is detected."""
        product = self.parser.parse(
            self._load_fixture_doc("amazon_out_of_stock.html"),
        )
        self.assertTrue(product.is_out_of_stock)
        self.assertEqual(product.current_price, 45.0)
        self.assertEqual(product.original_price, 45.0)
        self.assertEqual(product.currency, "€")
        self.assertEqual(product.discount_rate, 0.0)
        self.assertEqual(
            product.description, "Noise cancelling\n30 hour battery"
        )
        self.assertEqual(product.image_url, "")

    def test_page_without_price(self) -> None:
        """A page with no price gives zeros and an empty history."""
        product = self.parser.parse(
            self._load_fixture_doc("amazon_fallback.html"),
        )
        self.assertEqual(product.title, "Garden Hose")
        self.assertEqual(product.current_price, 0.0)
        self.assertEqual(product.price_history, [])
        self.assertEqual(product.lowest_price, 0)
        self.assertFalse(product.is_out_of_stock)
        self.assertEqual(
            product.description,
            "Flexible hose that does not kink.\nBrass fittings.",
        )

    def test_empty_page(self) -> None:
        """An empty document never raises."""
        product = self.parser.parse(load_document(""))
        self.assertEqual(product.title, "")
        self.assertEqual(product.current_price, 0.0)
        self.assertEqual(product.currency, "")
        self.assertEqual(product.description, "")

    def test_parse_is_idempotent(self) -> None:
        """Parsing the same document twice gives equal snapshots."""
        doc = self._load_fixture_doc("amazon_product.html")
        self.assertEqual(self.parser.parse(doc), self.parser.parse(doc))

    def test_unknown_source_has_no_selectors(self) -> None:
        """An unconfigured source logs a warning and extracts nothing."""
        with self.assertLogs("price_tracker.extractors", level="WARNING"):
            parser = ProductPageParser("nowhere")
        product = parser.parse(
            self._load_fixture_doc("amazon_product.html"),
        )
        self.assertEqual(product.title, "")
        self.assertEqual(product.current_price, 0.0)
        # Description tiers do not depend on the source selectors
        self.assertTrue(product.description)

    def test_selectors_loaded_from_settings_path(self) -> None:
        """A custom selectors file is honoured."""
        with tempfile.TemporaryDirectory() as tmp_dir:
            path = Path(tmp_dir) / "selectors.json"
            path.write_text(
                json.dumps({"shop": {
                    "title": "h1",
                    "current_price": ".now",
                }}),
                encoding="utf-8",
            )
            with patch(
                "src.extractors.product_page_parser.Settings.SELECTORS_PATH",
                path,
            ):
                parser = ProductPageParser("shop")
        product = parser.parse(load_document(
            "<h1>Lamp</h1><span class='now'>AED 1,099.50</span>"
        ))
        self.assertEqual(product.title, "Lamp")
        self.assertEqual(product.current_price, 1099.5)


if __name__ == "__main__":
    unittest.main()
