# src/extractors/product_page_parser.py

"""Build a product snapshot from a parsed product page."""

import json
import logging
import re
from dataclasses import replace
from datetime import datetime
from typing import Any

from src.analysis.history_analyzer import summarize_history
from src.config.settings import Settings
from src.extractors.field_extractor import (
    extract_currency,
    extract_description,
    extract_price,
)
from src.models.price_history_item import PriceHistoryItem
from src.models.product import ProductSnapshot
from src.parsing.node_set import NodeSet

logger = logging.getLogger("price_tracker.extractors")

_DISCOUNT_NOISE_RE = re.compile(r"[-%]")


def parse_price(text: str) -> float:
    """Parse extracted price text, falling back to 0.0 when malformed."""
    if not text:
        return 0.0
    try:
        return float(text)
    except ValueError:
        logger.debug("Unparsable price text %r", text)
        return 0.0


class ProductPageParser:
    """Turn a product page document into a :class:`ProductSnapshot`.

    Selectors come from ``selectors.json`` keyed by source id, so a new
    storefront only needs a selector block there.
    """

    def __init__(self, source_name: str | None = None) -> None:
        self.source_name = source_name or Settings.DEFAULT_SOURCE
        self.selectors: dict[str, Any] = self._load_selectors()

    def _load_selectors(self) -> dict[str, Any]:
        """Load CSS selectors for this source from selectors.json."""
        with open(Settings.SELECTORS_PATH, encoding="utf-8") as f:
            all_selectors: dict[str, Any] = json.load(f)
        result: dict[str, Any] = all_selectors.get(self.source_name, {})
        if not result:
            logger.warning(
                "No selectors configured for source '%s'",
                self.source_name,
            )
        return result

    def _selector_list(self, key: str) -> list[str]:
        value = self.selectors.get(key, [])
        if isinstance(value, str):
            return [value]
        return list(value)

    def _candidates(self, document: NodeSet, key: str) -> list[NodeSet]:
        return [
            document.find(selector)
            for selector in self._selector_list(key)
        ]

    def _first(self, document: NodeSet, key: str) -> NodeSet | None:
        selector = self.selectors.get(key, "")
        if not selector:
            return None
        return document.find(selector)

    def _discount_rate(self, document: NodeSet) -> float:
        node = self._first(document, "discount_rate")
        if node is None:
            return 0.0
        text = _DISCOUNT_NOISE_RE.sub("", node.text()).strip()
        return parse_price(text)

    def _is_out_of_stock(self, document: NodeSet) -> bool:
        node = self._first(document, "availability")
        if node is None:
            return False
        availability = node.text().strip().lower()
        return any(
            marker in availability
            for marker in Settings.OUT_OF_STOCK_MARKERS
        )

    def _image_url(self, document: NodeSet) -> str:
        node = self._first(document, "image")
        if node is None:
            return ""
        for name in ("data-old-hires", "src"):
            value = node.attr(name)
            if value:
                return value
        return ""

    def parse(
        self,
        document: NodeSet,
        url: str = "",
        scraped_at: datetime | None = None,
    ) -> ProductSnapshot:
        """Extract every snapshot field from *document*.

        Missing nodes give empty or zero fields.  The price history is
        seeded with the current price when one was found.
        """
        title_node = self._first(document, "title")
        title = title_node.text().strip() if title_node is not None else ""

        current_price = parse_price(
            extract_price(*self._candidates(document, "current_price"))
        )
        original_price = parse_price(
            extract_price(*self._candidates(document, "original_price"))
        )
        currency_node = self._first(document, "currency")
        currency = (
            extract_currency(currency_node)
            if currency_node is not None
            else ""
        )

        # List price stands in when no sale price is shown
        effective_price = current_price or original_price
        history: list[PriceHistoryItem] = []
        if effective_price > 0:
            history.append(
                PriceHistoryItem(price=effective_price, date=scraped_at)
            )

        snapshot = ProductSnapshot(
            current_price=effective_price,
            is_out_of_stock=self._is_out_of_stock(document),
            discount_rate=self._discount_rate(document),
            price_history=history,
            description=extract_description(document),
            currency=currency,
            title=title,
            url=url,
            original_price=original_price or current_price,
            image_url=self._image_url(document),
        )
        stats = summarize_history(history)
        logger.debug(
            "[%s] Parsed '%s': %s%.2f, %d history items",
            self.source_name,
            title,
            currency,
            snapshot.current_price,
            stats.count,
        )
        return replace(
            snapshot,
            lowest_price=stats.lowest,
            highest_price=stats.highest,
            average_price=stats.average,
        )
