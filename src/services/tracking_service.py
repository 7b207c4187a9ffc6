# src/services/tracking_service.py

"""Combines a fresh scrape with the stored product into an update."""

import logging
from dataclasses import dataclass, replace
from datetime import datetime

from src.analysis.change_classifier import classify_change
from src.analysis.history_analyzer import summarize_history
from src.models.notification import Notification
from src.models.price_history_item import PriceHistoryItem
from src.models.product import ProductSnapshot

logger = logging.getLogger("price_tracker.services")


@dataclass
class TrackingResult:
    """The snapshot to store next and the alert it warrants, if any."""

    product: ProductSnapshot
    notification: Notification | None = None


class TrackingService:
    """Merges scrapes into price history and picks the notification.

    Pure: nothing is fetched, stored or sent here, and neither input
    snapshot is modified.
    """

    @staticmethod
    def _with_stats(
        product: ProductSnapshot,
        history: list[PriceHistoryItem],
    ) -> ProductSnapshot:
        stats = summarize_history(history)
        return replace(
            product,
            price_history=history,
            lowest_price=stats.lowest,
            highest_price=stats.highest,
            average_price=stats.average,
        )

    def evaluate(
        self,
        scraped: ProductSnapshot,
        current: ProductSnapshot | None = None,
        scraped_at: datetime | None = None,
    ) -> TrackingResult:
        """Merge *scraped* into *current* and classify the change.

        Without a stored product this is a first scrape and yields
        ``WELCOME``.  A scrape without a usable price (zero or less)
        leaves the stored history as it was and warrants no alert.
        Otherwise the classification runs against the stored history
        before the new observation is appended.
        """
        if current is None:
            logger.info(
                "New product '%s', sending welcome", scraped.title,
            )
            return TrackingResult(
                product=self._with_stats(
                    scraped, list(scraped.price_history),
                ),
                notification=Notification.WELCOME,
            )

        if scraped.current_price <= 0:
            logger.warning(
                "No usable price for '%s', keeping stored history",
                scraped.title or scraped.url,
            )
            return TrackingResult(
                product=self._with_stats(
                    scraped, list(current.price_history),
                ),
                notification=None,
            )

        notification = classify_change(scraped, current)

        history = list(current.price_history)
        history.append(
            PriceHistoryItem(price=scraped.current_price, date=scraped_at)
        )
        merged = self._with_stats(scraped, history)
        logger.debug(
            "Merged '%s': %d history items, lowest %.2f, highest %.2f",
            merged.title,
            len(history),
            merged.lowest_price,
            merged.highest_price,
        )
        return TrackingResult(product=merged, notification=notification)
