# src/analysis/change_classifier.py

"""Classify the change between a fresh scrape and the stored product."""

import logging

from src.analysis.history_analyzer import get_lowest_price
from src.config.settings import Settings
from src.models.notification import Notification
from src.models.product import ProductSnapshot

logger = logging.getLogger("price_tracker.analysis")


def classify_change(
    scraped: ProductSnapshot,
    current: ProductSnapshot,
) -> Notification | None:
    """Return the notification warranted by *scraped*, or ``None``.

    Rules are checked in priority order and the first match wins:

    1. scraped price below the stored history's lowest -> ``LOWEST_PRICE``
    2. stored item out of stock, scraped item back -> ``CHANGE_OF_STOCK``
    3. scraped discount at or over the threshold -> ``THRESHOLD_MET``

    The stored history must not be empty
    (:class:`~src.analysis.history_analyzer.EmptyPriceHistoryError`).
    """
    lowest_price = get_lowest_price(current.price_history)

    if scraped.current_price < lowest_price:
        notification: Notification | None = Notification.LOWEST_PRICE
    elif current.is_out_of_stock and not scraped.is_out_of_stock:
        notification = Notification.CHANGE_OF_STOCK
    elif scraped.discount_rate >= Settings.THRESHOLD_PERCENTAGE:
        notification = Notification.THRESHOLD_MET
    else:
        notification = None

    logger.debug(
        "Classified %s (price %.2f vs lowest %.2f): %s",
        scraped.url or scraped.title or "product",
        scraped.current_price,
        lowest_price,
        notification.value if notification else "none",
    )
    return notification
