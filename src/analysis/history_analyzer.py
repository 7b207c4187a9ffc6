# src/analysis/history_analyzer.py

"""Descriptive statistics over a product's ordered price history."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from src.models.price_history_item import PriceHistoryItem

logger = logging.getLogger("price_tracker.analysis")


class EmptyPriceHistoryError(ValueError):
    """Raised when highest/lowest price is asked of an empty history."""


@dataclass(frozen=True)
class PriceStats:
    """Summary of a price history."""

    highest: float
    lowest: float
    average: float
    count: int


def get_highest_price(price_list: Sequence[PriceHistoryItem]) -> float:
    """Return the highest observed price; ties keep the earliest item."""
    if not price_list:
        raise EmptyPriceHistoryError("price history is empty")

    highest = price_list[0]
    for item in price_list:
        if item.price > highest.price:
            highest = item
    return highest.price


def get_lowest_price(price_list: Sequence[PriceHistoryItem]) -> float:
    """Return the lowest observed price; ties keep the earliest item."""
    if not price_list:
        raise EmptyPriceHistoryError("price history is empty")

    lowest = price_list[0]
    for item in price_list:
        if item.price < lowest.price:
            lowest = item
    return lowest.price


def get_average_price(price_list: Sequence[PriceHistoryItem]) -> float:
    """Return the mean price, or ``0`` for an empty history."""
    if not price_list:
        return 0
    return sum(item.price for item in price_list) / len(price_list)


def summarize_history(
    price_list: Sequence[PriceHistoryItem],
) -> PriceStats:
    """Compute highest / lowest / average / count in one call.

    An empty history gives an all-zero summary instead of raising.
    """
    if not price_list:
        logger.debug("Summarising empty price history")
        return PriceStats(highest=0, lowest=0, average=0, count=0)
    return PriceStats(
        highest=get_highest_price(price_list),
        lowest=get_lowest_price(price_list),
        average=get_average_price(price_list),
        count=len(price_list),
    )
