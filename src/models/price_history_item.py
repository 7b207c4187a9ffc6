# src/models/price_history_item.py

"""Single price observation in a product's price history."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class PriceHistoryItem:
    """A price observed at one scrape.

    Position in the history list is the temporal order; ``date`` is
    informational and may be missing for imported observations.
    """

    price: float
    date: datetime | None = None
