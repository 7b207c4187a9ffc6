# src/models/product.py

"""Product snapshot model for inter-module data flow."""

from dataclasses import dataclass, field

from src.models.price_history_item import PriceHistoryItem


@dataclass
class ProductSnapshot:
    """Captured state of a product page at one scrape.

    Two instances meet in classification: the freshly scraped one and
    the last stored one.  The core only reads snapshots and builds new
    ones; it never mutates an instance it was given.
    """

    current_price: float
    is_out_of_stock: bool = False
    discount_rate: float = 0.0
    price_history: list[PriceHistoryItem] = field(
        default_factory=lambda: list[PriceHistoryItem]()
    )
    description: str = ""
    currency: str = ""
    title: str = ""
    url: str = ""
    original_price: float = 0.0
    image_url: str = ""
    lowest_price: float = 0.0
    highest_price: float = 0.0
    average_price: float = 0.0
