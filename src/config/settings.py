# src/config/settings.py

"""Central configuration for the price_tracker core."""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Central configuration for the price_tracker core."""

    # --- Classification ---
    THRESHOLD_PERCENTAGE: float = float(
        os.getenv("PRICE_TRACKER_THRESHOLD_PERCENTAGE", "40")
    )                                     # Discount rate that triggers an alert

    # --- Description heuristics ---
    DESCRIPTION_SUFFICIENT_LENGTH: int = 100  # Primary text long enough to keep
    DESCRIPTION_MINIMAL_LENGTH: int = 20      # Primary text considered minimal
    DESCRIPTION_CONTAINER: str = "#productDescription"
    DESCRIPTION_PARAGRAPH: str = "p"
    FEATURE_BULLETS: str = "#feature-bullets .a-list-item"
    DESCRIPTION_FALLBACK_SELECTORS: list[str] = [
        ".a-unordered-list .a-list-item",
        ".a-expander-content p",
    ]

    # --- Availability ---
    OUT_OF_STOCK_MARKERS: list[str] = [
        "currently unavailable",
        "out of stock",
    ]

    # --- Paths ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    SELECTORS_PATH: Path = BASE_DIR / "src" / "config" / "selectors.json"
    LOGS_DIR: Path = BASE_DIR / "logs"

    # --- Sources (selector sets in selectors.json) ---
    DEFAULT_SOURCE: str = "amazon"
    AVAILABLE_SOURCES: list[dict[str, str]] = [
        {
            "id": "amazon",
            "label": "Amazon",
        },
    ]
