# src/models/notification.py

"""Notification categories surfaced to the alert sender."""

from enum import Enum


class Notification(str, Enum):
    """Closed set of alert categories.

    ``WELCOME`` is raised by the caller for the first scrape of a new
    product; the change classifier never produces it.
    """

    WELCOME = "WELCOME"
    CHANGE_OF_STOCK = "CHANGE_OF_STOCK"
    LOWEST_PRICE = "LOWEST_PRICE"
    THRESHOLD_MET = "THRESHOLD_MET"
