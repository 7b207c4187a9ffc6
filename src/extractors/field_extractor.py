# src/extractors/field_extractor.py

"""Heuristic extraction of price, currency and description from a page.

Every extractor tolerates missing nodes: absence yields ``""`` and
nothing here raises for a degenerate document.
"""

import logging
import re
from collections.abc import Callable

from src.config.settings import Settings
from src.parsing.node_set import NodeSet

logger = logging.getLogger("price_tracker.extractors")

_NON_PRICE_CHARS_RE = re.compile(r"[^0-9.]")
_CANONICAL_PRICE_RE = re.compile(r"[0-9]+\.[0-9]{2}")
_BLANK_LINES_RE = re.compile(r"\n\s*\n+")


# ── Price / currency ─────────────────────────────────────


def extract_price(*candidates: NodeSet) -> str:
    """Return the normalised price text of the first non-empty candidate.

    Candidates are tried in the given order and the first one with any
    trimmed text wins, even if that text holds no usable number; later
    candidates are never read.  Everything but digits and periods is
    stripped, then the first ``D+.DD`` run is preferred over the raw
    stripped text.  The result may still be malformed (``"1.2.3"``), so
    callers parse it defensively.
    """
    for position, candidate in enumerate(candidates):
        price_text = candidate.text().strip()
        if not price_text:
            continue

        clean_price = _NON_PRICE_CHARS_RE.sub("", price_text)
        match = _CANONICAL_PRICE_RE.search(clean_price)
        price = match.group(0) if match else clean_price
        logger.debug(
            "Price taken from candidate %d: %r -> %r",
            position,
            price_text,
            price,
        )
        return price

    return ""


def extract_currency(node: NodeSet) -> str:
    """Return the first character of the node's trimmed text, or ``""``."""
    return node.text().strip()[:1]


# ── Description ──────────────────────────────────────────


def _joined_texts(nodes: NodeSet) -> str:
    """Join the trimmed, non-empty texts of *nodes* with newlines."""
    texts = nodes.map(lambda node: node.text().strip())
    return "\n".join(text for text in texts if text)


def _primary_tier(document: NodeSet, current: str) -> str | None:
    """Paragraphs of the dedicated description container."""
    container = document.find(Settings.DESCRIPTION_CONTAINER)
    if not len(container):
        return None

    paragraphs = container.find(Settings.DESCRIPTION_PARAGRAPH)
    if len(paragraphs):
        return _joined_texts(paragraphs)
    return container.text().strip()


def _bullet_tier(document: NodeSet, current: str) -> str | None:
    """Feature bullets, consulted when the primary text is too short."""
    if current and len(current) >= Settings.DESCRIPTION_SUFFICIENT_LENGTH:
        return None

    bullets = _joined_texts(document.find(Settings.FEATURE_BULLETS))
    if not bullets:
        return None

    if len(current) < Settings.DESCRIPTION_MINIMAL_LENGTH:
        logger.debug("Minimal primary description replaced by bullets")
    else:
        # TODO: decide whether a short primary description should be
        # kept ahead of the bullets instead of being dropped.
        logger.debug(
            "Primary description of %d chars discarded for bullets",
            len(current),
        )
    return bullets


def _fallback_tier(document: NodeSet, current: str) -> str | None:
    """Generic list items, then expander paragraphs; first hit wins."""
    if current:
        return None

    for selector in Settings.DESCRIPTION_FALLBACK_SELECTORS:
        fallback_text = _joined_texts(document.find(selector))
        if fallback_text:
            logger.debug("Description taken from fallback '%s'", selector)
            return fallback_text
    return None


_DESCRIPTION_TIERS: tuple[Callable[[NodeSet, str], str | None], ...] = (
    _primary_tier,
    _bullet_tier,
    _fallback_tier,
)


def extract_description(document: NodeSet) -> str:
    """Extract a best-effort product description from *document*.

    Tiers run in order and each sees the text accumulated so far; a
    tier returning ``None`` leaves it untouched.  Runs of blank lines
    are collapsed and the result trimmed.
    """
    description = ""
    for tier in _DESCRIPTION_TIERS:
        result = tier(document, description)
        if result is not None:
            description = result

    if description:
        return _BLANK_LINES_RE.sub("\n", description).strip()
    return ""
