# src/parsing/soup_node_set.py

"""BeautifulSoup-backed implementation of the document query interface."""

import logging
from collections.abc import Iterator

from bs4 import BeautifulSoup, Tag
from soupsieve import SelectorSyntaxError

from src.parsing.node_set import NodeSet

logger = logging.getLogger("price_tracker.parsing")


class SoupNodeSet(NodeSet):
    """A :class:`NodeSet` over a list of BeautifulSoup tags."""

    def __init__(self, nodes: list[Tag] | None = None) -> None:
        self._nodes: list[Tag] = list(nodes or [])

    def find(self, selector: str) -> "SoupNodeSet":
        """Select descendants of every node, de-duplicated in order.

        An unparsable selector is logged and treated as matching nothing.
        """
        found: list[Tag] = []
        seen: set[int] = set()
        for node in self._nodes:
            try:
                matches = node.select(selector)
            except SelectorSyntaxError as exc:
                logger.warning(
                    "Invalid selector '%s': %s", selector, exc,
                )
                return SoupNodeSet()
            for match in matches:
                # Tag equality is structural, identity is what we want here
                if id(match) not in seen:
                    seen.add(id(match))
                    found.append(match)
        return SoupNodeSet(found)

    def text(self) -> str:
        """Concatenate ``get_text()`` of every node."""
        return "".join(node.get_text() for node in self._nodes)

    def attr(self, name: str) -> str:
        """Return the first node's attribute, joining multi-valued ones."""
        if not self._nodes:
            return ""
        value = self._nodes[0].get(name)
        if value is None:
            return ""
        if isinstance(value, list):
            return " ".join(value)
        return str(value)

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator["SoupNodeSet"]:
        for node in self._nodes:
            yield SoupNodeSet([node])

    def __repr__(self) -> str:
        return f"SoupNodeSet({len(self._nodes)} nodes)"


def load_document(html: str, parser: str = "lxml") -> SoupNodeSet:
    """Parse *html* and return the document root as a one-node set."""
    return SoupNodeSet([BeautifulSoup(html, parser)])
