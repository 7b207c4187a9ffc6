# src/parsing/node_set.py

"""Abstract document query interface consumed by the extractors."""

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from typing import TypeVar

T = TypeVar("T")


class NodeSet(ABC):
    """An ordered set of document nodes.

    A parsed document is itself a one-node set (its root).  Querying
    never fails for zero matches: ``find`` simply returns an empty set,
    and an empty set's ``text`` is ``""``.
    """

    @abstractmethod
    def find(self, selector: str) -> "NodeSet":
        """Return all descendants matching *selector*, in document order."""
        ...

    @abstractmethod
    def text(self) -> str:
        """Return the concatenated descendant text of every node."""
        ...

    @abstractmethod
    def attr(self, name: str) -> str:
        """Return attribute *name* of the first node, or ``""``."""
        ...

    @abstractmethod
    def __len__(self) -> int:
        ...

    @abstractmethod
    def __iter__(self) -> Iterator["NodeSet"]:
        """Yield each node wrapped as a single-node set."""
        ...

    def map(self, fn: Callable[["NodeSet"], T]) -> list[T]:
        """Apply *fn* to each node and collect the results in order."""
        return [fn(node) for node in self]

    def to_list(self) -> list["NodeSet"]:
        """Collect the nodes into a list of single-node sets."""
        return list(self)
