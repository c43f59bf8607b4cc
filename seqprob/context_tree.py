"""Nodes of a context tree used by variable-length Markov chains."""

from __future__ import annotations

from typing import Optional

from seqprob.discrete_iid import DiscreteIIDModel


class ContextTreeNode:
    """A node of a context tree.

    Each node has one child slot per symbol of the alphabet, a vector of
    symbol counts gathered during training and, once trained, the
    distribution of the next symbol given the node's context.
    """

    def __init__(self, alphabet_size: int) -> None:
        self.alphabet_size = alphabet_size
        self.id = 0
        self.parent = 0
        self.symbol = -1
        self.distribution: Optional[DiscreteIIDModel] = None
        self.counter: list[float] = [0.0] * alphabet_size
        self._children: list[Optional[ContextTreeNode]] = [None] * alphabet_size
        self._leaf = True

    def __repr__(self) -> str:
        return (
            f"ContextTreeNode(id={self.id}, symbol={self.symbol}, "
            f"counter={self.counter!r})"
        )

    def _check_symbol(self, symbol: int) -> None:
        if not 0 <= symbol < self.alphabet_size:
            raise IndexError(
                f"symbol {symbol} outside alphabet of size {self.alphabet_size}"
            )

    def add_count(self, symbol: int, weight: float = 1.0) -> None:
        """Add ``weight`` to the count of ``symbol``."""
        self._check_symbol(symbol)
        self.counter[symbol] += weight

    def set_count(self, symbol: int, value: float) -> None:
        """Set the count of ``symbol`` to ``value``."""
        self._check_symbol(symbol)
        self.counter[symbol] = value

    def set_child(self, child: "ContextTreeNode", symbol: int) -> None:
        """Attach ``child`` under ``symbol``; the node stops being a leaf."""
        self._check_symbol(symbol)
        self._children[symbol] = child
        self._leaf = False

    def child(self, symbol: int) -> Optional["ContextTreeNode"]:
        """Return the child under ``symbol``, or ``None`` if there is none."""
        self._check_symbol(symbol)
        return self._children[symbol]

    def children(self) -> list[Optional["ContextTreeNode"]]:
        """Return the child slots, one per symbol, ``None`` where empty."""
        return list(self._children)

    def delete_children(self) -> None:
        """Remove every child; the node becomes a leaf."""
        self._children = [None] * self.alphabet_size
        self._leaf = True

    def is_leaf(self) -> bool:
        """Return whether the node has no children."""
        return self._leaf