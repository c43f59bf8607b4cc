"""Consensus symbols: positions that accept any of a set of symbols."""

from __future__ import annotations

from typing import Iterable


class Consensus:
    """A position of a consensus sequence, matching any of its symbols."""

    def __init__(self, symbols: Iterable[int]) -> None:
        self._symbols = tuple(symbols)

    def __repr__(self) -> str:
        return f"Consensus({list(self._symbols)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Consensus):
            return NotImplemented
        return self._symbols == other._symbols

    def __hash__(self) -> int:
        return hash(self._symbols)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._symbols

    def matches(self, symbol: int) -> bool:
        """Return whether ``symbol`` is one of the accepted symbols."""
        return symbol in self._symbols

    def symbols(self) -> list[int]:
        """Return the accepted symbols in their original order."""
        return list(self._symbols)


def create_consensus_sequence() -> list[Consensus]:
    """Return a sample splice-site consensus: a/c, A G G T, a/g, a g t."""
    groups = [[0, 1], [0], [2], [2], [3], [0, 2], [0], [2], [3]]
    return [Consensus(group) for group in groups]