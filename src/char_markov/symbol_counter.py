"""
Per-window symbol frequencies.

A ``SymbolCounter`` records how often each symbol followed one window during
training. Entries keep the order in which symbols were first seen; that order
drives both the cumulative probabilities and sampling, so it must be stable
for a given corpus.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, Optional

logger = logging.getLogger(__name__)


@dataclass
class SymbolEntry:
    """
    Frequency record for one symbol following a window.

    Attributes:
        symbol: The following character
        count: Number of times ``symbol`` was observed after the window
        p: Probability (count / window total), set by ``normalize``
        cp: Cumulative probability up to and including this entry
    """
    symbol: str
    count: int = 0
    p: Optional[float] = None
    cp: Optional[float] = None

    def __str__(self) -> str:
        return f"({self.symbol!r} {self.count} {self.p} {self.cp})"


class SymbolCounter:
    """Insertion-ordered mapping of symbol -> ``SymbolEntry``."""

    def __init__(self) -> None:
        self._entries: dict[str, SymbolEntry] = {}
        self._normalized = False

    def update(self, symbol: str) -> None:
        entry = self._entries.get(symbol)
        if entry is None:
            entry = SymbolEntry(symbol)
            self._entries[symbol] = entry
        entry.count += 1
        self._normalized = False

    def normalize(self) -> None:
        """Set ``p`` and ``cp`` on every entry from the current counts."""

        total = self.total
        if total == 0:
            logger.debug("Skipping normalization of an empty counter")
            return

        running = 0.0
        for entry in self._entries.values():
            entry.p = entry.count / total
            running += entry.p
            entry.cp = running

        self._normalized = True

    def sample(self, r: float) -> str:
        """Return the first symbol whose cumulative probability reaches ``r``.

        ``r`` is a uniform draw in [0, 1). The scan follows first-seen order.
        """

        assert self._entries, "cannot sample from an empty counter"
        assert self._normalized, "counter must be normalized before sampling"

        entry = None
        for entry in self._entries.values():
            if entry.cp >= r:
                return entry.symbol

        # Rounding can leave the last cp just under r.
        return entry.symbol

    @property
    def total(self) -> int:
        return sum(entry.count for entry in self._entries.values())

    @property
    def normalized(self) -> bool:
        return self._normalized

    def get(self, symbol: str) -> Optional[SymbolEntry]:
        return self._entries.get(symbol)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._entries

    def __iter__(self) -> Iterator[SymbolEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __str__(self) -> str:
        return "(" + " ".join(str(entry) for entry in self._entries.values()) + ")"
