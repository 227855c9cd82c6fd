from __future__ import annotations

import logging
from typing import Iterator, Optional

import pandas as pd

from .symbol_counter import SymbolCounter

logger = logging.getLogger(__name__)

FRAME_COLUMNS = ["window", "symbol", "count", "p", "cp"]


class TransitionTable:
    """Maps fixed-length windows to the counter of symbols that followed them."""

    def __init__(self, window_length: int) -> None:
        self._window_length = window_length
        self._counters: dict[str, SymbolCounter] = {}

    @property
    def window_length(self) -> int:
        return self._window_length

    def observe(self, window: str, next_symbol: str) -> None:
        if len(window) != self._window_length:
            raise ValueError(
                f"window must have {self._window_length} symbols, got {len(window)}"
            )

        counter = self._counters.get(window)
        if counter is None:
            counter = SymbolCounter()
            self._counters[window] = counter
        counter.update(next_symbol)

    def get(self, window: str) -> Optional[SymbolCounter]:
        """Counter for ``window``, or None if it was never observed."""

        return self._counters.get(window)

    def normalize_all(self) -> None:
        for counter in self._counters.values():
            counter.normalize()
        logger.debug(f"Normalized {len(self._counters)} windows")

    def num_transitions(self) -> int:
        return sum(len(counter) for counter in self._counters.values())

    def items(self) -> Iterator[tuple[str, SymbolCounter]]:
        return iter(self._counters.items())

    def to_frame(self) -> pd.DataFrame:
        """One row per (window, symbol) pair, in table order."""

        rows = [
            (window, entry.symbol, entry.count, entry.p, entry.cp)
            for window, counter in self._counters.items()
            for entry in counter
        ]
        return pd.DataFrame(rows, columns=FRAME_COLUMNS)

    def __contains__(self, window: object) -> bool:
        return window in self._counters

    def __iter__(self) -> Iterator[str]:
        return iter(self._counters)

    def __len__(self) -> int:
        return len(self._counters)

    def __str__(self) -> str:
        return "".join(
            f"{window} : {counter}\n" for window, counter in self._counters.items()
        )
