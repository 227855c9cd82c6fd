"""
Character-level Markov Language Model

This module implements the fixed-window (n-gram) character model: training
builds a ``TransitionTable`` in one forward pass over a character stream, and
generation walks the table window by window, picking each next character by
weighted random sampling.

Usage:
    model = LanguageModel(window_length=3, seed=42)
    model.train(corpus_text)
    text = model.generate("the", 200)
"""

from __future__ import annotations

import itertools
import logging
from collections import deque
from typing import Iterable, Optional

import pandas as pd

from .random_source import RandomSource
from .transition_table import TransitionTable

logger = logging.getLogger(__name__)


class InputTooShortError(ValueError):
    """The training stream ended before a full window could be read."""

    def __init__(self, window_length: int, available: int) -> None:
        super().__init__(
            f"training input has {available} symbols, "
            f"need at least {window_length} to form a window"
        )
        self.window_length = window_length
        self.available = available


class LanguageModel:
    """
    Fixed-window character Markov model.

    Attributes:
        window_length: Number of preceding characters used as the state
        table: Transition counts and probabilities learned by ``train``
        random_source: Uniform random stream used for sampling; built from
            ``seed`` unless an existing ``RandomSource`` is passed in
    """

    def __init__(
        self,
        window_length: int,
        seed: Optional[int] = None,
        random_source: Optional[RandomSource] = None,
    ) -> None:
        if (isinstance(window_length, bool) or not isinstance(window_length, int)
                or window_length <= 0):
            raise ValueError("window_length must be a positive integer")
        if seed is not None and random_source is not None:
            raise ValueError("pass either seed or random_source, not both")

        self._window_length = window_length
        self.table = TransitionTable(window_length)
        self.random_source = random_source or RandomSource(seed)

    @property
    def window_length(self) -> int:
        return self._window_length

    def train(self, stream: Iterable[str]) -> None:
        """
        Count transitions in a single pass over ``stream``.

        Args:
            stream: Iterable of single characters (a str, or a lazy reader
                such as ``datasets.iter_chars``)

        Raises:
            InputTooShortError: If fewer than ``window_length`` symbols are
                available
        """
        symbols = iter(stream)
        window = deque(itertools.islice(symbols, self._window_length),
                       maxlen=self._window_length)
        if len(window) < self._window_length:
            raise InputTooShortError(self._window_length, len(window))

        observed = 0
        for symbol in symbols:
            self.table.observe("".join(window), symbol)
            window.append(symbol)
            observed += 1

        self.table.normalize_all()
        logger.info(
            f"Trained on {observed + self._window_length} symbols: "
            f"{len(self.table)} windows, {self.table.num_transitions()} transitions"
        )

    def generate(self, initial_text: str, target_length: int) -> str:
        """
        Generate text continuing the trailing window of ``initial_text``.

        The result starts with the last ``window_length`` characters of
        ``initial_text`` and grows by up to ``target_length`` characters.
        Generation stops early when the current window was never seen in
        training.

        Args:
            initial_text: Seed text; returned unchanged if shorter than
                ``window_length``
            target_length: Number of characters to generate

        Returns:
            The generated text
        """
        if target_length < 0:
            raise ValueError("target_length must be >= 0")

        if len(initial_text) < self._window_length:
            return initial_text

        window = deque(initial_text[-self._window_length:],
                       maxlen=self._window_length)
        output = list(window)
        limit = target_length + self._window_length

        while len(output) < limit:
            key = "".join(window)
            counter = self.table.get(key)
            if counter is None:
                logger.debug(f"No continuation for window {key!r} after {len(output)} symbols")
                break

            symbol = counter.sample(self.random_source.next())
            output.append(symbol)
            window.append(symbol)

        return "".join(output)

    def to_frame(self) -> pd.DataFrame:
        """Transition table as a DataFrame (window, symbol, count, p, cp)."""
        return self.table.to_frame()

    def __str__(self) -> str:
        return str(self.table)
