from __future__ import annotations

from typing import Optional

import numpy as np


class RandomSource:
    """Uniform [0, 1) draws from a seedable numpy generator.

    With ``seed=None`` numpy pulls fresh entropy from the OS, so every run
    differs. With an integer seed the sequence is reproducible.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self._seed = seed
        self._rng = np.random.default_rng(seed)

    @property
    def seed(self) -> Optional[int]:
        return self._seed

    def next(self) -> float:
        return float(self._rng.random())
