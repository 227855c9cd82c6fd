"""
Configuration for the char_markov command line.

Values come from dataclass defaults, optionally overridden by a JSON file
(``--config``) and then by explicit command line flags.
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Dict, Optional


@dataclass
class Config:
    """
    Settings for training a model and generating text.

    Attributes:
        corpus_path: Text (or CSV) file used for training
        window_length: Number of preceding characters in a state
        seed: Random seed; None for a different result every run
        initial_text: Seed text for generation; defaults to the corpus start
        target_length: Number of characters to generate
        csv_column: Read the corpus from this CSV column instead of plain text
        clean: Normalize the corpus with ``clean_text`` before training
        encoding: Corpus file encoding
        output_path: Write generated text here instead of stdout
    """

    corpus_path: Optional[str] = None
    window_length: int = 3
    seed: Optional[int] = None
    initial_text: Optional[str] = None
    target_length: int = 200

    csv_column: Optional[str] = None
    clean: bool = False
    encoding: str = "utf-8"
    output_path: Optional[str] = None

    def __post_init__(self):
        """Validate numeric settings."""
        for name in ("window_length", "target_length"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")
        if self.window_length <= 0:
            raise ValueError("window_length must be >= 1")
        if self.target_length < 0:
            raise ValueError("target_length must be >= 0")

    @classmethod
    def from_dict(cls, config_dict: Dict) -> 'Config':
        """Create Config instance from dictionary, ignoring unknown keys."""
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in config_dict.items() if k in names})

    @classmethod
    def from_json(cls, path: str | Path) -> 'Config':
        with open(path, 'r', encoding='utf-8') as f:
            return cls.from_dict(json.load(f))

    def to_dict(self) -> Dict:
        return asdict(self)
