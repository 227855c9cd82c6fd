from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pandas as pd

logger = logging.getLogger(__name__)

_CHUNK_SIZE = 64 * 1024


def iter_chars(path: str | Path, encoding: str = "utf-8") -> Iterator[str]:
    """Yield the characters of a text file one at a time."""

    with open(path, encoding=encoding, newline="") as f:
        while chunk := f.read(_CHUNK_SIZE):
            yield from chunk


def load_corpus_text(path: str | Path, encoding: str = "utf-8") -> str:
    with open(path, encoding=encoding, newline="") as f:
        text = f.read()
    logger.info(f"Loaded {len(text)} characters from {path}")
    return text


def load_csv_corpus(path: str | Path, column: str = "text", encoding: str = "utf-8") -> str:
    """Join one CSV column into a corpus, one row per line."""

    df = pd.read_csv(path, encoding=encoding)
    if column not in df.columns:
        raise ValueError(f"CSV must have a column named {column!r}")

    rows = df[column].dropna().astype(str).tolist()
    logger.info(f"Loaded {len(rows)} rows from column {column!r} of {path}")
    return "\n".join(rows)
