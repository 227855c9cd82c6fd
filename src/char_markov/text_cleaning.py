from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass

import regex  # type: ignore


_SPACES_RE = re.compile(r"[ \t\f\v]+")
_BLANK_LINES_RE = re.compile(r"\n{3,}")
_CONTROL_RE = re.compile(r"[\x00-\x08\x0B-\x1F\x7F]")


@dataclass(frozen=True)
class CleanTextConfig:
    lowercase: bool = True
    strip_accents: bool = True
    remove_control_chars: bool = True
    collapse_spaces: bool = True
    collapse_blank_lines: bool = True


def clean_text(text: str, config: CleanTextConfig | None = None) -> str:
    """Normalize a training corpus before counting characters.

    Line breaks are kept: they are ordinary symbols to the model.
    """

    cfg = config or CleanTextConfig()
    s = text.replace("\r\n", "\n").replace("\r", "\n")

    if cfg.lowercase:
        s = s.lower()

    if cfg.strip_accents:
        # Drop combining marks after decomposition, then recompose.
        s = regex.sub(r"\p{Mn}+", "", unicodedata.normalize("NFKD", s))
        s = unicodedata.normalize("NFC", s)

    if cfg.remove_control_chars:
        s = _CONTROL_RE.sub(" ", s)

    if cfg.collapse_spaces:
        s = _SPACES_RE.sub(" ", s)

    if cfg.collapse_blank_lines:
        s = _BLANK_LINES_RE.sub("\n\n", s)

    return s
