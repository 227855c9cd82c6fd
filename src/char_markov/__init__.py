"""Character-level n-gram Markov text generation.

Train a ``LanguageModel`` on any iterable of characters and sample new text
from it. The command line wrapper lives in ``char_markov.main``.
"""

from .language_model import InputTooShortError, LanguageModel
from .random_source import RandomSource
from .symbol_counter import SymbolCounter, SymbolEntry
from .transition_table import TransitionTable

__all__ = [
    "InputTooShortError",
    "LanguageModel",
    "RandomSource",
    "SymbolCounter",
    "SymbolEntry",
    "TransitionTable",
]
