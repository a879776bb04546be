# markov_textgen/core/protocols.py
"""
Protocol interfaces for the pluggable pieces of the language model.

The model depends on these Protocols rather than on concrete classes so tests
can inject a scripted random source or a hand-built character stream.
"""

from __future__ import annotations

from typing import Iterable, Protocol, runtime_checkable
from typing_extensions import TypedDict


# Typed structures ------------------------------------------------------------

class ModelStats(TypedDict):
    """
    Summary returned by LanguageModel.stats().

    Example:
      {"win_length": 3, "windows": 3, "transitions": 9, "trained": True}
    """
    win_length: int
    windows: int
    transitions: int
    trained: bool


# Protocols -------------------------------------------------------------------

@runtime_checkable
class RandomSource(Protocol):
    """Anything producing uniform floats in [0.0, 1.0). random.Random fits."""

    def random(self) -> float:
        ...


# a corpus is just an ordered stream of single characters
CharSource = Iterable[str]
