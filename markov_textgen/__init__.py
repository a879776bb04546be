"""markov_textgen - character-level Markov text generator."""

from markov_textgen.core import (
    CharCount,
    FrequencyTable,
    LanguageModel,
    MarkovError,
    ModelAlreadyTrainedError,
)

__all__ = [
    "CharCount",
    "FrequencyTable",
    "LanguageModel",
    "MarkovError",
    "ModelAlreadyTrainedError",
]

__version__ = "0.1.0"
