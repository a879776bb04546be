"""
markov_textgen.core

The text generation engine.
Contains:
 - per-window successor counts and distributions (FrequencyTable)
 - the character-level Markov model (LanguageModel)
 - random source factories and the RandomSource protocol
 - character stream readers for training corpora
"""

from .frequency_table import CharCount, FrequencyTable
from .language_model import LanguageModel
from .errors import MarkovError, ModelAlreadyTrainedError
from .random_source import make_source, seeded_source, entropy_source
from .protocols import RandomSource, ModelStats

__all__ = [
    "CharCount",
    "FrequencyTable",
    "LanguageModel",
    "MarkovError",
    "ModelAlreadyTrainedError",
    "make_source",
    "seeded_source",
    "entropy_source",
    "RandomSource",
    "ModelStats",
]
