# random_source.py - factories for the model's random number source
#
# "fixed"  -> random.Random(seed): same seed, same generated text (tests, debugging)
# "random" -> random.SystemRandom(): OS entropy, different text every run

from __future__ import annotations

import random
from typing import Optional

from markov_textgen.core.protocols import RandomSource

MODES = ("fixed", "random")


def seeded_source(seed: int) -> RandomSource:
    return random.Random(seed)


def entropy_source() -> RandomSource:
    return random.SystemRandom()


def make_source(mode: str, seed: Optional[int] = None) -> RandomSource:
    """
    Build a random source for the given mode.
    A fixed mode without a seed falls back to 0 so it stays reproducible.
    """
    if mode == "fixed":
        return seeded_source(0 if seed is None else seed)
    if mode == "random":
        return entropy_source()
    raise ValueError(f"unknown random mode {mode!r}, expected one of {MODES}")
