# tests/conftest.py - shared fixtures

import pytest

from markov_textgen.core.language_model import LanguageModel


class ScriptedRandom:
    """RandomSource that replays a fixed list of values."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def random(self):
        v = self.values[self.calls % len(self.values)]
        self.calls += 1
        return v


@pytest.fixture
def scripted():
    return ScriptedRandom


@pytest.fixture
def cyclic_model():
    m = LanguageModel(3, seed=1)
    m.train("abcabcabcabc")
    return m


@pytest.fixture
def english_corpus():
    return (
        "the quick brown fox jumps over the lazy dog. "
        "the timing of this is strange, don't you think? "
        "the enemy of my enemy is my friend. "
    ) * 3
