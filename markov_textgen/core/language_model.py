# language_model.py
# fixed-order character-level Markov model for text generation.

from __future__ import annotations

import logging
from itertools import islice
from typing import Dict, Iterator, Optional

from markov_textgen.core.char_stream import read_chars
from markov_textgen.core.errors import ModelAlreadyTrainedError
from markov_textgen.core.frequency_table import FrequencyTable
from markov_textgen.core.protocols import CharSource, ModelStats, RandomSource
from markov_textgen.core.random_source import entropy_source, seeded_source

logger = logging.getLogger(__name__)

Window = str


class LanguageModel:
    """
    Character-level Markov chain of a fixed window length.

    Maps every window of win_length characters seen in the corpus to a
    FrequencyTable of the characters that followed it. Lifecycle:
      - empty at construction
      - populated by exactly one train() / train_file() call
      - read-only afterwards, generate() may be called any number of times

    Constructing two models with the same win_length and seed and training
    them on the same corpus yields identical generate() output.
    """

    def __init__(self,
                 win_length: int,
                 seed: Optional[int] = None,
                 rng: Optional[RandomSource] = None) -> None:
        if win_length < 1:
            raise ValueError("win_length must be at least 1")
        self.win_length = win_length
        if rng is not None:
            self._rng = rng
        elif seed is not None:
            self._rng = seeded_source(seed)
        else:
            self._rng = entropy_source()
        # window -> successor table, in order of first appearance
        self._map: Dict[Window, FrequencyTable] = {}
        self._trained = False

    # ------------------------------------------------------------------
    # Training
    # ------------------------------------------------------------------
    def train(self, corpus: CharSource) -> None:
        """
        Build the model from a stream of characters in a single left to right
        scan. A corpus shorter than win_length leaves the model empty.

        Tables are installed only once the scan and normalization finish; a
        corpus that fails mid-read leaves the model untrained.
        """
        if self._trained:
            raise ModelAlreadyTrainedError("model has already been trained")

        chars = iter(corpus)
        window = "".join(islice(chars, self.win_length))
        if len(window) < self.win_length:
            logger.warning("corpus has %d chars, fewer than window length %d; model left empty",
                           len(window), self.win_length)
            self._trained = True
            return

        tables: Dict[Window, FrequencyTable] = {}
        n_chars = len(window)
        for c in chars:
            table = tables.get(window)
            if table is None:
                table = tables[window] = FrequencyTable()
            table.update(c)
            window = window[1:] + c
            n_chars += 1

        for table in tables.values():
            table.calculate_probabilities()

        self._map = tables
        self._trained = True
        logger.info("trained on %d chars: %d windows (win_length=%d)",
                    n_chars, len(self._map), self.win_length)

    def train_file(self, path: str, encoding: str = "utf-8") -> None:
        """Train on the contents of a text file."""
        logger.debug("training from %s", path)
        self.train(read_chars(path, encoding))

    # ------------------------------------------------------------------
    # Sampling
    # ------------------------------------------------------------------
    def sample_next_char(self, table: FrequencyTable) -> str:
        """
        Inverse-CDF draw from a window's distribution: the first entry whose
        cumulative probability reaches the random value wins. If rounding
        keeps every cp below the value, the last entry is returned.
        """
        if not len(table):
            raise ValueError("cannot sample from an empty frequency table")
        n = self._rng.random()
        for cc in table:
            if cc.cp >= n:
                return cc.chr
        return table[-1].chr

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------
    def generate(self, seed: str, length: int) -> str:
        """
        Extend seed by up to length characters.

        Returns seed unchanged when it is shorter than win_length, and stops
        early (returning what was produced so far) on a window the model
        never saw during training.
        """
        if length < 0:
            raise ValueError("length must be non-negative")
        if len(seed) < self.win_length:
            return seed

        target = len(seed) + length
        out = list(seed)
        window = seed[-self.win_length:]
        while len(out) < target:
            table = self._map.get(window)
            if table is None:
                logger.debug("unseen window %r, stopping after %d chars",
                             window, len(out) - len(seed))
                break
            out.append(self.sample_next_char(table))
            window = window[1:] + out[-1]
        return "".join(out)

    # ------------------------------------------------------------------
    # Introspection helpers
    # ------------------------------------------------------------------
    @property
    def trained(self) -> bool:
        return self._trained

    def distribution(self, window: Window) -> Optional[FrequencyTable]:
        return self._map.get(window)

    def windows(self) -> Iterator[Window]:
        return iter(self._map)

    def stats(self) -> ModelStats:
        return {
            "win_length": self.win_length,
            "windows": len(self._map),
            "transitions": sum(t.total for t in self._map.values()),
            "trained": self._trained,
        }

    def __len__(self) -> int:
        return len(self._map)

    def __contains__(self, window: object) -> bool:
        return window in self._map

    def __str__(self) -> str:
        """One line per window: 'abc : (a 3 1.0 1.0) ...'."""
        return "".join(f"{key} : {table}\n" for key, table in self._map.items())
