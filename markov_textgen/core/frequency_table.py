# frequency_table.py
# per-window successor counts and their probability distribution.

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional


@dataclass
class CharCount:
    """
    One successor character of a window.
    count is the raw number of observations, p its probability and
    cp the cumulative probability up to and including this entry.
    """
    chr: str
    count: int = 1
    p: float = 0.0
    cp: float = 0.0

    def __str__(self) -> str:
        return f"({self.chr} {self.count} {self.p} {self.cp})"


class FrequencyTable:
    """
    Ordered list of CharCount records for a single window.

    Entries keep the order in which characters were first seen. Sampling
    walks the list in that order, so the order decides which character
    wins when cumulative probabilities tie.
    """

    def __init__(self) -> None:
        self._entries: List[CharCount] = []
        # chr -> position in _entries, keeps update() O(1)
        self._index: Dict[str, int] = {}

    # ------------------------------------------------------------------
    # Counting
    # ------------------------------------------------------------------
    def update(self, chr: str) -> None:
        """Count one more occurrence of chr, appending it if unseen."""
        pos = self._index.get(chr)
        if pos is None:
            self._index[chr] = len(self._entries)
            self._entries.append(CharCount(chr))
        else:
            self._entries[pos].count += 1

    # ------------------------------------------------------------------
    # Probabilities
    # ------------------------------------------------------------------
    def calculate_probabilities(self) -> None:
        """
        Fill in p and cp for every entry from the current counts.
        Safe to call again; with unchanged counts it derives the same values.
        """
        total = self.total
        if total == 0:
            return
        cp = 0.0
        for cc in self._entries:
            cc.p = cc.count / total
            cp += cc.p
            cc.cp = cp

    # ------------------------------------------------------------------
    # Introspection helpers
    # ------------------------------------------------------------------
    @property
    def total(self) -> int:
        return sum(cc.count for cc in self._entries)

    def get(self, chr: str) -> Optional[CharCount]:
        pos = self._index.get(chr)
        return None if pos is None else self._entries[pos]

    def __getitem__(self, i: int) -> CharCount:
        return self._entries[i]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[CharCount]:
        return iter(self._entries)

    def __contains__(self, chr: object) -> bool:
        return chr in self._index

    def __str__(self) -> str:
        return " ".join(str(cc) for cc in self._entries)

    def __repr__(self) -> str:
        return f"FrequencyTable({self})"
