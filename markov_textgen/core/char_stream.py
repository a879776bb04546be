# char_stream.py - character-at-a-time readers for training corpora

from __future__ import annotations

from typing import IO, Iterator


def char_iterator(file: IO[str]) -> Iterator[str]:
    """
    The default iterator for files yields lines.
    This one yields single characters.
    """
    return iter(lambda: file.read(1), "")


def read_chars(path: str, encoding: str = "utf-8") -> Iterator[str]:
    """Yield the characters of a text file, closing it once exhausted."""
    with open(path, "r", encoding=encoding) as f:
        yield from char_iterator(f)
