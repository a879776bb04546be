# tests/test_char_stream.py

import io

from markov_textgen.core.char_stream import char_iterator, read_chars


def test_char_iterator_yields_single_chars():
    assert list(char_iterator(io.StringIO("ab\nc"))) == ["a", "b", "\n", "c"]


def test_char_iterator_empty():
    assert list(char_iterator(io.StringIO(""))) == []


def test_read_chars(tmp_path):
    p = tmp_path / "t.txt"
    p.write_text("héllo", encoding="utf-8")
    assert "".join(read_chars(str(p))) == "héllo"
