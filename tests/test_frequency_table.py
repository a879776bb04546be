# tests/test_frequency_table.py
# unit tests for per-window counts and probabilities

import pytest
from markov_textgen.core.frequency_table import CharCount, FrequencyTable


def _table(chars):
    t = FrequencyTable()
    for c in chars:
        t.update(c)
    return t


def test_update_keeps_first_seen_order():
    t = _table("baacb")
    assert [cc.chr for cc in t] == ["b", "a", "c"]
    assert [cc.count for cc in t] == [2, 2, 1]


def test_update_new_char_starts_at_one():
    t = FrequencyTable()
    t.update("x")
    assert len(t) == 1
    assert t.get("x").count == 1
    assert "x" in t and "y" not in t
    assert t.get("y") is None


def test_calculate_probabilities_values():
    t = _table("aab")
    t.calculate_probabilities()
    a, b = t[0], t[1]
    assert a.p == pytest.approx(2 / 3)
    assert b.p == pytest.approx(1 / 3)
    assert a.cp == pytest.approx(2 / 3)
    assert b.cp == pytest.approx(1.0)


def test_probabilities_sum_to_one_and_cp_monotonic():
    t = _table("the rain in spain stays mainly in the plain")
    t.calculate_probabilities()
    assert sum(cc.p for cc in t) == pytest.approx(1.0, abs=1e-9)
    cps = [cc.cp for cc in t]
    assert cps == sorted(cps)
    assert cps[-1] == pytest.approx(1.0, abs=1e-9)


def test_recalculate_is_idempotent():
    t = _table("abbccc")
    t.calculate_probabilities()
    first = [(cc.p, cc.cp) for cc in t]
    t.calculate_probabilities()
    assert [(cc.p, cc.cp) for cc in t] == first


def test_empty_table_calculate_is_noop():
    t = FrequencyTable()
    t.calculate_probabilities()
    assert len(t) == 0
    assert t.total == 0


def test_str_format():
    t = _table("ab")
    t.calculate_probabilities()
    assert str(t) == "(a 1 0.5 0.5) (b 1 0.5 1.0)"
    assert str(CharCount("z", 3, 1.0, 1.0)) == "(z 3 1.0 1.0)"
