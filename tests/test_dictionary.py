# tests/test_dictionary.py
# facade: timing, loading, suggestion cap

import pytest

from trie_dictionary.core.dictionary import Dictionary
from trie_dictionary.core.errors import DictionaryLoadError
from trie_dictionary.core.trie import Trie


@pytest.fixture
def d():
    return Dictionary()


def test_operations_round_trip(d):
    assert d.add("Moon", "satellite")
    assert d.lookup("moon").value == "satellite"
    assert d.change("moon", "luna")
    assert d.lookup("MOON").value == "luna"
    assert d.remove("moon")
    assert d.lookup("moon").is_not_found
    assert len(d) == 0


def test_metrics_recorded(d):
    d.add("sun", "star")
    d.lookup("sun")
    d.lookup("sky")
    d.suggest("s")
    snap = d.metrics.snapshot()
    assert snap["insert"]["count"] == 1
    assert snap["search"]["count"] == 2
    assert snap["suggest"]["count"] == 1
    assert snap["search"]["avg"] >= 0.0


def test_max_suggestions(d):
    for w in ["aa", "ab", "ac", "ad"]:
        d.add(w, "x")
    d.max_suggestions = 2
    assert d.suggest("a") == ["aa", "ab"]
    assert d.suggest("a", limit=3) == ["aa", "ab", "ac"]


def test_shared_trie_instance():
    t = Trie()
    d = Dictionary(trie=t)
    d.add("ink", "pigment")
    assert t.search("ink").value == "pigment"
    assert "ink" in d


def test_load(tmp_path, d):
    p = tmp_path / "words.txt"
    p.write_text("ant insect\nbee insect\nbad line here\n", encoding="utf-8")
    report = d.load(p)
    assert report.inserted == 2
    assert d.last_load is report
    assert d.stats()["words"] == 2


def test_load_missing(tmp_path, d):
    with pytest.raises(DictionaryLoadError):
        d.load(tmp_path / "missing.txt")


def test_load_lines(d):
    report = d.load_lines(["owl bird", "bat"])
    assert report.inserted == 1
    assert report.skipped == [2]
