# tests/test_protocols.py
# Outcome values and the error taxonomy behind unwrap()

import pytest

from trie_dictionary.core.errors import InvalidEntryError, TrieDictionaryError, WordNotFoundError
from trie_dictionary.core.protocols import Outcome, Status, WordStore
from trie_dictionary.core.trie import Trie


def test_ok_unwrap_returns_value():
    out = Outcome.ok("cat", "feline")
    assert out and out.is_ok
    assert out.unwrap() == "feline"


def test_empty_meaning_is_not_confused_with_missing():
    # a stored empty meaning stays distinguishable from "not found"
    out = Outcome.ok("cat", "")
    assert out.is_ok
    assert out.unwrap() == ""


def test_not_found_unwrap_raises():
    out = Outcome.not_found("cow")
    assert not out
    with pytest.raises(WordNotFoundError) as e:
        out.unwrap()
    assert e.value.word == "cow"
    assert isinstance(e.value, KeyError)
    assert "cow" in str(e.value)


def test_invalid_unwrap_raises():
    out = Outcome.invalid("c4t")
    assert out.status is Status.INVALID
    with pytest.raises(InvalidEntryError):
        out.unwrap()
    with pytest.raises(TrieDictionaryError):
        out.unwrap()


def test_trie_satisfies_word_store():
    assert isinstance(Trie(), WordStore)


def test_search_unwrap_end_to_end():
    t = Trie()
    t.insert("owl", "bird")
    assert t.search("OWL").unwrap() == "bird"
    with pytest.raises(WordNotFoundError):
        t.search("ow").unwrap()
    with pytest.raises(ValueError):
        t.search("ow1").unwrap()
