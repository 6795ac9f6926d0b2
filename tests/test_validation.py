import pytest

from trie_dictionary.core.validation import ALPHABET_SIZE, fold, is_valid, slot


@pytest.mark.parametrize("text", ["abc", "ABC", "MiXeD", ""])
def test_valid(text):
    assert is_valid(text)


@pytest.mark.parametrize("text", ["abc1", "a b", "a-b", "ñ", "é", "\0", "tab\t"])
def test_invalid(text):
    assert not is_valid(text)


def test_fold_and_slot():
    assert fold("HeLLo") == "hello"
    assert slot("a") == 0
    assert slot("z") == ALPHABET_SIZE - 1 == 25
