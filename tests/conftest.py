# conftest.py - shared fixtures

import pytest

from trie_dictionary.core.trie import Trie
from trie_dictionary.utils.logger_utils import Log


@pytest.fixture(autouse=True)
def quiet_metrics():
    # keep Log.metric/time_block from printing or writing logs/ during tests
    Log.configure(None, echo=False)
    yield
    Log.configure(None, echo=False)


@pytest.fixture
def trie():
    return Trie()


@pytest.fixture
def animals(trie):
    for w, m in [("cat", "feline"), ("car", "vehicle"), ("cart", "wagon"),
                 ("dog", "canine"), ("do", "perform")]:
        trie.insert(w, m)
    return trie
