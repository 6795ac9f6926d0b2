"""
trie_dictionary.core

The dictionary engine.
Contains:
 - the prefix tree storing word -> meaning (Trie)
 - explicit operation outcomes and shared types (Outcome, Status)
 - the bulk "word meaning" file loader
 - the Dictionary facade a host builds once and hands to its UI
"""

from .errors import (
    DictionaryLoadError,
    InvalidEntryError,
    TrieDictionaryError,
    WordNotFoundError,
)
from .protocols import Outcome, Status, TrieStats, WordStore
from .trie import SUGGESTION_LIMIT, Trie, TrieNode
from .loader import LoadReport, load_file, load_lines
from .dictionary import Dictionary

__all__ = [
    "Dictionary",
    "DictionaryLoadError",
    "InvalidEntryError",
    "LoadReport",
    "Outcome",
    "Status",
    "SUGGESTION_LIMIT",
    "Trie",
    "TrieDictionaryError",
    "TrieNode",
    "TrieStats",
    "WordNotFoundError",
    "WordStore",
    "load_file",
    "load_lines",
]
