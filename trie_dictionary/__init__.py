"""trie_dictionary - word/meaning dictionary on a prefix tree, with autocomplete."""

from .core import Dictionary, Outcome, Status, Trie

__all__ = ["Dictionary", "Outcome", "Status", "Trie"]

__version__ = "0.1.0"
