# dictionary.py
"""
Dictionary - application facade over the Trie engine.

Purpose:
 - Own exactly one Trie instance (built by the host, handed to the UI)
 - Bulk load a dictionary file at startup
 - Time every operation into a Metrics tracker
 - Simple public API for CLI/tests:
     add(word, meaning), lookup(word), change(word, meaning), remove(word),
     suggest(prefix), load(path), stats()
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Iterable, List, Optional, Union

from .loader import DEFAULT_DICTIONARY, LoadReport, load_file, load_lines
from .protocols import Outcome, TrieStats
from .trie import SUGGESTION_LIMIT, Trie
from ..utils.logger_utils import Log
from ..utils.metrics_tracker import Metrics

logger = logging.getLogger(__name__)


class Dictionary:
    """Application facade exposing a small API over a Trie."""

    def __init__(
        self,
        trie: Optional[Trie] = None,
        metrics: Optional[Metrics] = None,
        max_suggestions: int = SUGGESTION_LIMIT,
    ) -> None:
        self.trie = trie if trie is not None else Trie()
        self.metrics = metrics if metrics is not None else Metrics()
        self.max_suggestions = max_suggestions
        self.last_load: Optional[LoadReport] = None

    # loading ----------------------------------------------------------------
    def load(self, path: Union[str, Path] = DEFAULT_DICTIONARY) -> LoadReport:
        """Bulk load a file. DictionaryLoadError propagates to the host."""
        with Log.time_block("load_dictionary"):
            self.last_load = load_file(self.trie, path)
        return self.last_load

    def load_lines(self, lines: Iterable[str]) -> LoadReport:
        self.last_load = load_lines(self.trie, lines)
        return self.last_load

    # operations -------------------------------------------------------------
    def _timed(self, key: str, fn, *args):
        t0 = time.perf_counter()
        out = fn(*args)
        self.metrics.record(key, time.perf_counter() - t0)
        return out

    def add(self, word: str, meaning: str) -> Outcome:
        out = self._timed("insert", self.trie.insert, word, meaning)
        logger.debug("add %r -> %s", word, out.status.value)
        return out

    def lookup(self, word: str) -> Outcome:
        return self._timed("search", self.trie.search, word)

    def change(self, word: str, meaning: str) -> Outcome:
        out = self._timed("update", self.trie.update, word, meaning)
        logger.debug("change %r -> %s", word, out.status.value)
        return out

    def remove(self, word: str) -> Outcome:
        out = self._timed("delete", self.trie.delete, word)
        logger.debug("remove %r -> %s", word, out.status.value)
        return out

    def suggest(self, prefix: str, limit: Optional[int] = None) -> List[str]:
        return self._timed("suggest", self.trie.suggest, prefix,
                           limit if limit is not None else self.max_suggestions)

    # inspection -------------------------------------------------------------
    def stats(self) -> TrieStats:
        return self.trie.stats()

    def __len__(self) -> int:
        return len(self.trie)

    def __contains__(self, word: object) -> bool:
        return word in self.trie
