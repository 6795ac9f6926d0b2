# trie.py
# Prefix tree (trie) mapping words to meanings over the 26 lowercase letters.
# Every node owns a fixed array of 26 child slots (a -> 0 ... z -> 25), so a
# node can never hold two children for the same letter.
# Deleting a word prunes every node that no longer leads to a stored word.

from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Tuple

from .protocols import Outcome, TrieStats
from .validation import ALPHABET, ALPHABET_SIZE, fold, is_valid, slot

logger = logging.getLogger(__name__)

# suggestions are cut to this many words
SUGGESTION_LIMIT = 10


class TrieNode:
    """
    A single node in the Trie.
    letter: the character on the edge leading here ("" for the root)
    is_terminal: the path from the root to this node spells a stored word
    meaning: definition for a terminal node, "" otherwise
    children: 26 slots, None where no child exists
    """

    __slots__ = ("letter", "is_terminal", "meaning", "children")

    def __init__(self, letter: str = "") -> None:
        self.letter = letter
        self.is_terminal = False
        self.meaning = ""
        self.children: List[Optional[TrieNode]] = [None] * ALPHABET_SIZE

    def child(self, ch: str) -> Optional[TrieNode]:
        return self.children[slot(ch)]

    def has_children(self) -> bool:
        return any(c is not None for c in self.children)

    def is_prunable(self) -> bool:
        """A node its parent may unlink: not a word and nothing below it."""
        return not self.is_terminal and not self.has_children()

    def __repr__(self) -> str:
        return f"TrieNode({self.letter!r}, terminal={self.is_terminal})"


class Trie:
    """
    Word -> meaning dictionary backed by a prefix tree.

    All operations start at the root and walk child slots keyed by the
    lowercased letters of the input. Failures are reported as Outcome values
    (INVALID / NOT_FOUND) and never leave the tree modified.
    """

    def __init__(self) -> None:
        self._root = TrieNode()
        self._size = 0

    @property
    def root(self) -> TrieNode:
        return self._root

    # insertion -----------------------------------------------------
    def insert(self, word: str, meaning: str) -> Outcome:
        """
        Store `word` with `meaning`, overwriting any previous meaning.
        Both must be non-empty and purely alphabetic, otherwise INVALID is
        returned before anything is touched.
        """
        if not (word and meaning and is_valid(word) and is_valid(meaning)):
            logger.debug("insert rejected: %r / %r", word, meaning)
            return Outcome.invalid(word)

        key = fold(word)
        node = self._root
        for ch in key:
            idx = slot(ch)
            nxt = node.children[idx]
            if nxt is None:
                nxt = node.children[idx] = TrieNode(ch)
            node = nxt

        if not node.is_terminal:
            self._size += 1
        node.is_terminal = True
        node.meaning = meaning
        return Outcome.ok(key)

    # lookup/update ---------------------------------------------------------
    def search(self, word: str) -> Outcome:
        """Return OK with the stored meaning, NOT_FOUND, or INVALID."""
        if not is_valid(word):
            return Outcome.invalid(word)

        key = fold(word)
        node = self._find(key)
        if node is None or not node.is_terminal:
            return Outcome.not_found(key)
        return Outcome.ok(key, node.meaning)

    def update(self, word: str, new_meaning: str) -> Outcome:
        """Replace the meaning of an existing word. Never creates nodes."""
        if not (new_meaning and is_valid(word) and is_valid(new_meaning)):
            return Outcome.invalid(word)

        key = fold(word)
        node = self._find(key)
        if node is None or not node.is_terminal:
            return Outcome.not_found(key)
        node.meaning = new_meaning
        return Outcome.ok(key)

    def _find(self, key: str) -> Optional[TrieNode]:
        """Walk the path for an already folded key; None if it breaks."""
        node = self._root
        for ch in key:
            node = node.children[slot(ch)]
            if node is None:
                return None
        return node

    # deletion ---------------------------------------------------------
    def delete(self, word: str) -> Outcome:
        """
        Remove `word` and prune the branch it leaves behind.

        The terminal node is cleared first; on the way back up each parent
        unlinks a child that is neither terminal nor has children of its
        own. Branches still used by other words survive, the root is never
        removed.
        """
        if not is_valid(word):
            return Outcome.invalid(word)

        key = fold(word)
        if not self._delete(key):
            return Outcome.not_found(key)
        self._size -= 1
        logger.debug("deleted %r", key)
        return Outcome.ok(key)

    def _delete(self, key: str) -> bool:
        """
        Clear the terminal node for `key`, then unwind the path bottom-up,
        unlinking each child that is left non-terminal and childless.
        Returns False (and touches nothing) when `key` is not stored.
        The path is kept as an explicit list, so word length is not bounded
        by the recursion limit.
        """
        path: List[Tuple[TrieNode, int]] = []
        node = self._root
        for ch in key:
            idx = slot(ch)
            child = node.children[idx]
            if child is None:
                return False
            path.append((node, idx))
            node = child

        if not node.is_terminal:
            return False
        node.is_terminal = False
        node.meaning = ""

        for parent, idx in reversed(path):
            child = parent.children[idx]
            if not child.is_prunable():
                break
            parent.children[idx] = None
        return True

    # suggestions ---------------------------------------------------------
    def suggest(self, prefix: str, limit: int = SUGGESTION_LIMIT) -> List[str]:
        """
        Words starting with `prefix`, ascending, at most `limit` of them.
        An unknown or non-alphabetic prefix yields []. The empty prefix
        covers the whole tree. `limit` must be at least 1.
        """
        if limit < 1:
            raise ValueError(f"limit must be >= 1, got {limit}")
        if not is_valid(prefix):
            return []

        key = fold(prefix)
        node = self._find(key)
        if node is None:
            return []

        out = self._collect(node, key)
        out.sort()
        return out[:limit]

    def _collect(self, node: TrieNode, prefix: str) -> List[str]:
        """DFS (explicit stack) collecting every stored word under a prefix node."""
        results: List[str] = []
        stack = [(node, prefix)]
        while stack:
            node, prefix = stack.pop()
            if node.is_terminal:
                results.append(prefix)
            for ch, child in zip(ALPHABET, node.children):
                if child is not None:
                    stack.append((child, prefix + ch))
        return results

    # convenience/debugging -----------------------------------------------------
    def words(self) -> List[str]:
        """All stored words in ascending order."""
        acc = self._collect(self._root, "")
        acc.sort()
        return acc

    def has_prefix(self, prefix: str) -> bool:
        """True when some path (not necessarily a word) spells `prefix`."""
        return is_valid(prefix) and self._find(fold(prefix)) is not None

    def _walk(self) -> Iterator[Tuple[TrieNode, int]]:
        stack = [(self._root, 0)]
        while stack:
            node, depth = stack.pop()
            yield node, depth
            for child in node.children:
                if child is not None:
                    stack.append((child, depth + 1))

    def node_count(self) -> int:
        """Number of nodes including the root. O(N) walk."""
        return sum(1 for _ in self._walk())

    def stats(self) -> TrieStats:
        nodes = 0
        depth = 0
        for _, d in self._walk():
            nodes += 1
            depth = max(depth, d)
        return {"words": self._size, "nodes": nodes, "max_depth": depth}

    def __len__(self) -> int:
        return self._size

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.search(word).is_ok

    def __iter__(self) -> Iterator[str]:
        return iter(self.words())
