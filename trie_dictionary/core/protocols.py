# trie_dictionary/core/protocols.py
"""
Result types and protocol interfaces shared by the engine, the loader and the CLI.

Every engine operation reports back with an explicit Outcome instead of a
sentinel string, so "not found", "invalid input" and a legitimately empty
meaning never collide.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import List, Optional, Protocol, runtime_checkable
from typing_extensions import TypedDict

from .errors import InvalidEntryError, WordNotFoundError


class Status(enum.Enum):
    OK = "ok"
    NOT_FOUND = "not_found"
    INVALID = "invalid"


@dataclass(frozen=True)
class Outcome:
    """
    Discriminated result of an engine operation.
    status: OK / NOT_FOUND / INVALID
    value: the meaning for a successful search, else None
    word: the (case-folded when valid) word the operation targeted
    """

    status: Status
    word: str = ""
    value: Optional[str] = None

    @classmethod
    def ok(cls, word: str, value: Optional[str] = None) -> "Outcome":
        return cls(Status.OK, word, value)

    @classmethod
    def not_found(cls, word: str) -> "Outcome":
        return cls(Status.NOT_FOUND, word)

    @classmethod
    def invalid(cls, word: str) -> "Outcome":
        return cls(Status.INVALID, word)

    @property
    def is_ok(self) -> bool:
        return self.status is Status.OK

    @property
    def is_not_found(self) -> bool:
        return self.status is Status.NOT_FOUND

    @property
    def is_invalid(self) -> bool:
        return self.status is Status.INVALID

    def __bool__(self) -> bool:
        return self.is_ok

    def unwrap(self) -> Optional[str]:
        """Return the carried value, raising the matching error on failure."""
        if self.status is Status.INVALID:
            raise InvalidEntryError(self.word)
        if self.status is Status.NOT_FOUND:
            raise WordNotFoundError(self.word)
        return self.value


# Typed structures ------------------------------------------------------------

class TrieStats(TypedDict):
    """Snapshot of the tree shape, used by the CLI /stats command."""
    words: int
    nodes: int
    max_depth: int


# Protocols -------------------------------------------------------------------

@runtime_checkable
class WordStore(Protocol):
    """The operations a host layer (loader, CLI) relies on."""

    def insert(self, word: str, meaning: str) -> Outcome:
        ...

    def search(self, word: str) -> Outcome:
        ...

    def update(self, word: str, new_meaning: str) -> Outcome:
        ...

    def delete(self, word: str) -> Outcome:
        ...

    def suggest(self, prefix: str, limit: int = 10) -> List[str]:
        ...
