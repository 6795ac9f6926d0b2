# validation.py
# Shared input check for words, meanings and prefixes.
# Only the 26 ASCII letters (either case) are accepted; the empty string is
# valid here, callers that need non-empty input check for it themselves.

import string

ALPHABET = string.ascii_lowercase
ALPHABET_SIZE = len(ALPHABET)

_LETTERS = frozenset(string.ascii_letters)


def is_valid(text: str) -> bool:
    """True iff every character of `text` is in A-Z or a-z."""
    return all(ch in _LETTERS for ch in text)


def fold(text: str) -> str:
    """Case-fold a validated string to the stored lowercase form."""
    return text.lower()


def slot(ch: str) -> int:
    """Child slot index for a lowercase letter (a -> 0 ... z -> 25)."""
    return ord(ch) - ord("a")
