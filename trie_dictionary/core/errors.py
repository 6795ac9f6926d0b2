# errors.py
# Exception taxonomy for the dictionary engine.
# The engine itself reports failures as Outcome values; these are raised
# when a caller unwraps a failed Outcome, and by the bulk loader.


class TrieDictionaryError(Exception):
    """Base class for every error raised by trie_dictionary."""


class InvalidEntryError(TrieDictionaryError, ValueError):
    """Word or meaning contains characters outside A-Z / a-z."""

    def __init__(self, text: str, field: str = "word"):
        self.text = text
        self.field = field
        super().__init__(f"invalid {field}: {text!r}")


class WordNotFoundError(TrieDictionaryError, KeyError):
    """Word is not stored (path missing or final node not terminal)."""

    def __init__(self, word: str):
        self.word = word
        super().__init__(word)

    def __str__(self) -> str:
        return f"word not found: {self.word!r}"


class DictionaryLoadError(TrieDictionaryError, OSError):
    """Dictionary file could not be opened or read."""

    def __init__(self, path: str, reason: str, inserted: int = 0):
        self.path = path
        self.reason = reason
        self.inserted = inserted
        super().__init__(f"unable to load '{path}': {reason}")
