# loader.py
# Bulk dictionary loader: one "word meaning" pair per line.
# Lines that do not split into exactly two whitespace separated tokens, or
# whose tokens fail validation, are skipped. Loading is not transactional:
# if reading stops early, whatever was inserted so far stays in the tree.

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from .errors import DictionaryLoadError
from .protocols import WordStore
from .validation import is_valid

logger = logging.getLogger(__name__)

DEFAULT_DICTIONARY = "Dictionary.txt"


@dataclass
class LoadReport:
    """Counts gathered while loading. `skipped` holds 1-based line numbers."""
    source: str = "<lines>"
    inserted: int = 0
    skipped: List[int] = field(default_factory=list)

    @property
    def total(self) -> int:
        return self.inserted + len(self.skipped)


def parse_line(line: str) -> Optional[Tuple[str, str]]:
    """Split a line into (word, meaning), or None when it is not well formed."""
    parts = line.split()
    if len(parts) != 2:
        return None
    word, meaning = parts
    if not (is_valid(word) and is_valid(meaning)):
        return None
    return word, meaning


def load_lines(
    store: WordStore,
    lines: Iterable[str],
    source: str = "<lines>",
    report: Optional[LoadReport] = None,
) -> LoadReport:
    """
    Insert every well formed line of `lines` into `store`.
    Blank lines are ignored. Pass `report` to have the counts filled in
    place, so they survive an exception raised by the iterable.
    """
    if report is None:
        report = LoadReport(source=source)
    for lineno, line in enumerate(lines, 1):
        if not line.strip():
            continue
        pair = parse_line(line)
        if pair is None or not store.insert(*pair):
            logger.debug("%s:%d skipped %r", source, lineno, line.rstrip("\n"))
            report.skipped.append(lineno)
            continue
        report.inserted += 1
    return report


def load_file(store: WordStore, path: Union[str, Path] = DEFAULT_DICTIONARY) -> LoadReport:
    """
    Load a dictionary file into `store`.
    Raises DictionaryLoadError when the file cannot be opened, or when a read
    fails part way through (words inserted before that point are kept).
    """
    path = str(path)
    report = LoadReport(source=path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            load_lines(store, f, source=path, report=report)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Unable to open file '%s': %s", path, e)
        raise DictionaryLoadError(path, str(e), inserted=report.inserted) from e

    logger.info("loaded %d words from %s (%d lines skipped)",
                report.inserted, path, len(report.skipped))
    return report
