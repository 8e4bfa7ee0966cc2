"""Append-only word store shared between queries and word loaders.

The contents live in a ``frozenset`` that is replaced wholesale on every add.
Readers never take the lock: a query grabs the current set once and works on
that snapshot, so it sees each word either fully added or not at all, and
adds that land mid-query simply show up in the next one.
"""

from __future__ import annotations

import threading
from typing import FrozenSet, Iterable, Iterator

from .logger import get_logger
from .seed import DEFAULT_WORDS

logger = get_logger(__name__)


class WordDictionary:
    def __init__(self, words: Iterable[str] = ()):
        self._lock = threading.Lock()
        self._words: FrozenSet[str] = frozenset(words)

    @classmethod
    def with_seed_words(cls) -> "WordDictionary":
        """Build a store holding the bundled Sorani and Kurmanji sample words."""
        return cls(DEFAULT_WORDS)

    def add_words(self, *words: str) -> None:
        """Add one or more words; duplicates are ignored."""
        if not words:
            return
        with self._lock:
            before = len(self._words)
            self._words = self._words.union(words)
            added = len(self._words) - before
        logger.debug("Added %d new word(s) (%d given)", added, len(words))

    def contains(self, word: str) -> bool:
        return word in self._words

    def snapshot(self) -> FrozenSet[str]:
        """Return the current contents; later adds do not affect the result."""
        return self._words

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self._words)} words)"
