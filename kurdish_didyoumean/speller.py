from __future__ import annotations

from typing import Dict, List, Optional

from .dictionary import WordDictionary
from .logger import get_logger
from .ranking import DEFAULT_MAX_SUGGESTIONS, DEFAULT_THRESHOLD, suggest
from .wordlist import load_wordlist

logger = get_logger(__name__)


class SpellSuggester:
    """Did-you-mean suggestions over an injected :class:`WordDictionary`."""

    def __init__(
        self,
        dictionary: Optional[WordDictionary] = None,
        max_suggestions: int = DEFAULT_MAX_SUGGESTIONS,
        threshold: int = DEFAULT_THRESHOLD,
    ):
        self.dictionary = dictionary if dictionary is not None else WordDictionary.with_seed_words()
        self.max_suggestions = max_suggestions
        self.threshold = threshold

    @classmethod
    def from_config(cls, cfg: Dict) -> "SpellSuggester":
        """Build a suggester from a normalized config dict.

        Raises ``WordlistError`` if a configured wordlist cannot be loaded.
        """
        dictionary = WordDictionary.with_seed_words() if cfg.get("include_seed_words", True) else WordDictionary()
        for source in cfg.get("wordlists") or []:
            dictionary.add_words(*load_wordlist(source))
        logger.debug("Built dictionary with %d words", len(dictionary))
        return cls(
            dictionary,
            max_suggestions=cfg.get("max_suggestions", DEFAULT_MAX_SUGGESTIONS),
            threshold=cfg.get("threshold", DEFAULT_THRESHOLD),
        )

    def suggest(
        self,
        word: Optional[str],
        max_suggestions: Optional[int] = None,
        threshold: Optional[int] = None,
    ) -> List[str]:
        return suggest(
            word,
            self.dictionary,
            self.max_suggestions if max_suggestions is None else max_suggestions,
            self.threshold if threshold is None else threshold,
        )

    def add_words(self, *words: str) -> None:
        self.dictionary.add_words(*words)

    def contains(self, word: str) -> bool:
        return self.dictionary.contains(word)
