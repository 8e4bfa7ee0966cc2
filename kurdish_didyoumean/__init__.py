"""
kurdish_didyoumean: "did you mean" suggestions for Kurdish words.

Given a misspelled word, every dictionary word within an edit-distance
threshold is scored on edit similarity, length similarity and shared
prefix/suffix, and the best few are returned. Works on Sorani (Arabic
script) and Kurmanji (Latin script) alike since all comparisons are done on
Unicode code points.

Usage:
    from kurdish_didyoumean import SpellSuggester

    speller = SpellSuggester()           # seeded with sample vocabulary
    speller.suggest("سڵو")               # -> ["سڵاو", ...]
    speller.suggest("maal", 3, 1)        # -> ["mal", ...]
    speller.add_words("کوردستان")
    speller.contains("کوردستان")         # -> True
"""

from __future__ import annotations

from .dictionary import WordDictionary
from .distance import levenshtein
from .models import Candidate
from .ranking import rank_candidates, suggest
from .scoring import similarity_score
from .speller import SpellSuggester

__version__ = "0.1.0"

__all__ = [
    "Candidate",
    "SpellSuggester",
    "WordDictionary",
    "levenshtein",
    "rank_candidates",
    "similarity_score",
    "suggest",
]
