"""Threshold-filtered ranking of dictionary words for a misspelled input."""

from __future__ import annotations

from typing import AbstractSet, Iterable, List, Optional, Union

from .dictionary import WordDictionary
from .distance import levenshtein
from .logger import get_logger
from .models import Candidate
from .scoring import similarity_score

logger = get_logger(__name__)

DEFAULT_MAX_SUGGESTIONS = 3
DEFAULT_THRESHOLD = 3


def rank_candidates(word: str, words: Iterable[str], threshold: int) -> List[Candidate]:
    """Score every word within *threshold* edits of *word*, best first.

    The boundary is inclusive. A negative threshold lets nothing through.
    """
    out: List[Candidate] = []
    for candidate in words:
        distance = levenshtein(word, candidate)
        if distance > threshold:
            continue
        out.append(Candidate(candidate, similarity_score(word, candidate, distance), distance))
    out.sort(key=Candidate.sort_key)
    return out


def suggest(
    word: Optional[str],
    dictionary: Union[WordDictionary, AbstractSet[str]],
    max_suggestions: int = DEFAULT_MAX_SUGGESTIONS,
    threshold: int = DEFAULT_THRESHOLD,
) -> List[str]:
    """Return up to *max_suggestions* corrections for *word*.

    Surrounding whitespace is stripped first, and edit distances are
    measured from the stripped word. Returns an empty list when the input is
    blank, when it is already a dictionary word, or when nothing lies within
    *threshold* edits.
    """
    if word is None:
        return []
    base = word.strip()
    if not base or max_suggestions <= 0:
        return []
    words = dictionary.snapshot() if isinstance(dictionary, WordDictionary) else dictionary
    if base in words:
        logger.debug("%r is a dictionary word; nothing to suggest", base)
        return []
    ranked = rank_candidates(base, words, threshold)
    logger.debug(
        "%r: %d of %d words within %d edits",
        base,
        len(ranked),
        len(words),
        threshold,
    )
    return [c.word for c in ranked[:max_suggestions]]
