"""Multi-factor similarity between an input word and a dictionary candidate.

Edit distance dominates; length mismatch is a secondary penalty. Shared
prefixes and suffixes are additive bonuses for agglutinative morphology, so
a score can exceed 1.0 and callers must not treat it as a probability.
"""

from __future__ import annotations

EDIT_WEIGHT = 0.6
LENGTH_WEIGHT = 0.2
PREFIX_WEIGHT = 0.3
SUFFIX_WEIGHT = 0.2


def common_prefix_length(a: str, b: str) -> int:
    count = 0
    for ca, cb in zip(a, b):
        if ca != cb:
            break
        count += 1
    return count


def common_suffix_length(a: str, b: str) -> int:
    count = 0
    for ca, cb in zip(reversed(a), reversed(b)):
        if ca != cb:
            break
        count += 1
    return count


def similarity_score(word: str, candidate: str, edit_distance: int) -> float:
    """Score *candidate* against *word* given their precomputed edit distance.

    Prefix and suffix matches are measured independently, so on short words
    the two regions may overlap and both count.
    """
    longest = max(len(word), len(candidate))
    if longest == 0:
        return 0.0
    edit_similarity = (longest - edit_distance) / longest
    length_similarity = 1.0 - abs(len(word) - len(candidate)) / longest
    prefix_ratio = common_prefix_length(word, candidate) / longest
    suffix_ratio = common_suffix_length(word, candidate) / longest
    return (
        edit_similarity * EDIT_WEIGHT
        + length_similarity * LENGTH_WEIGHT
        + prefix_ratio * PREFIX_WEIGHT
        + suffix_ratio * SUFFIX_WEIGHT
    )
