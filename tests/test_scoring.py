from __future__ import annotations

import pytest

from kurdish_didyoumean.scoring import common_prefix_length, common_suffix_length, similarity_score


def test_prefix_and_suffix_scans_stop_at_first_mismatch():
    assert common_prefix_length("carta", "cart") == 4
    assert common_prefix_length("xcar", "car") == 0
    assert common_suffix_length("maal", "mal") == 2
    assert common_suffix_length("abc", "abd") == 0


def test_prefix_and_suffix_may_overlap():
    # "aa" vs "aaa": both scans cover the whole shorter word
    assert common_prefix_length("aa", "aaa") == 2
    assert common_suffix_length("aa", "aaa") == 2


def test_similarity_score_for_sorani_word():
    # m=4: edit .75*.6 + length .75*.2 + prefix 2/4*.3 + suffix 1/4*.2
    assert similarity_score("سڵو", "سڵاو", 1) == pytest.approx(0.8)


def test_similarity_score_can_exceed_one():
    assert similarity_score("mal", "mal", 0) == pytest.approx(1.3)


def test_similarity_score_prefers_closer_length():
    same_length = similarity_score("carx", "cart", 1)
    shorter = similarity_score("carx", "car", 1)
    assert same_length == pytest.approx(0.875)
    assert shorter == pytest.approx(0.825)


def test_similarity_score_both_empty():
    assert similarity_score("", "", 0) == 0.0
