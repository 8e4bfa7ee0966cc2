from __future__ import annotations

import pytest

from kurdish_didyoumean.dictionary import WordDictionary
from kurdish_didyoumean.exceptions import WordlistError
from kurdish_didyoumean.speller import SpellSuggester


def test_default_suggester_uses_seed_words():
    speller = SpellSuggester()
    assert speller.contains("silav")
    assert speller.suggest("silav") == []
    assert speller.suggest("maal", 3, 1) == ["mal"]


def test_added_words_become_candidates():
    speller = SpellSuggester(WordDictionary(["ئاو"]))
    assert not speller.contains("کوردستان")
    speller.add_words("کوردستان", "ئەمن", "ئاسمان")
    assert speller.contains("کوردستان")
    assert speller.suggest("کوردستا") == ["کوردستان"]
    assert speller.suggest("ئاسان")[0] == "ئاسمان"


def test_instance_defaults_apply_when_arguments_are_omitted():
    speller = SpellSuggester(WordDictionary(["cart", "car", "cards"]), max_suggestions=1, threshold=1)
    assert speller.suggest("carx") == ["cart"]
    assert speller.suggest("carx", max_suggestions=3, threshold=2) == ["cart", "car", "cards"]


def test_suggesters_do_not_share_dictionaries():
    first = SpellSuggester()
    second = SpellSuggester()
    first.add_words("کوردستان")
    assert not second.contains("کوردستان")


def test_from_config_loads_wordlists(tmp_path):
    wl = tmp_path / "words.txt"
    wl.write_text("کوردستان\nhewlêr\n", encoding="utf-8")
    speller = SpellSuggester.from_config(
        {"include_seed_words": False, "wordlists": [str(wl)], "max_suggestions": 2, "threshold": 1}
    )
    assert len(speller.dictionary) == 2
    assert not speller.contains("silav")
    assert speller.suggest("hewler") == ["hewlêr"]
    assert speller.max_suggestions == 2
    assert speller.threshold == 1


def test_from_config_propagates_wordlist_errors(tmp_path):
    with pytest.raises(WordlistError):
        SpellSuggester.from_config({"wordlists": [str(tmp_path / "missing.txt")]})
