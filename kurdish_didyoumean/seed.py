"""Sample vocabulary used to seed a fresh dictionary."""

from __future__ import annotations

from typing import Tuple

# Sorani (Arabic script)
SORANI_WORDS: Tuple[str, ...] = (
    "سڵاو", "چۆنی", "سوپاس", "بەڵێ", "نەخێر", "ماڵ", "ئاو", "نان", "کتێب", "قوتابی",
    "مامۆستا", "دایک", "باوک", "برا", "خوشک", "هاوڕێ", "ئیشت", "خواردن", "خەوتن", "وتن",
    "بینین", "گوێگرتن", "ڕۆیشتن", "هاتن", "کردن", "زانین", "فێربوون", "یاری", "کار", "پێکەنین",
)

# Kurmanji (Latin script)
KURMANJI_WORDS: Tuple[str, ...] = (
    "silav", "çoni", "spas", "erê", "na", "mal", "av", "nan", "pirtûk", "xwendekar",
    "mamosta", "dayik", "bav", "bira", "xwişk", "heval", "kar", "xwarin", "razân", "gotin",
    "dîtin", "guhdarî", "çûn", "hatin", "kirin", "zanîn", "hînbûn", "lîstin", "pêkenîn",
)

DEFAULT_WORDS: Tuple[str, ...] = SORANI_WORDS + KURMANJI_WORDS
