from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
# Import the package from the checkout without installing it
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from kurdish_didyoumean.dictionary import WordDictionary  # noqa: E402


@pytest.fixture
def seed_dictionary():
    return WordDictionary.with_seed_words()
