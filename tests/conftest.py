from __future__ import annotations

import re
from typing import Dict

import pytest

from readability_helper.scoring import ReadabilityScorer
from readability_helper.services import SyllableCounter, WordListVocabulary

WORD_RE = re.compile(r"\w+")


class TableSyllableCounter(SyllableCounter):
    """Looks syllables up per lower-cased word, one syllable when unlisted."""

    def __init__(self, table: Dict[str, int] | None = None) -> None:
        self.table = table or {}

    def count(self, text: str) -> int:
        return sum(self.table.get(word.lower(), 1) for word in WORD_RE.findall(text))


@pytest.fixture
def syllables() -> TableSyllableCounter:
    return TableSyllableCounter(
        {
            "readability": 5,
            "complicated": 4,
            "extraordinarily": 6,
            "sentence": 2,
            "going": 2,
        }
    )


@pytest.fixture
def vocabulary() -> WordListVocabulary:
    return WordListVocabulary(
        {
            "dale-chall": {"The", "the", "cat", "sat", "on"},
            "spache": {"Cats", "run", "Dogs"},
        }
    )


@pytest.fixture
def scorer(
    syllables: TableSyllableCounter, vocabulary: WordListVocabulary
) -> ReadabilityScorer:
    return ReadabilityScorer(syllables=syllables, vocabulary=vocabulary)
