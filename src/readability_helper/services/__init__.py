from __future__ import annotations

from .base import SyllableCounter, VocabularyLookup
from .syllables import TextstatSyllableCounter
from .vocabulary import (
    Vocabulary,
    WordListVocabulary,
    load_textstat_word_list,
    load_word_list,
)

__all__ = [
    "SyllableCounter",
    "VocabularyLookup",
    "TextstatSyllableCounter",
    "Vocabulary",
    "WordListVocabulary",
    "load_textstat_word_list",
    "load_word_list",
]
