from __future__ import annotations

import re
from typing import List

WORD_PATTERN = re.compile(r"\w+")
WHITESPACE_PATTERN = re.compile(r"\s+")
# A word character followed by terminal punctuation and whitespace or the end of text.
TERMINAL_SENTENCE_PATTERN = re.compile(r"\w[.?!](\s|\Z)")
# Unpunctuated list-style lines, optionally ending in a colon.
LINE_SENTENCE_PATTERN = re.compile(r"\w:?\n")


def tokenize_words(text: str) -> List[str]:
    """Return the word-character runs of ``text`` in document order."""
    return WORD_PATTERN.findall(text)


def word_count(text: str) -> int:
    """Count maximal runs of word characters."""
    return len(tokenize_words(text))


def character_count(text: str) -> int:
    """Count every non-whitespace character, punctuation included."""
    return len(WHITESPACE_PATTERN.sub("", text))


def sentence_count(text: str) -> int:
    """
    Approximate the number of sentences in ``text``.

    Terminal punctuation after a word and unpunctuated line endings both count
    as sentence ends. The result is never below 1 so that the formulas can
    divide by it.
    """
    count = sum(1 for _ in TERMINAL_SENTENCE_PATTERN.finditer(text))
    count += sum(1 for _ in LINE_SENTENCE_PATTERN.finditer(text))
    return count if count > 0 else 1
