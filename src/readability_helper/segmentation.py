from __future__ import annotations

import re
from typing import Iterator

from .models import Sentence

# Runs of non-terminal characters closed by terminal punctuation, or a trailing
# unterminated fragment. Abbreviations and decimals split sentences too.
SENTENCE_PATTERN = re.compile(r"([^.!?]+[.!?]+)|([^.!?]+\Z)")


class SentenceSegments:
    """
    Lazy view over the sentences of a text.

    Every iteration re-runs the segmentation from the start of the text, so the
    same instance can be walked any number of times.
    """

    __slots__ = ("text",)

    def __init__(self, text: str) -> None:
        self.text = text

    def __iter__(self) -> Iterator[Sentence]:
        for match in SENTENCE_PATTERN.finditer(self.text):
            raw = match.group()
            trimmed = raw.strip()
            if not trimmed:
                continue
            leading = len(raw) - len(raw.lstrip())
            yield Sentence(text=trimmed, offset=match.start() + leading)


def split_sentences(text: str) -> SentenceSegments:
    """Split text into trimmed sentences using a punctuation heuristic."""
    return SentenceSegments(text)
