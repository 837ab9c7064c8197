from __future__ import annotations

import textstat

from .base import SyllableCounter


class TextstatSyllableCounter(SyllableCounter):
    """Syllable counts backed by textstat's dictionary and hyphenation rules."""

    def count(self, text: str) -> int:
        if not text:
            return 0
        return int(textstat.syllable_count(text))
