from __future__ import annotations

from abc import ABC, abstractmethod


class SyllableCounter(ABC):
    """Abstract service that counts syllables in a fragment of prose."""

    @abstractmethod
    def count(self, text: str) -> int:
        """Return the total number of syllables in ``text``."""
        raise NotImplementedError


class VocabularyLookup(ABC):
    """Abstract service that knows which words belong to a familiar-word list."""

    @abstractmethod
    def is_familiar(self, word: str, vocabulary: str) -> bool:
        """Return True when ``word`` appears in the named vocabulary."""
        raise NotImplementedError
