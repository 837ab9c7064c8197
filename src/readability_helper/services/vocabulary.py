from __future__ import annotations

import logging
from enum import Enum
from importlib import resources
from pathlib import Path
from typing import Dict, FrozenSet, Iterable, Mapping

from .base import VocabularyLookup

logger = logging.getLogger(__name__)

TEXTSTAT_EASY_WORDS = ("resources", "en", "easy_words.txt")


class Vocabulary(str, Enum):
    """Familiar-word lists consulted by the Dale-Chall and Spache formulas."""

    DALE_CHALL = "dale-chall"
    SPACHE = "spache"


def parse_word_list(contents: str) -> FrozenSet[str]:
    """Parse one word per line, ignoring blank lines and ``#`` comments."""
    words = set()
    for line in contents.splitlines():
        word = line.strip()
        if not word or word.startswith("#"):
            continue
        words.add(word)
    return frozenset(words)


def load_word_list(path: str | Path) -> FrozenSet[str]:
    """
    Load a familiar-word list from a UTF-8 text file.

    Parameters
    ----------
    path:
        File with one word per line. A missing file yields an empty list so a
        misconfigured vocabulary degrades to "every word is difficult".
    """
    path = Path(path)
    if not path.exists():
        logger.warning("Word list %s does not exist; treating it as empty", path)
        return frozenset()
    words = parse_word_list(path.read_text(encoding="utf-8"))
    logger.info("Loaded %d familiar words from %s", len(words), path)
    return words


def load_textstat_word_list() -> FrozenSet[str]:
    """Load the Dale-Chall familiar-word list bundled with textstat."""
    resource = resources.files("textstat").joinpath(*TEXTSTAT_EASY_WORDS)
    if not resource.is_file():
        logger.warning("textstat does not ship %s", "/".join(TEXTSTAT_EASY_WORDS))
        return frozenset()
    words = parse_word_list(resource.read_text(encoding="utf-8"))
    logger.info("Loaded %d familiar words from textstat", len(words))
    return words


class WordListVocabulary(VocabularyLookup):
    """
    Vocabulary lookup over in-memory word sets.

    Lookups are exact and case-sensitive. Names that are not registered are
    never familiar.
    """

    def __init__(self, word_lists: Mapping[str, Iterable[str]]) -> None:
        self._word_lists: Dict[str, FrozenSet[str]] = {
            _vocabulary_key(name): frozenset(words)
            for name, words in word_lists.items()
        }

    @property
    def names(self) -> list[str]:
        return sorted(self._word_lists)

    def is_familiar(self, word: str, vocabulary: str) -> bool:
        words = self._word_lists.get(_vocabulary_key(vocabulary))
        if words is None:
            return False
        return word in words

    @classmethod
    def from_paths(
        cls, paths: Mapping[str, str | Path] | None = None
    ) -> "WordListVocabulary":
        """
        Build both vocabularies, preferring configured word-list files.

        Vocabularies without a configured path fall back to textstat's
        Dale-Chall list, which is also what textstat scores Spache with.
        """
        paths = {_vocabulary_key(name): value for name, value in (paths or {}).items()}
        default_words: FrozenSet[str] | None = None
        word_lists: Dict[str, FrozenSet[str]] = {}
        for vocabulary in Vocabulary:
            path = paths.get(vocabulary.value)
            if path:
                word_lists[vocabulary.value] = load_word_list(path)
                continue
            if default_words is None:
                default_words = load_textstat_word_list()
            word_lists[vocabulary.value] = default_words
        return cls(word_lists)


def _vocabulary_key(name: str | Vocabulary) -> str:
    if isinstance(name, Vocabulary):
        return name.value
    return str(name).lower().strip()
