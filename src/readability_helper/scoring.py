from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from .formulas import (
    FORMULA_LABELS,
    Formula,
    automated_readability_index,
    ceiling,
    coleman_liau_index,
    dale_chall_readability,
    flesch_kincaid_grade,
    flesch_reading_ease,
    round_decimals,
    round_half_up,
    safe_ratio,
    smog_grade,
    spache_readability,
)
from .services import (
    SyllableCounter,
    TextstatSyllableCounter,
    Vocabulary,
    VocabularyLookup,
    WordListVocabulary,
)
from .tokenization import character_count, sentence_count, tokenize_words, word_count

if TYPE_CHECKING:  # pragma: no cover - import for typing only
    from .config import ReadabilityConfig

logger = logging.getLogger(__name__)

POLYSYLLABLE_THRESHOLD = 3
# SMOG is calibrated on 30-sentence samples; single sentences are scaled up to one.
SMOG_SAMPLE_SENTENCES = 30
KNOWN_VOCABULARIES = frozenset(member.value for member in Vocabulary)

ScoreFunction = Callable[[str], float]


@dataclass(slots=True, frozen=True)
class FormulaFunctions:
    """Document scorer, sentence scorer and direction for one formula."""

    formula: Formula
    label: str
    document: ScoreFunction
    sentence: ScoreFunction
    lower_is_easier: bool


class ReadabilityScorer:
    """Applies the readability formulas using the configured language services."""

    def __init__(self, syllables: SyllableCounter, vocabulary: VocabularyLookup) -> None:
        self.syllables = syllables
        self.vocabulary = vocabulary

    def syllable_count(self, text: str) -> int:
        return self.syllables.count(text)

    def difficult_word_count(self, text: str, vocabulary: str | Vocabulary) -> int:
        """Count words missing from the named vocabulary; unknown names count 0."""
        name = vocabulary.value if isinstance(vocabulary, Vocabulary) else vocabulary
        if name not in KNOWN_VOCABULARIES:
            return 0
        return sum(
            1
            for word in tokenize_words(text)
            if not self.vocabulary.is_familiar(word, name)
        )

    def polysyllabic_word_count(self, text: str) -> int:
        return sum(
            1
            for word in tokenize_words(text)
            if self.syllables.count(word) >= POLYSYLLABLE_THRESHOLD
        )

    def automated_readability_document(self, text: str) -> float:
        return ceiling(
            automated_readability_index(
                sentence_count(text), word_count(text), character_count(text)
            )
        )

    def automated_readability_sentence(self, sentence: str) -> float:
        return automated_readability_index(
            1, word_count(sentence), character_count(sentence)
        )

    def flesch_document(self, text: str) -> float:
        return round_half_up(
            flesch_reading_ease(
                sentence_count(text), word_count(text), self.syllable_count(text)
            )
        )

    def flesch_sentence(self, sentence: str) -> float:
        return flesch_reading_ease(
            1, word_count(sentence), self.syllable_count(sentence)
        )

    def flesch_kincaid_document(self, text: str) -> float:
        return round_half_up(
            flesch_kincaid_grade(
                sentence_count(text), word_count(text), self.syllable_count(text)
            )
        )

    def flesch_kincaid_sentence(self, sentence: str) -> float:
        # Grade levels are whole numbers for single sentences as well.
        return round_half_up(
            flesch_kincaid_grade(1, word_count(sentence), self.syllable_count(sentence))
        )

    def coleman_liau_document(self, text: str) -> float:
        return round_half_up(
            coleman_liau_index(
                sentence_count(text), word_count(text), character_count(text)
            )
        )

    def coleman_liau_sentence(self, sentence: str) -> float:
        return coleman_liau_index(1, word_count(sentence), character_count(sentence))

    def dale_chall_document(self, text: str) -> float:
        words = word_count(text)
        percentage = self._difficult_percentage(text, words, Vocabulary.DALE_CHALL)
        return round_decimals(
            dale_chall_readability(sentence_count(text), words, percentage), 1
        )

    def dale_chall_sentence(self, sentence: str) -> float:
        words = word_count(sentence)
        percentage = self._difficult_percentage(sentence, words, Vocabulary.DALE_CHALL)
        return dale_chall_readability(1, words, percentage)

    def smog_document(self, text: str) -> float:
        return round_half_up(
            smog_grade(sentence_count(text), self.polysyllabic_word_count(text))
        )

    def smog_sentence(self, sentence: str) -> float:
        polysyllables = self.polysyllabic_word_count(sentence)
        return smog_grade(SMOG_SAMPLE_SENTENCES, polysyllables * SMOG_SAMPLE_SENTENCES)

    def spache_document(self, text: str) -> float:
        return round_half_up(
            spache_readability(
                sentence_count(text),
                word_count(text),
                self.difficult_word_count(text, Vocabulary.SPACHE),
            )
        )

    def spache_sentence(self, sentence: str) -> float:
        return spache_readability(
            1,
            word_count(sentence),
            self.difficult_word_count(sentence, Vocabulary.SPACHE),
        )

    def formula_functions(self, formula: str | Formula) -> FormulaFunctions:
        """Resolve the scoring functions and direction for ``formula``."""
        formula = Formula.parse(formula)
        if formula is Formula.AUTOMATED_READABILITY:
            document, sentence = (
                self.automated_readability_document,
                self.automated_readability_sentence,
            )
        elif formula is Formula.FLESCH:
            document, sentence = self.flesch_document, self.flesch_sentence
        elif formula is Formula.FLESCH_KINCAID:
            document, sentence = (
                self.flesch_kincaid_document,
                self.flesch_kincaid_sentence,
            )
        elif formula is Formula.COLEMAN_LIAU:
            document, sentence = self.coleman_liau_document, self.coleman_liau_sentence
        elif formula is Formula.DALE_CHALL:
            document, sentence = self.dale_chall_document, self.dale_chall_sentence
        elif formula is Formula.SMOG:
            document, sentence = self.smog_document, self.smog_sentence
        elif formula is Formula.SPACHE:
            document, sentence = self.spache_document, self.spache_sentence
        else:  # pragma: no cover - Formula.parse only yields known members
            raise ValueError(f"Unsupported formula '{formula}'.")
        return FormulaFunctions(
            formula=formula,
            label=FORMULA_LABELS[formula],
            document=document,
            sentence=sentence,
            # Flesch Reading Ease is the only formula where higher means easier.
            lower_is_easier=formula is not Formula.FLESCH,
        )

    def score_document(self, formula: str | Formula, text: str) -> float:
        functions = self.formula_functions(formula)
        score = functions.document(text)
        logger.debug("%s score %.2f for %d characters", functions.label, score, len(text))
        return score

    def _difficult_percentage(self, text: str, words: int, vocabulary: Vocabulary) -> float:
        return safe_ratio(self.difficult_word_count(text, vocabulary), words) * 100


def build_scorer_from_config(config: "ReadabilityConfig") -> ReadabilityScorer:
    """Convenience helper to build a scorer from ReadabilityConfig."""
    return ReadabilityScorer(
        syllables=TextstatSyllableCounter(),
        vocabulary=WordListVocabulary.from_paths(config.vocabulary_paths),
    )
