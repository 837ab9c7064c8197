"""
Readability formulas.

Each function takes raw text statistics and returns the unrounded score. The
divisions follow IEEE semantics: a zero word count yields ``nan`` or ``inf``
instead of raising, so degenerate documents surface as non-finite scores.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum


class Formula(str, Enum):
    """Readability formulas that can drive document scoring."""

    AUTOMATED_READABILITY = "automated-readability"
    FLESCH = "flesch"
    FLESCH_KINCAID = "flesch-kincaid"
    COLEMAN_LIAU = "coleman-liau"
    DALE_CHALL = "dale-chall"
    SMOG = "smog"
    SPACHE = "spache"

    @classmethod
    def parse(cls, name: "str | Formula") -> "Formula":
        """Resolve a configured formula name, raising ValueError when unknown."""
        if isinstance(name, cls):
            return name
        normalized = str(name).lower().strip()
        for member in cls:
            if member.value == normalized:
                return member
        choices = ", ".join(member.value for member in cls)
        raise ValueError(f"Unknown formula '{name}'. Expected one of: {choices}.")


FORMULA_LABELS: dict[Formula, str] = {
    Formula.AUTOMATED_READABILITY: "Automated Readability",
    Formula.FLESCH: "Flesch Reading Ease",
    Formula.FLESCH_KINCAID: "Flesch-Kincaid Grade Level",
    Formula.COLEMAN_LIAU: "Coleman-Liau Index",
    Formula.DALE_CHALL: "Dale-Chall Readability",
    Formula.SMOG: "SMOG Formula",
    Formula.SPACHE: "Spache Readability",
}


def safe_ratio(numerator: float, denominator: float) -> float:
    """Divide like IEEE floats do: x/0 is +/-inf and 0/0 is nan."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator)
    return numerator / denominator


def automated_readability_index(sentences: int, words: int, characters: int) -> float:
    return (
        4.71 * safe_ratio(characters, words)
        + 0.5 * safe_ratio(words, sentences)
        - 21.43
    )


def flesch_reading_ease(sentences: int, words: int, syllables: int) -> float:
    return (
        206.835
        - 1.015 * safe_ratio(words, sentences)
        - 84.6 * safe_ratio(syllables, words)
    )


def flesch_kincaid_grade(sentences: int, words: int, syllables: int) -> float:
    return (
        0.39 * safe_ratio(words, sentences)
        + 11.8 * safe_ratio(syllables, words)
        - 15.59
    )


def coleman_liau_index(sentences: int, words: int, characters: int) -> float:
    return (
        0.0588 * (safe_ratio(characters, words) * 100)
        - 0.296 * (safe_ratio(sentences, words) * 100)
        - 15.8
    )


def dale_chall_readability(
    sentences: int, words: int, difficult_word_percentage: float
) -> float:
    score = 0.1579 * difficult_word_percentage + 0.0496 * safe_ratio(words, sentences)
    # Raw score offset once more than 5% of the words are unfamiliar.
    if difficult_word_percentage > 5:
        score += 3.6365
    return score


def smog_grade(sentences: int, polysyllables: int) -> float:
    return 3.1291 + 1.0430 * math.sqrt(polysyllables * safe_ratio(30, sentences))


def spache_readability(sentences: int, words: int, difficult_words: int) -> float:
    return (
        0.659
        + 0.121 * safe_ratio(words, sentences)
        + 0.082 * (safe_ratio(difficult_words, words) * 100)
    )


def round_half_up(value: float) -> float:
    """Round halves toward positive infinity; non-finite values pass through."""
    if not math.isfinite(value):
        return value
    return float(math.floor(value + 0.5))


def round_decimals(value: float, digits: int) -> float:
    """
    Round the exact binary value of ``value`` to ``digits`` decimal places.

    Halves go away from zero, but 0.15 is stored just below 0.15 and rounds
    to 0.1, the way fixed-point formatting does. Non-finite values pass
    through.
    """
    if not math.isfinite(value):
        return value
    exponent = Decimal(1).scaleb(-digits)
    return float(Decimal(value).quantize(exponent, rounding=ROUND_HALF_UP))


def ceiling(value: float) -> float:
    if not math.isfinite(value):
        return value
    return float(math.ceil(value))
