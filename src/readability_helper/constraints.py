from __future__ import annotations

from .formulas import Formula
from .config import ReadabilityConfig


def exceeds_max_difficulty(
    score: float, max_difficulty_score: float, lower_is_easier: bool
) -> bool:
    """Return True when ``score`` is harder than the configured maximum."""
    if lower_is_easier:
        return score > max_difficulty_score
    return score < max_difficulty_score


def max_difficulty_for(config: ReadabilityConfig, formula: str | Formula) -> float:
    """Look up the configured maximum difficulty for ``formula`` (0 when unset)."""
    formula = Formula.parse(formula)
    return float(config.max_difficulty_scores.get(formula.value, 0.0))
