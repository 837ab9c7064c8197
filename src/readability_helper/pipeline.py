from __future__ import annotations

import logging
from functools import lru_cache
from typing import Dict, List, Sequence, Tuple

from .config import ReadabilityConfig
from .constraints import exceeds_max_difficulty, max_difficulty_for
from .formulas import Formula
from .markup import Stripper, build_stripper
from .models import Document, DocumentReport, Finding, SeamLookup
from .ranking import DEFAULT_CAPACITY, rank_difficult_sentences
from .scoring import FormulaFunctions, ReadabilityScorer, build_scorer_from_config
from .seams import SeamFinder

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def default_scorer() -> ReadabilityScorer:
    """Scorer wired to textstat syllables and the bundled familiar-word list."""
    return build_scorer_from_config(ReadabilityConfig())


def score_document(
    formula: str | Formula, text: str, scorer: ReadabilityScorer | None = None
) -> float:
    """Score an already stripped text with the named formula."""
    scorer = scorer or default_scorer()
    return scorer.score_document(formula, text)


def find_difficult_spans(
    formula: str | Formula,
    original: str,
    stripped: str,
    max_difficulty_score: float,
    scorer: ReadabilityScorer | None = None,
    capacity: int = DEFAULT_CAPACITY,
) -> List[SeamLookup]:
    """
    Locate the hardest sentences in original-text coordinates.

    Nothing is returned unless the stripped document's score is harder than
    ``max_difficulty_score``.
    """
    scorer = scorer or default_scorer()
    functions = scorer.formula_functions(formula)
    score = functions.document(stripped)
    if not exceeds_max_difficulty(score, max_difficulty_score, functions.lower_is_easier):
        return []
    return locate_difficult_sentences(original, stripped, functions, capacity)


def locate_difficult_sentences(
    original: str,
    stripped: str,
    functions: FormulaFunctions,
    capacity: int = DEFAULT_CAPACITY,
) -> List[SeamLookup]:
    """Rank sentences of ``stripped`` and map their ranges onto ``original``."""
    ranges = rank_difficult_sentences(
        stripped, functions.sentence, functions.lower_is_easier, capacity
    )
    if not ranges:
        return []
    finder = SeamFinder(original, stripped)
    if not finder.is_aligned:
        logger.warning(
            "Stripped text is not a subsequence of the original; "
            "highlighted ranges may be shifted"
        )
    return [finder.lookup(warn.offset, warn.length) for warn in ranges]


def process_document(
    doc: Document,
    config: ReadabilityConfig,
    scorer: ReadabilityScorer,
    stripper: Stripper | None = None,
) -> DocumentReport:
    """Score a single document and collect findings for its hardest sentences."""
    stripper = stripper or build_stripper(config.markup)
    stripped = stripper(doc.text)
    functions = scorer.formula_functions(config.formula)
    score = functions.document(stripped)
    max_difficulty = max_difficulty_for(config, functions.formula)
    should_warn = config.highlight_difficult_sentences and exceeds_max_difficulty(
        score, max_difficulty, functions.lower_is_easier
    )
    report = DocumentReport(
        doc_id=doc.doc_id,
        formula=functions.formula.value,
        label=functions.label,
        score=score,
        max_difficulty_score=max_difficulty,
        should_warn=should_warn,
    )
    if not should_warn:
        return report

    logger.info(
        "%s: %s score %s is harder than %s",
        doc.doc_id,
        functions.label,
        score,
        max_difficulty,
    )
    spans = locate_difficult_sentences(
        doc.text, stripped, functions, config.max_difficult_sentences
    )
    report.findings = [_finding_for(doc.text, span) for span in spans]
    return report


def process_corpus(
    documents: Sequence[Document],
    config: ReadabilityConfig,
    scorer: ReadabilityScorer,
    stripper: Stripper | None = None,
) -> Dict[str, DocumentReport]:
    """Process all documents independently and return the per-document reports."""
    stripper = stripper or build_stripper(config.markup)
    results: Dict[str, DocumentReport] = {}
    for document in documents:
        results[document.doc_id] = process_document(document, config, scorer, stripper)
    return results


def position_at(text: str, offset: int) -> Tuple[int, int]:
    """Return the 1-based line and column of ``offset`` within ``text``."""
    offset = max(0, min(offset, len(text)))
    line = text.count("\n", 0, offset) + 1
    line_start = text.rfind("\n", 0, offset) + 1
    return line, offset - line_start + 1


def _finding_for(text: str, span: SeamLookup) -> Finding:
    line, column = position_at(text, span.start)
    return Finding(
        start=span.start,
        length=span.length,
        line=line,
        column=column,
        text=text[span.start : span.start + span.length],
    )
