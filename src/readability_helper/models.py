from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class Document:
    """Represents an input document in its original, unstripped form."""

    doc_id: str
    text: str


@dataclass(slots=True, frozen=True)
class Sentence:
    """A trimmed sentence and the offset of its first character in the stripped text."""

    text: str
    offset: int


@dataclass(slots=True, frozen=True)
class ScoredSentence:
    """Sentence paired with the score the active formula gave it."""

    score: float
    sentence: Sentence


@dataclass(slots=True, frozen=True, order=True)
class WarnRange:
    """Range in stripped-text coordinates that should be flagged."""

    offset: int
    length: int


@dataclass(slots=True, frozen=True)
class Seam:
    """Run of original characters elided at a stripped-text position."""

    stripped_index: int
    deleted_length: int


@dataclass(slots=True, frozen=True)
class SeamLookup:
    """Range in original-text coordinates."""

    start: int
    length: int


@dataclass(slots=True)
class Finding:
    """A difficult span located in the original document."""

    start: int
    length: int
    line: int
    column: int
    text: str
    message: str = "This sentence is difficult to read"


@dataclass(slots=True)
class DocumentReport:
    """Readability outcome for a single document."""

    doc_id: str
    formula: str
    label: str
    score: float
    max_difficulty_score: float
    should_warn: bool
    findings: list[Finding] = field(default_factory=list)
