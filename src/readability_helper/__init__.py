"""
readability_helper package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .config import ReadabilityConfig, config_from_dict, config_from_yaml, load_config
from .formulas import Formula
from .pipeline import (
    find_difficult_spans,
    process_corpus,
    process_document,
    score_document,
)
from .scoring import ReadabilityScorer, build_scorer_from_config
from .seams import SeamFinder

__all__ = [
    "Formula",
    "ReadabilityConfig",
    "ReadabilityScorer",
    "SeamFinder",
    "build_scorer_from_config",
    "config_from_dict",
    "config_from_yaml",
    "find_difficult_spans",
    "load_config",
    "process_corpus",
    "process_document",
    "score_document",
]

__version__ = "0.1.0"
