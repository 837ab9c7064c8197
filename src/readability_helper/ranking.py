from __future__ import annotations

import heapq
import logging
import math
from typing import Callable, Iterable, List, Tuple

from .models import ScoredSentence, Sentence, WarnRange
from .segmentation import split_sentences

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 3


def select_most_difficult(
    sentences: Iterable[Sentence],
    score_sentence: Callable[[str], float],
    lower_is_easier: bool,
    capacity: int = DEFAULT_CAPACITY,
) -> List[ScoredSentence]:
    """
    Keep the ``capacity`` most difficult sentences, most difficult first.

    A min-heap holds the retained sentences with the least difficult on top.
    When two sentences score exactly the same, the one seen first wins, so a
    different document order can retain a different set on ties.
    """
    capacity = max(1, capacity)
    heap: List[Tuple[float, int, ScoredSentence]] = []
    for position, sentence in enumerate(sentences):
        score = score_sentence(sentence.text)
        if math.isnan(score):
            logger.debug("Skipping unscorable sentence %r", sentence.text)
            continue
        difficulty = score if lower_is_easier else -score
        entry = (difficulty, -position, ScoredSentence(score=score, sentence=sentence))
        if len(heap) < capacity:
            heapq.heappush(heap, entry)
        else:
            heapq.heappushpop(heap, entry)
    ordered = sorted(heap, key=lambda item: (item[0], item[1]), reverse=True)
    return [item[2] for item in ordered]


def find_occurrences(text: str, sentence: str) -> List[WarnRange]:
    """Return a range for every non-overlapping literal occurrence of ``sentence``."""
    if not sentence:
        return []
    ranges: List[WarnRange] = []
    index = text.find(sentence)
    while index != -1:
        ranges.append(WarnRange(offset=index, length=len(sentence)))
        index = text.find(sentence, index + len(sentence))
    return ranges


def rank_difficult_sentences(
    text: str,
    score_sentence: Callable[[str], float],
    lower_is_easier: bool,
    capacity: int = DEFAULT_CAPACITY,
) -> List[WarnRange]:
    """
    Locate every occurrence of the most difficult sentences in ``text``.

    Ranges are returned in stripped-text coordinates ordered by offset.
    Repeated copies of a retained sentence are all flagged; ranges coming from
    different retained sentences may overlap and are kept as they are.
    """
    retained = select_most_difficult(
        split_sentences(text), score_sentence, lower_is_easier, capacity
    )
    seen: set[str] = set()
    ranges: List[WarnRange] = []
    for scored in retained:
        sentence_text = scored.sentence.text
        if sentence_text in seen:
            continue
        seen.add(sentence_text)
        ranges.extend(find_occurrences(text, sentence_text))
    ranges.sort(key=lambda warn: warn.offset)
    logger.debug(
        "Retained %d difficult sentences covering %d ranges", len(retained), len(ranges)
    )
    return ranges
