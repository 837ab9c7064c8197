"""
Map ranges in markup-stripped text back onto the original text.

The stripped text is assumed to be a subsequence of the original. Walking both
texts once records a seam wherever a run of original characters was removed;
any stripped range can then be widened and shifted by the seams before and
inside it.
"""

from __future__ import annotations

from typing import List, Tuple

from .models import Seam, SeamLookup


def build_seams(original: str, stripped: str) -> Tuple[List[Seam], int]:
    """
    Record the elided runs of ``original`` relative to ``stripped``.

    Returns the seams and the number of stripped characters matched. A run of
    deletions after the last matched character produces no seam.
    """
    seams: List[Seam] = []
    original_index = 0
    stripped_index = 0
    seam_start = -1

    while original_index < len(original) and stripped_index < len(stripped):
        if original[original_index] == stripped[stripped_index]:
            if seam_start != -1:
                seams.append(
                    Seam(
                        stripped_index=stripped_index,
                        deleted_length=original_index - seam_start,
                    )
                )
                seam_start = -1
            stripped_index += 1
        elif seam_start == -1:
            seam_start = original_index
        original_index += 1

    return seams, stripped_index


class SeamFinder:
    """Translates stripped-text ranges into original-text ranges."""

    __slots__ = ("_seams", "_matched", "_stripped_length")

    def __init__(self, original: str, stripped: str) -> None:
        seams, matched = build_seams(original, stripped)
        self._seams: Tuple[Seam, ...] = tuple(seams)
        self._matched = matched
        self._stripped_length = len(stripped)

    @property
    def seams(self) -> Tuple[Seam, ...]:
        return self._seams

    @property
    def is_aligned(self) -> bool:
        """False when the stripped text was not a subsequence of the original."""
        return self._matched == self._stripped_length

    def lookup(self, offset: int, length: int) -> SeamLookup:
        end = offset + length
        start_correction = 0
        end_correction = 0
        for seam in self._seams:
            if offset >= seam.stripped_index:
                start_correction += seam.deleted_length
            if end > seam.stripped_index:
                end_correction += seam.deleted_length
        return SeamLookup(
            start=offset + start_correction,
            length=length + end_correction - start_correction,
        )
