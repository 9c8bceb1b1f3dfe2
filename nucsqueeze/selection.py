"""Phase 2: pick the most frequent segment."""

from __future__ import annotations

from typing import Mapping, Sequence

from .errors import NoSegmentsError
from .types import SegmentKey, SelectionRecord


def select_segment(index: Mapping[SegmentKey, Sequence[int]]) -> SelectionRecord:
    """Return the key with the most recorded occurrences.

    Ties go to the numerically lowest key, so the choice does not depend
    on the iteration order of ``index``.
    """
    if not index:
        raise NoSegmentsError("Frequency index is empty.")
    best_key = min(index, key=lambda key: (-len(index[key]), key))
    return SelectionRecord(key=best_key, positions=tuple(index[best_key]))
