"""Phase 1: segment frequency index."""

from __future__ import annotations

from .codec import BITS_PER_SYMBOL
from .types import SegmentKey
from .window import iter_window_keys

FrequencyIndex = dict[SegmentKey, list[int]]


def _record(positions: list[int], start: int, segment_len: int) -> None:
    # Only the most recently accepted occurrence of the same key is checked.
    if not positions or start >= positions[-1] + segment_len:
        positions.append(start)


def build_index(buffer, length: int, segment_len: int) -> FrequencyIndex:
    index: FrequencyIndex = {}
    for start, key in iter_window_keys(buffer, length, segment_len):
        positions = index.get(key)
        if positions is None:
            index[key] = [start]
        else:
            _record(positions, start, segment_len)
    return index


def build_dense_index(buffer, length: int, segment_len: int) -> FrequencyIndex:
    """Same result as ``build_index`` using a slot per possible key.

    The returned mapping iterates in ascending key order.
    """
    if length < segment_len:
        return {}
    slots: list[list[int] | None] = [None] * (1 << (BITS_PER_SYMBOL * segment_len))
    for start, key in iter_window_keys(buffer, length, segment_len):
        positions = slots[key]
        if positions is None:
            slots[key] = [start]
        else:
            _record(positions, start, segment_len)
    return {key: positions for key, positions in enumerate(slots) if positions is not None}
