"""Rolling segment keys over a symbol buffer."""

from __future__ import annotations

from typing import Iterator

from .codec import BITS_PER_SYMBOL, encode_segment, encode_symbol
from .types import SegmentKey, Symbol


def key_mask(segment_len: int) -> int:
    return (1 << (BITS_PER_SYMBOL * segment_len)) - 1


def initial_key(buffer, start: int, segment_len: int, length: int | None = None) -> SegmentKey:
    return encode_segment(buffer, start, segment_len, length)


def advance(key: SegmentKey, next_symbol: Symbol, segment_len: int) -> SegmentKey:
    """Slide the window one symbol to the right.

    The earliest symbol falls off the top of the ``2 * segment_len`` bit
    key and ``next_symbol`` becomes the least significant code.
    """
    return ((key << BITS_PER_SYMBOL) & key_mask(segment_len)) | encode_symbol(next_symbol)


def iter_window_keys(buffer, length: int, segment_len: int) -> Iterator[tuple[int, SegmentKey]]:
    """Yield ``(start, key)`` for every window start in ``[0, length - segment_len]``."""
    if length < segment_len:
        return
    key = initial_key(buffer, 0, segment_len, length)
    yield 0, key
    mask = key_mask(segment_len)
    for start in range(1, length - segment_len + 1):
        key = ((key << BITS_PER_SYMBOL) & mask) | encode_symbol(buffer[start + segment_len - 1])
        yield start, key
