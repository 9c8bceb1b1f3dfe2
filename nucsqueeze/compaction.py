"""Phase 3: remove selected occurrences in place."""

from __future__ import annotations

from typing import Sequence


def remove_occurrences(buffer: bytearray, length: int, positions: Sequence[int], segment_len: int) -> int:
    """Close every ``segment_len`` gap at ``positions`` and return the new length.

    ``positions`` must be ascending and at least ``segment_len`` apart.
    Surviving symbols keep their order; bytes past the new length are left
    as they were.
    """
    if not positions:
        return length
    read = 0
    write = 0
    with memoryview(buffer) as view:
        for pos in positions:
            span = pos - read
            if span and write != read:
                view[write : write + span] = view[read:pos]
            write += span
            read = pos + segment_len
        tail = length - read
        if tail and write != read:
            view[write : write + tail] = view[read:length]
        write += tail
    return write
