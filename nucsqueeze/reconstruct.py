"""Inverse of compaction: re-insert removed segments."""

from __future__ import annotations

from typing import Sequence

from .codec import decode_key
from .types import SelectionRecord


def restored_length(length: int, table: Sequence[SelectionRecord], segment_len: int) -> int:
    return length + sum(record.count for record in table) * segment_len


def restore(
    buffer,
    length: int,
    table: Sequence[SelectionRecord],
    segment_len: int,
) -> tuple[bytearray, int]:
    """Rebuild the original sequence from the reduced one and its table.

    Records are undone newest first. Each round reads from one buffer and
    writes into the other, then the two swap roles. The table must be the
    one produced for this exact sequence; a mismatched table is not
    detected.
    """
    total = restored_length(length, table, segment_len)
    src = bytearray(total)
    src[:length] = buffer[:length]
    dst = bytearray(total)

    for record in reversed(table):
        segment = decode_key(record.key, segment_len)
        read = 0
        write = 0
        for pos in record.positions:
            span = pos - write
            dst[write:pos] = src[read : read + span]
            read += span
            dst[pos : pos + segment_len] = segment
            write = pos + segment_len
        tail = length - read
        dst[write : write + tail] = src[read:length]
        length = write + tail
        src, dst = dst, src

    return src, length
