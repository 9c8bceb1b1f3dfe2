"""Shared types for the repeat-elimination compressor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

Symbol = Union[int, str]
SegmentKey = int
Positions = tuple[int, ...]


@dataclass(frozen=True)
class SelectionRecord:
    key: SegmentKey
    positions: Positions

    @property
    def count(self) -> int:
        return len(self.positions)


CompressionTable = tuple[SelectionRecord, ...]


@dataclass(frozen=True)
class CompressionResult:
    sequence: bytes
    table: CompressionTable
    original_length: int
    compressed_length: int
    segment_len: int
    rounds_requested: int

    @property
    def rounds_completed(self) -> int:
        return len(self.table)

    @property
    def removed_symbols(self) -> int:
        return self.original_length - self.compressed_length
