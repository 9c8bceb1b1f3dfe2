"""Configuration for repeat-elimination compression."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CompressionConfig:
    segment_count: int = 6
    segment_len: int = 8
    dense_index_max_len: int = 8
    verify: bool = False
