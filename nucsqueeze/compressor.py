"""Core compression and decompression APIs."""

from __future__ import annotations

from typing import Sequence

from .codec import validate_symbols
from .config import CompressionConfig
from .engine import default_engine
from .reconstruct import restore
from .sequence import SequenceInput, SymbolSequence
from .types import CompressionResult, CompressionTable, SelectionRecord


def compress_in_place(
    buffer: bytearray,
    length: int | None = None,
    config: CompressionConfig | None = None,
) -> tuple[int, list[SelectionRecord]]:
    """Remove the most frequent segments from ``buffer`` without reallocating.

    The whole logical sequence is checked before anything is mutated, so
    an invalid symbol leaves ``buffer`` untouched.
    """
    cfg = config or CompressionConfig()
    size = len(buffer) if length is None else length
    if not 0 <= size <= len(buffer):
        raise ValueError("Sequence length exceeds buffer capacity.")
    validate_symbols(buffer, size)
    engine = default_engine(cfg)
    return engine.compress_buffer(buffer, size, cfg)


def compress(sequence: SequenceInput, config: CompressionConfig | None = None) -> CompressionResult:
    cfg = config or CompressionConfig()
    working = SymbolSequence.from_data(sequence)
    original = working.symbols()
    working.length, table = compress_in_place(working.buffer, working.length, cfg)

    result = CompressionResult(
        sequence=working.symbols(),
        table=tuple(table),
        original_length=len(original),
        compressed_length=working.length,
        segment_len=cfg.segment_len,
        rounds_requested=cfg.segment_count,
    )

    if cfg.verify:
        roundtrip = decompress(result.sequence, result.table, cfg)
        if roundtrip != original:
            raise ValueError("Round-trip verification failed.")

    return result


def decompress_buffer(
    buffer: SequenceInput,
    length: int,
    table: Sequence[SelectionRecord],
    segment_len: int = 8,
) -> tuple[bytearray, int]:
    """Return a new buffer holding the original sequence and its length."""
    if isinstance(buffer, str):
        buffer = SymbolSequence.from_data(buffer).buffer
    validate_symbols(buffer, length)
    return restore(buffer, length, table, segment_len)


def decompress(
    sequence: SequenceInput,
    table: CompressionTable | Sequence[SelectionRecord],
    config: CompressionConfig | None = None,
) -> bytes:
    cfg = config or CompressionConfig()
    reduced = SymbolSequence.from_data(sequence)
    buffer, length = decompress_buffer(reduced.buffer, reduced.length, table, cfg.segment_len)
    return bytes(buffer[:length])


def decompress_result(result: CompressionResult) -> bytes:
    buffer, length = decompress_buffer(result.sequence, result.compressed_length, result.table, result.segment_len)
    return bytes(buffer[:length])
