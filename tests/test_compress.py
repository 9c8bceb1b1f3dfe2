import pytest

from nucsqueeze import (
    CompressionConfig,
    InvalidSymbolError,
    compress,
    compress_in_place,
    decompress,
    decompress_buffer,
    decompress_result,
)
from nucsqueeze.codec import encode_segment


def test_single_round_removes_both_occurrences(small_sequence):
    result = compress(small_sequence, CompressionConfig(segment_count=1))
    assert result.sequence == b"GGCC"
    assert result.compressed_length == 4
    assert [(r.key, r.positions) for r in result.table] == [(encode_segment(b"ATCGATCG", 0, 8), (0, 10))]
    assert decompress(result.sequence, result.table) == small_sequence.encode("ascii")


def test_overlap_leaves_single_occurrence():
    result = compress("ATCGATCGATCGAAAA", CompressionConfig(segment_count=1))
    # Every key is seen once after suppression; the lowest key wins.
    assert result.table[0].key == encode_segment(b"ATCGAAAA", 0, 8)
    assert result.table[0].positions == (8,)
    assert result.sequence == b"ATCGATCG"


def test_stops_early_when_sequence_runs_out():
    result = compress("ATCGATCGATCGAAAA", CompressionConfig(segment_count=6))
    assert result.rounds_requested == 6
    assert result.rounds_completed == 2
    assert result.compressed_length == 0
    assert decompress_result(result) == b"ATCGATCGATCGAAAA"


def test_short_sequence_is_returned_unchanged():
    result = compress("ATCGA")
    assert result.compressed_length == 5
    assert result.sequence == b"ATCGA"
    assert result.table == ()


def test_empty_sequence():
    result = compress("")
    assert result.table == ()
    assert decompress(b"", result.table) == b""


def test_round_trip_random(seeded_sequence):
    result = compress(seeded_sequence, CompressionConfig(verify=True))
    assert decompress(result.sequence, result.table) == seeded_sequence.encode("ascii")


@pytest.mark.parametrize(
    "segment_count,segment_len",
    [(1, 1), (3, 2), (6, 8), (10, 5), (4, 10)],
)
def test_round_trip_parameters(repetitive_sequence, segment_count, segment_len):
    cfg = CompressionConfig(segment_count=segment_count, segment_len=segment_len)
    result = compress(repetitive_sequence, cfg)
    assert decompress(result.sequence, result.table, cfg) == repetitive_sequence.encode("ascii")


def test_length_shrinks_by_removed_segments(repetitive_sequence):
    result = compress(repetitive_sequence)
    removed = sum(record.count for record in result.table) * 8
    assert result.compressed_length == result.original_length - removed
    assert result.removed_symbols == removed
    assert result.rounds_completed <= result.rounds_requested


def test_records_are_non_overlapping(repetitive_sequence):
    result = compress(repetitive_sequence, CompressionConfig(segment_count=10))
    for record in result.table:
        for left, right in zip(record.positions, record.positions[1:]):
            assert right - left >= 8


def test_planted_repeat_is_found(repetitive_sequence):
    result = compress(repetitive_sequence, CompressionConfig(segment_count=1))
    assert result.table[0].count >= 12


def test_compress_in_place_does_not_reallocate(small_sequence):
    buffer = bytearray(small_sequence, "ascii")
    length, table = compress_in_place(buffer, config=CompressionConfig(segment_count=1))
    assert length == 4
    assert len(buffer) == 20
    assert bytes(buffer[:length]) == b"GGCC"
    restored, restored_len = decompress_buffer(buffer, length, table)
    assert bytes(restored[:restored_len]) == small_sequence.encode("ascii")


def test_compress_in_place_honours_logical_length():
    buffer = bytearray(b"ATCGATCGATCGATCGNNNN")
    length, table = compress_in_place(buffer, 16, CompressionConfig(segment_count=1))
    assert length == 0
    assert table[0].positions == (0, 8)
    assert buffer[16:] == bytearray(b"NNNN")


def test_invalid_symbol_aborts_before_mutation():
    buffer = bytearray(b"ATCGATCGATCGATCGN")
    with pytest.raises(InvalidSymbolError) as excinfo:
        compress_in_place(buffer)
    assert excinfo.value.position == 16
    assert buffer == bytearray(b"ATCGATCGATCGATCGN")


def test_invalid_symbol_in_short_sequence():
    with pytest.raises(InvalidSymbolError):
        compress("ACGu")
    with pytest.raises(InvalidSymbolError):
        compress("ATCGÄ")


def test_decompress_rejects_invalid_symbols():
    with pytest.raises(InvalidSymbolError):
        decompress("ATXG", ())


def test_length_beyond_capacity():
    with pytest.raises(ValueError):
        compress_in_place(bytearray(b"ATCG"), 5)


def test_warns_when_no_rounds_requested():
    with pytest.warns(RuntimeWarning):
        result = compress("ATCGATCGATCGATCG", CompressionConfig(segment_count=0))
    assert result.table == ()
    assert result.compressed_length == 16


def test_rejects_invalid_config():
    try:
        compress("ATCGATCG", CompressionConfig(segment_len=0))
    except ValueError as exc:
        assert "segment_len" in str(exc)
    else:
        raise AssertionError("Expected error for segment_len=0.")


def test_decompress_buffer_accepts_text(small_sequence):
    result = compress(small_sequence, CompressionConfig(segment_count=1))
    restored, length = decompress_buffer(result.sequence.decode("ascii"), result.compressed_length, result.table)
    assert bytes(restored[:length]) == small_sequence.encode("ascii")
