"""Basic usage example for nucsqueeze."""

import random

from nucsqueeze import CompressionConfig, compress, decompress, format_table, serialize


def main():
    # Example 1: Simple compression
    print("=" * 60)
    print("Example 1: Basic Compression")
    print("=" * 60)

    sequence = "ATCGATCG" + "GG" + "ATCGATCG" + "CC"
    config = CompressionConfig(segment_count=1, verify=True)

    result = compress(sequence, config)

    print(f"Original length:   {result.original_length} symbols")
    print(f"Compressed length: {result.compressed_length} symbols")
    print(f"Reduced sequence:  {result.sequence.decode('ascii')}")
    print(format_table(result.table, result.segment_len))

    restored = decompress(result.sequence, result.table, config)
    print(f"Lossless:          {restored == sequence.encode('ascii')}")

    # Example 2: Several rounds over a repetitive sequence
    print("\n" + "=" * 60)
    print("Example 2: Multiple Rounds")
    print("=" * 60)

    rng = random.Random(7)
    background = "".join(rng.choice("ATCG") for _ in range(200))
    sequence = background[:60] + "GATTACAA" * 6 + background[60:140] + "CCGGTTAA" * 4 + background[140:]

    result = compress(sequence, CompressionConfig(verify=True))
    print(f"Original length:   {result.original_length} symbols")
    print(f"Compressed length: {result.compressed_length} symbols")
    print(f"Rounds completed:  {result.rounds_completed} of {result.rounds_requested}")
    print("\nRemoved segments:")
    print(format_table(result.table, result.segment_len))

    # Example 3: Serialized table
    print("\n" + "=" * 60)
    print("Example 3: JSON Output")
    print("=" * 60)
    print(serialize(result).to_json())


if __name__ == "__main__":
    main()
