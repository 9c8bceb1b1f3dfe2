import argparse
import random
import statistics

from nucsqueeze import CompressionConfig, compress


def generate_sequence(length: int, repeats: int, copies: int, seed: int) -> str:
    rng = random.Random(seed)
    pieces = ["".join(rng.choice("ATCG") for _ in range(length))]
    for _ in range(repeats):
        repeat = "".join(rng.choice("ATCG") for _ in range(rng.randint(8, 24)))
        for _ in range(copies):
            text = pieces.pop()
            cut = rng.randrange(len(text) + 1)
            pieces.append(text[:cut] + repeat + text[cut:])
    return pieces[0]


def main() -> None:
    parser = argparse.ArgumentParser(description="Repeat elimination ratio benchmark")
    parser.add_argument("--length", type=int, default=100_000)
    parser.add_argument("--repeats", type=int, default=8)
    parser.add_argument("--copies", type=int, default=50)
    parser.add_argument("--runs", type=int, default=5)
    parser.add_argument("--segment-count", type=int, default=6)
    parser.add_argument("--segment-len", type=int, default=8)
    parser.add_argument("--seed", type=int, default=7)
    args = parser.parse_args()

    ratios: list[float] = []
    rounds: list[int] = []

    for offset in range(args.runs):
        sequence = generate_sequence(args.length, args.repeats, args.copies, args.seed + offset)
        cfg = CompressionConfig(segment_count=args.segment_count, segment_len=args.segment_len)
        result = compress(sequence, cfg)
        ratios.append(result.compressed_length / result.original_length)
        rounds.append(result.rounds_completed)

    print(f"Runs: {args.runs}")
    print(f"Sequence length: {args.length} (+ planted repeats)")
    print(f"Segment length: {args.segment_len}")
    print(f"Mean rounds completed: {statistics.mean(rounds):.2f}")
    print(f"Mean compression ratio: {statistics.mean(ratios):.4f}")


if __name__ == "__main__":
    main()
