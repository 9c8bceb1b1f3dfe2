import random

import pytest

ALPHABET = "ATCG"


def random_sequence(length: int, seed: int) -> str:
    rng = random.Random(seed)
    return "".join(rng.choice(ALPHABET) for _ in range(length))


def planted_sequence(length: int, repeats: list[str], copies: int, seed: int) -> str:
    """Random background with ``copies`` intact copies of each repeat spliced in."""
    rng = random.Random(seed)
    background = random_sequence(length, seed)
    inserts = [repeat for repeat in repeats for _ in range(copies)]
    rng.shuffle(inserts)
    cuts = sorted(rng.randrange(length + 1) for _ in inserts)
    pieces: list[str] = []
    prev = 0
    for cut, insert in zip(cuts, inserts):
        pieces.append(background[prev:cut])
        pieces.append(insert)
        prev = cut
    pieces.append(background[prev:])
    return "".join(pieces)


@pytest.fixture
def small_sequence():
    return "ATCGATCGGGATCGATCGCC"


@pytest.fixture(params=[0, 1, 7, 42, 1234])
def seeded_sequence(request):
    return random_sequence(600, request.param)


@pytest.fixture(params=[3, 11, 29])
def repetitive_sequence(request):
    return planted_sequence(400, ["GATTACAA", "CCGGTTAA", "TTTTCCCC"], 12, request.param)
