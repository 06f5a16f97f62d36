import random
from collections import Counter

from shuffler import shuffle


def test_shuffle_is_non_destructive():
    items = [1, 2, 3, 4, 5]
    out = shuffle(items, random.Random(1))
    assert items == [1, 2, 3, 4, 5]
    assert sorted(out) == items
    assert out is not items


def test_shuffle_preserves_multiset():
    items = ["a", "a", "b", "c"]
    out = shuffle(items, random.Random(3))
    assert Counter(out) == Counter(items)
    assert shuffle([], random.Random(3)) == []
    assert shuffle(["x"], random.Random(3)) == ["x"]


def test_shuffle_seeded_is_reproducible():
    a = shuffle(range(20), random.Random(42))
    b = shuffle(range(20), random.Random(42))
    assert a == b


def test_shuffle_positions_roughly_uniform():
    rng = random.Random(1234)
    runs = 6000
    positions = Counter()
    perms = Counter()
    for _ in range(runs):
        out = shuffle(["a", "b", "c"], rng)
        positions[out.index("a")] += 1
        perms[tuple(out)] += 1
    for i in range(3):
        assert abs(positions[i] - runs / 3) < 200
    # all 3! permutations show up about equally often
    assert len(perms) == 6
    for c in perms.values():
        assert abs(c - runs / 6) < 150
