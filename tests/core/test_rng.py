"""Tests for the seeded DungeonRNG."""

from keymaze.core.rng import DungeonRNG


class TestDungeonRNG:
    def test_same_seed_same_sequence(self):
        a, b = DungeonRNG(7), DungeonRNG(7)
        assert [a.random_int(0, 100) for _ in range(20)] == [
            b.random_int(0, 100) for _ in range(20)
        ]

    def test_random_int_is_inclusive(self):
        rng = DungeonRNG(3)
        values = {rng.random_int(2, 4) for _ in range(500)}
        assert values == {2, 3, 4}

    def test_shuffle_is_permutation(self):
        rng = DungeonRNG(11)
        items = list(range(10))
        rng.shuffle(items)
        assert sorted(items) == list(range(10))

    def test_shuffle_deterministic(self):
        first, second = list(range(10)), list(range(10))
        DungeonRNG(5).shuffle(first)
        DungeonRNG(5).shuffle(second)
        assert first == second

    def test_random_choice_from_sequence(self):
        rng = DungeonRNG(1)
        assert rng.random_choice("abc") in "abc"

    def test_unseeded_records_entropy_seed(self):
        rng = DungeonRNG()
        assert isinstance(rng.seed, int)
        replay = DungeonRNG(rng.seed)
        assert [rng.random_int(0, 10**6) for _ in range(5)] == [
            replay.random_int(0, 10**6) for _ in range(5)
        ]

    def test_fork_is_deterministic_and_named(self):
        parent = DungeonRNG(42)
        assert parent.fork("dungeon:0").seed == DungeonRNG(42).fork("dungeon:0").seed
        assert parent.fork("dungeon:0").seed != parent.fork("dungeon:1").seed

    def test_repr(self):
        assert repr(DungeonRNG(9)) == "DungeonRNG(seed=9)"
