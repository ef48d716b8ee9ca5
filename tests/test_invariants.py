"""
Randomized tests checking the red-black invariants after every mutation.
"""

import random

import pytest

from rbtree import RedBlackTree


SEEDS = [1, 2, 3, 17, 2024]


class TestRandomWorkloads:
    """Seeded random add/remove sequences."""

    @pytest.mark.parametrize("seed", SEEDS)
    def test_random_insert(self, tree, seed):
        """Test iteration after random inserts is sorted and duplicate-free."""
        rng = random.Random(seed)
        expected = {}
        for i in range(300):
            key = rng.randrange(1000)
            tree.add(key, i)
            expected[key] = i

        assert list(tree.items()) == sorted(expected.items())
        assert len(tree) == len(expected)

    @pytest.mark.parametrize("seed", SEEDS)
    def test_random_remove(self, tree, seed):
        """Test removing a random subset keeps the survivors in order."""
        rng = random.Random(seed)
        expected = sorted({rng.randrange(1000) for _ in range(200)})
        for i, key in enumerate(expected):
            tree.add(key, i)

        survivors = []
        for key in expected:
            if rng.random() >= 0.5:
                assert tree.remove(key)
            else:
                survivors.append(key)

        assert list(tree.keys()) == survivors
        assert len(tree) == len(survivors)

    @pytest.mark.parametrize("seed", SEEDS)
    def test_insert_all_then_remove_all(self, tree, seed):
        """Test the tree is empty after removing every key in random order."""
        rng = random.Random(seed)
        keys = rng.sample(range(10_000), 400)
        for key in keys:
            tree.add(key, str(key))
        assert len(tree) == 400

        rng.shuffle(keys)
        for key in keys:
            assert tree.remove(key)

        assert len(tree) == 0
        assert list(tree) == []
        assert tree.iter().next() is False
        assert tree.validate() == 0

    @pytest.mark.parametrize("seed", SEEDS)
    def test_mixed_operations(self, tree, seed):
        """Test interleaved add/update/remove/search against a dict model."""
        rng = random.Random(seed)
        model = {}
        for step in range(2000):
            key = rng.randrange(200)
            action = rng.random()
            if action < 0.5:
                tree.add(key, step)
                model[key] = step
            elif action < 0.8:
                assert tree.remove(key) == (key in model)
                model.pop(key, None)
            else:
                assert tree.search(key) == (model.get(key), key in model)
            assert len(tree) == len(model)

        assert list(tree.items()) == sorted(model.items())

    def test_string_keys(self, tree):
        rng = random.Random(99)
        words = {"".join(rng.choices("abcdef", k=5)) for _ in range(300)}
        for word in words:
            tree.add(word, word.upper())

        assert list(tree.keys()) == sorted(words)
        for word in sorted(words)[::3]:
            assert tree.remove(word)
        tree.validate()

    def test_update_does_not_restructure(self, tree, shape):
        """Test that overwriting values leaves the structure untouched."""
        for key in range(50):
            tree.add(key, "old")
        before = shape(tree)

        for key in range(50):
            tree.add(key, "old")

        assert shape(tree) == before
        assert len(tree) == 50


class TestArenaReuse:
    """Removed slots are recycled."""

    def test_slots_reused(self):
        tree = RedBlackTree()
        for key in range(100):
            tree.add(key, key)
        for key in range(0, 100, 2):
            tree.remove(key)
        for key in range(100, 150):
            tree.add(key, key)

        assert len(tree._arena) == 100
        assert len(tree._arena._slots) == 100
        tree.validate()
