import random
import unittest

from weighted_dice.sources import SOURCE_MAP
from weighted_dice.sources.mersenne import MersenneTwisterSource
from weighted_dice.sources.system import SystemRandomSource


class TestMersenneTwisterSource(unittest.TestCase):
    def test_seeded_next_is_reproducible(self):
        source = MersenneTwisterSource()
        self.assertEqual(source.next(1, 1000, seed=42), source.next(1, 1000, seed=42))
        self.assertEqual(source.next(1, 1000, seed=42), random.Random(42).randint(1, 1000))

    def test_constructor_seed_reproduces_stream(self):
        a = MersenneTwisterSource(7)
        b = MersenneTwisterSource(7)
        self.assertEqual(a.seed, 7)
        self.assertEqual([a.next(1, 6) for _ in range(10)], [b.next(1, 6) for _ in range(10)])

    def test_seeded_draw_does_not_advance_stream(self):
        a = MersenneTwisterSource(3)
        b = MersenneTwisterSource(3)
        a.next(1, 100, seed=99)
        self.assertEqual(a.next(1, 100), b.next(1, 100))

    def test_reseed(self):
        source = MersenneTwisterSource(1)
        first = [source.next(1, 100) for _ in range(5)]
        source.reseed(1)
        self.assertEqual([source.next(1, 100) for _ in range(5)], first)

    def test_range_bounds(self):
        source = MersenneTwisterSource(0)
        self.assertEqual(source.next(5, 5), 5)
        for _ in range(200):
            self.assertTrue(1 <= source.next(1, 3) <= 3)
        with self.assertRaises(ValueError):
            source.next(10, 1)

    def test_large_range(self):
        value = MersenneTwisterSource(0).next(1, 10 ** 18)
        self.assertTrue(1 <= value <= 10 ** 18)


class TestSystemRandomSource(unittest.TestCase):
    def test_unseeded_within_range(self):
        source = SystemRandomSource()
        for _ in range(100):
            self.assertTrue(1 <= source.next(1, 10) <= 10)

    def test_seeded_falls_back_to_reproducible_generator(self):
        source = SystemRandomSource()
        self.assertEqual(source.next(1, 100, seed=5), random.Random(5).randint(1, 100))

    def test_constructor_seed_reproduces_stream(self):
        a = SystemRandomSource(5)
        b = SystemRandomSource(5)
        self.assertEqual(a.seed, 5)
        self.assertEqual([a.next(1, 20) for _ in range(10)], [b.next(1, 20) for _ in range(10)])
        self.assertIsNone(SystemRandomSource().seed)

    def test_invalid_range(self):
        with self.assertRaises(ValueError):
            SystemRandomSource().next(2, 1)


class TestSourceRegistry(unittest.TestCase):
    def test_registered_sources(self):
        self.assertIs(SOURCE_MAP["mersenne"], MersenneTwisterSource)
        self.assertIs(SOURCE_MAP["system"], SystemRandomSource)


if __name__ == '__main__':
    unittest.main()
