import unittest

from weighted_dice.persistence.recorder import InMemoryRecorder
from weighted_dice.rollers.base import InvalidDistributionError, Roller
from weighted_dice.rollers.dice import D10Roller, D4Roller
from weighted_dice.sources.base import RandomSource
from weighted_dice.sources.mersenne import MersenneTwisterSource


class TableRoller(Roller):
    def __init__(self, table, random_source=None, recorder=None):
        super().__init__(random_source=random_source, recorder=recorder)
        self.table = table

    def probabilities(self):
        return self.table


class TestThresholdsAndResolve(unittest.TestCase):
    """
    Tests for mapping a raw sample back to an outcome through cumulative thresholds scaled by max_range().
    """

    def setUp(self):
        self.roller = TableRoller({"a": 0.25, "b": 0.5, "c": 0.25})

    def test_thresholds(self):
        self.assertEqual(self.roller.thresholds(), [("a", 25), ("b", 75), ("c", 100)])

    def test_resolve_bucket_edges(self):
        self.assertEqual(self.roller.resolve(1), "a")
        self.assertEqual(self.roller.resolve(25), "a")
        self.assertEqual(self.roller.resolve(26), "b")
        self.assertEqual(self.roller.resolve(75), "b")
        self.assertEqual(self.roller.resolve(76), "c")
        self.assertEqual(self.roller.resolve(100), "c")

    def test_resolve_out_of_range(self):
        with self.assertRaises(ValueError):
            self.roller.resolve(0)
        with self.assertRaises(ValueError):
            self.roller.resolve(101)

    def test_zero_probability_outcome_is_never_chosen(self):
        roller = TableRoller({"a": 0.5, "never": 0.0, "b": 0.5})
        outcomes = {roller.resolve(v) for v in range(1, roller.max_range() + 1)}
        self.assertEqual(outcomes, {"a", "b"})

    def test_last_bound_pinned_to_max_range(self):
        roller = TableRoller({"a": 0.5, "b": 0.49999999999})
        self.assertEqual(roller.thresholds()[-1], ("b", roller.max_range()))

    def test_d10_maps_one_to_one(self):
        roller = D10Roller()
        self.assertEqual([roller.resolve(v) for v in range(1, 11)], list(range(1, 11)))

    def test_d4_buckets(self):
        roller = D4Roller()
        self.assertEqual(roller.thresholds(), [(1, 25), (2, 50), (3, 75), (4, 100)])


class TestRollOutcome(unittest.TestCase):
    def test_roll_outcome_is_reproducible_with_seed(self):
        roller = TableRoller({"heads": 0.5, "tails": 0.5})
        self.assertEqual(roller.roll_outcome(seed=3), roller.roll_outcome(seed=3))
        self.assertIn(roller.roll_outcome(), ("heads", "tails"))

    def test_roll_outcome_records_events(self):
        recorder = InMemoryRecorder()
        roller = TableRoller({"a": 0.25, "b": 0.75}, random_source=MersenneTwisterSource(11), recorder=recorder)
        outcomes = [roller.roll_outcome() for _ in range(5)]
        events = recorder.events()
        self.assertEqual(len(events), 5)
        self.assertEqual([e.outcome for e in events], outcomes)
        for e in events:
            self.assertEqual(e.roller, "TableRoller")
            self.assertEqual(e.max_range, 100)
            self.assertEqual(e.outcome, roller.resolve(e.value))
            self.assertIsNone(e.seed)
        self.assertEqual(sum(recorder.counts().values()), 5)

    def test_invalid_distribution_records_nothing(self):
        recorder = InMemoryRecorder()
        roller = TableRoller({"a": 0.9}, recorder=recorder)
        with self.assertRaises(InvalidDistributionError):
            roller.roll_outcome()
        self.assertEqual(recorder.events(), [])


class ShiftingRoller(Roller):
    """Returns a different table on every probabilities() call."""
    TABLES = ({"a": 0.25, "b": 0.75}, {"a": 0.5, "b": 0.5})

    def __init__(self, random_source=None, recorder=None):
        super().__init__(random_source=random_source, recorder=recorder)
        self.reads = 0

    def probabilities(self):
        table = self.TABLES[self.reads % 2]
        self.reads += 1
        return table


class TopSource(RandomSource):
    """Always returns the top of the requested range."""
    def __init__(self):
        self.ranges = []

    def next(self, minimum, maximum, seed=None):
        self.ranges.append(maximum)
        return maximum


class TestChangingDistribution(unittest.TestCase):
    """
    A roller whose table changes between calls must draw and resolve against the same table.
    """

    def test_top_sample_resolves_to_last_outcome(self):
        for start in (0, 1):
            recorder = InMemoryRecorder()
            source = TopSource()
            roller = ShiftingRoller(random_source=source, recorder=recorder)
            roller.reads = start
            self.assertEqual(roller.roll_outcome(), "b")
            event = recorder.events()[0]
            self.assertEqual(event.max_range, source.ranges[0])
            self.assertEqual(event.value, source.ranges[0])

    def test_one_read_per_roll_outcome(self):
        roller = ShiftingRoller(random_source=TopSource())
        roller.roll_outcome()
        self.assertEqual(roller.reads, 1)
        roller.roll()
        self.assertEqual(roller.reads, 2)


if __name__ == '__main__':
    unittest.main()
