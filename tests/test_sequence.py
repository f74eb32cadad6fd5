import math
import unittest

from daily_crossword.core.exceptions import ConfigurationError
from daily_crossword.engine.sequence import HashSequence, SeededSequence, SineSequence, make_sequence


class HashSequenceTests(unittest.TestCase):
    def test_same_seed_replays_same_stream(self) -> None:
        first = HashSequence(484)
        second = HashSequence(484)
        self.assertEqual(
            [first.random() for _ in range(20)],
            [second.random() for _ in range(20)],
        )

    def test_different_seeds_diverge(self) -> None:
        a = [HashSequence(1).random() for _ in range(5)]
        b = [HashSequence(2).random() for _ in range(5)]
        self.assertNotEqual(a, b)

    def test_restart_rewinds_counter(self) -> None:
        sequence = HashSequence(99)
        values = [sequence.random() for _ in range(10)]
        sequence.restart()
        self.assertEqual([sequence.random() for _ in range(10)], values)

    def test_values_stay_in_unit_interval(self) -> None:
        sequence = HashSequence(12345)
        for _ in range(2000):
            value = sequence.random()
            self.assertGreaterEqual(value, 0.0)
            self.assertLess(value, 1.0)

    def test_counter_zero_hashes_to_zero(self) -> None:
        # The first draw uses counter seed + 1.
        self.assertEqual(HashSequence(-1).random(), 0.0)

    def test_counter_advances_by_one(self) -> None:
        sequence = HashSequence(10)
        sequence.random()
        sequence.random()
        self.assertEqual(sequence.state, 12)
        self.assertEqual(sequence.transform(13), HashSequence(12).random())


class SineSequenceTests(unittest.TestCase):
    def test_matches_fractional_sine_formula(self) -> None:
        sequence = SineSequence(7)
        for counter in range(7, 12):
            x = math.sin(counter) * 10000
            self.assertEqual(sequence.random(), x - math.floor(x))

    def test_first_draw_uses_seed_itself(self) -> None:
        x = math.sin(484) * 10000
        self.assertEqual(SineSequence(484).random(), x - math.floor(x))

    def test_restart_replays_from_seed(self) -> None:
        sequence = SineSequence(30)
        values = [sequence.random() for _ in range(4)]
        sequence.restart()
        self.assertEqual([sequence.random() for _ in range(4)], values)


class SequenceHelperTests(unittest.TestCase):
    def test_shuffle_is_deterministic_permutation(self) -> None:
        items = list(range(30))
        shuffled_a = HashSequence(3).shuffle(list(items))
        shuffled_b = HashSequence(3).shuffle(list(items))
        self.assertEqual(shuffled_a, shuffled_b)
        self.assertEqual(sorted(shuffled_a), items)

    def test_shuffled_leaves_input_untouched(self) -> None:
        items = ["A", "B", "C", "D"]
        result = HashSequence(5).shuffled(items)
        self.assertEqual(items, ["A", "B", "C", "D"])
        self.assertEqual(sorted(result), items)

    def test_shuffle_of_short_lists_draws_nothing(self) -> None:
        sequence = HashSequence(8)
        sequence.shuffle([])
        sequence.shuffle(["ONLY"])
        self.assertEqual(sequence.state, 8)

    def test_randrange_bounds(self) -> None:
        sequence = HashSequence(77)
        for _ in range(500):
            self.assertIn(sequence.randrange(3), (0, 1, 2))
        with self.assertRaises(ValueError):
            sequence.randrange(0)

    def test_base_class_is_abstract(self) -> None:
        with self.assertRaises(TypeError):
            SeededSequence(1)

    def test_make_sequence_kinds(self) -> None:
        self.assertIsInstance(make_sequence(1), HashSequence)
        self.assertIsInstance(make_sequence(1, "sine"), SineSequence)
        with self.assertRaises(ConfigurationError):
            make_sequence(1, "mersenne")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
