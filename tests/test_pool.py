import unittest

from daily_crossword.core.exceptions import EmptyPoolError
from daily_crossword.core.models import WordPoolEntry
from daily_crossword.data.normalization import is_grid_word, normalize_category, normalize_word
from daily_crossword.data.pool import build_word_pool
from daily_crossword.engine.sequence import HashSequence


SAMPLE_TABLE = {
    "FRUIT": ["APPLE", "PEACH"],
    "ANIMAL": ["APE", "EAGLE"],
}


class NormalizationTests(unittest.TestCase):
    def test_normalize_word_uppercases_and_strips(self) -> None:
        self.assertEqual(normalize_word("  sandía "), "SANDÍA")
        self.assertEqual(normalize_word(""), "")

    def test_normalize_category_collapses_whitespace(self) -> None:
        self.assertEqual(normalize_category("music   instruments "), "MUSIC INSTRUMENTS")

    def test_grid_word_requires_letters_only(self) -> None:
        self.assertTrue(is_grid_word("SANDÍA"))
        self.assertFalse(is_grid_word("ICE CREAM"))
        self.assertFalse(is_grid_word("R2D2"))
        self.assertFalse(is_grid_word(""))


class WordPoolTests(unittest.TestCase):
    def test_pool_flattens_every_category(self) -> None:
        pool = build_word_pool(SAMPLE_TABLE, 3, 5, HashSequence(42))
        self.assertEqual(
            sorted((entry.word, entry.category) for entry in pool),
            [("APE", "ANIMAL"), ("APPLE", "FRUIT"), ("EAGLE", "ANIMAL"), ("PEACH", "FRUIT")],
        )

    def test_pool_filters_by_length(self) -> None:
        pool = build_word_pool(SAMPLE_TABLE, 4, 5, HashSequence(42))
        self.assertNotIn("APE", [entry.word for entry in pool])
        self.assertEqual(len(pool), 3)

    def test_pool_uppercases_words_and_categories(self) -> None:
        pool = build_word_pool({"colors": ["red", "blue"]}, 3, 5, HashSequence(1))
        self.assertEqual(
            sorted(pool, key=lambda entry: entry.word),
            [WordPoolEntry("BLUE", "COLORS"), WordPoolEntry("RED", "COLORS")],
        )

    def test_pool_skips_words_with_spaces_or_digits(self) -> None:
        pool = build_word_pool({"food": ["ice cream", "pie", "7up"]}, 3, 9, HashSequence(1))
        self.assertEqual([entry.word for entry in pool], ["PIE"])

    def test_duplicates_across_categories_are_kept(self) -> None:
        table = {"colors": ["orange"], "fruit": ["orange"]}
        pool = build_word_pool(table, 3, 8, HashSequence(1))
        self.assertEqual(sorted(entry.category for entry in pool), ["COLORS", "FRUIT"])

    def test_shuffle_is_deterministic(self) -> None:
        first = build_word_pool(SAMPLE_TABLE, 3, 5, HashSequence(42))
        second = build_word_pool(SAMPLE_TABLE, 3, 5, HashSequence(42))
        self.assertEqual(first, second)

    def test_empty_table_raises(self) -> None:
        with self.assertRaises(EmptyPoolError):
            build_word_pool({}, 3, 5, HashSequence(1))

    def test_no_word_in_range_raises(self) -> None:
        with self.assertRaises(EmptyPoolError):
            build_word_pool({"short": ["ab", "c"]}, 3, 5, HashSequence(1))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
