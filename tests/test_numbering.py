import unittest

from daily_crossword.core.constants import Direction
from daily_crossword.core.models import PlacedWord
from daily_crossword.engine.numbering import number_clues


WORDS = [
    PlacedWord("WAX", "ITEMS", 2, 0, Direction.ACROSS),
    PlacedWord("TOE", "BODY", 0, 2, Direction.DOWN),
    PlacedWord("COW", "ANIMALS", 0, 0, Direction.DOWN),
    PlacedWord("CAT", "ANIMALS", 0, 0, Direction.ACROSS),
]


class ClueNumberingTests(unittest.TestCase):
    def test_numbers_follow_row_major_start_cells(self) -> None:
        clues = number_clues(WORDS)
        self.assertEqual(
            [(c.number, c.direction, c.answer) for c in clues],
            [
                (1, Direction.ACROSS, "CAT"),
                (1, Direction.DOWN, "COW"),
                (2, Direction.DOWN, "TOE"),
                (3, Direction.ACROSS, "WAX"),
            ],
        )

    def test_numbering_ignores_input_order(self) -> None:
        self.assertEqual(number_clues(WORDS), number_clues(list(reversed(WORDS))))

    def test_clue_carries_category_position_and_length(self) -> None:
        clue = number_clues([PlacedWord("TIGER", "ANIMALS", 4, 7, Direction.DOWN)])[0]
        self.assertEqual(clue.text, "ANIMALS")
        self.assertEqual((clue.row, clue.col, clue.length), (4, 7, 5))
        self.assertEqual(
            clue.to_dict(),
            {
                "number": 1,
                "direction": "down",
                "text": "ANIMALS",
                "row": 4,
                "col": 7,
                "length": 5,
                "answer": "TIGER",
            },
        )

    def test_no_words_no_clues(self) -> None:
        self.assertEqual(number_clues([]), [])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
