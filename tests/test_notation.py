import unittest

from console_chess.notation import parse_move
from console_chess.core import InvalidInputFormatError


class TestParseMove(unittest.TestCase):
    def test_algebraic(self):
        self.assertEqual(parse_move("b2 b3"), ((6, 1), (5, 1)))
        self.assertEqual(parse_move("e7 e5"), ((1, 4), (3, 4)))
        self.assertEqual(parse_move("a1 h8"), ((7, 0), (0, 7)))

    def test_algebraic_is_case_insensitive(self):
        self.assertEqual(parse_move("E2 E4"), ((6, 4), (4, 4)))

    def test_row_col_pairs(self):
        self.assertEqual(parse_move("1,1 2,1"), ((1, 1), (2, 1)))
        self.assertEqual(parse_move("6,4 4,4"), ((6, 4), (4, 4)))

    def test_surrounding_whitespace_is_ignored(self):
        self.assertEqual(parse_move("  g1 f3 \n"), ((7, 6), (5, 5)))

    def test_out_of_range_coordinates_pass_through(self):
        self.assertEqual(parse_move("a2 a9"), ((6, 0), (-1, 0)))
        self.assertEqual(parse_move("6,0 9,0"), ((6, 0), (9, 0)))

    def test_malformed(self):
        bad = (
            "",
            "e2",
            "e2 e4 e5",
            "e2  e4",
            "e2e4",
            "x,1 2,1",
            "1,1 2",
            "1,1,1 2,1",
            "z2 e4",
            "e2 e",
            "ee e4",
            "e22 e4",
        )
        for text in bad:
            with self.subTest(text=text):
                with self.assertRaises(InvalidInputFormatError) as cm:
                    parse_move(text)
                self.assertEqual(str(cm.exception), "Invalid input format.")


if __name__ == "__main__":
    unittest.main()
