
import unittest
from dama.games.dama8 import (
    parse_coordinate,
    format_coordinate,
    parse_move,
    InvalidCoordinate,
    DamaError
)


class CoordinateTest(unittest.TestCase):

    def test_parse_coordinate(self):
        self.assertEqual(parse_coordinate("A1"), (0, 0))
        self.assertEqual(parse_coordinate("C3"), (2, 2))
        self.assertEqual(parse_coordinate("D4"), (3, 3))
        self.assertEqual(parse_coordinate("H1"), (0, 7))
        self.assertEqual(parse_coordinate("A8"), (7, 0))
        self.assertEqual(parse_coordinate("H8"), (7, 7))
    # end def test_parse_coordinate

    def test_format_coordinate(self):
        self.assertEqual(format_coordinate((0, 0)), "A1")
        self.assertEqual(format_coordinate((2, 2)), "C3")
        self.assertEqual(format_coordinate((4, 4)), "E5")
        self.assertEqual(format_coordinate((7, 7)), "H8")
    # end def test_format_coordinate

    def test_every_square_converts_both_ways(self):
        for row in range(8):
            for col in range(8):
                notation = format_coordinate((row, col))
                self.assertEqual(parse_coordinate(notation), (row, col))
            # end for
        # end for
    # end def test_every_square_converts_both_ways

    def test_malformed_notation_is_rejected(self):
        for notation in ["", "A", "A10", "I1", "A0", "A9", "c3", "3C", " C3", "C3 ", "@1"]:
            with self.assertRaises(InvalidCoordinate):
                parse_coordinate(notation)
            # end with
        # end for

        with self.assertRaises(InvalidCoordinate):
            parse_coordinate(None)
        # end with
    # end def test_malformed_notation_is_rejected

    def test_out_of_range_coordinates_are_rejected(self):
        for pos in [(-1, 0), (0, -1), (8, 0), (0, 8), (3,), "xx", (1.0, 2)]:
            with self.assertRaises(InvalidCoordinate):
                format_coordinate(pos)
            # end with
        # end for
    # end def test_out_of_range_coordinates_are_rejected

    def test_errors_are_value_errors(self):
        self.assertTrue(issubclass(InvalidCoordinate, DamaError))
        self.assertTrue(issubclass(InvalidCoordinate, ValueError))
    # end def test_errors_are_value_errors

    def test_parse_move(self):
        self.assertEqual(parse_move("C3-D4"), ((2, 2), (3, 3)))
        self.assertEqual(parse_move(" C3 - D4 "), ((2, 2), (3, 3)))

        with self.assertRaises(InvalidCoordinate):
            parse_move("C3D4")
        # end with

        with self.assertRaises(InvalidCoordinate):
            parse_move("C3-D4-E5")
        # end with
    # end def test_parse_move

# end class CoordinateTest


if __name__ == '__main__':
    unittest.main()
# end if
