
import unittest
import numpy as np
import dama
from dama import (
    DamaGame,
    GameInterface,
    Move,
    Piece,
    Side,
    IllegalMove,
    InvalidCoordinate
)


class ApiTest(unittest.TestCase):

    def test_new_game(self):
        game = dama.new_game()
        self.assertIsInstance(game, DamaGame)
        self.assertIsInstance(game, GameInterface)
        self.assertEqual(game.current_player, Side.WHITE)
        self.assertEqual(len(dama.legal_moves(game)), 7)
        self.assertIsNone(dama.winner(game))
        self.assertFalse(dama.is_over(game))
        self.assertTrue(dama.has_moves(game))
    # end def test_new_game

    def test_board_snapshot(self):
        game = dama.new_game()
        snapshot = dama.board_snapshot(game)

        self.assertIsInstance(snapshot, np.ndarray)
        self.assertEqual(snapshot.shape, (8, 8))
        self.assertEqual(int((snapshot == Piece.WHITE).sum()), 12)
        self.assertEqual(int((snapshot == Piece.BLACK).sum()), 12)
        self.assertFalse(snapshot.flags.writeable)
    # end def test_board_snapshot

    def test_opening_scenario(self):
        game = dama.new_game()

        # White opens with a quiet move
        result = dama.submit_move(game, "C3", "D4")
        self.assertIs(result, game)
        self.assertEqual(game.current_player, Side.BLACK)
        self.assertTrue(all(not m.is_capture for m in dama.legal_moves(game)))

        # Black offers a piece, the capture is now mandatory for White
        dama.submit_move(game, "F6", "E5")
        moves = dama.legal_moves(game)
        self.assertEqual(moves, [Move((3, 3), (5, 5), (4, 4))])
        self.assertFalse(dama.valid(game, "G3", "H4"))

        with self.assertRaises(IllegalMove):
            dama.submit_move(game, "G3", "H4")
        # end with

        dama.submit_move(game, (3, 3), (5, 5))
        self.assertEqual(game.current_player, Side.BLACK)
        self.assertEqual(dama.get_moves(game), ["C3-D4", "F6-E5", "D4-F6"])
        self.assertIsNone(dama.winner(game))
    # end def test_opening_scenario

    def test_dama_from_moves(self):
        game = dama.dama("C3-D4,F6-E5")
        self.assertEqual(game.get_moves(), ["C3-D4", "F6-E5"])

        game = dama.dama("C3-D4 F6-E5 D4-F6")
        self.assertEqual(len(game), 3)

        game = dama.dama(["C3-D4", "", "F6-E5"])
        self.assertEqual(len(game), 2)

        with self.assertRaises(IllegalMove):
            dama.dama("C3-D4,C3-D4")
        # end with

        with self.assertRaises(InvalidCoordinate):
            dama.dama("C3-D9")
        # end with
    # end def test_dama_from_moves

    def test_valid_with_bad_coordinate(self):
        game = dama.new_game()
        with self.assertRaises(InvalidCoordinate):
            dama.valid(game, "C3", "K4")
        # end with
    # end def test_valid_with_bad_coordinate

    def test_show(self):
        game = dama.new_game()
        dama.show(game)
    # end def test_show

# end class ApiTest


if __name__ == '__main__':
    unittest.main()
# end if
