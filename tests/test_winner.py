
import unittest
from dama.games.dama8 import DamaGame, Piece, Side, Chaining, IllegalMove
from helpers import empty_game


class WinnerTest(unittest.TestCase):

    def test_no_winner_at_start(self):
        game = DamaGame()
        self.assertIsNone(game.check_winner())
        self.assertIsNone(game.winner)
        self.assertFalse(game.is_game_over())
    # end def test_no_winner_at_start

    def test_side_without_pieces_loses(self):
        self.assertEqual(empty_game(C3=Piece.WHITE).check_winner(), Side.WHITE)
        self.assertEqual(empty_game(C3=Piece.BLACK).check_winner(), Side.BLACK)
    # end def test_side_without_pieces_loses

    def test_blocked_player_loses(self):
        game = empty_game(H2=Piece.WHITE, G3=Piece.BLACK, F4=Piece.BLACK)

        self.assertEqual(game.get_valid_moves(), [])
        self.assertEqual(game.check_winner(), Side.BLACK)
        self.assertTrue(game.is_game_over())

        # Black is not blocked in the same position
        game.set_turn(Side.BLACK)
        self.assertIsNone(game.check_winner())
    # end def test_blocked_player_loses

    def test_finished_game_refuses_moves(self):
        game = empty_game(H2=Piece.WHITE, G3=Piece.BLACK, F4=Piece.BLACK)

        with self.assertRaises(IllegalMove):
            game.make_move("H2", "G3")
        # end with

        self.assertFalse(game.is_valid_move("H2", "G3"))
        self.assertIsNone(game.make_random_move())
        self.assertEqual(len(game), 0)
    # end def test_finished_game_refuses_moves

    def test_last_capture_wins(self):
        game = empty_game(C3=Piece.WHITE, D4=Piece.BLACK)
        game.make_move("C3", "E5")

        self.assertEqual(game.check_winner(), Side.WHITE)
        self.assertIsNone(game.make_random_move())
    # end def test_last_capture_wins

    def test_check_winner_has_no_side_effect(self):
        game = empty_game(C3=Piece.WHITE, D4=Piece.BLACK, F4=Piece.BLACK)
        game.make_move("C3", "E5")
        before = game.board_snapshot()

        self.assertIsNone(game.check_winner())
        self.assertIsNone(game.check_winner())

        self.assertEqual(game.turn_state, Chaining((4, 4)))
        self.assertEqual(game.current_player, Side.WHITE)
        self.assertTrue((game.board_snapshot() == before).all())
    # end def test_check_winner_has_no_side_effect

# end class WinnerTest


if __name__ == '__main__':
    unittest.main()
# end if
