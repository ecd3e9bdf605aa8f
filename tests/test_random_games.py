
import random
import unittest
from dama.games.dama8 import DamaGame, Side, generate_dama_game


class RandomGamesTest(unittest.TestCase):

    def test_rules_hold_over_random_games(self):
        for seed in range(20):
            random.seed(seed)
            game = DamaGame()

            for _ in range(150):
                moves = game.get_valid_moves()

                # Capture is mandatory
                if any(move.is_capture for move in moves):
                    self.assertTrue(all(move.is_capture for move in moves))
                # end if

                # A chain restricts play to the active piece's captures
                if game.in_multi_capture:
                    self.assertTrue(moves)
                    for move in moves:
                        self.assertEqual(move.origin, game.active_piece)
                        self.assertTrue(move.is_capture)
                    # end for
                # end if

                player = game.current_player
                move = game.make_random_move()
                if move is None:
                    self.assertTrue(game.is_game_over())
                    break
                # end if

                game.board.check_invariants()
                for side in Side:
                    self.assertEqual(len(game.board.pieces(side)), game.board.count(side))
                # end for

                # The turn only stays with the mover during a chain
                if game.current_player == player:
                    self.assertTrue(move.is_capture)
                    self.assertEqual(game.active_piece, move.destination)
                else:
                    self.assertFalse(game.in_multi_capture)
                # end if
            # end for
        # end for
    # end def test_rules_hold_over_random_games

    def test_generate_dama_game(self):
        game = generate_dama_game(seed=3, max_plies=30)
        self.assertLessEqual(len(game), 30)
        game.board.check_invariants()

        # Same seed, same game
        again = generate_dama_game(seed=3, max_plies=30)
        self.assertEqual(game.get_moves(), again.get_moves())
    # end def test_generate_dama_game

# end class RandomGamesTest


if __name__ == '__main__':
    unittest.main()
# end if
