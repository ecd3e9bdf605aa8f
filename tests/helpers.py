
from dama.games.dama8 import DamaGame


def empty_game(**pieces) -> DamaGame:
    """
    Game on an empty board with the given pieces, e.g. empty_game(C3=Piece.WHITE).
    """
    game = DamaGame()
    game.clear_board()
    for square, piece in pieces.items():
        game.set_piece(square, piece)
    # end for
    return game
# end def empty_game


def notations(moves):
    return sorted(move.notation() for move in moves)
# end def notations
