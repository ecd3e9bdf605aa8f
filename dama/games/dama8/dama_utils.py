"""
Copyright (C) 2025 dama Contributors

This program is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

This program is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
GNU General Public License for more details.

You should have received a copy of the GNU General Public License
along with this program.  If not, see <https://www.gnu.org/licenses/>.
"""

# Imports
from typing import List, Tuple
from .dama_simulator import DamaGame, DamaError, Piece, SIZE, parse_move


def verify_game(moves: List[str]) -> Tuple[bool, List[str]]:
    """
    Verify the validity of a dama game by replaying it from the starting position.

    A rejected move leaves the board unchanged and the replay goes on with the next move.

    Args:
        moves (List[str]): List of moves in notation (e.g., ['C3-D4', 'F6-E5', ...])

    Returns:
        Tuple[bool, List[str]]:
            - First element is True if all moves are valid, False otherwise
            - Second element is an empty list if all moves are valid,
              or the list of rejected moves
    """
    game = DamaGame()
    invalid_moves = []

    for move in moves:
        try:
            origin, destination = parse_move(move)
            game.make_move(origin, destination)
        except DamaError:
            invalid_moves.append(move)
        # end try
    # end for

    return len(invalid_moves) == 0, invalid_moves
# end def verify_game


def game_to_board(moves: List[str]) -> List[int]:
    """
    Transform a game (as a list of str) into a board representation as a list of int.

    Args:
        moves (List[str]): List of moves in notation (e.g., ['C3-D4', 'F6-E5', ...])

    Returns:
        List[int]: Board representation as a 1D list where:
            - 0 = empty
            - 1 = white man
            - 2 = black man
            - 3 = white king
            - 4 = black king
            - The first entry is "A1", the second "A2", ..., the ninth "B1".

    Raises:
        ValueError: If a move is invalid
    """
    try:
        game = DamaGame.load_moves(moves)
    except DamaError as e:
        raise ValueError(f"Error processing moves: {e}") from e
    # end try

    # Transposing makes the flattening column-major
    board_1d = game.board_snapshot().T.flatten().tolist()

    assert len(board_1d) == SIZE * SIZE, "Error: board representation must contain 64 elements"

    return board_1d
# end def game_to_board


def board_to_string(board: List[int]) -> str:
    """
    Convert a board representation to a string for display, row 8 on top.

    Args:
        board (List[int]): Board representation as a 1D list (see game_to_board)

    Returns:
        str: String representation of the board
    """
    if len(board) != SIZE * SIZE:
        raise ValueError("Board must have 64 elements")
    # end if

    pieces = {
        Piece.EMPTY: "·",
        Piece.WHITE: "○",
        Piece.BLACK: "●",
        Piece.WHITE_KING: "♔",
        Piece.BLACK_KING: "♚"
    }

    result = "  A B C D E F G H\n"

    for row in range(SIZE - 1, -1, -1):
        result += f"{row + 1} "
        for col in range(SIZE):
            piece = board[col * SIZE + row]
            result += pieces.get(piece, "?") + " "
        # end for
        result += f"{row + 1}\n"
    # end for

    result += "  A B C D E F G H"

    return result
# end def board_to_string


def count_pieces(board: List[int]) -> Tuple[int, int, int, int]:
    """
    Count the number of pieces of each type on the board.

    Args:
        board (List[int]): Board representation as a 1D list

    Returns:
        Tuple[int, int, int, int]: (white_men, black_men, white_kings, black_kings)
    """
    white_men = board.count(Piece.WHITE)
    black_men = board.count(Piece.BLACK)
    white_kings = board.count(Piece.WHITE_KING)
    black_kings = board.count(Piece.BLACK_KING)

    return white_men, black_men, white_kings, black_kings
# end def count_pieces
