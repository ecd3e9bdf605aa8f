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
from typing import Union, List, Tuple, Optional
import numpy as np

from .games.dama8.dama_simulator import (
    DamaGame,
    DamaBoard,
    Move,
    Side,
    Piece,
    DamaError,
    InvalidCoordinate,
    IllegalMove
)
from .games.game_interface import GameInterface

# Square given in notation ("C3") or as (row, col) coordinates
Square = Union[str, Tuple[int, int]]


def _split_moves(moves_str: Union[str, List[str]]) -> List[str]:
    """
    Split a comma- or space-separated move string into a list of moves.
    """
    if isinstance(moves_str, str):
        if ',' in moves_str:
            moves = [move.strip() for move in moves_str.split(',')]
        else:
            moves = [move.strip() for move in moves_str.split()]
        # end if
    else:
        moves = moves_str
    # end if

    # Remove any empty moves
    return [move for move in moves if move]
# end def _split_moves


def new_game() -> DamaGame:
    """
    Create a game with the standard starting layout, White to move.

    Returns:
        DamaGame: A new game
    """
    return DamaGame()
# end def new_game


def dama(moves_str: Union[str, List[str]]) -> DamaGame:
    """
    Create a DamaGame object from a string of moves.

    Args:
        moves_str (Union[str, List[str]]): list of moves as a string (e.g. "C3-D4,F6-E5") or list of strings

    Returns:
        DamaGame: A DamaGame object with the moves applied

    Raises:
        InvalidCoordinate: If a move is malformed
        IllegalMove: If the move sequence contains an illegal move
    """
    return DamaGame.load_moves(_split_moves(moves_str))
# end def dama


def legal_moves(game: DamaGame) -> List[Move]:
    """
    Get all legal moves for the current player.

    Args:
        game (DamaGame): The game

    Returns:
        List[Move]: Legal moves; captures only when a capture is available
    """
    return game.get_valid_moves()
# end def legal_moves


def submit_move(game: DamaGame, origin: Square, destination: Square) -> DamaGame:
    """
    Apply the move to the game and return the same game object.

    Args:
        game (DamaGame): The game
        origin (Square): Square of the piece to move (e.g. 'C3')
        destination (Square): Square to move to (e.g. 'D4')

    Returns:
        DamaGame: The same game object with the move applied

    Raises:
        InvalidCoordinate: If a square is malformed
        IllegalMove: If the move is not legal, in which case the game is unchanged
    """
    game.make_move(origin, destination)
    return game
# end def submit_move


def winner(game: DamaGame) -> Optional[Side]:
    """
    Get the winner of the game, None while it goes on.
    """
    return game.check_winner()
# end def winner


def board_snapshot(game: DamaGame) -> np.ndarray:
    """
    Get a read-only 8x8 grid of cell contents, indexed [row, col] with row 0 being row "1".
    """
    return game.board_snapshot()
# end def board_snapshot


def valid(game: GameInterface, origin: Square, destination: Square) -> bool:
    """
    Check if a move is legal for the given game.

    Args:
        game (GameInterface): A game object implementing the GameInterface
        origin (Square): Origin square
        destination (Square): Destination square

    Returns:
        bool: True if the move is legal, False otherwise
    """
    return game.is_valid_move(origin, destination)
# end def valid


def is_over(game: GameInterface) -> bool:
    return game.is_game_over()
# end def is_over


def has_moves(game: GameInterface) -> bool:
    return game.has_valid_moves()
# end def has_moves


def show(game: GameInterface) -> None:
    """
    Display the current game state.
    """
    game.show()
# end def show


def get_moves(game: GameInterface) -> List[str]:
    """
    Get the list of moves played in the game in notation.
    """
    return game.get_moves()
# end def get_moves


__all__ = [
    "DamaGame",
    "DamaBoard",
    "Move",
    "Side",
    "Piece",
    "DamaError",
    "InvalidCoordinate",
    "IllegalMove",
    "GameInterface",
    "new_game",
    "dama",
    "legal_moves",
    "submit_move",
    "winner",
    "board_snapshot",
    "valid",
    "is_over",
    "has_moves",
    "show",
    "get_moves"
]
