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

"""
Common interface for board games played by moving pieces from one square to another.
"""

from abc import ABC, abstractmethod
from typing import List, Tuple, Any, Optional


class GameInterface(ABC):
    """
    Common interface for from/to board games.

    This abstract class defines the methods a game implementation must provide so that
    hosts (console loop, verification tools, simulations) can drive it without knowing its rules.
    A square is given either in notation (e.g. "C3") or as (row, col) coordinates.
    """

    @abstractmethod
    def get_valid_moves(self) -> List[Any]:
        """
        Return the list of legal moves for the current player.

        Returns:
            List[Any]: Move objects exposing origin and destination squares
        """
        pass
    # end def get_valid_moves

    @abstractmethod
    def is_valid_move(self, origin: Any, destination: Any) -> bool:
        """
        Check if moving the piece on origin to destination is legal for the current player.

        Args:
            origin (Any): Origin square
            destination (Any): Destination square

        Returns:
            bool: True if the move is legal, False otherwise
        """
        pass

    @abstractmethod
    def make_move(self, origin: Any, destination: Any) -> Any:
        """
        Play the move from origin to destination for the current player.

        Args:
            origin (Any): Origin square
            destination (Any): Destination square

        Returns:
            Any: The executed move

        Raises:
            ValueError: If the move is not legal
        """
        pass

    @abstractmethod
    def make_random_move(self) -> Optional[Any]:
        """
        Play a random legal move for the current player. If there is no legal move, return None.

        Returns:
            Optional[Any]: The executed move, or None if no move was possible
        """
        pass

    @abstractmethod
    def has_valid_moves(self) -> bool:
        """
        Check if the current player has any legal move.

        Returns:
            bool: True if the current player has at least one legal move, False otherwise
        """
        pass

    @abstractmethod
    def is_game_over(self) -> bool:
        """
        Check if the game is over.

        Returns:
            bool: True if the game is over, False otherwise
        """
        pass

    @abstractmethod
    def coords_to_notation(self, row: int, col: int) -> str:
        """
        Convert board coordinates to standard notation.

        Args:
            row (int): Row index
            col (int): Column index

        Returns:
            str: Position in standard notation
        """
        pass
    # end def coords_to_notation

    @abstractmethod
    def notation_to_coords(self, notation: str) -> Tuple[int, int]:
        """
        Convert standard notation to board coordinates.

        Args:
            notation (str): Position in standard notation

        Returns:
            Tuple[int, int]: (row, col) coordinates
        """
        pass
    # end def notation_to_coords

    @abstractmethod
    def get_moves(self) -> List[str]:
        """
        Return the list of moves played so far in standard notation.

        Returns:
            List[str]: List of moves in standard notation
        """
        pass
    # end def get_moves

    @abstractmethod
    def show(self) -> None:
        """
        Display the current game state.
        """
        pass
    # end show

    @abstractmethod
    def __len__(self) -> int:
        """
        Return the number of moves played.

        Returns:
            int: Number of moves played
        """
        pass
    # end def __len__

# end class GameInterface
