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
Dama game simulator.

This module implements the 8x8 dama rules, including board representation,
legal move generation with mandatory capture, multi-jump chains, flying kings,
promotion and win detection.
"""

import copy
import random
from dataclasses import dataclass
from enum import IntEnum
from typing import List, Tuple, Set, Dict, Optional, Union

import numpy as np

from dama.utils import console, debug
from dama.games.game_interface import GameInterface


# Board size (rows and columns)
SIZE = 8

# Number of rows filled by each side at the start
START_ROWS = 3

# (row, col) pair, both between 0 and SIZE - 1
Coordinate = Tuple[int, int]

# Diagonal directions as (row step, col step)
ALL_DIRECTIONS = ((1, 1), (1, -1), (-1, 1), (-1, -1))


class DamaError(ValueError):
    """Base class for the errors raised by the dama engine."""
# end class DamaError


class InvalidCoordinate(DamaError):
    """Malformed or out-of-range coordinate."""
# end class InvalidCoordinate


class IllegalMove(DamaError):
    """A well-formed move which is not in the current legal move set."""
# end class IllegalMove


class Side(IntEnum):
    """
    The two players. White moves first, towards increasing rows.
    """

    WHITE = 1
    BLACK = 2

    @property
    def opponent(self) -> "Side":
        return Side.BLACK if self == Side.WHITE else Side.WHITE
    # end def opponent

    @property
    def forward(self) -> int:
        """Row step of a forward move."""
        return 1 if self == Side.WHITE else -1
    # end def forward

    @property
    def promotion_row(self) -> int:
        """Row on which a man of this side becomes a king."""
        return SIZE - 1 if self == Side.WHITE else 0
    # end def promotion_row

    def __str__(self) -> str:
        return self.name.capitalize()
    # end def __str__

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)
    # end def __format__

# end class Side


class Piece(IntEnum):
    """
    Content of a board cell.
    """

    EMPTY = 0
    WHITE = 1
    BLACK = 2
    WHITE_KING = 3
    BLACK_KING = 4

    @property
    def side(self) -> Optional[Side]:
        """Owner of the piece, None for an empty cell."""
        if self in (Piece.WHITE, Piece.WHITE_KING):
            return Side.WHITE
        elif self in (Piece.BLACK, Piece.BLACK_KING):
            return Side.BLACK
        # end if
        return None
    # end def side

    @property
    def is_king(self) -> bool:
        return self in (Piece.WHITE_KING, Piece.BLACK_KING)
    # end def is_king

    @staticmethod
    def man(side: Side) -> "Piece":
        return Piece.WHITE if side == Side.WHITE else Piece.BLACK
    # end def man

    @staticmethod
    def king(side: Side) -> "Piece":
        return Piece.WHITE_KING if side == Side.WHITE else Piece.BLACK_KING
    # end def king

# end class Piece


def on_board(row: int, col: int) -> bool:
    """
    Check that (row, col) lies within the board.
    """
    return 0 <= row < SIZE and 0 <= col < SIZE
# end def on_board


def is_dark_square(row: int, col: int) -> bool:
    """
    Check if (row, col) is a playable (dark) square.
    """
    return (row + col) % 2 == 0
# end def is_dark_square


def validate_coordinate(pos: Coordinate) -> Coordinate:
    """
    Check that pos is a (row, col) pair of integers on the board.

    Args:
        pos (Coordinate): Coordinates to check

    Returns:
        Coordinate: The coordinates as plain ints

    Raises:
        InvalidCoordinate: If pos is malformed or out of the board
    """
    try:
        row, col = pos
    except (TypeError, ValueError):
        raise InvalidCoordinate(f"Invalid coordinate: {pos!r}")
    # end try

    for value in (row, col):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise InvalidCoordinate(f"Invalid coordinate: {pos!r}")
        # end if
    # end for

    if not on_board(row, col):
        raise InvalidCoordinate(f"Coordinate out of the board: {pos!r}")
    # end if

    return int(row), int(col)
# end def validate_coordinate


def parse_coordinate(notation: str) -> Coordinate:
    """
    Convert a square in notation ("A1" to "H8") to (row, col) coordinates.

    Columns A-H map to 0-7 and rows 1-8 map to 0-7.

    Args:
        notation (str): Square in notation

    Returns:
        Coordinate: (row, col) coordinates

    Raises:
        InvalidCoordinate: If the notation is malformed
    """
    if not isinstance(notation, str) or len(notation) != 2:
        raise InvalidCoordinate(f"Invalid coordinate: {notation!r}")
    # end if

    col_char, row_char = notation[0], notation[1]
    if not ('A' <= col_char <= 'H' and '1' <= row_char <= '8'):
        raise InvalidCoordinate(f"Invalid coordinate: {notation!r}")
    # end if

    return ord(row_char) - ord('1'), ord(col_char) - ord('A')
# end def parse_coordinate


def format_coordinate(pos: Coordinate) -> str:
    """
    Convert (row, col) coordinates to notation, e.g. (2, 2) -> "C3".

    Raises:
        InvalidCoordinate: If pos is not on the board
    """
    row, col = validate_coordinate(pos)
    return f"{chr(ord('A') + col)}{chr(ord('1') + row)}"
# end def format_coordinate


def to_coordinate(square: Union[str, Coordinate]) -> Coordinate:
    """
    Accept a square either in notation or as coordinates and return coordinates.
    """
    if isinstance(square, str):
        return parse_coordinate(square)
    # end if
    return validate_coordinate(square)
# end def to_coordinate


def parse_move(text: str) -> Tuple[Coordinate, Coordinate]:
    """
    Parse a move written as "C3-D4".

    Args:
        text (str): Move in notation

    Returns:
        Tuple[Coordinate, Coordinate]: Origin and destination coordinates

    Raises:
        InvalidCoordinate: If the move text is malformed
    """
    parts = text.strip().split("-")
    if len(parts) != 2:
        raise InvalidCoordinate(f"Invalid move notation: {text!r}")
    # end if
    return parse_coordinate(parts[0].strip()), parse_coordinate(parts[1].strip())
# end def parse_move


@dataclass(frozen=True)
class Move:
    """
    A candidate transition, computed fresh for each query.

    Attributes:
        origin (Coordinate): Square the piece leaves
        destination (Coordinate): Square the piece lands on
        captured (Coordinate, optional): Square of the captured piece, None for a quiet move
    """
    origin: Coordinate
    destination: Coordinate
    captured: Optional[Coordinate] = None

    @property
    def is_capture(self) -> bool:
        return self.captured is not None

    def notation(self) -> str:
        """Move in notation, e.g. "C3-D4"."""
        return f"{format_coordinate(self.origin)}-{format_coordinate(self.destination)}"

    def __str__(self) -> str:
        return self.notation()
    # end def __str__

# end class Move


@dataclass(frozen=True)
class Idle:
    """No capture chain is in progress, any piece of the current player may move."""

    def __str__(self) -> str:
        return "idle"

# end class Idle


@dataclass(frozen=True)
class Chaining:
    """
    A capture chain is in progress, only the piece on `active` may move and it must capture.
    """
    active: Coordinate

    def __str__(self) -> str:
        return f"chaining from {format_coordinate(self.active)}"

# end class Chaining


IDLE = Idle()

# Continuation state of the current turn
TurnState = Union[Idle, Chaining]


class DamaBoard:
    """
    Represents a dama board.

    The board holds an 8x8 grid of Piece values and, for each side, the set of occupied
    squares and the live piece count. All changes go through add_piece, remove_piece,
    move_piece and promote_to_king, which keep the grid and the indices in lock-step.
    """

    # Text symbols
    UNICODE_SYMBOLS = {
        Piece.WHITE: "○",
        Piece.BLACK: "●",
        Piece.WHITE_KING: "♔",
        Piece.BLACK_KING: "♚",
    }
    ASCII_SYMBOLS = {
        Piece.WHITE: "w",
        Piece.BLACK: "b",
        Piece.WHITE_KING: "W",
        Piece.BLACK_KING: "B",
    }

    def __init__(self, setup: bool = True):
        """
        Initialize a new dama board.

        Args:
            setup (bool): Place the pieces in their starting positions (default: True),
                          otherwise the board starts empty
        """
        self.size = SIZE
        self.board = np.zeros((SIZE, SIZE), dtype=int)
        self.positions: Dict[Side, Set[Coordinate]] = {Side.WHITE: set(), Side.BLACK: set()}
        self.counts: Dict[Side, int] = {Side.WHITE: 0, Side.BLACK: 0}

        if setup:
            self._setup_board()
        # end if
    # end def __init__

    def _setup_board(self):
        """
        Set up the initial board state: White on rows 0-2, Black on rows 5-7, dark squares only.
        """
        for row in range(SIZE):
            for col in range(SIZE):
                if not is_dark_square(row, col):
                    continue
                # end if
                if row < START_ROWS:
                    self.add_piece((row, col), Piece.WHITE)
                elif row >= SIZE - START_ROWS:
                    self.add_piece((row, col), Piece.BLACK)
                # end if
            # end for
        # end for
    # end def _setup_board

    def clear(self):
        """Remove every piece from the board."""
        self.board[:, :] = Piece.EMPTY
        self.positions = {Side.WHITE: set(), Side.BLACK: set()}
        self.counts = {Side.WHITE: 0, Side.BLACK: 0}
    # end def clear

    def get_piece(self, pos: Coordinate) -> Piece:
        """
        Get the piece at the specified position.

        Args:
            pos (Coordinate): (row, col) coordinates

        Returns:
            Piece: Content of the cell

        Raises:
            InvalidCoordinate: If pos is not on the board
        """
        row, col = validate_coordinate(pos)
        return Piece(int(self.board[row, col]))
    # end def get_piece

    def is_empty(self, pos: Coordinate) -> bool:
        return self.get_piece(pos) == Piece.EMPTY

    def owner(self, pos: Coordinate) -> Optional[Side]:
        """Side owning the piece at pos, None if the cell is empty."""
        return self.get_piece(pos).side

    def is_white(self, pos: Coordinate) -> bool:
        return self.owner(pos) == Side.WHITE

    def is_black(self, pos: Coordinate) -> bool:
        return self.owner(pos) == Side.BLACK

    def is_king(self, pos: Coordinate) -> bool:
        return self.get_piece(pos).is_king

    def pieces(self, side: Side) -> List[Coordinate]:
        """
        Occupied squares of a side, in sorted order.
        """
        return sorted(self.positions[Side(side)])
    # end def pieces

    def count(self, side: Side) -> int:
        """Number of live pieces of a side."""
        return self.counts[Side(side)]
    # end def count

    def add_piece(self, pos: Coordinate, kind: Piece):
        """
        Put a piece on an empty dark square.

        Args:
            pos (Coordinate): (row, col) coordinates
            kind (Piece): Piece to add

        Raises:
            InvalidCoordinate: If pos is not on the board
            ValueError: If kind is EMPTY, or the square is light or occupied
        """
        row, col = validate_coordinate(pos)
        kind = Piece(kind)

        if kind == Piece.EMPTY:
            raise ValueError("Cannot add an empty piece")
        # end if

        if not is_dark_square(row, col):
            raise ValueError(f"Pieces can only be placed on dark squares, got {format_coordinate((row, col))}")
        # end if

        if self.board[row, col] != Piece.EMPTY:
            raise ValueError(f"Square {format_coordinate((row, col))} is already occupied")
        # end if

        self.board[row, col] = kind
        self.positions[kind.side].add((row, col))
        self.counts[kind.side] += 1
    # end def add_piece

    def remove_piece(self, pos: Coordinate) -> Piece:
        """
        Remove the piece at pos.

        Args:
            pos (Coordinate): (row, col) coordinates

        Returns:
            Piece: The removed piece

        Raises:
            ValueError: If the square is empty
        """
        row, col = validate_coordinate(pos)
        kind = Piece(int(self.board[row, col]))

        if kind == Piece.EMPTY:
            raise ValueError(f"No piece to remove at {format_coordinate((row, col))}")
        # end if

        self.board[row, col] = Piece.EMPTY
        self.positions[kind.side].remove((row, col))
        self.counts[kind.side] -= 1

        return kind
    # end def remove_piece

    def move_piece(self, origin: Coordinate, destination: Coordinate):
        """
        Relocate a piece from origin to an empty dark square.

        Args:
            origin (Coordinate): Square holding the piece
            destination (Coordinate): Empty square to move to

        Raises:
            ValueError: If origin is empty, or destination is light or occupied
        """
        r1, c1 = validate_coordinate(origin)
        r2, c2 = validate_coordinate(destination)
        kind = Piece(int(self.board[r1, c1]))

        if kind == Piece.EMPTY:
            raise ValueError(f"No piece to move at {format_coordinate((r1, c1))}")
        # end if

        if not is_dark_square(r2, c2) or self.board[r2, c2] != Piece.EMPTY:
            raise ValueError(f"Cannot move to {format_coordinate((r2, c2))}")
        # end if

        self.board[r1, c1] = Piece.EMPTY
        self.board[r2, c2] = kind
        self.positions[kind.side].remove((r1, c1))
        self.positions[kind.side].add((r2, c2))
    # end def move_piece

    def promote_to_king(self, pos: Coordinate) -> bool:
        """
        Promote a man to king if it stands on its side's last row.

        Args:
            pos (Coordinate): (row, col) coordinates

        Returns:
            bool: True if the piece was promoted, False otherwise
        """
        row, col = validate_coordinate(pos)
        piece = self.get_piece((row, col))

        if piece == Piece.EMPTY or piece.is_king:
            return False
        # end if

        if row != piece.side.promotion_row:
            return False
        # end if

        self.board[row, col] = Piece.king(piece.side)
        return True
    # end def promote_to_king

    def snapshot(self) -> np.ndarray:
        """
        Read-only copy of the grid, indexed [row, col].
        """
        grid = self.board.copy()
        grid.setflags(write=False)
        return grid
    # end def snapshot

    def copy(self) -> "DamaBoard":
        """Independent copy of the board and its indices."""
        return copy.deepcopy(self)
    # end def copy

    def check_invariants(self):
        """
        Check that the piece indices mirror the grid.

        Raises:
            AssertionError: If an index or a count is out of sync with the grid
        """
        for side in Side:
            occupied = {
                (int(row), int(col))
                for row, col in zip(*np.nonzero(self.board))
                if Piece(int(self.board[row, col])).side == side
            }
            assert occupied == self.positions[side], \
                f"{side} index {sorted(self.positions[side])} does not match the grid {sorted(occupied)}"
            assert len(self.positions[side]) == self.counts[side], \
                f"{side} count {self.counts[side]} does not match its index ({len(self.positions[side])})"
            for row, col in occupied:
                assert is_dark_square(row, col), f"{side} piece on light square {(row, col)}"
            # end for
        # end for
    # end def check_invariants

    def __str__(self, last_move: Optional[Coordinate] = None, unicode: bool = True) -> str:
        """
        Return a string representation of the board, row 8 on top.

        Args:
            last_move (Coordinate, optional): Destination of the last move, marked with '*'
            unicode (bool): Use unicode symbols for the pieces (default: True)

        Returns:
            str: String representation of the board
        """
        symbols = self.UNICODE_SYMBOLS if unicode else self.ASCII_SYMBOLS
        columns = " ".join(chr(ord('A') + col) + " " for col in range(SIZE))

        result = "  " + columns + "\n"
        for row in range(SIZE - 1, -1, -1):
            result += f"{row + 1} "
            for col in range(SIZE):
                piece = Piece(int(self.board[row, col]))
                if piece == Piece.EMPTY:
                    cell = "." if is_dark_square(row, col) else " "
                else:
                    cell = symbols[piece]
                # end if
                mark = "*" if last_move == (row, col) else " "
                result += f"{cell}{mark} "
            # end for
            result += f"{row + 1}\n"
        # end for
        result += "  " + columns

        return result
    # end def __str__

    def __repr__(self):
        return self.__str__()

# end class DamaBoard


class DamaGame(GameInterface):
    """
    Implements the dama game logic.

    This class handles the turn and capture-chain state, legal move generation,
    move execution and win detection. It implements the GameInterface so that hosts
    can drive it like any other game.
    """

    SIZE = SIZE

    # Player constants
    WHITE = Side.WHITE
    BLACK = Side.BLACK

    def __init__(self):
        """Initialize a new game with the standard layout, White to move."""
        self.board = DamaBoard()

        # White starts
        self.current_player = Side.WHITE

        # Capture chain state
        self.turn_state: TurnState = IDLE

        # Move history
        self.moves: List[str] = []
        self.moves_player: List[Side] = []
    # end def __init__

    @property
    def in_multi_capture(self) -> bool:
        return isinstance(self.turn_state, Chaining)

    @property
    def active_piece(self) -> Optional[Coordinate]:
        """Square of the piece that must keep capturing, None outside a chain."""
        if isinstance(self.turn_state, Chaining):
            return self.turn_state.active
        # end if
        return None

    # region MOVE GENERATION

    def get_valid_moves(self) -> List[Move]:
        """
        Return the legal moves of the current player.

        During a capture chain only the active piece's captures are legal. Otherwise
        captures are mandatory over the whole side: if any piece can capture, every
        capture is returned and no quiet move is.

        Returns:
            List[Move]: Legal moves, in board order
        """
        return self._generate_moves(self.current_player, self.turn_state)
    # end def get_valid_moves

    def _generate_moves(self, player: Side, turn_state: TurnState) -> List[Move]:
        if isinstance(turn_state, Chaining):
            return self._get_captures(turn_state.active, player, first_capture=False)
        # end if

        pieces = self.board.pieces(player)

        # Captures first (mandatory)
        captures = []
        for pos in pieces:
            captures.extend(self._get_captures(pos, player, first_capture=True))
        # end for

        if captures:
            return captures
        # end if

        moves = []
        for pos in pieces:
            moves.extend(self._get_regular_moves(pos, player))
        # end for

        return moves
    # end def _generate_moves

    def _capture_directions(self, piece: Piece, player: Side, first_capture: bool):
        # Men open a turn by capturing forward, then capture in any direction
        if piece.is_king or not first_capture:
            return ALL_DIRECTIONS
        # end if
        return (player.forward, 1), (player.forward, -1)
    # end def _capture_directions

    def _get_captures(self, pos: Coordinate, player: Side, first_capture: bool) -> List[Move]:
        """
        Get the capture moves of the piece at pos.

        Men jump an adjacent enemy onto the empty square right behind it. Kings fly: they
        slide over empty squares up to the first piece, which must be an enemy, and land on
        the square right behind it, which must be empty.

        Args:
            pos (Coordinate): Square of the piece
            player (Side): Owner of the piece
            first_capture (bool): True for the first capture of a turn

        Returns:
            List[Move]: Capture moves
        """
        piece = self.board.get_piece(pos)
        if piece.side != player:
            return []
        # end if

        row, col = pos
        enemy = player.opponent
        captures = []

        for dr, dc in self._capture_directions(piece, player, first_capture):
            if piece.is_king:
                r, c = row + dr, col + dc
                while on_board(r, c) and self.board.is_empty((r, c)):
                    r, c = r + dr, c + dc
                # end while

                if not on_board(r, c) or self.board.owner((r, c)) != enemy:
                    continue
                # end if

                land_r, land_c = r + dr, c + dc
                if on_board(land_r, land_c) and self.board.is_empty((land_r, land_c)):
                    captures.append(Move(pos, (land_r, land_c), (r, c)))
                # end if
            else:
                mid_r, mid_c = row + dr, col + dc
                land_r, land_c = row + 2 * dr, col + 2 * dc
                if (on_board(land_r, land_c) and self.board.is_empty((land_r, land_c))
                        and self.board.owner((mid_r, mid_c)) == enemy):
                    captures.append(Move(pos, (land_r, land_c), (mid_r, mid_c)))
                # end if
            # end if
        # end for

        return captures
    # end def _get_captures

    def _get_regular_moves(self, pos: Coordinate, player: Side) -> List[Move]:
        """
        Get the quiet moves of the piece at pos.

        Args:
            pos (Coordinate): Square of the piece
            player (Side): Owner of the piece

        Returns:
            List[Move]: Quiet moves
        """
        piece = self.board.get_piece(pos)
        row, col = pos
        moves = []

        if piece.is_king:
            # Kings slide along each diagonal up to the first obstruction
            for dr, dc in ALL_DIRECTIONS:
                r, c = row + dr, col + dc
                while on_board(r, c) and self.board.is_empty((r, c)):
                    moves.append(Move(pos, (r, c)))
                    r, c = r + dr, c + dc
                # end while
            # end for
        else:
            for dc in (1, -1):
                r, c = row + player.forward, col + dc
                if on_board(r, c) and self.board.is_empty((r, c)):
                    moves.append(Move(pos, (r, c)))
                # end if
            # end for
        # end if

        return moves
    # end def _get_regular_moves

    # endregion MOVE GENERATION

    def _find_move(self, origin: Coordinate, destination: Coordinate) -> Optional[Move]:
        for move in self.get_valid_moves():
            if move.origin == origin and move.destination == destination:
                return move
            # end if
        # end for
        return None
    # end def _find_move

    def is_valid_move(self, origin: Union[str, Coordinate], destination: Union[str, Coordinate]) -> bool:
        """
        Check if moving from origin to destination is legal for the current player.

        Args:
            origin (Union[str, Coordinate]): Origin square, in notation or coordinates
            destination (Union[str, Coordinate]): Destination square, in notation or coordinates

        Returns:
            bool: True if the move is legal, False otherwise

        Raises:
            InvalidCoordinate: If a square is malformed
        """
        if self.is_game_over():
            return False
        # end if
        return self._find_move(to_coordinate(origin), to_coordinate(destination)) is not None
    # end def is_valid_move

    # region MOVE EXECUTION

    def make_move(self, origin: Union[str, Coordinate], destination: Union[str, Coordinate]) -> Move:
        """
        Play a move for the current player.

        Args:
            origin (Union[str, Coordinate]): Origin square, in notation or coordinates
            destination (Union[str, Coordinate]): Destination square, in notation or coordinates

        Returns:
            Move: The executed move

        Raises:
            InvalidCoordinate: If a square is malformed
            IllegalMove: If the move is not legal or the game is over; the game is left unchanged
        """
        origin = to_coordinate(origin)
        destination = to_coordinate(destination)

        winner = self.check_winner()
        if winner is not None:
            raise IllegalMove(f"The game is over, {winner} won")
        # end if

        move = self._find_move(origin, destination)
        if move is None:
            raise IllegalMove(
                f"Illegal move {format_coordinate(origin)}-{format_coordinate(destination)} "
                f"for {self.current_player}"
            )
        # end if

        self._execute_move(move)

        return move
    # end def make_move

    def _execute_move(self, move: Move):
        """
        Apply a legal move: relocate, capture, promote, then continue the chain or pass the turn.
        """
        player = self.current_player

        self.board.move_piece(move.origin, move.destination)

        if move.is_capture:
            self.board.remove_piece(move.captured)
        # end if

        if self.board.promote_to_king(move.destination):
            debug(f"{player} man promoted to king on {format_coordinate(move.destination)}")
        # end if

        self.moves.append(move.notation())
        self.moves_player.append(player)

        # Only a capture can start or extend a chain
        if move.is_capture:
            if self._get_captures(move.destination, player, first_capture=False):
                self.turn_state = Chaining(move.destination)
                debug(f"{player} must keep capturing with {format_coordinate(move.destination)}")
                return
            # end if
        # end if

        self.turn_state = IDLE
        self.switch_player()
    # end def _execute_move

    # endregion MOVE EXECUTION

    def make_random_move(self) -> Optional[Move]:
        """
        Play a random legal move for the current player.

        Returns:
            Optional[Move]: The executed move, or None if the game is over
        """
        if self.is_game_over():
            return None
        # end if

        move = random.choice(self.get_valid_moves())
        self._execute_move(move)
        return move
    # end def make_random_move

    def has_valid_moves(self) -> bool:
        return len(self.get_valid_moves()) > 0

    def switch_player(self):
        """Switch the current player."""
        self.current_player = self.current_player.opponent

    def check_winner(self) -> Optional[Side]:
        """
        Return the winner, or None while the game goes on.

        A side with no piece left loses. A current player with pieces but no legal move
        is blocked and loses too. This method never changes the game state.

        Returns:
            Optional[Side]: The winning side, if any
        """
        if self.board.count(Side.BLACK) == 0:
            return Side.WHITE
        # end if

        if self.board.count(Side.WHITE) == 0:
            return Side.BLACK
        # end if

        if not self.get_valid_moves():
            return self.current_player.opponent
        # end if

        return None
    # end def check_winner

    @property
    def winner(self) -> Optional[Side]:
        return self.check_winner()

    def is_game_over(self) -> bool:
        return self.check_winner() is not None

    # region SETUP

    def clear_board(self):
        """
        Empty the board and reset the turn: White to move, no chain, no history.
        """
        self.board.clear()
        self.current_player = Side.WHITE
        self.turn_state = IDLE
        self.moves = []
        self.moves_player = []
    # end def clear_board

    def set_piece(self, square: Union[str, Coordinate], piece: Piece):
        """
        Put a piece on a square, replacing what was there.

        Any capture chain in progress is dropped.

        Args:
            square (Union[str, Coordinate]): Square, in notation or coordinates
            piece (Piece): Piece to place, EMPTY to clear the square
        """
        pos = to_coordinate(square)
        piece = Piece(piece)

        if not self.board.is_empty(pos):
            self.board.remove_piece(pos)
        # end if

        if piece != Piece.EMPTY:
            self.board.add_piece(pos, piece)
        # end if

        self.turn_state = IDLE
    # end def set_piece

    def set_turn(self, player: Side):
        """
        Give the turn to a player and drop any capture chain.
        """
        self.current_player = Side(player)
        self.turn_state = IDLE
    # end def set_turn

    # endregion SETUP

    def coords_to_notation(self, row: int, col: int) -> str:
        return format_coordinate((row, col))

    def notation_to_coords(self, notation: str) -> Tuple[int, int]:
        return parse_coordinate(notation)

    def get_moves(self) -> List[str]:
        """
        Return the moves played so far, e.g. ["C3-D4", "F6-E5"].
        """
        return list(self.moves)
    # end def get_moves

    @classmethod
    def load_moves(cls, moves: List[str]) -> "DamaGame":
        """
        Replay a sequence of moves from the starting position.

        Args:
            moves (List[str]): Moves in notation (e.g. ['C3-D4', 'F6-E5', ...])

        Returns:
            DamaGame: A game with the moves applied

        Raises:
            InvalidCoordinate: If a move is malformed
            IllegalMove: If a move is not legal at its turn
        """
        game = cls()
        for text in moves:
            origin, destination = parse_move(text)
            game.make_move(origin, destination)
        # end for
        return game
    # end def load_moves

    def board_snapshot(self) -> np.ndarray:
        return self.board.snapshot()

    def copy(self) -> "DamaGame":
        """Independent copy of the game."""
        return copy.deepcopy(self)

    def show(self, unicode: bool = True):
        """Display the current game state."""
        console.print(self.__str__(unicode=unicode), highlight=False)

    def __str__(self, unicode: bool = True):
        """
        Return a string representation of the game.

        Returns:
            str: Current player, board and outcome
        """
        last_move = parse_move(self.moves[-1])[1] if self.moves else None

        result = f"Current player: {self.current_player}"
        if self.in_multi_capture:
            result += f" (must capture with {format_coordinate(self.active_piece)})"
        # end if
        result += "\n" + self.board.__str__(last_move=last_move, unicode=unicode)

        winner = self.check_winner()
        if winner is not None:
            result += f"\nGame over! {winner} wins!"
        # end if

        return result
    # end def __str__

    def __repr__(self):
        return self.__str__()

    def __len__(self):
        return len(self.moves)

# end class DamaGame


def generate_dama_game(seed: int = None, max_plies: int = 200) -> DamaGame:
    """
    Play a random game.

    Args:
        seed (int, optional): Random seed for reproducibility
        max_plies (int): Maximum number of moves before stopping, kings can shuffle forever

    Returns:
        DamaGame: The game, finished or stopped after max_plies moves
    """
    if seed is not None:
        random.seed(seed)
    # end if

    game = DamaGame()

    plies = 0
    while plies < max_plies:
        if game.make_random_move() is None:
            break
        # end if
        plies += 1
    # end while

    return game
# end def generate_dama_game
