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

from .cli import (
    dama_play,
    dama_verify,
    dama_convert,
    dama_simulate
)

from .dama_simulator import (
    DamaGame,
    DamaBoard,
    Move,
    Side,
    Piece,
    Idle,
    Chaining,
    IDLE,
    DamaError,
    InvalidCoordinate,
    IllegalMove,
    parse_coordinate,
    format_coordinate,
    parse_move,
    generate_dama_game
)

from .dama_utils import verify_game, game_to_board, board_to_string, count_pieces

__all__ = [
    "dama_play",
    "dama_verify",
    "dama_convert",
    "dama_simulate",
    "DamaGame",
    "DamaBoard",
    "Move",
    "Side",
    "Piece",
    "Idle",
    "Chaining",
    "IDLE",
    "DamaError",
    "InvalidCoordinate",
    "IllegalMove",
    "parse_coordinate",
    "format_coordinate",
    "parse_move",
    "generate_dama_game",
    "verify_game",
    "game_to_board",
    "board_to_string",
    "count_pieces"
]
