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
Command-line interface for the dama game.
"""

# Imports
import argparse
from collections import Counter
from typing import Callable, Dict, List, Optional, Any
import numpy as np
from rich.progress import Progress, TextColumn, BarColumn, TimeElapsedColumn, TimeRemainingColumn
from dama.utils import console, info, warning, error, success, set_verbose, DamaConfig

from .dama_simulator import DamaGame, DamaError, generate_dama_game
from .dama_utils import verify_game, game_to_board, board_to_string


def load_config(args: argparse.Namespace) -> DamaConfig:
    """
    Load the configuration given with --config, or the defaults, and apply verbosity.

    Args:
        args (argparse.Namespace): Arguments parsed by argparse.

    Returns:
        DamaConfig: Configuration
    """
    config_path = getattr(args, "config", None)
    config = DamaConfig.from_yaml(config_path) if config_path else DamaConfig()
    set_verbose(bool(config.verbose or getattr(args, "verbose", False)))
    return config
# end def load_config


def _read_moves(args: argparse.Namespace) -> Optional[List[str]]:
    """
    Read moves from --moves (comma-separated) or --file (one per line).
    """
    moves = [move.strip() for move in args.moves.split(',')] if args.moves else []

    if args.file:
        try:
            with open(args.file, 'r') as f:
                moves = [move.strip() for move in f.readlines()]
            # end with
        except FileNotFoundError:
            error(f"File {args.file} not found.")
            return None
        # end try
    # end if

    moves = [move for move in moves if move]
    if not moves:
        error("No moves provided. Use --moves or --file to provide moves.")
        return None
    # end if

    return moves
# end def _read_moves


def dama_play(
        args: argparse.Namespace,
        input_fn: Optional[Callable[[str], str]] = None,
        game: Optional[DamaGame] = None
) -> DamaGame:
    """
    Play an interactive game on the console.

    Each turn reads a line such as "C3 D4". "moves" lists the legal moves and "exit" quits.
    A rejected move is reported and the board is left unchanged.

    Args:
        args (argparse.Namespace): Arguments parsed by argparse.
        input_fn (Callable, optional): Function reading a line, console.input by default
        game (DamaGame, optional): Game to continue, a new game by default

    Returns:
        DamaGame: The game as it stands when the loop ends
    """
    config = load_config(args)
    read_line = input_fn if input_fn is not None else console.input

    if game is None:
        game = DamaGame()
        info("Starting a new dama game, White moves first.")
    # end if
    game.show(unicode=config.unicode_pieces)

    while not game.is_game_over():
        if config.show_legal_moves:
            info("Legal moves: " + ", ".join(str(m) for m in game.get_valid_moves()))
        # end if

        try:
            line = read_line(f"{game.current_player} to move (e.g. C3 D4): ")
        except EOFError:
            break
        # end try

        command = line.strip().upper()
        if command == "EXIT":
            break
        # end if

        if command == "MOVES":
            info("Legal moves: " + ", ".join(str(m) for m in game.get_valid_moves()))
            continue
        # end if

        parts = command.replace("-", " ").split()
        if len(parts) != 2:
            warning("Invalid input format, expected two squares such as 'C3 D4'.")
            continue
        # end if

        player = game.current_player
        try:
            move = game.make_move(parts[0], parts[1])
        except DamaError as e:
            error(str(e))
            continue
        # end try

        success(f"{player} played {move}")
        if game.in_multi_capture:
            info(f"{player} must keep capturing with the piece on {game.coords_to_notation(*game.active_piece)}")
        # end if
        game.show(unicode=config.unicode_pieces)
    # end while

    winner = game.check_winner()
    if winner is not None:
        success(f"Game over. Winner: {winner}")
    # end if

    return game
# end def dama_play


def dama_verify(args: argparse.Namespace) -> bool:
    """
    Verify if a sequence of moves forms a valid dama game.
    """
    load_config(args)
    moves = _read_moves(args)
    if moves is None:
        return False
    # end if

    is_valid, invalid_moves = verify_game(moves)

    if is_valid:
        success("The game is valid.")
    else:
        error("The game is invalid. Invalid moves:")
        for move in invalid_moves:
            error(f"  - {move}")
        # end for
    # end if

    return is_valid
# end def dama_verify


def dama_convert(args: argparse.Namespace):
    """
    Convert a list of moves to the final board representation, or list them numbered.
    """
    load_config(args)
    moves = _read_moves(args)
    if moves is None:
        return
    # end if

    if args.to_board:
        try:
            board = game_to_board(moves)
        except ValueError as e:
            error(f"{e}")
            return
        # end try
        info("Board representation:")
        console.print(" ".join(str(piece) for piece in board))
        console.print(board_to_string(board), highlight=False)
    else:
        info("Moves representation:")
        for i, move in enumerate(moves):
            info(f"{i + 1}. {move}")
        # end for
    # end if
# end def dama_convert


def dama_simulate(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Play random games and report their length and outcome.

    Nothing is written to disk.

    Args:
        args (argparse.Namespace): Arguments parsed by argparse.

    Returns:
        Dict[str, Any]: Game lengths and outcome counts
    """
    config = load_config(args)
    max_plies = args.max_plies if args.max_plies is not None else int(config.max_plies)

    game_lengths = []
    outcomes = Counter()

    with Progress(
            TextColumn("[bold blue]{task.description}"),
            BarColumn(bar_width=None),
            TextColumn("[progress.percentage]{task.percentage:>3.0f}%"),
            TextColumn("[bold green]{task.completed}/{task.total} games"),
            TimeElapsedColumn(),
            TimeRemainingColumn(),
            console=console,
    ) as progress:
        task = progress.add_task("[bold green]Playing games...", total=args.num_games)

        for i in range(args.num_games):
            # A different seed per game for variety
            game_seed = None if args.seed is None else args.seed + i
            game = generate_dama_game(game_seed, max_plies=max_plies)
            game_lengths.append(len(game))

            winner = game.check_winner()
            outcomes[str(winner) if winner is not None else "Unfinished"] += 1

            progress.update(task, advance=1)
        # end for
    # end with

    lengths = np.array(game_lengths, dtype=int)

    console.log(f"Simulation ended, {len(game_lengths)} games played:")
    for outcome, count in sorted(outcomes.items()):
        console.log(f"\t- [bold green]{count:>5}[/] games: [bold blue]{outcome}[/]")
    # end for

    if lengths.size > 0:
        console.log("Length statistics")
        console.log(f"\tTotal moves played: {lengths.sum()}")
        console.log(f"\tAverage moves per game: {lengths.mean():.2f}")
        console.log(f"\tStd moves per game: {lengths.std():.2f}")
    # end if

    return {"lengths": game_lengths, "outcomes": dict(outcomes)}
# end def dama_simulate
