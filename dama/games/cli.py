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
Command Line Interface for the dama engine.
"""

import argparse
import sys
from typing import List, Optional

from dama.utils import log_exception

from .dama8 import (
    dama_play,
    dama_verify,
    dama_convert,
    dama_simulate
)


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argument parser with one subcommand per host action.
    """
    parser = argparse.ArgumentParser(description="Command Line Interface for the 8x8 dama engine.")
    parser.add_argument("--config", default=None, help="Path to a YAML configuration file")
    parser.add_argument("--verbose", action="store_true", help="Print debug messages")
    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    # Play
    play_parser = subparsers.add_parser("play", help="Start an interactive game on the console")
    play_parser.set_defaults(func=dama_play)

    # Verify
    verify_parser = subparsers.add_parser("verify", help="Verify if a sequence of moves forms a valid game")
    verify_parser.add_argument("--moves", help="Comma-separated list of moves (e.g., 'C3-D4,F6-E5')")
    verify_parser.add_argument("--file", help="File containing moves (one per line)")
    verify_parser.set_defaults(func=dama_verify)

    # Convert
    convert_parser = subparsers.add_parser("convert", help="Convert a sequence of moves to another representation")
    convert_parser.add_argument("--moves", help="Comma-separated list of moves (e.g., 'C3-D4,F6-E5')")
    convert_parser.add_argument("--file", help="File containing moves (one per line)")
    convert_parser.add_argument("--to-board", action="store_true", help="Convert moves to board representation")
    convert_parser.set_defaults(func=dama_convert)

    # Simulate
    simulate_parser = subparsers.add_parser("simulate", help="Play random games and report statistics")
    simulate_parser.add_argument("--num-games", type=int, required=True, help="Number of games to play")
    simulate_parser.add_argument("--seed", type=int, default=None, help="Random seed")
    simulate_parser.add_argument("--max-plies", type=int, default=None, help="Maximum number of moves per game")
    simulate_parser.set_defaults(func=dama_simulate)

    return parser
# end def build_parser


def main(argv: Optional[List[str]] = None):
    """
    Main entry point for the CLI.

    Exits with status 1 when a command fails or reports an invalid game.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    # Execute the appropriate function
    if hasattr(args, "func"):
        try:
            result = args.func(args)
        except Exception:
            log_exception(f"Command '{args.command}' failed")
            sys.exit(1)
        # end try

        if result is False:
            sys.exit(1)
        # end if
    else:
        parser.print_help()
    # end if
# end def main


if __name__ == "__main__":
    main()
# end if
