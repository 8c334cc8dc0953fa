#!/usr/bin/env python3
"""
Minesweeper - Terminal entry point.

Usage:
    python main.py [--size N] [--mines M] [--seed S]

Each turn, enter '<column> <row> <action>' with zero-based coordinates
and action 'mine' (mark/unmark) or 'free' (reveal).
"""
import argparse
from typing import Optional

from src.minesweeper.commands import parse_command
from src.minesweeper.errors import MinesweeperError
from src.minesweeper.minefield import FIELD_SIZE, BoardConfig, Minefield
from src.minesweeper.session import advance


MINES_PROMPT = "How many mines do you want on the field?"
TURN_PROMPT = "Set/unset mines marks or claim a cell as free: "


def ask_mine_count() -> int:
    """Prompt for the number of mines; unparsable answers mean none."""
    print(MINES_PROMPT)
    try:
        return int(input().strip())
    except ValueError:
        return 0


def create_field(args: argparse.Namespace) -> Optional[Minefield]:
    """Build the minefield from arguments, reporting bad configuration."""
    mines = args.mines if args.mines is not None else ask_mine_count()
    try:
        config = BoardConfig(size=args.size, num_mines=mines, seed=args.seed)
    except MinesweeperError as error:
        print(f"Error: {error}")
        return None
    return Minefield(config)


def play(minefield: Minefield) -> None:
    """Run the read-apply-render loop until the game ends."""
    print(minefield.render())

    while minefield.is_playing:
        line = input(TURN_PROMPT)
        try:
            command = parse_command(line)
            minefield, result = advance(minefield, command)
        except MinesweeperError as error:
            print(f"Error: {error}")
            continue

        print(result.board)
        if result.message:
            print(result.message)


def main() -> None:
    """Parse arguments and play one game."""
    parser = argparse.ArgumentParser(description="Minesweeper in the terminal")
    parser.add_argument(
        "--size", type=int, default=FIELD_SIZE, help="Field size (NxN)"
    )
    parser.add_argument(
        "--mines", type=int, default=None,
        help="Number of mines (prompted for if omitted)",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed for mine placement"
    )
    args = parser.parse_args()

    try:
        minefield = create_field(args)
        if minefield is not None:
            play(minefield)
    except (EOFError, KeyboardInterrupt):
        print()


if __name__ == "__main__":
    main()
