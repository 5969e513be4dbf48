#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play [--level {beginner,intermediate,advanced}] [--seed N]
    python main.py levels
"""
import argparse
import random

from src.minesweeper import GameEngine, LEVELS, DEFAULT_LEVEL
from src.minesweeper.terminal import TerminalGame


def play(args: argparse.Namespace) -> None:
    """Play an interactive game in the terminal."""
    rng = random.Random(args.seed) if args.seed is not None else None
    engine = GameEngine(level=args.level, rng=rng)
    TerminalGame(engine).play()
    print("Bye!")


def levels(args: argparse.Namespace) -> None:
    """Print the difficulty presets."""
    print(f"{'Level':<14} {'Rows':>5} {'Cols':>5} {'Mines':>6}")
    print("-" * 33)
    for name, config in LEVELS.items():
        print(
            f"{name:<14} {config.rows:>5} {config.columns:>5} "
            f"{config.num_mines:>6}"
        )


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Minesweeper - reveal every safe cell and flag every mine"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    play_parser.add_argument(
        "--level",
        choices=list(LEVELS),
        default=DEFAULT_LEVEL,
        help="Difficulty level",
    )
    play_parser.add_argument(
        "--seed", type=int, default=None, help="Seed for reproducible boards"
    )

    # Levels command
    subparsers.add_parser("levels", help="List difficulty levels")

    args = parser.parse_args()

    if args.command == "play":
        play(args)
    elif args.command == "levels":
        levels(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
