#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play [--width W] [--height H] [--tile-size PX] [--seed N]
    python main.py show [--width W] [--height H] [--seed N] [--reveal X Y ...]
"""
import argparse

from src.game.board import Board, make_rng
from src.game.game import GameConfig


def play(args: argparse.Namespace) -> None:
    """Open the pygame window."""
    from src.game.frontend import run

    config = GameConfig(
        board_width=args.width,
        board_height=args.height,
        tile_size=args.tile_size,
        canvas_width=max(640, args.width * args.tile_size),
        canvas_height=max(480, args.height * args.tile_size),
        fps=args.fps,
        seed=args.seed,
    )
    print(f"Playing {config.board_width}x{config.board_height} (seed: {config.seed})")
    run(config)


def show(args: argparse.Namespace) -> None:
    """Generate a board, apply reveals and print it."""
    config = GameConfig(
        board_width=args.width, board_height=args.height, seed=args.seed
    )
    board = Board.generate(config.board_config(), make_rng(config.seed))
    print(f"Board: {board.width}x{board.height} with {board.mine_count} mines")

    for x, y in args.reveal or []:
        revealed = board.reveal(x, y)
        print(f"Reveal ({x}, {y}): {revealed} tiles")

    print()
    print(board.render_ansi())


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Minesweeper")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play in a window")
    play_parser.add_argument("--width", type=int, default=10, help="Board columns")
    play_parser.add_argument("--height", type=int, default=10, help="Board rows")
    play_parser.add_argument(
        "--tile-size", type=int, default=32, help="Tile size in pixels"
    )
    play_parser.add_argument("--fps", type=int, default=60, help="Frames per second")
    play_parser.add_argument("--seed", type=int, default=None, help="Mine seed")

    # Show command
    show_parser = subparsers.add_parser("show", help="Print a board as text")
    show_parser.add_argument("--width", type=int, default=10, help="Board columns")
    show_parser.add_argument("--height", type=int, default=10, help="Board rows")
    show_parser.add_argument("--seed", type=int, default=None, help="Mine seed")
    show_parser.add_argument(
        "--reveal",
        type=int,
        nargs=2,
        action="append",
        metavar=("X", "Y"),
        help="Reveal a tile (repeatable)",
    )

    args = parser.parse_args()

    if args.command == "play":
        play(args)
    elif args.command == "show":
        show(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
