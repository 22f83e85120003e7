"""Executable entrypoint for Neon Snake."""

from __future__ import annotations

from pathlib import Path
import argparse
import logging

from .game import NeonSnakeGame
from .settings import GameVariant
from .utils import DATA_DIR


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Neon Snake arcade game")
    parser.add_argument(
        "--variant",
        choices=[variant.value for variant in GameVariant],
        help="Game variant to play (remembered for next time)",
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=DATA_DIR,
        help="Directory for settings and high scores",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Launch the game."""
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    root = Path(__file__).resolve().parents[2]
    variant = GameVariant(args.variant) if args.variant else None
    NeonSnakeGame(root=root, data_dir=args.data_dir, variant=variant).run()


if __name__ == "__main__":
    main()
