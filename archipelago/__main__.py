"""Entry point for ``python -m archipelago``.

Loads the default YAML config, builds a grid session, and opens a Pygame
window for drawing islands and lakes.
"""

from __future__ import annotations

import argparse
import logging
import pathlib

from archipelago.session.config import SessionConfig
from archipelago.session.session import GridSession
from archipelago.ui.pygame_client import PygameRenderer

_DEFAULT_CONFIG = (
    pathlib.Path(__file__).resolve().parent.parent / "config" / "default.yaml"
)


def main() -> None:
    """Parse CLI args, create session, launch renderer."""
    parser = argparse.ArgumentParser(
        prog="archipelago",
        description="Archipelago - count islands and lakes on a land/water grid",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=pathlib.Path,
        default=_DEFAULT_CONFIG,
        help="Path to YAML config file (default: config/default.yaml)",
    )
    parser.add_argument(
        "--cell-size",
        type=int,
        default=None,
        help="Pixel size per grid cell (default: from config)",
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=None,
        help="Target frames per second (default: from config)",
    )
    parser.add_argument(
        "--diagonal",
        action="store_true",
        help="Start with diagonal land adjacency enabled",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
    )

    config = SessionConfig.from_yaml(args.config)
    if args.diagonal:
        config.include_diagonal = True
    session = GridSession(config=config)

    renderer = PygameRenderer(
        session=session,
        cell_size=args.cell_size or config.cell_size,
    )
    renderer.run(fps=args.fps or config.fps)


if __name__ == "__main__":
    main()
