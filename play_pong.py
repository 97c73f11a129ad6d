#!/usr/bin/env python3
"""
Main script to launch Wrap Pong with PyGame graphical interface
"""

import argparse
import logging

from wrap_pong.core.actions import KeyStateInput
from wrap_pong.core.game_engine import Game, run_headless
from wrap_pong.core.render import RecordingRenderer
from wrap_pong.gui.game_app import main as run_gui
from wrap_pong.utils.config import game_config, load_config_from_file
from wrap_pong.utils.keyboard_layout import (
    auto_configure_layout,
    list_available_layouts,
    show_layout_help,
)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Two-player pong with screen wrap-around")
    parser.add_argument(
        "--layout",
        type=str,
        choices=list(list_available_layouts()),
        default=None,
        help="Keyboard layout (detected from the locale by default)",
    )
    parser.add_argument("--config", type=str, default=None, help="JSON configuration file")
    parser.add_argument("--fps", type=int, default=None, help="Target frames per second")
    parser.add_argument(
        "--headless",
        type=int,
        default=0,
        metavar="FRAMES",
        help="Run FRAMES frames without a window and print the final state",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    if args.config and not load_config_from_file(args.config):
        print(f"Could not load configuration from {args.config}, using defaults")
    if args.fps:
        game_config.FPS = args.fps
    if args.layout:
        game_config.KEYBOARD_LAYOUT = args.layout
    else:
        auto_configure_layout()

    if args.headless:
        game = Game(KeyStateInput(), RecordingRenderer())
        result = run_headless(game, args.headless, 1.0 / game_config.FPS)
        print(f"Events: {result['events']}")
        print(f"Final state: {result['game_state']}")
        return

    print("=== WRAP PONG ===")
    print()
    print(show_layout_help())
    print("  R: Restart")
    print("  ESC: Quit")
    print()
    run_gui()


if __name__ == "__main__":
    main()
