"""Entry point for the flappy arcade game."""

from __future__ import annotations

import argparse
import logging
from dataclasses import replace

from flappy_game import (
    FlappyGame,
    GameConfig,
    KeyboardInput,
    SocketInput,
    SocketInputConfig,
)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the flappy arcade game.")
    parser.add_argument(
        "--seed",
        type=int,
        help="Optional random seed for deterministic obstacle gaps.",
    )
    parser.add_argument(
        "--fps",
        type=int,
        help="Override the render frame rate (simulation tick rate is unaffected).",
    )
    parser.add_argument(
        "--log-level",
        default="info",
        choices=("debug", "info", "warning", "error"),
        help="Logging verbosity (default: info).",
    )
    parser.add_argument(
        "--socket-input",
        action="store_true",
        help="Enable JSON-over-TCP command interface for external controllers.",
    )
    parser.add_argument(
        "--socket-host",
        help="Override socket input bind host (default: config value).",
    )
    parser.add_argument(
        "--socket-port",
        type=int,
        help="Override socket input port (default: config value).",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    config = GameConfig()
    if args.fps is not None:
        config = replace(config, target_fps=args.fps)

    socket_cfg: SocketInputConfig = config.socket_input
    socket_overrides = {}
    if args.socket_host:
        socket_overrides["host"] = args.socket_host
    if args.socket_port is not None:
        socket_overrides["port"] = args.socket_port

    if socket_overrides:
        socket_cfg = replace(socket_cfg, **socket_overrides)
        config = replace(config, socket_input=socket_cfg)

    input_provider = KeyboardInput()
    if args.socket_input:
        input_provider = SocketInput(base=input_provider, config=socket_cfg)

    game = FlappyGame(config=config, input_provider=input_provider, seed=args.seed)
    game.run()


if __name__ == "__main__":
    main()
