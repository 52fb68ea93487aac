"""Forward typed commands to a running game's socket input."""

from __future__ import annotations

import argparse
import json
import socket
import sys

KEYS = {
    "f": "flap",
    "p": "pause",
    "r": "restart",
}


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Send flap/pause/restart commands to the game over TCP.")
    parser.add_argument("--game-host", default="127.0.0.1", help="Game socket host.")
    parser.add_argument("--game-port", type=int, default=4790, help="Game socket port.")
    parser.add_argument("--verbose", action="store_true", help="Print each payload sent to the game.")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    print(f"[INFO] Connecting to game socket {args.game_host}:{args.game_port} ...")
    try:
        conn = socket.create_connection((args.game_host, args.game_port), timeout=5.0)
    except OSError as exc:
        print(f"[WARN] Could not connect: {exc}", file=sys.stderr)
        sys.exit(1)

    print("[INFO] Type f (flap), p (pause) or r (restart) and press Enter. Ctrl+D to stop.")
    with conn:
        for line in sys.stdin:
            for ch in line.strip().lower():
                name = KEYS.get(ch)
                if name is None:
                    continue
                payload = json.dumps({"command": name})
                conn.sendall(payload.encode("utf-8") + b"\n")
                if args.verbose:
                    print(f"[SEND] {payload}")


if __name__ == "__main__":
    main()
