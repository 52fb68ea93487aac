"""Run the simulation without a window and report scores for a simple gap-following policy."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import numpy as np

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from flappy_game import Command, GameConfig, Simulation, build_observation


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Headless rollouts of the flappy simulation.")
    parser.add_argument("--episodes", type=int, default=10, help="Number of lives to play.")
    parser.add_argument("--max-ticks", type=int, default=20_000, help="Tick cap per episode.")
    parser.add_argument("--seed", type=int, default=0, help="Obstacle seed.")
    parser.add_argument("--slack", type=float, default=20.0, help="Pixels below the gap centre before flapping.")
    parser.add_argument("--verbose", action="store_true", help="Print every episode, not just the summary.")
    return parser.parse_args()


def wants_flap(obs: np.ndarray, config: GameConfig, slack: float) -> bool:
    floor = config.world.playable_height
    size = config.physics.body_size
    body_centre = obs[0] * (floor - size) + size / 2.0
    gap_centre = obs[4] * floor
    return bool(obs[1] >= 0.0 and body_centre > gap_centre + slack)


def play_episode(sim: Simulation, max_ticks: int, slack: float) -> tuple[int, int]:
    sim.apply(Command.RESTART)
    for _ in range(max_ticks):
        obs = build_observation(sim.snapshot(), sim.config)
        if wants_flap(obs, sim.config, slack):
            sim.apply(Command.FLAP)
        sim.step()
        if sim.snapshot().game_over:
            break
    snap = sim.snapshot()
    return snap.score, snap.ticks


def main() -> None:
    args = parse_args()
    sim = Simulation(GameConfig(), seed=args.seed)

    scores = []
    for episode in range(args.episodes):
        score, ticks = play_episode(sim, args.max_ticks, args.slack)
        scores.append(score)
        if args.verbose:
            print(f"  episode {episode:3d}: score={score:4d} ticks={ticks}")

    results = np.asarray(scores, dtype=np.int64)
    print(f"Episodes: {len(results)}")
    print(f"Score mean {results.mean():.2f} ± {results.std():.2f}, max {results.max()}")
    print(f"Best score this session: {sim.state.best_score}")


if __name__ == "__main__":
    main()
