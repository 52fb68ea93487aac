"""Flappy arcade game package."""

from .config import ConfigurationError, GameConfig, ObstacleConfig, PhysicsConfig, SocketInputConfig, WorldConfig
from .game import FlappyGame, Renderer
from .input import CommandSource, KeyboardInput, SocketInput
from .observation import build_observation
from .simulation import Command, Simulation, SimulationDriver
from .world import Mode, Snapshot, WorldState

__all__ = [
    "FlappyGame",
    "Renderer",
    "GameConfig",
    "WorldConfig",
    "PhysicsConfig",
    "ObstacleConfig",
    "SocketInputConfig",
    "ConfigurationError",
    "Simulation",
    "SimulationDriver",
    "Command",
    "Mode",
    "Snapshot",
    "WorldState",
    "CommandSource",
    "KeyboardInput",
    "SocketInput",
    "build_observation",
]
