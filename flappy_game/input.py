"""Input sources that turn raw events into simulation commands."""

from __future__ import annotations

import json
import logging
import socket
import threading
from collections import deque
from typing import Deque, Iterable, Optional, Protocol

import pygame

from .config import SocketInputConfig
from .simulation import Command

logger = logging.getLogger(__name__)

_COMMAND_NAMES = {command.value: command for command in Command}


class CommandSource(Protocol):
    """Interface for supplying player commands to the game loop."""

    def poll(self, events: Iterable[pygame.event.Event]) -> list[Command]:
        """Return commands produced since the previous poll, oldest first."""


class KeyboardInput(CommandSource):
    """Default keyboard controller (Space/Up flap, P pause, R restart)."""

    bindings = {
        pygame.K_SPACE: Command.FLAP,
        pygame.K_UP: Command.FLAP,
        pygame.K_p: Command.TOGGLE_PAUSE,
        pygame.K_r: Command.RESTART,
    }

    def poll(self, events: Iterable[pygame.event.Event]) -> list[Command]:
        commands: list[Command] = []
        for event in events:
            if event.type != pygame.KEYDOWN:
                continue
            command = self.bindings.get(event.key)
            if command is not None:
                commands.append(command)
        return commands


def parse_command_line(raw: bytes) -> list[Command]:
    """Decode one JSON control message into zero or more commands.

    Accepts ``{"command": "flap"}`` or boolean flags such as
    ``{"flap": true, "restart": true}``. Anything malformed yields nothing.
    """
    raw = raw.strip()
    if not raw:
        return []
    try:
        payload = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError):
        return []
    if not isinstance(payload, dict):
        return []

    commands: list[Command] = []
    name = payload.get("command")
    if isinstance(name, str) and name.lower() in _COMMAND_NAMES:
        commands.append(_COMMAND_NAMES[name.lower()])
    # Flags are applied in a fixed order: restart first so a flap in the same
    # message lands on the fresh world.
    for key in ("restart", "pause", "flap"):
        if payload.get(key) is True:
            commands.append(_COMMAND_NAMES[key])
    return commands


class SocketInput(CommandSource):
    """Listens for JSON control messages over TCP alongside a base source."""

    def __init__(
        self,
        base: Optional[CommandSource] = None,
        config: Optional[SocketInputConfig] = None,
    ) -> None:
        self.base = base or KeyboardInput()
        self.cfg = config or SocketInputConfig()
        self._lock = threading.Lock()
        self._queue: Deque[Command] = deque()
        self._running = threading.Event()
        self._running.set()
        self._bound = threading.Event()
        self.address: Optional[tuple[str, int]] = None
        self._thread = threading.Thread(target=self._run_server, name="SocketInput", daemon=True)
        self._thread.start()

    def poll(self, events: Iterable[pygame.event.Event]) -> list[Command]:
        commands = self.base.poll(events)
        with self._lock:
            commands.extend(self._queue)
            self._queue.clear()
        return commands

    def wait_until_bound(self, timeout: float = 2.0) -> bool:
        return self._bound.wait(timeout)

    def shutdown(self) -> None:
        self._running.clear()
        if self._thread.is_alive():
            self._thread.join(timeout=1.5)
        if hasattr(self.base, "shutdown"):
            self.base.shutdown()  # type: ignore[attr-defined]

    def _run_server(self) -> None:
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as server:
            server.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            try:
                server.bind((self.cfg.host, self.cfg.port))
                server.listen(self.cfg.backlog)
                server.settimeout(0.2)
            except OSError as exc:
                logger.warning("Socket input disabled: cannot bind %s:%s (%s)", self.cfg.host, self.cfg.port, exc)
                return

            self.address = server.getsockname()
            self._bound.set()
            logger.info("Socket input listening on %s:%s", *self.address)
            while self._running.is_set():
                try:
                    client, peer = server.accept()
                    client.settimeout(self.cfg.read_timeout)
                except socket.timeout:
                    continue
                except OSError:
                    break
                logger.debug("Socket input client connected from %s:%s", *peer)
                threading.Thread(
                    target=self._handle_client,
                    args=(client,),
                    daemon=True,
                ).start()

    def _handle_client(self, client: socket.socket) -> None:
        with client:
            buffer = bytearray()
            while self._running.is_set():
                try:
                    data = client.recv(4096)
                except socket.timeout:
                    continue
                except OSError:
                    break
                if not data:
                    break
                buffer.extend(data)
                while b"\n" in buffer:
                    line, _, remainder = buffer.partition(b"\n")
                    buffer = bytearray(remainder)
                    self._process_line(bytes(line))

    def _process_line(self, raw: bytes) -> None:
        commands = parse_command_line(raw)
        if not commands:
            return
        with self._lock:
            self._queue.extend(commands)
