"""Contract of the external game + HLAE launcher."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Protocol

from ..core.config import LaunchConfig

__all__ = ["GameLauncher", "LauncherCallbacks"]


def _noop() -> None:
    return None


@dataclass
class LauncherCallbacks:
    """Lifecycle hooks the launcher calls, possibly from its own thread."""

    on_hlae_started: Callable[[], None] = _noop
    on_game_started: Callable[[], None] = _noop
    on_game_running: Callable[[], None] = _noop
    on_game_closed: Callable[[], None] = _noop
    on_hlae_closed: Callable[[], None] = _noop


class GameLauncher(Protocol):
    def watch_demo(
        self, launch: LaunchConfig, demo_path: str, callbacks: LauncherCallbacks
    ) -> None:
        """Start the game through HLAE on *demo_path* and block until it closes."""
        ...
