"""Capture/encode orchestration and its external process helpers."""
from __future__ import annotations

from .launcher import GameLauncher, LauncherCallbacks
from .process import PROCESS_NAMES, kill_processes, reveal_in_file_browser, run_process
from .service import MovieResult, MovieService, MovieState
from .thread import MovieThread

__all__ = [
    "PROCESS_NAMES",
    "GameLauncher",
    "LauncherCallbacks",
    "MovieResult",
    "MovieService",
    "MovieState",
    "MovieThread",
    "kill_processes",
    "reveal_in_file_browser",
    "run_process",
]
