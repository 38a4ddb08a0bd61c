"""Record a game demo through HLAE and encode the capture into a video."""
from __future__ import annotations

from .core import (
    DEFAULT_COMMANDS,
    LaunchConfig,
    MovieConfig,
    MovieError,
    PreconditionError,
    resolve_artifacts,
)
from .encoding import build_ffmpeg_args, build_job_script, select_encoder
from .script import generate_actions, generate_script, generate_user_cfg

__all__ = [
    "DEFAULT_COMMANDS",
    "LaunchConfig",
    "MovieConfig",
    "MovieError",
    "PreconditionError",
    "build_ffmpeg_args",
    "build_job_script",
    "generate_actions",
    "generate_script",
    "generate_user_cfg",
    "resolve_artifacts",
    "select_encoder",
    "MovieService",
    "MovieState",
    "MovieResult",
    "MovieThread",
]


def __getattr__(name: str):  # pragma: no cover - thin lazy loader
    if name in {"MovieService", "MovieState", "MovieResult", "MovieThread"}:
        from . import recording

        return getattr(recording, name)
    raise AttributeError(name)
