"""Core configuration, errors and path helpers for movie generation."""
from __future__ import annotations

from .config import DEFAULT_COMMANDS, LaunchConfig, MovieConfig
from .errors import MovieError, PreconditionError
from .paths import (
    CaptureArtifacts,
    escape_path,
    output_path,
    raw_root,
    resolve_artifacts,
    script_path,
    user_cfg_path,
)

__all__ = [
    "DEFAULT_COMMANDS",
    "CaptureArtifacts",
    "LaunchConfig",
    "MovieConfig",
    "MovieError",
    "PreconditionError",
    "escape_path",
    "output_path",
    "raw_root",
    "resolve_artifacts",
    "script_path",
    "user_cfg_path",
]
