"""Encoder integrations (VirtualDub job file, FFmpeg direct arguments)."""
from __future__ import annotations

from .encoders import (
    DirectArgsEncoder,
    EncodeJob,
    Encoder,
    JobFileEncoder,
    select_encoder,
)
from .ffmpeg import build_ffmpeg_args, ffmpeg_command_line
from .virtualdub import build_job_script

__all__ = [
    "DirectArgsEncoder",
    "EncodeJob",
    "Encoder",
    "JobFileEncoder",
    "build_ffmpeg_args",
    "build_job_script",
    "ffmpeg_command_line",
    "select_encoder",
]
