"""The two encoder integrations and their shared job contract."""
from __future__ import annotations

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional

from ..core.config import MovieConfig
from ..core.errors import PreconditionError
from ..core.paths import JOBS_FILE_NAME, CaptureArtifacts, jobs_path, output_path
from .ffmpeg import build_ffmpeg_args
from .virtualdub import build_job_script

__all__ = [
    "DirectArgsEncoder",
    "EncodeJob",
    "Encoder",
    "JobFileEncoder",
    "select_encoder",
]


@dataclass(frozen=True)
class EncodeJob:
    """One encoder invocation."""

    executable: str
    args: List[str]
    cwd: Optional[str] = None


class Encoder(ABC):
    """Turns captured artifacts into an :class:`EncodeJob`.

    Subclasses check their own preconditions and raise
    :class:`PreconditionError` before any process is started.
    """

    name = ""

    @abstractmethod
    def build_job(self, config: MovieConfig, artifacts: CaptureArtifacts) -> EncodeJob:
        """Checks preconditions and returns the job to run."""


class JobFileEncoder(Encoder):
    """VirtualDub: writes a job file, then runs it in batch mode."""

    name = "virtualdub"

    def build_job(self, config: MovieConfig, artifacts: CaptureArtifacts) -> EncodeJob:
        frames_dir = artifacts.frame_dir
        if frames_dir is None or not os.path.isdir(frames_dir):
            raise PreconditionError("Directory containing TGA files does not exist.")
        if not artifacts.frames:
            raise PreconditionError("No TGA files found.")

        video_path = output_path(config)
        if not os.path.isdir(os.path.dirname(video_path) or "."):
            raise PreconditionError("Output directory does not exist.")

        if artifacts.first_frame is None or not os.path.isfile(artifacts.first_frame):
            raise PreconditionError("TGA file 00000.tga not found.")
        if artifacts.audio_path is None or not os.path.isfile(artifacts.audio_path):
            raise PreconditionError("WAV file not found.")
        if not os.path.isdir(config.virtualdub_dir):
            raise PreconditionError("VirtualDub directory not found.")

        script = build_job_script(
            artifacts.first_frame,
            artifacts.audio_path,
            config.frame_rate,
            len(artifacts.frames),
            video_path,
        )
        with open(jobs_path(config.virtualdub_dir), "w", encoding="utf-8") as f:
            f.write(script)

        return EncodeJob(
            executable=config.virtualdub_exe_path,
            args=["/s", JOBS_FILE_NAME, "/x"],
            cwd=config.virtualdub_dir,
        )


class DirectArgsEncoder(Encoder):
    """FFmpeg: launched directly with a positional argument list."""

    name = "ffmpeg"

    def build_job(self, config: MovieConfig, artifacts: CaptureArtifacts) -> EncodeJob:
        if artifacts.frame_dir is None:
            raise PreconditionError("Directory containing TGA files does not exist.")
        if artifacts.audio_path is None:
            raise PreconditionError("WAV file not found.")
        args = build_ffmpeg_args(
            config, artifacts.frame_dir, artifacts.audio_path, output_path(config)
        )
        return EncodeJob(executable=config.ffmpeg_exe_path, args=args)


def select_encoder(config: MovieConfig) -> Encoder:
    return JobFileEncoder() if config.use_virtualdub else DirectArgsEncoder()
