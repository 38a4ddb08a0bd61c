"""FFmpeg command line construction."""
from __future__ import annotations

import os
import shlex
from typing import List

from ..core.config import MovieConfig
from ..core.paths import FRAME_EXT

__all__ = ["FRAME_PATTERN", "build_ffmpeg_args", "ffmpeg_command_line"]


FRAME_PATTERN = f"%05d.{FRAME_EXT}"


def build_ffmpeg_args(
    config: MovieConfig, frames_dir: str, audio_path: str, output: str
) -> List[str]:
    """Return the FFmpeg argument list for encoding a captured take.

    FFmpeg is sensitive to argument position, so the order is fixed. The raw
    input/extra parameters are split into tokens and inserted as given.
    """
    args = ["-y", "-f", "image2", "-framerate", str(config.frame_rate)]
    if config.ffmpeg_input_parameters:
        args.extend(shlex.split(config.ffmpeg_input_parameters))

    args += ["-i", os.path.join(frames_dir, FRAME_PATTERN)]
    args += ["-i", audio_path]
    args += ["-vcodec", config.video_codec]
    args += ["-qp", str(config.video_quality)]
    args += ["-acodec", config.audio_codec]
    args += ["-b:a", f"{config.audio_bitrate}K"]
    if config.ffmpeg_extra_parameters:
        args.extend(shlex.split(config.ffmpeg_extra_parameters))

    args.append(output)
    return args


def ffmpeg_command_line(executable: str, args: List[str]) -> str:
    """Return a printable shell command for *executable* and *args*."""
    return shlex.join([executable, *args])
