"""File system helpers locating the capture, script and output files."""
from __future__ import annotations

import glob
import os
from dataclasses import dataclass
from typing import List, Optional

from .config import MovieConfig
from .errors import PreconditionError


__all__ = [
    "AUDIO_FILE_PATTERN",
    "FIRST_FRAME_NAME",
    "FRAME_EXT",
    "JOBS_FILE_NAME",
    "STREAM_NAME",
    "TAKE_PREFIX",
    "USER_CFG_NAME",
    "CaptureArtifacts",
    "escape_path",
    "first_frame_path",
    "frame_dir",
    "jobs_path",
    "last_audio_path",
    "last_take_dir",
    "list_frames",
    "output_path",
    "raw_root",
    "resolve_artifacts",
    "script_path",
    "user_cfg_path",
]


# HLAE naming conventions
TAKE_PREFIX = "take"
STREAM_NAME = "defaultNormal"
FRAME_EXT = "tga"
FIRST_FRAME_NAME = f"00000.{FRAME_EXT}"
AUDIO_FILE_PATTERN = "audio_*.wav"

USER_CFG_NAME = "demo_movie.cfg"
JOBS_FILE_NAME = "demo_movie.jobs"


def raw_root(config: MovieConfig) -> str:
    """Return the folder where HLAE writes every take for this movie."""
    return os.path.join(config.raw_files_destination, config.output_filename)


def last_take_dir(root: str) -> Optional[str]:
    """Return the lexicographically last ``take*`` folder inside *root*."""
    if not os.path.isdir(root):
        return None
    takes = sorted(
        name
        for name in os.listdir(root)
        if name.startswith(TAKE_PREFIX) and os.path.isdir(os.path.join(root, name))
    )
    if not takes:
        return None
    return os.path.join(root, takes[-1])


def frame_dir(take_dir: str) -> str:
    return os.path.join(take_dir, STREAM_NAME)


def first_frame_path(frames_dir: str) -> str:
    return os.path.join(frames_dir, FIRST_FRAME_NAME)


def list_frames(frames_dir: str) -> List[str]:
    """Return the frame images of *frames_dir* in playback order."""
    return sorted(glob.glob(os.path.join(frames_dir, f"*.{FRAME_EXT}")))


def last_audio_path(take_dir: str) -> Optional[str]:
    """Return the most recently created ``audio_*.wav`` of *take_dir*.

    HLAE suffixes the audio file name with random hex letters, so the newest
    file is picked by creation time rather than by name.
    """
    candidates = glob.glob(os.path.join(take_dir, AUDIO_FILE_PATTERN))
    if not candidates:
        return None
    return max(candidates, key=os.path.getctime)


def output_path(config: MovieConfig) -> str:
    extension = ".avi" if config.use_virtualdub else ".mp4"
    return os.path.join(config.output_destination, config.output_filename + extension)


def escape_path(path: str) -> str:
    """Double backslashes so *path* survives VDM and VirtualDub job text."""
    return path.replace("\\", "\\\\")


def script_path(demo_path: str) -> str:
    """Return the VDM path the game loads alongside *demo_path*."""
    return os.path.splitext(demo_path)[0] + ".vdm"


def user_cfg_path(game_dir: str) -> str:
    """Return the path of the cfg executed when the demo starts.

    Raises:
        PreconditionError: the game folder or its ``cfg`` folder is missing.
    """
    if not game_dir:
        raise PreconditionError("Unable to find the game folder.")
    cfg_dir = os.path.join(game_dir, "cfg")
    if not os.path.isdir(cfg_dir):
        raise PreconditionError("Unable to find a cfg folder within the game folder.")
    return os.path.join(cfg_dir, USER_CFG_NAME)


def jobs_path(virtualdub_dir: str) -> str:
    return os.path.join(virtualdub_dir, JOBS_FILE_NAME)


@dataclass(frozen=True)
class CaptureArtifacts:
    """Snapshot of the raw files HLAE produced for the last take.

    HLAE may still be writing while this is read, so resolve it once per
    pass and hand the instance down instead of querying the disk again.
    """

    take_dir: Optional[str]
    frame_dir: Optional[str]
    first_frame: Optional[str]
    frames: List[str]
    audio_path: Optional[str]

    @property
    def capture_started(self) -> bool:
        return self.first_frame is not None and os.path.isfile(self.first_frame)


def resolve_artifacts(config: MovieConfig) -> CaptureArtifacts:
    take = last_take_dir(raw_root(config))
    if take is None:
        return CaptureArtifacts(None, None, None, [], None)
    frames_dir = frame_dir(take)
    return CaptureArtifacts(
        take_dir=take,
        frame_dir=frames_dir,
        first_frame=first_frame_path(frames_dir),
        frames=list_frames(frames_dir),
        audio_path=last_audio_path(take),
    )
