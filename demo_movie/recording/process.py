"""External process helpers: run an encode job, kill by name, reveal a file."""
from __future__ import annotations

import logging
import os
import subprocess
import sys
from typing import Iterable

import psutil

from ..encoding.encoders import EncodeJob

__all__ = [
    "PROCESS_NAMES",
    "kill_processes",
    "reveal_in_file_browser",
    "run_process",
]

logger = logging.getLogger(__name__)


# game, capture helper and both encoders
PROCESS_NAMES = ("csgo", "HLAE", "ffmpeg", "Veedub64", "VirtualDub")


def run_process(job: EncodeJob) -> int:
    """Start *job* and block until it exits, returning the raw exit code."""
    cmd = [job.executable, *job.args]
    logger.info("Starting %s", cmd)
    proc = subprocess.Popen(cmd, cwd=job.cwd)
    code = proc.wait()
    logger.info("%s exited with code %s", job.executable, code)
    return code


def _base_name(name: str) -> str:
    return os.path.splitext(name)[0].lower()


def kill_processes(names: Iterable[str] = PROCESS_NAMES) -> int:
    """Kill every running process whose name is in *names*.

    Matching ignores case and an ``.exe`` suffix. Processes that exit or
    refuse access while being killed are skipped. Returns the kill count.
    """
    wanted = {_base_name(n) for n in names}
    killed = 0
    for proc in psutil.process_iter(["name"]):
        name = proc.info.get("name") or ""
        if _base_name(name) not in wanted:
            continue
        try:
            proc.kill()
            killed += 1
            logger.info("Killed %s (pid %s)", name, proc.pid)
        except (psutil.NoSuchProcess, psutil.AccessDenied) as exc:
            logger.debug("Could not kill %s: %s", name, exc)
    return killed


def reveal_in_file_browser(path: str) -> None:
    """Open the platform file browser with *path* selected."""
    if sys.platform.startswith("win"):
        subprocess.Popen(["explorer.exe", f"/select,{os.path.normpath(path)}"])
    elif sys.platform == "darwin":
        subprocess.Popen(["open", "-R", path])
    else:
        # xdg-open cannot select a file, open its folder instead
        subprocess.Popen(["xdg-open", os.path.dirname(os.path.abspath(path))])
