# -*- coding: utf-8 -*-
"""
데모 녹화 → 인코딩 → 정리 과정을 진행하는 오케스트레이터.

- 캡처: 사용자 cfg / VDM 파일 작성 후 런처로 게임 + HLAE 실행, 종료까지 대기.
- 검증: 첫 TGA 파일이 없으면 사용자가 중간에 종료한 것으로 보고 인코딩 생략.
- 인코딩: VirtualDub(jobs 파일) 또는 FFmpeg(인자 목록) 실행 후 종료까지 대기.
- 정리: 원본 파일 삭제, 파일 탐색기에서 결과 파일 선택.

Docstring 스타일: Google Style
"""
from __future__ import annotations

import logging
import os
import shutil
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple

from PyQt5 import QtCore

from ..core import MovieConfig, MovieError, resolve_artifacts
from ..core.paths import (
    TAKE_PREFIX,
    CaptureArtifacts,
    frame_dir,
    last_take_dir,
    output_path,
    raw_root,
    script_path,
    user_cfg_path,
)
from ..encoding import EncodeJob, build_ffmpeg_args, ffmpeg_command_line, select_encoder
from ..script import generate_script, generate_user_cfg
from .launcher import GameLauncher, LauncherCallbacks
from .process import PROCESS_NAMES, kill_processes, reveal_in_file_browser, run_process


__all__ = ["MovieResult", "MovieService", "MovieState"]

logger = logging.getLogger(__name__)


class MovieState(str, Enum):
    IDLE = "idle"
    CAPTURE_RUNNING = "capture_running"
    CAPTURE_DONE = "capture_done"
    ENCODING = "encoding"
    CLEANUP = "cleanup"
    TERMINAL = "terminal"


@dataclass(frozen=True)
class MovieResult:
    """1회 실행 결과.

    Attributes:
        state: 마지막 상태 (정상 종료 시 TERMINAL).
        output_path: 최종 영상 경로.
        exit_code: 인코더 종료 코드. 인코더를 실행하지 않았으면 None.
        aborted: 첫 프레임이 없어 인코딩을 생략했는지 여부.
    """

    state: MovieState
    output_path: str
    exit_code: Optional[int] = None
    aborted: bool = False


class MovieService(QtCore.QObject):
    """데모 1개에 대한 영상 생성 오케스트레이터.

    ``start()`` 는 외부 프로세스가 끝날 때까지 블로킹되므로 GUI에서는
    :class:`~demo_movie.recording.thread.MovieThread` 로 실행합니다.
    런처 콜백은 런처 쪽 쓰레드에서 호출될 수 있으며 시그널로만 전달합니다.

    Signals:
        sig_status(str): 진행 상태 메시지.
        sig_state(str): 상태 전이 (:class:`MovieState` 값).
        sig_hlae_started / sig_hlae_closed: HLAE 시작/종료.
        sig_game_started / sig_game_running / sig_game_closed: 게임 수명주기.
        sig_virtualdub_started / sig_virtualdub_closed: VirtualDub 시작/종료.
        sig_ffmpeg_started / sig_ffmpeg_closed: FFmpeg 시작/종료.
        sig_encoder_exited(int): 인코더 종료 코드 (흐름 제어에는 사용하지 않음).
    """

    sig_status = QtCore.pyqtSignal(str)
    sig_state = QtCore.pyqtSignal(str)

    sig_hlae_started = QtCore.pyqtSignal()
    sig_hlae_closed = QtCore.pyqtSignal()
    sig_game_started = QtCore.pyqtSignal()
    sig_game_running = QtCore.pyqtSignal()
    sig_game_closed = QtCore.pyqtSignal()

    sig_virtualdub_started = QtCore.pyqtSignal()
    sig_virtualdub_closed = QtCore.pyqtSignal()
    sig_ffmpeg_started = QtCore.pyqtSignal()
    sig_ffmpeg_closed = QtCore.pyqtSignal()
    sig_encoder_exited = QtCore.pyqtSignal(int)

    def __init__(
        self,
        cfg: MovieConfig,
        launcher: Optional[GameLauncher] = None,
        runner: Callable[[EncodeJob], int] = run_process,
        reveal: Callable[[str], None] = reveal_in_file_browser,
        parent: Optional[QtCore.QObject] = None,
    ) -> None:
        super().__init__(parent)
        self.cfg = cfg
        self.launcher = launcher
        self.runner = runner
        self.reveal = reveal
        self.encoder = select_encoder(cfg)
        self.state = MovieState.IDLE

    # ------------------------------ Control ------------------------------ #
    def start(self) -> MovieResult:
        """캡처 → 인코딩 → 정리를 순서대로 실행합니다.

        Returns:
            실행 결과.

        Raises:
            PreconditionError: 인코더 실행 전 필요한 파일/폴더가 없는 경우.
            MovieError: 원본 생성이 필요한데 런처가 없는 경우.
            OSError: 인코더 실행 파일을 시작하지 못한 경우.
        """
        if self.cfg.generate_raw_files:
            self._capture()
        else:
            # 게임이 막 종료된 것처럼 바로 인코딩 단계로 진행
            self._set_state(MovieState.CAPTURE_DONE)

        video_path = output_path(self.cfg)
        artifacts = resolve_artifacts(self.cfg)
        if not artifacts.capture_started:
            self.sig_status.emit("No frame captured, encoding skipped.")
            self._set_state(MovieState.TERMINAL)
            return MovieResult(self.state, video_path, aborted=True)

        if not self.cfg.generate_video_file:
            self._set_state(MovieState.TERMINAL)
            return MovieResult(self.state, video_path)

        try:
            exit_code = self._encode(artifacts)
        except (MovieError, OSError):
            self._set_state(MovieState.TERMINAL)
            raise

        self._cleanup(video_path)
        self._set_state(MovieState.TERMINAL)
        self.sig_status.emit(f"Done → {video_path}")
        return MovieResult(self.state, video_path, exit_code=exit_code)

    def cancel(self) -> None:
        """알려진 외부 프로세스를 모두 종료합니다 (여러 번 호출해도 안전)."""
        killed = kill_processes(PROCESS_NAMES)
        logger.info("Cancel requested, %d process(es) killed", killed)

    # ------------------------------ Queries ------------------------------ #
    def is_first_frame_present(self) -> bool:
        return resolve_artifacts(self.cfg).capture_started

    def delete_raw_directory(self) -> None:
        """마지막 take 폴더만 삭제합니다."""
        take = last_take_dir(raw_root(self.cfg))
        if take is not None and os.path.isdir(take):
            shutil.rmtree(take)

    def ffmpeg_command_line(self) -> str:
        """FFmpeg 명령줄 (표시용).

        캡처 전에는 HLAE가 만들 예상 경로를 대신 사용합니다.
        """
        artifacts = resolve_artifacts(self.cfg)
        take = artifacts.take_dir or os.path.join(
            raw_root(self.cfg), f"{TAKE_PREFIX}0000"
        )
        frames_dir = artifacts.frame_dir or frame_dir(take)
        audio = artifacts.audio_path or os.path.join(take, "audio.wav")
        args = build_ffmpeg_args(self.cfg, frames_dir, audio, output_path(self.cfg))
        return ffmpeg_command_line(self.cfg.ffmpeg_exe_path, args)

    # ------------------------------ Internals ---------------------------- #
    def _set_state(self, state: MovieState) -> None:
        self.state = state
        logger.debug("Movie state → %s", state.value)
        self.sig_state.emit(state.value)

    def _capture(self) -> None:
        if self.launcher is None:
            raise MovieError("A game launcher is required to generate raw files.")

        cfg_path = user_cfg_path(self.cfg.game_dir)
        vdm_path = script_path(self.cfg.demo_path)
        callbacks = LauncherCallbacks(
            on_hlae_started=self.sig_hlae_started.emit,
            on_game_started=self.sig_game_started.emit,
            on_game_running=self.sig_game_running.emit,
            on_game_closed=self.sig_game_closed.emit,
            on_hlae_closed=self.sig_hlae_closed.emit,
        )
        try:
            with open(cfg_path, "w", encoding="utf-8") as f:
                f.write(generate_user_cfg(self.cfg))
            with open(vdm_path, "w", encoding="utf-8") as f:
                f.write(generate_script(self.cfg))

            self._set_state(MovieState.CAPTURE_RUNNING)
            self.sig_status.emit("Recording... (waiting for the game to close)")
            self.launcher.watch_demo(self.cfg.launch, self.cfg.demo_path, callbacks)
        finally:
            # 1회용 파일
            for path in (vdm_path, cfg_path):
                if os.path.isfile(path):
                    os.remove(path)

        self._set_state(MovieState.CAPTURE_DONE)

    def _encoder_signals(self) -> Tuple[QtCore.pyqtBoundSignal, QtCore.pyqtBoundSignal]:
        if self.encoder.name == "virtualdub":
            return self.sig_virtualdub_started, self.sig_virtualdub_closed
        return self.sig_ffmpeg_started, self.sig_ffmpeg_closed

    def _encode(self, artifacts: CaptureArtifacts) -> int:
        self._set_state(MovieState.ENCODING)
        job = self.encoder.build_job(self.cfg, artifacts)

        started, closed = self._encoder_signals()
        self.sig_status.emit(
            f"Encoding {len(artifacts.frames)} frames with {self.encoder.name}..."
        )
        started.emit()
        try:
            exit_code = self.runner(job)
        finally:
            closed.emit()
        # 종료 코드는 알림만 하고 흐름에는 사용하지 않음
        self.sig_encoder_exited.emit(exit_code)
        return exit_code

    def _cleanup(self, video_path: str) -> None:
        self._set_state(MovieState.CLEANUP)
        if self.cfg.clean_up_raw_files:
            root = raw_root(self.cfg)
            if os.path.isdir(root):
                shutil.rmtree(root)
                logger.info("Removed raw files in %s", root)
        if self.cfg.open_in_explorer:
            self.reveal(video_path)
