# -*- coding: utf-8 -*-
"""
데모 영상(Movie) 설정 데이터 클래스 모듈.

Docstring 스타일: Google Style
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple


__all__ = ["DEFAULT_COMMANDS", "LaunchConfig", "MovieConfig"]


# 사용자 cfg 기본값 (UI에서 편집 가능)
DEFAULT_COMMANDS: Tuple[str, ...] = (
    "cl_draw_only_deathnotices 1",
    "cl_clock_correction 0",
    "mirv_fix playerAnimState 1",
    "mirv_streams record matPostprocessEnable 1",
    "mirv_streams record matDynamicTonemapping 1",
    "mirv_streams record matMotionBlurEnabled 0",
    "mirv_streams record matForceTonemapScale 0",
    "net_graph 0",
)


@dataclass(frozen=True)
class LaunchConfig:
    """게임 + HLAE 실행 설정값.

    코어는 이 값을 해석하지 않고 런처(외부 협력자)에 그대로 전달합니다.

    Attributes:
        game_exe_path: 게임 실행 파일 경로.
        hlae_exe_path: HLAE 실행 파일 경로.
        steam_exe_path: Steam 실행 파일 경로.
        width: 창 너비 (픽셀 단위).
        height: 창 높이 (픽셀 단위).
        fullscreen: 전체 화면 여부.
        launch_parameters: 추가 실행 인자 (그대로 전달).
        hlae_config_parent_folder: HLAE 설정 상위 폴더.
        enable_hlae_config_parent: 위 폴더 사용 여부.
        worldwide_enabled: 월드와이드 클라이언트 사용 여부.
    """

    game_exe_path: str = ""
    hlae_exe_path: str = ""
    steam_exe_path: str = ""
    width: int = 1920
    height: int = 1080
    fullscreen: bool = True
    launch_parameters: str = ""
    hlae_config_parent_folder: str = ""
    enable_hlae_config_parent: bool = False
    worldwide_enabled: bool = False


@dataclass(frozen=True)
class MovieConfig:
    """데모 녹화 + 인코딩 1회 실행에 필요한 설정값.

    한 번 생성된 뒤에는 변경되지 않습니다. 리스트 입력은 튜플로 정규화됩니다.

    Attributes:
        demo_path: 데모 파일 경로 (.vdm 스크립트가 옆에 생성됨).
        game_dir: ``cfg`` 폴더를 포함하는 게임 폴더.
        raw_files_destination: TGA/WAV 원본 파일이 저장될 상위 폴더.
        output_destination: 최종 영상이 저장될 폴더.
        output_filename: 확장자를 제외한 출력 파일 이름.
        start_tick: 녹화 시작 틱.
        end_tick: 녹화 종료 틱.
        frame_rate: 초당 프레임 수.
        ffmpeg_exe_path: FFmpeg 실행 파일 경로.
        virtualdub_dir: VirtualDub 폴더 (jobs 파일 위치 겸 작업 폴더).
        virtualdub_exe_path: VirtualDub 실행 파일 경로.
        video_codec: FFmpeg 비디오 코덱.
        video_quality: FFmpeg ``-qp`` 값.
        audio_codec: FFmpeg 오디오 코덱.
        audio_bitrate: FFmpeg 오디오 비트레이트 (kbps).
        ffmpeg_input_parameters: 입력 앞에 그대로 삽입되는 인자.
        ffmpeg_extra_parameters: 출력 앞에 그대로 삽입되는 인자.
        user_cfg: 사용자 콘솔 명령 목록.
        focus_steam_id: 카메라를 고정할 플레이어 (0이면 사용 안 함).
        blocked_steam_ids: 킬 알림을 숨길 플레이어 목록.
        highlight_steam_ids: 킬 알림을 강조할 플레이어 목록.
        deaths_notices_display_time: 킬 알림 표시 시간 (초).
        generate_raw_files: 게임을 실행해 원본 파일을 생성할지 여부.
        generate_video_file: 최종 영상을 인코딩할지 여부.
        use_virtualdub: True면 VirtualDub, False면 FFmpeg 사용.
        auto_close_game: 녹화 후 게임 자동 종료 여부.
        clean_up_raw_files: 인코딩 후 원본 파일 삭제 여부.
        open_in_explorer: 인코딩 후 파일 탐색기에서 결과 파일 선택 여부.
        launch: 게임 실행 설정.
    """

    demo_path: str
    game_dir: str
    raw_files_destination: str
    output_destination: str
    output_filename: str
    start_tick: int
    end_tick: int
    frame_rate: int = 60
    ffmpeg_exe_path: str = "ffmpeg"
    virtualdub_dir: str = ""
    virtualdub_exe_path: str = ""
    video_codec: str = "libx264"
    video_quality: int = 16
    audio_codec: str = "libmp3lame"
    audio_bitrate: int = 256
    ffmpeg_input_parameters: str = ""
    ffmpeg_extra_parameters: str = ""
    user_cfg: Tuple[str, ...] = DEFAULT_COMMANDS
    focus_steam_id: int = 0
    blocked_steam_ids: Tuple[int, ...] = ()
    highlight_steam_ids: Tuple[int, ...] = ()
    deaths_notices_display_time: float = 5
    generate_raw_files: bool = True
    generate_video_file: bool = True
    use_virtualdub: bool = False
    auto_close_game: bool = True
    clean_up_raw_files: bool = False
    open_in_explorer: bool = False
    launch: LaunchConfig = field(default_factory=LaunchConfig)

    def __post_init__(self) -> None:
        """입력값 검증 및 보정."""

        for name in ("user_cfg", "blocked_steam_ids", "highlight_steam_ids"):
            object.__setattr__(self, name, tuple(getattr(self, name)))

        if self.start_tick < 0:
            raise ValueError("start_tick must be >= 0")
        if self.start_tick >= self.end_tick:
            raise ValueError("start_tick must be lower than end_tick")
        if self.frame_rate <= 0:
            raise ValueError("frame_rate must be > 0")
        if self.focus_steam_id < 0:
            raise ValueError("focus_steam_id must be >= 0")
        for steam_id in self.blocked_steam_ids + self.highlight_steam_ids:
            if steam_id < 0:
                raise ValueError(f"player ids must be >= 0, got {steam_id}")
