# -*- coding: utf-8 -*-
"""
VDM 스크립트 / 사용자 cfg 생성 모듈.

HLAE가 데모 재생 중 틱 단위로 실행할 명령을 순서대로 만듭니다.
모든 함수는 설정값만으로 결과를 계산하며 파일 입출력은 하지 않습니다.

Docstring 스타일: Google Style
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from ..core.config import MovieConfig
from ..core.paths import STREAM_NAME, USER_CFG_NAME, escape_path, raw_root


__all__ = [
    "END_DELAY_TICKS",
    "EXEC_COMMANDS_TICK",
    "EXEC_USER_CFG_TICK",
    "GOTO_TICK",
    "MANDATORY_COMMANDS",
    "PLAY_COMMANDS",
    "PRE_ROLL_TICKS",
    "SKIP_AHEAD",
    "STOP_PLAYBACK",
    "ScriptAction",
    "generate_actions",
    "generate_script",
    "generate_user_cfg",
    "render_script",
    "skip_target_tick",
]


# 사용자 cfg 실행 틱
EXEC_USER_CFG_TICK = 50
# 사용자 cfg가 적용된 뒤 필수 명령 실행 틱
EXEC_COMMANDS_TICK = EXEC_USER_CFG_TICK + 64
# 녹화 시작 직전으로 빨리 감기하는 틱
GOTO_TICK = EXEC_COMMANDS_TICK + 64
# 월드 로딩을 위해 시작 틱보다 앞서 재생할 틱 수
PRE_ROLL_TICKS = 256
# 녹화 종료 후 게임 종료/재생 중지까지의 틱 수
END_DELAY_TICKS = 128

PLAY_COMMANDS = "PlayCommands"
SKIP_AHEAD = "SkipAhead"
STOP_PLAYBACK = "StopPlayback"

# 정상 녹화를 위해 반드시 필요한 명령
MANDATORY_COMMANDS = (
    "sv_cheats 1",
    "host_timescale 0",
    "mirv_snd_timescale 1",  # startmovie 오디오 싱크 문제 보정
    "mirv_gameoverlay enable 0",
)

_MAIN_TEMPLATE = "demoactions\n{{\n{actions}}}\n"

_ACTION_TEMPLATES = {
    PLAY_COMMANDS: (
        '\t"{index}"\n'
        "\t{{\n"
        '\t\tfactory "PlayCommands"\n'
        '\t\tname "action{index}"\n'
        '\t\tstarttick "{tick}"\n'
        '\t\tcommands "{command}"\n'
        "\t}}\n"
    ),
    SKIP_AHEAD: (
        '\t"{index}"\n'
        "\t{{\n"
        '\t\tfactory "SkipAhead"\n'
        '\t\tname "skip"\n'
        '\t\tstarttick "{tick}"\n'
        '\t\tskiptotick "{skip_to_tick}"\n'
        "\t}}\n"
    ),
    STOP_PLAYBACK: (
        '\t"{index}"\n'
        "\t{{\n"
        '\t\tfactory "StopPlayback"\n'
        '\t\tname "stop"\n'
        '\t\tstarttick "{tick}"\n'
        "\t}}\n"
    ),
}


@dataclass(frozen=True)
class ScriptAction:
    """VDM 액션 하나.

    Attributes:
        index: 1부터 시작하는 순번 (생성 순서대로 증가).
        tick: 액션이 실행될 틱. 앞 액션보다 작을 수 있음.
        command: 콘솔 명령 텍스트 (PlayCommands 외에는 빈 문자열).
        kind: 액션 종류 (PlayCommands / SkipAhead / StopPlayback).
        skip_to_tick: SkipAhead 대상 틱.
    """

    index: int
    tick: int
    command: str
    kind: str = PLAY_COMMANDS
    skip_to_tick: Optional[int] = None

    def render(self) -> str:
        return _ACTION_TEMPLATES[self.kind].format(
            index=self.index,
            tick=self.tick,
            command=self.command,
            skip_to_tick=self.skip_to_tick,
        )


class _ActionList:
    """순번을 자동으로 매기며 액션을 쌓는 빌더."""

    def __init__(self) -> None:
        self.actions: List[ScriptAction] = []

    def add(
        self,
        tick: int,
        command: str = "",
        kind: str = PLAY_COMMANDS,
        skip_to_tick: Optional[int] = None,
    ) -> None:
        index = len(self.actions) + 1
        self.actions.append(ScriptAction(index, tick, command, kind, skip_to_tick))


def skip_target_tick(start_tick: int) -> int:
    """시작 틱보다 ``PRE_ROLL_TICKS`` 앞선 틱을 반환합니다 (최소 1)."""
    return max(1, start_tick - PRE_ROLL_TICKS)


def generate_actions(config: MovieConfig) -> List[ScriptAction]:
    """설정값으로부터 VDM 액션 목록을 생성합니다.

    Args:
        config: 영상 생성 설정.

    Returns:
        순번 1..N 의 액션 목록.
    """
    builder = _ActionList()

    # 1. 사용자 cfg 실행
    builder.add(EXEC_USER_CFG_TICK, f"exec {USER_CFG_NAME}")

    # 2. 필수 명령 (사용자 cfg가 적용된 뒤)
    for command in MANDATORY_COMMANDS:
        builder.add(EXEC_COMMANDS_TICK, command)

    # 3. 설정값에 따른 명령, VDM 안에서는 따옴표 이스케이프 필요
    builder.add(EXEC_COMMANDS_TICK, f"host_framerate {config.frame_rate}")
    builder.add(
        EXEC_COMMANDS_TICK,
        f'mirv_streams record name \\"{escape_path(raw_root(config))}\\"',
    )

    # 4. 월드가 모두 로딩되도록 시작 틱보다 앞으로 이동
    builder.add(
        GOTO_TICK,
        kind=SKIP_AHEAD,
        skip_to_tick=skip_target_tick(config.start_tick),
    )

    # 5. 카메라 고정 + 킬 알림 설정
    options_tick = GOTO_TICK + 1
    if config.focus_steam_id != 0:
        builder.add(options_tick, f"spec_lock_to_accountid {config.focus_steam_id}")
    builder.add(
        options_tick,
        f"mirv_deathmsg lifetime {config.deaths_notices_display_time}",
    )
    # 로컬 플레이어 강조 없음 (필터 중 가장 먼저 와야 함)
    builder.add(options_tick, "mirv_deathmsg filter attackerIsLocal=0 victimIsLocal=0")
    for steam_id in config.blocked_steam_ids:
        builder.add(
            options_tick,
            f"mirv_deathmsg filter add attackerMatch=x{steam_id} block=1",
        )
    for steam_id in config.highlight_steam_ids:
        builder.add(
            options_tick,
            f"mirv_deathmsg filter add attackerMatch=x{steam_id} attackerIsLocal=1",
        )

    # 6. 녹화 시작: 스트림 등록과 시작을 같은 틱에 실행
    builder.add(
        config.start_tick,
        f"mirv_streams add normal {STREAM_NAME}; mirv_streams record start",
    )

    # 7. 녹화 종료
    builder.add(config.end_tick, "mirv_streams record end")

    # 8. 게임 종료 또는 재생 중지
    close_tick = config.end_tick + END_DELAY_TICKS
    if config.auto_close_game:
        builder.add(close_tick, "quit")
    else:
        builder.add(close_tick, kind=STOP_PLAYBACK)

    return builder.actions


def render_script(actions: List[ScriptAction]) -> str:
    return _MAIN_TEMPLATE.format(actions="".join(a.render() for a in actions))


def generate_script(config: MovieConfig) -> str:
    """VDM 파일 내용을 반환합니다."""
    return render_script(generate_actions(config))


def generate_user_cfg(config: MovieConfig) -> str:
    """사용자 cfg 파일 내용을 반환합니다 (명령을 줄바꿈으로 연결)."""
    return "\n".join(config.user_cfg)
