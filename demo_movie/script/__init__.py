"""Generation of the tick-scheduled VDM script and the user cfg."""
from __future__ import annotations

from .vdm import (
    MANDATORY_COMMANDS,
    ScriptAction,
    generate_actions,
    generate_script,
    generate_user_cfg,
    render_script,
    skip_target_tick,
)

__all__ = [
    "MANDATORY_COMMANDS",
    "ScriptAction",
    "generate_actions",
    "generate_script",
    "generate_user_cfg",
    "render_script",
    "skip_target_tick",
]
