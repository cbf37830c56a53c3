# -*- coding: utf-8 -*-

from core.session_controller import SessionSnapshot

WORK_BG = "#90EE90"  # light green
BREAK_BG = "#40E0D0"  # turquoise
IDLE_BG = "#000000"
TIME_FG = "#FFFFFF"


def time_background(snap: SessionSnapshot, pending_advance: bool = False) -> str:
    # the finished phase keeps its colour until the next one starts
    if snap.is_running or pending_advance:
        return BREAK_BG if snap.phase.is_break else WORK_BG
    return IDLE_BG
