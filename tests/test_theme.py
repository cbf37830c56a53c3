"""Tests for the time label colours."""

from core.session_controller import SessionSnapshot
from domain.models import Phase
from ui.theme import BREAK_BG, IDLE_BG, WORK_BG, time_background


def _snap(phase, running=False, suspended=False):
    return SessionSnapshot(
        phase=phase, remaining_sec=0, is_running=running, is_suspended=suspended, break_count=0
    )


def test_running_phases_use_phase_colour():
    assert time_background(_snap(Phase.WORK, running=True)) == WORK_BG
    assert time_background(_snap(Phase.SHORT_BREAK, running=True)) == BREAK_BG
    assert time_background(_snap(Phase.LONG_BREAK, running=True)) == BREAK_BG


def test_idle_and_suspended_are_black():
    assert time_background(_snap(Phase.WORK)) == IDLE_BG
    assert time_background(_snap(Phase.SHORT_BREAK, suspended=True)) == IDLE_BG


def test_finished_phase_keeps_colour_while_advance_pending():
    assert time_background(_snap(Phase.WORK), pending_advance=True) == WORK_BG
    assert time_background(_snap(Phase.LONG_BREAK), pending_advance=True) == BREAK_BG
