"""Shared test fixtures.

Keeps the application logger out of the real user log directory and
provides a manual scheduler standing in for Tk.after / Tk.after_cancel.
"""

from __future__ import annotations

import logging
import logging.handlers
from unittest.mock import patch

import pytest

import utils.logger as logger_mod
from core.session_controller import SessionController
from domain.models import SessionConfig
from services.timer_service import TimerService


def _drop_handlers():
    logger_mod._logger = None
    logger = logging.getLogger("pomodoro_timer")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        if isinstance(handler, logging.handlers.RotatingFileHandler):
            handler.close()


@pytest.fixture(autouse=True)
def isolated_logger(tmp_path):
    """Point the logger at tmp_path and reset the singleton between tests."""
    _drop_handlers()
    with patch("utils.logger.user_log_dir", return_value=str(tmp_path / "logs")):
        yield
    _drop_handlers()


class FakeScheduler:
    """Virtual clock: jobs run only when advance() moves time past them."""

    def __init__(self):
        self.now = 0
        self._seq = 0
        self.jobs = {}

    def schedule(self, delay_ms, fn):
        self._seq += 1
        self.jobs[self._seq] = (self.now + delay_ms, fn)
        return self._seq

    def cancel(self, job):
        self.jobs.pop(job, None)

    def pending(self):
        return len(self.jobs)

    def advance(self, ms):
        target = self.now + ms
        while True:
            due = [(when, jid) for jid, (when, _) in self.jobs.items() if when <= target]
            if not due:
                break
            when, jid = min(due)
            _, fn = self.jobs.pop(jid)
            self.now = when
            fn()
        self.now = target


@pytest.fixture()
def config():
    return SessionConfig(
        work_sec=3, short_break_sec=2, long_break_sec=4, short_breaks_before_long=2
    )


@pytest.fixture()
def scheduler():
    return FakeScheduler()


@pytest.fixture()
def service(config, scheduler):
    controller = SessionController(config)
    return TimerService(controller, schedule=scheduler.schedule, cancel=scheduler.cancel)
