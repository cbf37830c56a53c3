# -*- coding: utf-8 -*-

import threading
from dataclasses import dataclass
from typing import Callable, Optional

from domain.models import Phase, SessionConfig
from utils.logger import get_logger

TimeUpdatedFn = Callable[[int, Phase], None]
PhaseCompleteFn = Callable[[Phase], None]


@dataclass(frozen=True)
class SessionSnapshot:
    phase: Phase
    remaining_sec: int
    is_running: bool
    is_suspended: bool
    break_count: int

    @property
    def is_idle(self) -> bool:
        return not self.is_running and not self.is_suspended


class SessionController:
    """
    Pomodoro session state machine (no Tkinter).

    Owns phase, countdown and the short/long break sequencing. Something
    external calls tick() once per second; the controller reports through
    on_time_updated(remaining_sec, phase) and on_phase_complete(phase).

    Mutations are serialized by a re-entrant lock; listeners are called
    after it is released.
    """

    def __init__(
        self,
        config: Optional[SessionConfig] = None,
        on_time_updated: Optional[TimeUpdatedFn] = None,
        on_phase_complete: Optional[PhaseCompleteFn] = None,
    ):
        self._lock = threading.RLock()
        self._config = config or SessionConfig()

        self._phase = Phase.WORK
        self._remaining_sec = self._config.work_sec
        self._is_running = False
        self._is_suspended = False
        self._break_count = 0

        self._on_time_updated = on_time_updated
        self._on_phase_complete = on_phase_complete

    # ----- Listeners -----
    def set_on_time_updated(self, fn: Optional[TimeUpdatedFn]) -> None:
        self._on_time_updated = fn

    def set_on_phase_complete(self, fn: Optional[PhaseCompleteFn]) -> None:
        self._on_phase_complete = fn

    def _notify(self, remaining_sec: int, phase: Phase, completed: Optional[Phase] = None) -> None:
        if self._on_time_updated:
            self._on_time_updated(remaining_sec, phase)
        if completed is not None and self._on_phase_complete:
            self._on_phase_complete(completed)

    # ----- Accessors -----
    @property
    def config(self) -> SessionConfig:
        with self._lock:
            return self._config

    @property
    def phase(self) -> Phase:
        with self._lock:
            return self._phase

    @property
    def remaining_sec(self) -> int:
        with self._lock:
            return self._remaining_sec

    @property
    def is_running(self) -> bool:
        with self._lock:
            return self._is_running

    @property
    def is_suspended(self) -> bool:
        with self._lock:
            return self._is_suspended

    @property
    def is_idle(self) -> bool:
        with self._lock:
            return not self._is_running and not self._is_suspended

    @property
    def break_count(self) -> int:
        with self._lock:
            return self._break_count

    def snapshot(self) -> SessionSnapshot:
        with self._lock:
            return SessionSnapshot(
                phase=self._phase,
                remaining_sec=self._remaining_sec,
                is_running=self._is_running,
                is_suspended=self._is_suspended,
                break_count=self._break_count,
            )

    # ----- Commands -----
    def start_work(self) -> None:
        with self._lock:
            self._phase = Phase.WORK
            self._remaining_sec = self._config.work_sec
            self._is_running = True
            self._is_suspended = False
            remaining, phase = self._remaining_sec, self._phase

        get_logger().info("Work started (%ss)", remaining)
        self._notify(remaining, phase)

    def start_break(self) -> None:
        with self._lock:
            # decided now, never precomputed
            if self._break_count >= self._config.short_breaks_before_long:
                self._phase = Phase.LONG_BREAK
                self._remaining_sec = self._config.long_break_sec
                self._break_count = 0
            else:
                self._phase = Phase.SHORT_BREAK
                self._remaining_sec = self._config.short_break_sec
                self._break_count += 1
            self._is_running = True
            self._is_suspended = False
            remaining, phase, count = self._remaining_sec, self._phase, self._break_count

        get_logger().info("%s started (%ss, break_count=%d)", phase.value, remaining, count)
        self._notify(remaining, phase)

    def suspend(self) -> None:
        """Toggle pause. No-op while idle."""
        with self._lock:
            if self._is_running:
                self._is_running = False
                self._is_suspended = True
                action = "suspended"
            elif self._is_suspended:
                self._is_suspended = False
                self._is_running = True
                action = "resumed"
            else:
                return
            remaining, phase = self._remaining_sec, self._phase

        get_logger().debug("Session %s at %ss", action, remaining)
        self._notify(remaining, phase)

    def tick(self) -> bool:
        """
        Advance the countdown by one second.
        Returns True if this tick completed the current phase.
        """
        with self._lock:
            if not self._is_running:
                return False

            self._remaining_sec -= 1
            completed: Optional[Phase] = None
            if self._remaining_sec <= 0:
                self._remaining_sec = 0
                self._is_running = False
                self._is_suspended = False
                completed = self._phase
            remaining, phase = self._remaining_sec, self._phase

        if completed is not None:
            get_logger().info("%s complete", completed.value)
        self._notify(remaining, phase, completed)
        return completed is not None

    def update_config(self, config: SessionConfig) -> None:
        with self._lock:
            self._config = config
            if not self.is_idle:
                # in-flight countdown keeps its remaining time
                get_logger().debug("Config updated while active: %s", config)
                return

            if self._phase is Phase.WORK:
                self._remaining_sec = config.work_sec
            else:
                self._remaining_sec = config.break_duration(self._break_count)
            remaining, phase = self._remaining_sec, self._phase

        get_logger().debug("Config updated: %s", config)
        self._notify(remaining, phase)
