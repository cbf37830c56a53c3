# -*- coding: utf-8 -*-

from typing import Any, Callable, Optional

from core.session_controller import SessionController, SessionSnapshot
from domain.models import Phase, SessionConfig
from utils.logger import get_logger

ScheduleFn = Callable[[int, Callable[[], None]], Any]
CancelFn = Callable[[Any], None]


class TimerService:
    """
    Orchestrates:
    - SessionController state
    - the single countdown job (one tick per second)
    - auto-advance to the next phase after a completed one
    - Callbacks for UI

    Scheduling goes through an injected schedule/cancel pair
    (Tk.after / Tk.after_cancel in the app).
    """

    def __init__(
        self,
        controller: SessionController,
        schedule: ScheduleFn,
        cancel: CancelFn,
        tick_ms: int = 1000,
        advance_delay_ms: int = 2000,
        auto_advance: bool = True,
    ):
        self.controller = controller
        self._schedule = schedule
        self._cancel = cancel

        self.tick_ms = int(tick_ms)
        self.advance_delay_ms = int(advance_delay_ms)
        self.auto_advance = auto_advance

        self._tick_job: Any = None
        self._advance_job: Any = None

        self._on_tick: Optional[Callable[[SessionSnapshot], None]] = None
        self._on_phase_complete: Optional[Callable[[Phase, SessionSnapshot], None]] = None
        self._on_state_change: Optional[Callable[[SessionSnapshot], None]] = None

        self.controller.set_on_time_updated(self._handle_time_updated)
        self.controller.set_on_phase_complete(self._handle_phase_complete)

    # ----- Callbacks -----
    def set_on_tick(self, fn: Callable[[SessionSnapshot], None]) -> None:
        self._on_tick = fn

    def set_on_phase_complete(self, fn: Callable[[Phase, SessionSnapshot], None]) -> None:
        self._on_phase_complete = fn

    def set_on_state_change(self, fn: Callable[[SessionSnapshot], None]) -> None:
        self._on_state_change = fn

    def _emit_state_change(self) -> None:
        if self._on_state_change:
            self._on_state_change(self.controller.snapshot())

    def _handle_time_updated(self, remaining_sec: int, phase: Phase) -> None:
        if self._on_tick:
            self._on_tick(self.controller.snapshot())

    def _handle_phase_complete(self, phase: Phase) -> None:
        # scheduled first so listeners see has_pending_advance
        if self.auto_advance:
            self._cancel_advance()
            self._advance_job = self._schedule(
                self.advance_delay_ms, lambda: self._advance_after(phase)
            )

        if self._on_phase_complete:
            self._on_phase_complete(phase, self.controller.snapshot())

    # ----- Public API -----
    def get_snapshot(self) -> SessionSnapshot:
        return self.controller.snapshot()

    @property
    def config(self) -> SessionConfig:
        return self.controller.config

    @property
    def has_pending_advance(self) -> bool:
        return self._advance_job is not None

    def start_work(self) -> None:
        self._cancel_advance()
        self.controller.start_work()
        self._restart_countdown()
        self._emit_state_change()

    def start_break(self) -> None:
        self._cancel_advance()
        self.controller.start_break()
        self._restart_countdown()
        self._emit_state_change()

    def suspend(self) -> None:
        self.controller.suspend()
        if self.controller.is_running:
            # resume keeps the existing tick source if it is still alive
            self._ensure_countdown()
        self._emit_state_change()

    def update_config(self, config: SessionConfig) -> None:
        self.controller.update_config(config)
        self._emit_state_change()

    def shutdown(self) -> None:
        """Cancel every scheduled job. Call before the UI is destroyed."""
        self._stop_countdown()
        self._cancel_advance()
        get_logger().debug("Timer service shut down")

    # ----- Countdown (single job) -----
    def _restart_countdown(self) -> None:
        self._stop_countdown()
        self._tick_job = self._schedule(self.tick_ms, self._tick_once)

    def _ensure_countdown(self) -> None:
        if self._tick_job is None:
            self._tick_job = self._schedule(self.tick_ms, self._tick_once)

    def _stop_countdown(self) -> None:
        if self._tick_job is not None:
            self._cancel(self._tick_job)
            self._tick_job = None

    def _tick_once(self) -> None:
        self._tick_job = None
        self.controller.tick()
        # a listener may already have restarted the countdown
        if self._tick_job is None and not self.controller.is_idle:
            self._tick_job = self._schedule(self.tick_ms, self._tick_once)

    # ----- Auto-advance -----
    def _cancel_advance(self) -> None:
        if self._advance_job is not None:
            self._cancel(self._advance_job)
            self._advance_job = None

    def _advance_after(self, completed: Phase) -> None:
        self._advance_job = None
        if completed is Phase.WORK:
            self.start_break()
        else:
            self.start_work()
