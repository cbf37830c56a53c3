# -*- coding: utf-8 -*-

import tkinter as tk
from tkinter import ttk
from typing import Callable

from core.formatting import format_time
from core.session_controller import SessionSnapshot
from domain.models import Phase
from services.timer_service import TimerService
from ui.theme import IDLE_BG, TIME_FG, time_background

PHASE_TITLES = {
    Phase.WORK: "Work",
    Phase.SHORT_BREAK: "Short break",
    Phase.LONG_BREAK: "Long break",
}


class PomodoroWidget(ttk.Frame):
    def __init__(
        self,
        master,
        timer_service: TimerService,
        on_open_settings: Callable[[], None],
        on_open_about: Callable[[], None],
    ):
        super().__init__(master)

        self.timer_service = timer_service
        self.on_open_settings = on_open_settings
        self.on_open_about = on_open_about

        self._build_ui()

        # wire callbacks from service -> widget UI
        self.timer_service.set_on_tick(self._on_tick)
        self.timer_service.set_on_phase_complete(self._on_phase_complete)
        self.timer_service.set_on_state_change(self._on_state_change)

        # initial render
        self._render(self.timer_service.get_snapshot())
        self._update_buttons()

    def _build_ui(self):
        self.columnconfigure(0, weight=1)
        self.columnconfigure(1, weight=1)

        self.time_var = tk.StringVar(value="00:00")
        self.phase_var = tk.StringVar(value="")
        self.info_var = tk.StringVar(value="Ready")

        # tk.Label (not ttk) so the background can follow the phase
        self.time_label = tk.Label(
            self,
            textvariable=self.time_var,
            font=("Courier", 56, "bold"),
            fg=TIME_FG,
            bg=IDLE_BG,
            padx=20,
            pady=10,
        )
        self.time_label.grid(row=0, column=0, columnspan=2, sticky="ew")

        status = ttk.Frame(self)
        status.grid(row=1, column=0, columnspan=2, sticky="ew", pady=(4, 8))
        ttk.Label(status, textvariable=self.phase_var, font=("Sans", 10, "bold")).pack(
            side="left"
        )
        ttk.Label(status, textvariable=self.info_var).pack(side="right")

        self.start_work_btn = ttk.Button(self, text="Start work", command=self._start_work)
        self.about_btn = ttk.Button(self, text="About", command=self.on_open_about)
        self.start_break_btn = ttk.Button(self, text="Start break", command=self._start_break)
        self.settings_btn = ttk.Button(self, text="Settings", command=self.on_open_settings)
        self.suspend_btn = ttk.Button(self, text="Suspend", command=self._suspend)

        self.start_work_btn.grid(row=2, column=0, sticky="ew", padx=(0, 3), pady=2)
        self.about_btn.grid(row=2, column=1, sticky="ew", padx=(3, 0), pady=2)
        self.start_break_btn.grid(row=3, column=0, sticky="ew", padx=(0, 3), pady=2)
        self.settings_btn.grid(row=3, column=1, sticky="ew", padx=(3, 0), pady=2)
        self.suspend_btn.grid(row=4, column=0, sticky="ew", padx=(0, 3), pady=2)

    def _update_buttons(self):
        snap = self.timer_service.get_snapshot()

        # Start buttons are locked only while the countdown advances
        if snap.is_running:
            self.start_work_btn.state(["disabled"])
            self.start_break_btn.state(["disabled"])
        else:
            self.start_work_btn.state(["!disabled"])
            self.start_break_btn.state(["!disabled"])

        if snap.is_idle:
            self.suspend_btn.state(["disabled"])
            self.suspend_btn.config(text="Suspend")
        else:
            self.suspend_btn.state(["!disabled"])
            self.suspend_btn.config(text="Continue" if snap.is_suspended else "Suspend")

    def _start_work(self):
        self.timer_service.start_work()

    def _start_break(self):
        self.timer_service.start_break()

    def _suspend(self):
        self.timer_service.suspend()

    # ---- Service callbacks ----
    def _on_tick(self, snap: SessionSnapshot):
        self._render(snap)

    def _on_phase_complete(self, phase: Phase, snap: SessionSnapshot):
        top = self.winfo_toplevel()
        top.deiconify()
        top.lift()
        top.focus_force()

        if phase is Phase.WORK:
            self.info_var.set("Starting a break")
        else:
            self.info_var.set("Back to work")
        self._render(snap, keep_info=True)
        self._update_buttons()

    def _on_state_change(self, snap: SessionSnapshot):
        self._render(snap)
        self._update_buttons()

    def _render(self, snap: SessionSnapshot, keep_info: bool = False):
        self.time_var.set(format_time(snap.remaining_sec))
        self.phase_var.set(PHASE_TITLES[snap.phase])

        pending = self.timer_service.has_pending_advance
        self.time_label.config(bg=time_background(snap, pending))

        if keep_info or pending:
            return
        if snap.is_idle:
            self.info_var.set("Ready")
        elif snap.is_running:
            self.info_var.set("Running...")
        else:
            self.info_var.set("Suspended")
