# -*- coding: utf-8 -*-

import tkinter as tk
from tkinter import ttk

from domain.validation import ConfigError, build_config
from services.timer_service import TimerService
from utils.logger import get_logger


class ConfigWindow:
    """Settings form. Closing hides it; show() refreshes the fields."""

    def __init__(self, master: tk.Misc, timer_service: TimerService):
        self.timer_service = timer_service

        self.top = tk.Toplevel(master)
        self.top.title("Settings")
        self.top.resizable(False, False)
        self.top.protocol("WM_DELETE_WINDOW", self.hide)

        self.work_var = tk.StringVar()
        self.short_var = tk.StringVar()
        self.long_var = tk.StringVar()
        self.count_var = tk.StringVar()
        self.err_var = tk.StringVar(value="")

        self._build_ui()
        self.refresh_values()

    def _build_ui(self):
        outer = ttk.Frame(self.top, padding=12)
        outer.pack(fill="both", expand=True)
        outer.columnconfigure(1, weight=1)

        ttk.Label(outer, text="Pomodoro settings", font=("Sans", 11, "bold")).grid(
            row=0, column=0, columnspan=2, sticky="w", pady=(0, 8)
        )

        rows = [
            ("Work time (minutes):", self.work_var),
            ("Short break (minutes):", self.short_var),
            ("Long break (minutes):", self.long_var),
            ("Short breaks before long:", self.count_var),
        ]
        for i, (label, var) in enumerate(rows, start=1):
            ttk.Label(outer, text=label).grid(row=i, column=0, sticky="w", pady=3)
            ttk.Entry(outer, textvariable=var, width=8).grid(
                row=i, column=1, sticky="ew", padx=(8, 0), pady=3
            )

        ttk.Label(outer, textvariable=self.err_var, foreground="red").grid(
            row=5, column=0, columnspan=2, sticky="w", pady=(6, 6)
        )

        btns = ttk.Frame(outer)
        btns.grid(row=6, column=0, columnspan=2, sticky="e")
        ttk.Button(btns, text="Cancel", command=self.hide).pack(side="right")
        ttk.Button(btns, text="Save", command=self._submit).pack(side="right", padx=(0, 6))

        self.top.bind("<Return>", lambda e: self._submit())
        self.top.bind("<Escape>", lambda e: self.hide())

    def refresh_values(self):
        cfg = self.timer_service.config
        self.work_var.set(str(cfg.work_sec // 60))
        self.short_var.set(str(cfg.short_break_sec // 60))
        self.long_var.set(str(cfg.long_break_sec // 60))
        self.count_var.set(str(cfg.short_breaks_before_long))
        self.err_var.set("")

    def show(self):
        self.refresh_values()
        self.top.deiconify()
        self.top.lift()

    def hide(self):
        self.top.withdraw()

    def close(self):
        self.top.destroy()

    def _submit(self):
        try:
            config = build_config(
                self.work_var.get(),
                self.short_var.get(),
                self.long_var.get(),
                self.count_var.get(),
            )
        except ConfigError as e:
            get_logger().debug("Rejected settings field %s", e.field)
            self.err_var.set(str(e))
            return

        self.timer_service.update_config(config)
        self.hide()
