# -*- coding: utf-8 -*-

import tkinter as tk
from tkinter import ttk
from typing import Optional

from services.timer_service import TimerService
from ui.about_window import APP_NAME, AboutWindow
from ui.config_window import ConfigWindow
from ui.pomodoro_widget import PomodoroWidget
from utils.logger import get_logger


class MainWindow:
    def __init__(self, root: tk.Tk, timer_service: TimerService):
        self.root = root
        self.timer_service = timer_service

        self.root.title(APP_NAME)
        self.root.geometry("420x260")
        self.root.minsize(360, 220)

        self.config_window: Optional[ConfigWindow] = None
        self.about_window: Optional[AboutWindow] = None

        self._build_ui()
        self.root.protocol("WM_DELETE_WINDOW", self._on_close)

    def _build_ui(self):
        outer = ttk.Frame(self.root, padding=10)
        outer.pack(fill="both", expand=True)
        outer.columnconfigure(0, weight=1)

        self.pomodoro = PomodoroWidget(
            outer,
            timer_service=self.timer_service,
            on_open_settings=self._open_settings,
            on_open_about=self._open_about,
        )
        self.pomodoro.grid(row=0, column=0, sticky="nsew")

    def run(self):
        self.root.mainloop()

    # ----- child windows (created once, then shown/hidden) -----
    def _open_settings(self):
        if self.config_window is None:
            self.config_window = ConfigWindow(self.root, self.timer_service)
        self.config_window.show()

    def _open_about(self):
        if self.about_window is None:
            self.about_window = AboutWindow(self.root)
        self.about_window.show()

    def _on_close(self):
        # no scheduled job may outlive the window
        self.timer_service.shutdown()
        if self.config_window is not None:
            self.config_window.close()
        if self.about_window is not None:
            self.about_window.close()
        get_logger().info("Main window closed")
        self.root.destroy()
