#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import tkinter as tk

from core.session_controller import SessionController
from domain.models import SessionConfig
from services.timer_service import TimerService
from ui.main_window import MainWindow
from utils.logger import get_logger


def main():
    get_logger().info("Starting Pomodoro Timer")

    root = tk.Tk()

    controller = SessionController(SessionConfig())
    timer_service = TimerService(
        controller,
        schedule=root.after,
        cancel=root.after_cancel,
    )

    app = MainWindow(root, timer_service)
    app.run()


if __name__ == "__main__":
    main()
