# -*- coding: utf-8 -*-

import tkinter as tk
from tkinter import ttk
from typing import Optional

from tkinterweb import HtmlFrame

from ui.markdown_renderer import MarkdownRenderer

APP_NAME = "Pomodoro Timer"
APP_VERSION = "1.0.0"
APP_AUTHOR = "Pomodoro Timer contributors"
APP_LICENSE = "Open Source"
APP_COPYRIGHT = "© 2025"
APP_DESCRIPTION = "A simple Pomodoro timer for the desktop."


def about_markdown() -> str:
    return f"""# {APP_NAME}

*Version {APP_VERSION}*

{APP_DESCRIPTION}

---

## Author
{APP_AUTHOR}

## License
{APP_LICENSE} {APP_COPYRIGHT}
"""


class AboutWindow:
    def __init__(self, master: tk.Misc, renderer: Optional[MarkdownRenderer] = None):
        self.renderer = renderer or MarkdownRenderer()

        self.top = tk.Toplevel(master)
        self.top.title(f"About {APP_NAME}")
        self.top.geometry("460x380")
        self.top.resizable(False, False)
        self.top.protocol("WM_DELETE_WINDOW", self.hide)

        outer = ttk.Frame(self.top, padding=8)
        outer.pack(fill="both", expand=True)

        self.view = HtmlFrame(outer, horizontal_scrollbar="auto")
        self.view.pack(fill="both", expand=True)
        self.view.load_html(self.renderer.to_html(about_markdown()))

        ttk.Button(outer, text="Close", command=self.hide).pack(pady=(8, 0))

    def show(self):
        self.top.deiconify()
        self.top.lift()

    def hide(self):
        self.top.withdraw()

    def close(self):
        self.top.destroy()
