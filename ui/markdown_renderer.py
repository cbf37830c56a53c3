# ui/markdown_renderer.py
# -*- coding: utf-8 -*-

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from markdown import markdown


@dataclass(frozen=True)
class MarkdownTheme:
    text: str = "#111827"
    muted: str = "#6B7280"
    border: str = "#E5E7EB"
    panel: str = "#FFFFFF"
    link: str = "#2563EB"
    accent: str = "#40E0D0"


class MarkdownRenderer:
    """
    Single responsibility:
    - Convert MD -> HTML
    - Provide CSS

    tkinterweb (tkhtml) only understands a subset of HTML/CSS, so the
    extension list is kept to plain block output (no tasklists, no tabs).
    """

    def __init__(self, theme: Optional[MarkdownTheme] = None):
        self.theme = theme or MarkdownTheme()

    def extensions(self) -> List[str]:
        return ["extra", "sane_lists", "nl2br"]

    # ---------- CSS ----------
    def css(self) -> str:
        t = self.theme
        return f"""
        body {{
          font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, Arial, sans-serif;
          margin: 14px;
          color: {t.text};
          background: {t.panel};
          font-size: 14px;
          line-height: 1.5;
          text-align: center;
        }}

        h1 {{
          font-size: 1.4em;
          margin: 0.4em 0 0.2em;
          border-bottom: 3px solid {t.accent};
        }}
        h2 {{ font-size: 1.1em; margin: 1.0em 0 0.4em; }}

        p {{ margin: 0.5em 0; }}
        a {{ color: {t.link}; text-decoration: none; }}

        hr {{
          border: 0;
          border-top: 1px solid {t.border};
          margin: 1em 0;
        }}

        em {{ color: {t.muted}; }}
        """

    # ---------- render ----------
    def to_html(self, md_text: str) -> str:
        body = markdown(
            md_text or "",
            extensions=self.extensions(),
            output_format="html5",
        )
        return f"""
        <html>
          <head>
            <meta charset="utf-8"/>
            <style>{self.css()}</style>
          </head>
          <body>{body}</body>
        </html>
        """
