"""
envlayer/theme.py
Semantic colour names for rich console output.

Supports:
  - NO_COLOR=1 → disable all colors
  - FORCE_COLOR=1 → force colors in pipes
  - ENVLAYER_THEME=minimal → alternative theme

Usage:
    from envlayer.theme import theme
    console.print(f"[{theme.success}]ok[/{theme.success}]")
"""

from __future__ import annotations

import os

_ATTRS = ("success", "warning", "error", "muted", "heading",
          "key", "value")


class Theme:

    def __init__(self):
        self.no_color = bool(os.environ.get("NO_COLOR"))
        self.force_color = bool(os.environ.get("FORCE_COLOR"))
        self._theme_name = os.environ.get("ENVLAYER_THEME", "default")

        if self.no_color:
            self._apply_no_color()
        elif self._theme_name == "minimal":
            self._apply_minimal()
        else:
            self._apply_default()

    def _apply_default(self):
        self.success = "green"
        self.warning = "yellow"
        self.error = "red"
        self.muted = "dim"
        self.heading = "bold"
        self.key = "bold cyan"
        self.value = "magenta"

    def _apply_minimal(self):
        """Minimal theme, status colours only."""
        self.success = "green"
        self.warning = "yellow"
        self.error = "red"
        self.muted = "dim"
        self.heading = "bold"
        self.key = "bold"
        self.value = ""

    def _apply_no_color(self):
        for attr in _ATTRS:
            setattr(self, attr, "")

    def tag(self, style: str, text: str) -> str:
        """Wrap *text* in rich markup for *style*; plain text if style is empty."""
        style = getattr(self, style)
        if not style:
            return text
        return f"[{style}]{text}[/{style}]"


# Singleton instance
theme = Theme()
