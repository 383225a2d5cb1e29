from __future__ import annotations

from .widgets import Button, draw_label, wrap_text

__all__ = [
    "Button",
    "draw_label",
    "wrap_text",
]
