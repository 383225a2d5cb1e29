from __future__ import annotations

from .config import RenderParams, AppConfig
from .renderer import PygameRenderer
from .app import PipePuzzleApp

__all__ = [
    "RenderParams",
    "AppConfig",
    "PygameRenderer",
    "PipePuzzleApp",
]
