from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from pipeflow.core.config import GenerationParams


@dataclass
class RenderParams:
    tile_size: int = 32
    window_title: str = "PipeFlow"
    show_grid: bool = True
    # Sidebar has a constant pixel width, independent of tile size
    sidebar_width_px: int = 260
    background_color: Tuple[int, int, int] = (15, 15, 20)
    pipe_color: Tuple[int, int, int] = (190, 190, 200)
    connected_color: Tuple[int, int, int] = (60, 170, 255)
    # Pipe thickness as a fraction of the tile size
    pipe_width_ratio: float = 0.28


@dataclass
class AppConfig:
    generation: GenerationParams = field(default_factory=GenerationParams)
    render: RenderParams = field(default_factory=RenderParams)
