from __future__ import annotations
from .core.config import GenerationParams
from .core.connectivity import evaluate, is_connected
from .core.generation import BoardGenerator, GenerationError, generate_board
from .core.rules import GameSession, rotate_tile
from .core.types import Board, Evaluation, Tile
from .core.tiles import PipeKind, PIPE_CONNECTIONS, FILLER_KINDS, TILE_COLORS

__all__ = [
    "GenerationParams",
    "BoardGenerator",
    "GenerationError",
    "generate_board",
    "evaluate",
    "is_connected",
    "rotate_tile",
    "GameSession",
    "Board",
    "Evaluation",
    "Tile",
    "PipeKind",
    "PIPE_CONNECTIONS",
    "FILLER_KINDS",
    "TILE_COLORS",
]
