from __future__ import annotations

from .config import GenerationParams
from .connectivity import evaluate, is_connected
from .directions import ROTATIONS, Coord, Direction
from .generation import BoardGenerator, GenerationError, generate_board
from .rules import GameSession, rotate_tile
from .tiles import FILLER_KINDS, PIPE_CONNECTIONS, TILE_COLORS, PipeKind
from .types import Board, Evaluation, Tile
from . import directions as directions
from . import text as text

__all__ = [
    "GenerationParams",
    "BoardGenerator",
    "GenerationError",
    "generate_board",
    "evaluate",
    "is_connected",
    "rotate_tile",
    "GameSession",
    "ROTATIONS",
    "Coord",
    "Direction",
    "PipeKind",
    "PIPE_CONNECTIONS",
    "FILLER_KINDS",
    "TILE_COLORS",
    "Board",
    "Tile",
    "Evaluation",
    "directions",
    "text",
]
