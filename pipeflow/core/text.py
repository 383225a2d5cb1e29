from __future__ import annotations
from typing import AbstractSet, Dict, FrozenSet, List, Optional

from .directions import Coord, Direction
from .tiles import PipeKind
from .types import Board, Tile

N, E, S, W = Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST

GLYPHS: Dict[FrozenSet[Direction], str] = {
    frozenset(): " ",
    frozenset({N}): "╵",
    frozenset({E}): "╶",
    frozenset({S}): "╷",
    frozenset({W}): "╴",
    frozenset({N, S}): "│",
    frozenset({E, W}): "─",
    frozenset({N, E}): "└",
    frozenset({E, S}): "┌",
    frozenset({S, W}): "┐",
    frozenset({W, N}): "┘",
    frozenset({N, E, S}): "├",
    frozenset({E, S, W}): "┬",
    frozenset({S, W, N}): "┤",
    frozenset({W, N, E}): "┴",
    frozenset({N, E, S, W}): "┼",
}

TERMINAL_MARKERS: Dict[PipeKind, str] = {
    PipeKind.START: "S",
    PipeKind.EXIT: "X",
}

# Arrow showing where a terminal's single opening points.
ARROWS: Dict[Direction, str] = {N: "^", E: ">", S: "v", W: "<"}


def tile_glyph(tile: Tile) -> str:
    dirs = tile.connections()
    marker = TERMINAL_MARKERS.get(tile.kind)
    if marker is not None:
        (opening,) = dirs
        return marker + ARROWS[opening]
    return GLYPHS[dirs] + " "


def render_board(board: Board, reachable: Optional[AbstractSet[Coord]] = None) -> str:
    """
    One line per row, two characters per tile.
    Non-terminal tiles reached from the start get a '*' instead of the trailing space.
    """
    lines: List[str] = []
    for r in range(board.size):
        row = []
        for c in range(board.size):
            tile = board.tile_at(r, c)
            glyph = tile_glyph(tile)
            if reachable and (r, c) in reachable and tile.kind not in TERMINAL_MARKERS:
                glyph = glyph[0] + "*"
            row.append(glyph)
        lines.append("".join(row).rstrip())
    return "\n".join(lines)
