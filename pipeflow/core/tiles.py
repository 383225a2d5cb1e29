from __future__ import annotations

from enum import Enum
from typing import AbstractSet, Dict, FrozenSet, Tuple

from .directions import ROTATIONS, Direction, rotate_directions


class PipeKind(str, Enum):
    STRAIGHT = "straight"
    CORNER = "corner"
    TEE = "tee"
    END = "end"
    START = "start"
    EXIT = "exit"


# Openings at rotation 0.
PIPE_CONNECTIONS: Dict[PipeKind, FrozenSet[Direction]] = {
    PipeKind.STRAIGHT: frozenset({Direction.NORTH, Direction.SOUTH}),
    PipeKind.CORNER: frozenset({Direction.NORTH, Direction.EAST}),
    PipeKind.TEE: frozenset({Direction.NORTH, Direction.EAST, Direction.SOUTH}),
    PipeKind.END: frozenset({Direction.NORTH}),
    PipeKind.START: frozenset({Direction.EAST}),
    PipeKind.EXIT: frozenset({Direction.WEST}),
}

TERMINAL_KINDS: Tuple[PipeKind, ...] = (PipeKind.START, PipeKind.EXIT)

FILLER_KINDS: Tuple[PipeKind, ...] = (
    PipeKind.STRAIGHT,
    PipeKind.CORNER,
    PipeKind.TEE,
    PipeKind.END,
)

TILE_COLORS: Dict[PipeKind, Tuple[int, int, int]] = {
    PipeKind.STRAIGHT: (70, 70, 80),
    PipeKind.CORNER: (70, 70, 80),
    PipeKind.TEE: (70, 70, 80),
    PipeKind.END: (70, 70, 80),
    PipeKind.START: (40, 130, 60),
    PipeKind.EXIT: (160, 50, 50),
}


def connections_for(kind: PipeKind, rotation: int) -> FrozenSet[Direction]:
    return rotate_directions(PIPE_CONNECTIONS[kind], rotation)


def kind_for_openings(required: AbstractSet[Direction]) -> PipeKind:
    """Pick the filler shape whose openings can match `required` exactly."""
    n = len(required)
    if n == 1:
        return PipeKind.END
    if n == 2:
        a, b = sorted(required)
        if a.opposite == b:
            return PipeKind.STRAIGHT
        return PipeKind.CORNER
    if n == 3:
        return PipeKind.TEE
    raise ValueError(f"No pipe shape opens exactly towards {sorted(d.name for d in required)}.")


def solve_rotation(kind: PipeKind, required: AbstractSet[Direction]) -> int:
    """
    Smallest rotation that makes `kind` open exactly towards `required`.
    An empty requirement leaves the tile at 0.
    """
    if not required:
        return 0
    for rotation in ROTATIONS:
        if connections_for(kind, rotation) == required:
            return rotation
    raise ValueError(
        f"'{kind.value}' cannot be rotated to open towards {sorted(d.name for d in required)}."
    )
