from __future__ import annotations

from enum import IntEnum
from typing import FrozenSet, Iterable, Iterator, Optional, Tuple

Coord = Tuple[int, int]

ROTATIONS: Tuple[int, ...] = (0, 90, 180, 270)


class Direction(IntEnum):
    """Compass direction stored as degrees, clockwise from north."""

    NORTH = 0
    EAST = 90
    SOUTH = 180
    WEST = 270

    @property
    def opposite(self) -> "Direction":
        return Direction((self.value + 180) % 360)

    @property
    def delta(self) -> Coord:
        return _DELTAS[self]

    def rotated(self, rotation: int) -> "Direction":
        return Direction((self.value + normalize_rotation(rotation)) % 360)


_DELTAS = {
    Direction.NORTH: (-1, 0),
    Direction.EAST: (0, 1),
    Direction.SOUTH: (1, 0),
    Direction.WEST: (0, -1),
}


def normalize_rotation(rotation: int) -> int:
    if rotation % 90 != 0:
        raise ValueError(f"Rotation must be a multiple of 90 degrees, got {rotation}.")
    return rotation % 360


def rotate_directions(dirs: Iterable[Direction], rotation: int) -> FrozenSet[Direction]:
    rotation = normalize_rotation(rotation)
    return frozenset(d.rotated(rotation) for d in dirs)


def direction_between(a: Coord, b: Coord) -> Optional[Direction]:
    """Direction from cell a to cell b, or None if they are not 4-adjacent."""
    dr = b[0] - a[0]
    dc = b[1] - a[1]
    for direction, delta in _DELTAS.items():
        if delta == (dr, dc):
            return direction
    return None


def connecting_directions(a: Coord, b: Coord) -> Optional[Tuple[Direction, Direction]]:
    d = direction_between(a, b)
    if d is None:
        return None
    return d, d.opposite


def neighbors(coord: Coord, size: int) -> Iterator[Tuple[Direction, Coord]]:
    r, c = coord
    for direction in Direction:
        dr, dc = direction.delta
        nr, nc = r + dr, c + dc
        if 0 <= nr < size and 0 <= nc < size:
            yield direction, (nr, nc)
