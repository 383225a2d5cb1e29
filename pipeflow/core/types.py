from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Iterator, List, Set

from .directions import Coord, Direction
from .tiles import PipeKind, connections_for


@dataclass
class Tile:
    row: int
    col: int
    kind: PipeKind
    rotation: int = 0

    @property
    def coord(self) -> Coord:
        return (self.row, self.col)

    def connections(self) -> FrozenSet[Direction]:
        return connections_for(self.kind, self.rotation)


@dataclass
class Board:
    size: int
    tiles: List[Tile]

    @classmethod
    def blank(cls, size: int) -> "Board":
        """Board of `end` tiles with the start and exit pinned to opposite corners."""
        if size < 1:
            raise ValueError(f"Board size must be at least 1, got {size}.")
        tiles = [Tile(r, c, PipeKind.END) for r in range(size) for c in range(size)]
        board = cls(size=size, tiles=tiles)
        # A 1x1 board keeps the start; its cell is also the exit coordinate.
        board.tile_at(*board.exit_coord).kind = PipeKind.EXIT
        board.tile_at(*board.start_coord).kind = PipeKind.START
        return board

    @property
    def start_coord(self) -> Coord:
        return (0, 0)

    @property
    def exit_coord(self) -> Coord:
        return (self.size - 1, self.size - 1)

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def index(self, row: int, col: int) -> int:
        return row * self.size + col

    def tile_at(self, row: int, col: int) -> Tile:
        if not self.in_bounds(row, col):
            raise IndexError(f"({row}, {col}) is outside a {self.size}x{self.size} board.")
        return self.tiles[self.index(row, col)]

    def __iter__(self) -> Iterator[Tile]:
        return iter(self.tiles)

    def __len__(self) -> int:
        return len(self.tiles)


@dataclass
class Evaluation:
    reachable: Set[Coord] = field(default_factory=set)
    won: bool = False
