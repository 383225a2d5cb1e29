"""Shared board builders for the test suite."""

from typing import Dict, Tuple

import pytest

from pipeflow.core.tiles import PipeKind
from pipeflow.core.types import Board, Tile


def make_board(size: int, layout: Dict[Tuple[int, int], Tuple[PipeKind, int]]) -> Board:
    """Board where unlisted cells are `end` tiles opening south."""
    tiles = []
    for r in range(size):
        for c in range(size):
            kind, rotation = layout.get((r, c), (PipeKind.END, 180))
            tiles.append(Tile(r, c, kind, rotation))
    return Board(size=size, tiles=tiles)


@pytest.fixture
def open_board():
    # start -> straight -> corner -> dead end pointing back up; exit faces west
    return make_board(3, {
        (0, 0): (PipeKind.START, 0),
        (0, 1): (PipeKind.STRAIGHT, 90),
        (0, 2): (PipeKind.CORNER, 180),
        (1, 2): (PipeKind.END, 0),
        (2, 2): (PipeKind.EXIT, 0),
    })


@pytest.fixture
def solved_board():
    return make_board(3, {
        (0, 0): (PipeKind.START, 0),
        (0, 1): (PipeKind.STRAIGHT, 90),
        (0, 2): (PipeKind.CORNER, 180),
        (1, 2): (PipeKind.STRAIGHT, 0),
        (2, 2): (PipeKind.EXIT, 90),
    })
