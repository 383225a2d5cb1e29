from __future__ import annotations
from collections import deque
from typing import Deque, Set

from .directions import Coord, connecting_directions, neighbors
from .types import Board, Evaluation, Tile


def is_connected(a: Tile, b: Tile) -> bool:
    """True when a and b are adjacent and both open towards each other."""
    dirs = connecting_directions(a.coord, b.coord)
    if dirs is None:
        return False
    a_to_b, b_to_a = dirs
    return a_to_b in a.connections() and b_to_a in b.connections()


def evaluate(board: Board) -> Evaluation:
    """
    Breadth-first search from the start tile over valid pipe connections.
    Stops as soon as the exit is dequeued; `reachable` holds every dequeued cell.
    """
    start = board.start_coord
    goal = board.exit_coord

    q: Deque[Coord] = deque([start])
    visited: Set[Coord] = {start}
    reachable: Set[Coord] = set()

    while q:
        cur = q.popleft()
        reachable.add(cur)
        if cur == goal:
            return Evaluation(reachable=reachable, won=True)

        tile = board.tile_at(*cur)
        for _, (nr, nc) in neighbors(cur, board.size):
            if (nr, nc) in visited:
                continue
            if is_connected(tile, board.tile_at(nr, nc)):
                visited.add((nr, nc))
                q.append((nr, nc))

    return Evaluation(reachable=reachable, won=False)
