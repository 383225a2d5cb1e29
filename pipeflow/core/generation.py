from __future__ import annotations
import logging
import random
from typing import List, Optional, Set

from .config import GenerationParams
from .directions import ROTATIONS, Coord, Direction, direction_between, neighbors
from .tiles import FILLER_KINDS, TERMINAL_KINDS, kind_for_openings, solve_rotation
from .types import Board

logger = logging.getLogger(__name__)


class GenerationError(RuntimeError):
    pass


class BoardGenerator:
    def __init__(self, params: GenerationParams, rng: Optional[random.Random] = None):
        self.params = params
        self.random = rng if rng is not None else random.Random(params.seed)

    def generate(self) -> Board:
        board = Board.blank(self.params.size)

        path = self._carve_path_with_retries(board)
        self._assign_path_shapes(board, path)
        self._fill_decoys(board, set(path))

        if self.params.scramble:
            self._scramble(board)

        return board

    # ------------------------------------------------------------ carving

    def _carve_path_with_retries(self, board: Board) -> List[Coord]:
        attempts = max(1, self.params.max_attempts)
        for attempt in range(1, attempts + 1):
            path = self._carve_path(board)
            if path is not None:
                logger.debug("Carved path of %d cells on attempt %d", len(path), attempt)
                return path
            logger.debug("Carving attempt %d dead-ended, retrying", attempt)

        logger.warning("Path carving failed after %d attempts", attempts)
        raise GenerationError(
            f"Could not carve a path from {board.start_coord} to {board.exit_coord} "
            f"in {attempts} attempts."
        )

    def _carve_path(self, board: Board) -> Optional[List[Coord]]:
        """
        Backtracking random walk from the start to the exit.
        The stack always holds a simple path; returns None if it empties.
        """
        goal = board.exit_coord
        stack: List[Coord] = [board.start_coord]
        visited: Set[Coord] = {board.start_coord}

        while stack:
            current = stack[-1]
            if current == goal:
                return stack

            options = [
                coord for _, coord in neighbors(current, board.size)
                if coord not in visited or coord == goal
            ]
            if not options:
                stack.pop()
                continue

            nxt = self.random.choice(options)
            visited.add(nxt)
            stack.append(nxt)

        return None

    # ------------------------------------------------------------ shapes

    def _assign_path_shapes(self, board: Board, path: List[Coord]) -> None:
        for i, coord in enumerate(path):
            required: Set[Direction] = set()
            if i > 0:
                required.add(self._direction(coord, path[i - 1]))
            if i < len(path) - 1:
                required.add(self._direction(coord, path[i + 1]))

            tile = board.tile_at(*coord)
            if tile.kind not in TERMINAL_KINDS:
                tile.kind = kind_for_openings(required)
            tile.rotation = solve_rotation(tile.kind, required)

    @staticmethod
    def _direction(a: Coord, b: Coord) -> Direction:
        d = direction_between(a, b)
        if d is None:
            raise GenerationError(f"Path cells {a} and {b} are not adjacent.")
        return d

    # ------------------------------------------------------------ filler

    def _fill_decoys(self, board: Board, on_path: Set[Coord]) -> None:
        for tile in board:
            if tile.kind in TERMINAL_KINDS or tile.coord in on_path:
                continue
            tile.kind = self.random.choice(FILLER_KINDS)
            tile.rotation = 0

    def _scramble(self, board: Board) -> None:
        for tile in board:
            tile.rotation = self.random.choice(ROTATIONS)


def generate_board(size: int, seed: Optional[int] = None) -> Board:
    return BoardGenerator(GenerationParams(size=size, seed=seed)).generate()
