from __future__ import annotations
import logging
import random
from typing import Optional

from .config import GenerationParams
from .connectivity import evaluate
from .generation import BoardGenerator
from .types import Board, Evaluation, Tile

logger = logging.getLogger(__name__)

HINT_TEXT = "Tip: the start and exit tiles can be rotated too!"
WIN_TEXT = "Connected! The flow reaches the exit."


def rotate_tile(board: Board, index: int) -> Tile:
    """Turn one tile 90 degrees clockwise in place. Its kind never changes."""
    if not 0 <= index < len(board):
        raise IndexError(f"Tile index {index} is outside a board of {len(board)} tiles.")
    tile = board.tiles[index]
    tile.rotation = (tile.rotation + 90) % 360
    return tile


class GameSession:
    """
    One running puzzle: the board, its latest evaluation and the game-over flag.
    The UI owns the session and is the only caller that mutates it.
    """

    def __init__(self, params: GenerationParams, rng: Optional[random.Random] = None) -> None:
        self.params = params
        self.generator = BoardGenerator(params, rng=rng)
        self.board: Board = self.generator.generate()
        self.evaluation: Evaluation = evaluate(self.board)

    @property
    def won(self) -> bool:
        return self.evaluation.won

    @property
    def status_text(self) -> str:
        return WIN_TEXT if self.won else HINT_TEXT

    def new_game(self) -> Evaluation:
        self.board = self.generator.generate()
        self.evaluation = evaluate(self.board)
        logger.info("New %dx%d board", self.board.size, self.board.size)
        return self.evaluation

    def click(self, index: int) -> Optional[Evaluation]:
        if self.won:
            return None

        rotate_tile(self.board, index)
        self.evaluation = evaluate(self.board)
        if self.won:
            logger.info("Board solved")
        return self.evaluation
