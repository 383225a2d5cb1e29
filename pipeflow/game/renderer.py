from __future__ import annotations

from typing import Optional, Tuple

import pygame

from pipeflow.core.directions import Direction
from pipeflow.core.tiles import TILE_COLORS
from pipeflow.core.types import Board, Evaluation, Tile
from .config import RenderParams
from .ui.widgets import draw_label, wrap_text


class PygameRenderer:
    """
    Handles drawing:
    - Board view (tiles scaled to fit the window)
    - Sidebar with the status text (fixed width)
    """

    def __init__(self, params: RenderParams) -> None:
        self.params = params
        self.board: Optional[Board] = None
        self.evaluation: Optional[Evaluation] = None
        self.status_text: str = ""

        self.font: Optional[pygame.font.Font] = None

        # Set by the app layout, below the buttons
        self.status_offset_y: int = 0

    # ------------------------------------------------------------------ API

    def set_board(self, board: Board, evaluation: Evaluation) -> None:
        self.board = board
        self.evaluation = evaluation

    def set_evaluation(self, evaluation: Evaluation) -> None:
        self.evaluation = evaluation

    def set_status(self, text: str) -> None:
        self.status_text = text

    def ensure_font(self) -> None:
        if self.font is None:
            self.font = pygame.font.SysFont("consolas", 16)

    # -------------------------------------------------------- Coords helpers

    def tile_size(self) -> int:
        screen = pygame.display.get_surface()
        if screen is None or self.board is None:
            return self.params.tile_size
        width, height = screen.get_size()
        view = min(width - self.params.sidebar_width_px, height)
        return max(8, view // self.board.size)

    def is_in_board(self, x: int, y: int) -> bool:
        if self.board is None:
            return False
        extent = self.tile_size() * self.board.size
        return 0 <= x < extent and 0 <= y < extent

    def get_tile_index_from_mouse(self, x: int, y: int) -> Optional[int]:
        if not self.is_in_board(x, y):
            return None
        assert self.board is not None
        ts = self.tile_size()
        return self.board.index(y // ts, x // ts)

    # ---------------------------------------------------------------- Draw

    def draw(self) -> None:
        screen = pygame.display.get_surface()
        if screen is None:
            return

        self.ensure_font()
        assert self.font is not None

        width, height = screen.get_size()
        sidebar_width = self.params.sidebar_width_px

        sidebar_rect = pygame.Rect(width - sidebar_width, 0, sidebar_width, height)

        screen.fill(self.params.background_color)

        if self.board is not None:
            self._draw_board(screen)

        self._draw_sidebar(screen, sidebar_rect)

    def _draw_board(self, screen: pygame.Surface) -> None:
        assert self.board is not None
        tile_size = self.tile_size()
        reachable = self.evaluation.reachable if self.evaluation else set()

        for tile in self.board:
            rect = pygame.Rect(tile.col * tile_size, tile.row * tile_size, tile_size, tile_size)
            self._draw_tile(screen, tile, rect, tile.coord in reachable)

            if self.params.show_grid:
                pygame.draw.rect(screen, (30, 30, 30), rect, 1)

    def _draw_tile(self, screen: pygame.Surface, tile: Tile, rect: pygame.Rect, connected: bool) -> None:
        pygame.draw.rect(screen, TILE_COLORS.get(tile.kind, (255, 0, 255)), rect)

        color = self.params.connected_color if connected else self.params.pipe_color
        pipe_w = max(2, int(rect.width * self.params.pipe_width_ratio))
        cx, cy = rect.center

        for direction in tile.connections():
            ex, ey = self._edge_midpoint(rect, direction)
            pygame.draw.line(screen, color, (cx, cy), (ex, ey), pipe_w)

        # round hub hides the gaps between arms
        pygame.draw.circle(screen, color, (cx, cy), pipe_w // 2)

    @staticmethod
    def _edge_midpoint(rect: pygame.Rect, direction: Direction) -> Tuple[int, int]:
        if direction == Direction.NORTH:
            return rect.midtop
        if direction == Direction.EAST:
            return rect.midright
        if direction == Direction.SOUTH:
            return rect.midbottom
        return rect.midleft

    def _draw_sidebar(self, screen: pygame.Surface, sidebar_rect: pygame.Rect) -> None:
        pygame.draw.rect(screen, (10, 10, 10), sidebar_rect)

        self.ensure_font()
        assert self.font is not None

        x = sidebar_rect.x + 10
        y = max(self.status_offset_y, sidebar_rect.y) + 4
        line_h = self.font.get_linesize()

        for line in wrap_text(self.font, self.status_text, sidebar_rect.width - 20):
            draw_label(screen, self.font, line, x, y)
            y += line_h

        if self.evaluation is not None and self.board is not None:
            y += line_h
            draw_label(
                screen,
                self.font,
                f"Connected: {len(self.evaluation.reachable)}/{len(self.board)}",
                x,
                y,
            )
