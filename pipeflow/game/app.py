from __future__ import annotations

import sys

import pygame

from pipeflow.core.rules import GameSession

from .config import AppConfig
from .renderer import PygameRenderer
from .ui.widgets import Button


class PipePuzzleApp:
    def __init__(self, config: AppConfig) -> None:
        self.cfg = config
        self.renderer = PygameRenderer(config.render)
        self.session = GameSession(self.cfg.generation)

        pygame.init()
        pygame.display.set_caption(self.cfg.render.window_title)

        board_px = self.cfg.render.tile_size * self.cfg.generation.size
        self.window = pygame.display.set_mode(
            (board_px + self.cfg.render.sidebar_width_px, board_px), pygame.RESIZABLE
        )
        self.font = pygame.font.SysFont("consolas", 18)

        self.btn_restart = Button(
            rect=pygame.Rect(0, 0, 10, 10),
            text="Restart",
            font=self.font,
            on_click=self.restart,
        )

        self._layout_ui()
        self._sync_renderer()

    # ---------------------------------------------------------------- Layout

    def _layout_ui(self) -> None:
        width, _height = self.window.get_size()
        sidebar_width = self.cfg.render.sidebar_width_px

        x = width - sidebar_width + 10
        w = sidebar_width - 20
        y = 10
        h_btn = 32
        gap = 8

        self.btn_restart.rect = pygame.Rect(x, y, w, h_btn)
        y += h_btn + gap

        # status text sits below the buttons
        self.renderer.status_offset_y = y + 4

    def _sync_renderer(self) -> None:
        self.renderer.set_board(self.session.board, self.session.evaluation)
        self.renderer.set_status(self.session.status_text)

    # -------------------------------------------------------------- Game

    def restart(self) -> None:
        self.session.new_game()
        self._sync_renderer()

    def rotate_at(self, x: int, y: int) -> None:
        index = self.renderer.get_tile_index_from_mouse(x, y)
        if index is None:
            return

        evaluation = self.session.click(index)
        if evaluation is None:
            return

        self.renderer.set_evaluation(evaluation)
        self.renderer.set_status(self.session.status_text)

    # -------------------------------------------------------------- Events

    def handle_mouse_down(self, event: pygame.event.Event) -> None:
        if event.button != 1:
            return

        # send to UI first
        if self.btn_restart.handle_event(event):
            return

        x, y = event.pos
        if self.renderer.is_in_board(x, y):
            self.rotate_at(x, y)

    def handle_key(self, event: pygame.event.Event) -> None:
        if event.key == pygame.K_r:
            self.restart()

    # ----------------------------------------------------------- Draw UI

    def draw_ui(self) -> None:
        self.btn_restart.draw(self.window)

    # ------------------------------------------------------------- Main loop

    def run(self) -> None:
        clock = pygame.time.Clock()
        running = True

        while running:
            _dt = clock.tick(60)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                    break

                if event.type == pygame.VIDEORESIZE:
                    self.window = pygame.display.set_mode(event.size, pygame.RESIZABLE)
                    self._layout_ui()
                    continue

                if event.type == pygame.MOUSEBUTTONDOWN:
                    self.handle_mouse_down(event)

                if event.type == pygame.MOUSEMOTION:
                    self.btn_restart.handle_event(event)

                if event.type == pygame.KEYDOWN:
                    self.handle_key(event)

            self.renderer.draw()
            self.draw_ui()
            pygame.display.flip()

        pygame.quit()
        sys.exit()
