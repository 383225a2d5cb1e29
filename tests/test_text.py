"""Tests for core/text.py."""

from pipeflow.core.connectivity import evaluate
from pipeflow.core.text import render_board, tile_glyph
from pipeflow.core.tiles import PipeKind
from pipeflow.core.types import Tile


class TestTileGlyph:
    def test_pipes(self):
        assert tile_glyph(Tile(0, 0, PipeKind.TEE, 0)) == "├ "
        assert tile_glyph(Tile(0, 0, PipeKind.CORNER, 90)) == "┌ "
        assert tile_glyph(Tile(0, 0, PipeKind.END, 270)) == "╴ "

    def test_terminals_show_their_opening(self):
        assert tile_glyph(Tile(0, 0, PipeKind.START, 0)) == "S>"
        assert tile_glyph(Tile(2, 2, PipeKind.EXIT, 90)) == "X^"


class TestRenderBoard:
    def test_plain(self, solved_board):
        assert render_board(solved_board) == "\n".join([
            "S>─ ┐",
            "╷ ╷ │",
            "╷ ╷ X^",
        ])

    def test_marks_reachable_tiles(self, solved_board):
        reachable = evaluate(solved_board).reachable
        assert render_board(solved_board, reachable) == "\n".join([
            "S>─*┐*",
            "╷ ╷ │*",
            "╷ ╷ X^",
        ])
