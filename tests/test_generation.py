"""Tests for core/generation.py."""

import random

import pytest

from pipeflow.core.config import GenerationParams
from pipeflow.core.connectivity import evaluate
from pipeflow.core.directions import ROTATIONS
from pipeflow.core.generation import BoardGenerator, GenerationError, generate_board
from pipeflow.core.rules import rotate_tile
from pipeflow.core.tiles import FILLER_KINDS, PipeKind


def _generate(size, seed, scramble=True):
    return BoardGenerator(GenerationParams(size=size, seed=seed, scramble=scramble)).generate()


class TestSolvability:
    @pytest.mark.parametrize("size", [2, 3, 5, 8, 20])
    def test_unscrambled_board_is_won(self, size):
        for seed in range(10):
            board = _generate(size, seed, scramble=False)
            assert evaluate(board).won, f"size={size} seed={seed}"

    def test_scramble_keeps_kinds(self):
        for seed in range(10):
            solved = _generate(10, seed, scramble=False)
            puzzle = _generate(10, seed)
            assert [t.kind for t in puzzle] == [t.kind for t in solved]

    def test_scrambled_board_can_be_rotated_back(self):
        for seed in range(10):
            solved = _generate(12, seed, scramble=False)
            puzzle = _generate(12, seed)

            for index, (have, want) in enumerate(zip(puzzle, solved)):
                clicks = ((want.rotation - have.rotation) % 360) // 90
                for _ in range(clicks):
                    rotate_tile(puzzle, index)

            assert evaluate(puzzle).won


class TestBoardShape:
    def test_terminals_pinned_for_any_seed(self):
        for seed in range(25):
            board = _generate(6, seed)
            assert board.tile_at(0, 0).kind == PipeKind.START
            assert board.tile_at(5, 5).kind == PipeKind.EXIT

            kinds = [t.kind for t in board]
            assert kinds.count(PipeKind.START) == 1
            assert kinds.count(PipeKind.EXIT) == 1
            assert all(k in FILLER_KINDS for k in kinds[1:-1])

    def test_rotations_are_quarter_turns(self):
        board = _generate(10, 3)
        assert all(t.rotation in ROTATIONS for t in board)

    def test_tiles_are_in_row_major_order(self):
        board = _generate(4, 1)
        assert [t.coord for t in board] == [(r, c) for r in range(4) for c in range(4)]

    def test_default_size(self):
        board = BoardGenerator(GenerationParams(seed=0)).generate()
        assert board.size == 20
        assert len(board) == 400


class TestRandomness:
    def test_same_seed_same_board(self):
        a = _generate(8, 42)
        b = _generate(8, 42)
        assert a == b

    def test_injected_rng_matches_seed(self):
        params = GenerationParams(size=8, seed=None)
        a = BoardGenerator(params, rng=random.Random(5)).generate()
        b = BoardGenerator(GenerationParams(size=8, seed=5)).generate()
        assert a == b

    def test_generate_board_helper(self):
        board = generate_board(6, seed=3)
        assert board.size == 6
        assert board == _generate(6, 3)


class TestEdgeCases:
    def test_single_cell_board(self):
        board = _generate(1, 0)
        assert len(board) == 1
        assert board.tiles[0].kind == PipeKind.START
        assert evaluate(board).won

    def test_invalid_size(self):
        with pytest.raises(ValueError):
            _generate(0, 0)

    def test_carving_failure_raises(self, monkeypatch):
        monkeypatch.setattr(BoardGenerator, "_carve_path", lambda self, board: None)
        params = GenerationParams(size=5, seed=0, max_attempts=3)
        with pytest.raises(GenerationError, match="3 attempts"):
            BoardGenerator(params).generate()

    def test_carving_is_retried(self, monkeypatch):
        original = BoardGenerator._carve_path
        calls = []

        def flaky(self, board):
            calls.append(board)
            if len(calls) < 3:
                return None
            return original(self, board)

        monkeypatch.setattr(BoardGenerator, "_carve_path", flaky)
        board = _generate(5, 0, scramble=False)
        assert len(calls) == 3
        assert evaluate(board).won
