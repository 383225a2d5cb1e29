from __future__ import annotations
import logging

from pipeflow.core.config import GenerationParams
from pipeflow.core.connectivity import evaluate
from pipeflow.core.generation import BoardGenerator
from pipeflow.core.text import render_board


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    solved = BoardGenerator(GenerationParams(size=10, seed=7, scramble=False)).generate()
    print("Solution:")
    print(render_board(solved, evaluate(solved).reachable))

    puzzle = BoardGenerator(GenerationParams(size=10, seed=7)).generate()
    print("\nPuzzle:")
    print(render_board(puzzle, evaluate(puzzle).reachable))


if __name__ == "__main__":
    main()
