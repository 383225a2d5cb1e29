from __future__ import annotations
import logging

from pipeflow.game.config import AppConfig
from pipeflow.game.app import PipePuzzleApp


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    app = PipePuzzleApp(AppConfig())
    app.run()


if __name__ == "__main__":
    main()
