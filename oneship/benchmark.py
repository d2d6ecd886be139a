"""
Head-less batch runs: play many games by feeding a fixed sweep of shots
through the normal input path and report how many shots each game took.
"""

import logging
import random

from tqdm import tqdm

from oneship.game import Game, Outcome
from oneship.settings import BOARD_SIZE

logger = logging.getLogger(__name__)

NUM_GAMES = 1000


def sweep_input(board_size=BOARD_SIZE):
    """Input callable that answers every prompt with the next cell of a row-major sweep."""
    tokens = iter([str(v) for r in range(1, board_size + 1)
                   for c in range(1, board_size + 1) for v in (r, c)])

    def read(prompt=""):
        try:
            return next(tokens)
        except StopIteration:
            raise EOFError("sweep exhausted") from None

    return read


def run_batch(num_games=NUM_GAMES, board_size=BOARD_SIZE, rng=None, shot_log=None, progress=True):
    rng = rng or random.Random()
    shots = []
    aborted = 0
    for game_number in tqdm(range(1, num_games + 1), desc="Sweeping", ncols=80, disable=not progress):
        game = Game(game_number, board_size=board_size, rng=rng,
                    read=sweep_input(board_size), write=lambda *_: None, shot_log=shot_log)
        if game.play() is Outcome.SUNK:
            shots.append(game.shots)
        else:
            aborted += 1

    results = {
        "games": num_games,
        "sunk": len(shots),
        "aborted": aborted,
        "avg_shots": round(sum(shots) / len(shots), 2) if shots else 0,
        "min_shots": min(shots) if shots else 0,
        "max_shots": max(shots) if shots else 0,
    }
    logger.info(f"Batch complete: {results}")
    return results
