import logging
import random

from oneship.game import Game, Outcome, TokenReader
from oneship.settings import BOARD_SIZE, MAX_GAMES, MAX_PROMPT_RETRIES

logger = logging.getLogger(__name__)


class Session:
    """Plays games back to back until the player stops or the game limit is hit."""

    def __init__(self, max_games=MAX_GAMES, max_retries=MAX_PROMPT_RETRIES, rng=None,
                 read=input, write=print, shot_log=None, board_size=BOARD_SIZE):
        self.max_games = max_games
        self.max_retries = max_retries
        self.rng = rng or random.Random()
        self.reader = TokenReader(read)
        self.write = write
        self.shot_log = shot_log
        self.board_size = board_size
        self.games = []

    def run(self):
        """Returns a summary dict of the games played."""
        game_number = 0
        while game_number < self.max_games:
            game_number += 1
            game = Game(game_number, board_size=self.board_size, rng=self.rng,
                        write=self.write, shot_log=self.shot_log, reader=self.reader)
            game.play()
            self.games.append(game)
            self.save_shots()

            if game_number >= self.max_games:
                self.write(f"\nGame limit of {self.max_games} reached. Thanks for playing!")
                break
            if not self.ask_yes_no("Play again? (y/n): "):
                self.write("\nThanks for playing!")
                break

        summary = self.summary()
        logger.info(f"Session over: {summary}")
        return summary

    def ask_yes_no(self, prompt):
        """
        Ask until the answer starts with y or n (any case). Gives up and answers
        no after max_retries bad answers or when input runs out.
        """
        self.reader.clear()
        bad_answers = 0
        while True:
            answer = self.reader.next_token(prompt)
            self.reader.clear()
            if answer is None:
                return False
            choice = answer[0].lower()
            if choice == "y":
                return True
            if choice == "n":
                return False

            bad_answers += 1
            logger.warning(f"Unrecognised answer {answer!r} ({bad_answers}/{self.max_retries})")
            if bad_answers >= self.max_retries:
                self.write("Too many invalid answers. Stopping.")
                return False
            self.write("Please answer y or n.")

    def save_shots(self):
        """Write the finished game's shots so an interrupted session keeps them."""
        if self.shot_log is None:
            return
        try:
            self.shot_log.flush()
        except OSError:
            self.write(f"Could not save the shot log to {self.shot_log.path}. Shot logging is off.")
            self.shot_log = None

    def summary(self):
        return {
            "games": len(self.games),
            "sunk": sum(1 for g in self.games if g.outcome is Outcome.SUNK),
            "aborted": sum(1 for g in self.games if g.outcome is Outcome.ABORTED),
            "shots": sum(g.shots for g in self.games),
            "hits": sum(g.hits for g in self.games),
        }
