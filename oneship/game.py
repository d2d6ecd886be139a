import logging
from enum import Enum

from oneship.board import Board, CellState
from oneship.settings import BOARD_SIZE
from oneship.ship import Ship

logger = logging.getLogger(__name__)


class Outcome(Enum):
    SUNK = "sunk"
    ABORTED = "aborted"


class TokenReader:
    """
    Pulls whitespace separated tokens out of an input callable.
    Extra tokens on a line are kept for the next read, so "3 4" typed at the
    row prompt answers the column prompt as well.
    """

    def __init__(self, read=input):
        self.read = read
        self.pending = []

    def next_token(self, prompt):
        while not self.pending:
            try:
                line = self.read(prompt)
            except EOFError:
                return None
            self.pending = line.split()
        return self.pending.pop(0)

    def next_int(self, prompt):
        """Next token as an int. End of input and junk both read as 0."""
        token = self.next_token(prompt)
        if token is None:
            logger.info("Input closed while waiting for a coordinate")
            return 0
        try:
            return int(token)
        except ValueError:
            logger.warning(f"Ignoring malformed coordinate {token!r}")
            return 0

    def clear(self):
        self.pending = []


class Game:
    """One game: a hidden ship, the visible board and the shot counters."""

    def __init__(self, game_number, board_size=BOARD_SIZE, rng=None,
                 read=input, write=print, shot_log=None, reader=None):
        self.game_number = game_number
        self.board = Board(board_size)
        self.ship = Ship(board_size, rng)
        self.shots = 0
        self.hits = 0
        self.outcome = None
        self.reader = reader or TokenReader(read)
        self.write = write
        self.shot_log = shot_log
        logger.debug(f"Game {game_number} ship: {self.ship.to_dict()}")

    # ------------------------------------------------------------------ #
    # Core loop
    # ------------------------------------------------------------------ #
    def play(self):
        """Fire until the ship is sunk or the player enters a coordinate <= 0."""
        size = self.board.size
        message = f"Enter row and column (1-{size}). 0 quits this game."

        while not self.ship.is_sunk():
            self.display_state(message)

            row = self.reader.next_int("Row: ")
            col = self.reader.next_int("Column: ")
            if row <= 0 or col <= 0:
                return self._finish(Outcome.ABORTED)

            if not self.board.in_range(row, col):
                message = f"({row}, {col}) is off the board. Pick values between 1 and {size}."
                self.reader.clear()
                continue

            warning = ""
            if self.board.is_fired(row, col):
                warning = f"You've already fired at ({row}, {col}). "
            hit = self.fire(row, col)
            message = warning + (f"({row}, {col}) is a HIT!" if hit else f"({row}, {col}) is a miss.")

        return self._finish(Outcome.SUNK)

    def fire(self, row, col):
        """Charge a shot at an in-range cell and mark the board. Returns True on a hit."""
        self.shots += 1
        hit = self.ship.is_hit(row, col)
        self.board.mark(row, col, CellState.HIT if hit else CellState.MISS)
        if hit:
            self.hits += 1
        logger.debug(f"Game {self.game_number} shot {self.shots} at ({row}, {col}): {'hit' if hit else 'miss'}")
        if self.shot_log is not None:
            self.shot_log.record(self.game_number, row, col, "hit" if hit else "miss")
        return hit

    def _finish(self, outcome):
        self.outcome = outcome
        if outcome is Outcome.SUNK:
            self.display_state(f"You sank the ship in {self.shots} shots!")
        else:
            self.display_state("Game aborted. The ship was here:", reveal=True)
        logger.info(f"Game {self.game_number} {outcome.value} after {self.shots} shots, {self.hits} hits")
        if self.shot_log is not None:
            self.shot_log.finish(self.game_number, outcome.value, self.shots, self.hits)
        return outcome

    # ------------------------------------------------------------------ #
    # Display
    # ------------------------------------------------------------------ #
    def render(self, message="", reveal=False):
        lines = [
            self.board.render(reveal=self.ship.coordinates if reveal else None),
            "",
            f"Game #{self.game_number}  Shots: {self.shots}  Hits: {self.hits}",
        ]
        if message:
            lines.append(message)
        return "\n".join(lines)

    def display_state(self, message="", reveal=False):
        self.write("\n" + self.render(message, reveal))
