import random
from enum import Enum

from oneship.settings import BOARD_SIZE


class Orientation(Enum):
    HORIZONTAL = "H"
    VERTICAL = "V"


class Ship:
    """
    Represents the hidden ship.
    Lays itself out on a straight lane one cell shorter than the board and tracks hits.
    Coordinates are 1-indexed (row, col) tuples.
    """

    def __init__(self, board_size=BOARD_SIZE, rng=None):
        if board_size < 2:
            raise ValueError(f"Board size must be at least 2, got {board_size}")
        rng = rng or random.Random()

        self._orientation = rng.choice([Orientation.HORIZONTAL, Orientation.VERTICAL])
        offset = rng.randint(1, 2)
        lane = rng.randint(1, board_size)

        length = board_size - 1
        if self._orientation is Orientation.HORIZONTAL:
            self._cells = [(lane, offset + i) for i in range(length)]
        else:
            self._cells = [(offset + i, lane) for i in range(length)]
        self._hit = [False] * length

    @property
    def orientation(self):
        return self._orientation

    @property
    def size(self):
        return len(self._cells)

    @property
    def coordinates(self):
        return tuple(self._cells)

    @property
    def hits(self):
        return sum(self._hit)

    def is_hit(self, row, col):
        # A cell that is already hit does not match again
        for i, cell in enumerate(self._cells):
            if not self._hit[i] and cell == (row, col):
                self._hit[i] = True
                return True  # Positive hit
        return False  # Miss

    def is_sunk(self):
        return all(self._hit)

    def to_dict(self):
        """Snapshot of the ship for logging."""
        return {
            'size': self.size,
            'orientation': self._orientation.value,
            'coordinates': list(self._cells),
            'hits': [c for c, h in zip(self._cells, self._hit) if h],
            'is_sunk': self.is_sunk()
        }
