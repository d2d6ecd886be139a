"""Visible board for the game: what the player has fired at and what it hit."""

from enum import IntEnum

import numpy as np

from oneship.settings import (
    BOARD_SIZE, CELL_DELIMITER, EMPTY_GLYPH, HIT_GLYPH, MISS_GLYPH, SHIP_GLYPH,
)


class CellState(IntEnum):
    EMPTY = 0
    MISS = 1
    HIT = 2


SYMBOLS = {
    CellState.EMPTY: EMPTY_GLYPH,
    CellState.MISS: MISS_GLYPH,
    CellState.HIT: HIT_GLYPH,
}


class Board:
    def __init__(self, size=BOARD_SIZE):
        if size < 2:
            raise ValueError(f"Board size must be at least 2, got {size}")
        self.size = size
        self.grid = np.zeros((size, size), dtype=int)

    def in_range(self, row, col):
        """True when both coordinates fall in 1..size."""
        return 1 <= row <= self.size and 1 <= col <= self.size

    def _index(self, row, col):
        if not self.in_range(row, col):
            raise IndexError(f"({row}, {col}) is outside a {self.size}x{self.size} board")
        return row - 1, col - 1

    def cell(self, row, col):
        return CellState(int(self.grid[self._index(row, col)]))

    def is_fired(self, row, col):
        return self.cell(row, col) is not CellState.EMPTY

    def mark(self, row, col, state):
        self.grid[self._index(row, col)] = int(state)

    def counts(self):
        """Number of hit and miss cells on the board."""
        return {
            CellState.HIT: int(np.count_nonzero(self.grid == CellState.HIT)),
            CellState.MISS: int(np.count_nonzero(self.grid == CellState.MISS)),
        }

    def render(self, delimiter=CELL_DELIMITER, reveal=None):
        """
        Text rendering of the board: a header row of column numbers, then one
        line per row prefixed with its number. `reveal` is an iterable of ship
        coordinates to show as ship glyphs where they have not been fired at.
        """
        hidden = set(reveal or ())
        width = len(str(self.size))
        pad = " " * (width + 1)

        header = pad + (" " * len(delimiter)).join(str(c) for c in range(1, self.size + 1))
        lines = [header.rstrip()]
        for r in range(1, self.size + 1):
            row_display = []
            for c in range(1, self.size + 1):
                state = self.cell(r, c)
                if state is CellState.EMPTY and (r, c) in hidden:
                    row_display.append(SHIP_GLYPH)
                else:
                    row_display.append(SYMBOLS[state])
            lines.append(f"{str(r).rjust(width)} " + delimiter.join(row_display))
        return "\n".join(lines)
