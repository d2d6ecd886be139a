"""Game constants. Command line flags override the session limits per run."""

from pathlib import Path

# Directory setup
BASE_DIR = Path.cwd()
LOGS_DIR = BASE_DIR / "logs"
DATA_DIR = BASE_DIR / "data"

BOARD_SIZE = 5

# Session limits
MAX_GAMES = 10
MAX_PROMPT_RETRIES = 3

# Rendering
CELL_DELIMITER = " | "
EMPTY_GLYPH = "."
MISS_GLYPH = "O"
HIT_GLYPH = "X"
SHIP_GLYPH = "S"
