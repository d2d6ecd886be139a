"""
One Ship - single-ship terminal Battleship

This package contains the game logic and the terminal front end.

Available modules:
- ship: the hidden ship and its hit tracking
- board: visible board grid and rendering
- game: one game's firing loop
- session: repeats games and asks to play again
- shot_log: CSV telemetry of every shot
- benchmark: scripted batch runs
- main: command line entry point
"""

__version__ = "1.0.0"
