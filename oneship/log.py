import logging
import sys
from pathlib import Path

from oneship.settings import LOGS_DIR

DEFAULT_LOG_FILE = LOGS_DIR / "oneship.log"


def setup_logging(level=logging.WARNING, log_file=None):
    """
    Configure the package logger. Console output goes to stderr so it never
    mixes with the board on stdout; the file handler always records DEBUG.
    """
    logger = logging.getLogger("oneship")
    logger.setLevel(logging.DEBUG)

    # Remove existing handlers
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    logger.addHandler(console_handler)

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        )
        logger.addHandler(file_handler)

    return logger
