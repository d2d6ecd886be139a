# main.py
import argparse
import logging
import random

from oneship.benchmark import NUM_GAMES, run_batch
from oneship.log import DEFAULT_LOG_FILE, setup_logging
from oneship.session import Session
from oneship.settings import DATA_DIR, MAX_GAMES, MAX_PROMPT_RETRIES
from oneship.shot_log import ShotLog

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(prog="oneship", description="Find and sink the hidden ship.")
    parser.add_argument("--games", type=int, default=MAX_GAMES, help="Maximum games in one session")
    parser.add_argument("--retries", type=int, default=MAX_PROMPT_RETRIES,
                        help="Invalid answers allowed at the play-again prompt")
    parser.add_argument("--seed", type=int, default=None, help="Seed for ship placement")
    parser.add_argument("--shot-log", nargs="?", const=str(DATA_DIR / "shots.csv"), default=None,
                        help="Append every shot to a CSV file")
    parser.add_argument("--benchmark", type=int, nargs="?", const=NUM_GAMES, default=None,
                        help="Play this many scripted games instead of an interactive session")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Console log level")
    parser.add_argument("--log-file", nargs="?", const=str(DEFAULT_LOG_FILE), default=None,
                        help="Also log to a file (default path when given without a value)")
    return parser


def main(argv=None, read=input, write=print):
    args = build_parser().parse_args(argv)
    setup_logging(getattr(logging, args.log_level), args.log_file)
    logger.debug(f"Arguments: {vars(args)}")

    rng = random.Random(args.seed)
    shot_log = ShotLog(args.shot_log) if args.shot_log else None

    try:
        if args.benchmark is not None:
            results = run_batch(args.benchmark, rng=rng, shot_log=shot_log)
            write(f"Games: {results['games']}  Sunk: {results['sunk']}  "
                  f"Avg shots: {results['avg_shots']}  Min: {results['min_shots']}  Max: {results['max_shots']}")
        else:
            session = Session(max_games=args.games, max_retries=args.retries, rng=rng,
                              read=read, write=write, shot_log=shot_log)
            session.run()
    finally:
        # Shots still buffered when the run ends or is interrupted
        if shot_log is not None:
            try:
                shot_log.flush()
            except OSError:
                write(f"Could not save the shot log to {args.shot_log}.")
    return 0


if __name__ == "__main__":
    main()
