import csv
import logging
import time
import uuid
from pathlib import Path

logger = logging.getLogger(__name__)

FIELDS = ["session_id", "game", "timestamp", "row", "col", "result", "outcome", "shots", "hits"]


# ----------------------------------------------------------------------
# Telemetry logger - captures every shot and appends it to a CSV file
# ----------------------------------------------------------------------
class ShotLog:
    def __init__(self, path):
        self.path = Path(path)
        self.session_id = uuid.uuid4().hex[:8]
        self.start_ts = time.time()
        self.rows = []

    def record(self, game, row, col, result):
        self.rows.append({
            "session_id": self.session_id,
            "game": game,
            "timestamp": round(time.time() - self.start_ts, 3),
            "row": row,
            "col": col,
            "result": result,
        })

    def finish(self, game, outcome, shots, hits):
        """Stamp the game's result onto its rows."""
        for row in self.rows:
            if row["game"] == game:
                row["outcome"] = outcome
                row["shots"] = shots
                row["hits"] = hits

    def flush(self):
        """Append buffered rows to the CSV file. Returns the number of rows written."""
        if not self.rows:
            return 0

        new = not self.path.exists()
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("a", newline="") as fh:
                writer = csv.DictWriter(fh, fieldnames=FIELDS)
                if new:
                    writer.writeheader()
                writer.writerows(self.rows)
        except OSError as exc:
            logger.error(f"Could not write shot log {self.path}: {exc}")
            raise

        written = len(self.rows)
        logger.info(f"Wrote {written} shots to {self.path}")
        self.rows = []
        return written
