import logging
from pathlib import Path

logger = logging.getLogger(__name__)

CLOCK_FILE = "now.txt"


class VirtualClock:
    """Integer counter in ``<state>/now.txt`` shared with the served app.

    advance() is a plain read-modify-write without locking. Two processes
    advancing the same clock at once can lose an update. If that ever
    matters, write to a sibling temp file under a file lock and os.replace()
    it into place.
    """

    def __init__(self, state_dir: Path):
        self.path = Path(state_dir) / CLOCK_FILE

    def read(self) -> int:
        return int(self.path.read_text(encoding="utf-8").strip())

    def advance(self, delta: int) -> int:
        # Negative deltas are written as-is; readers decide what rollback means
        new_time = self.read() + delta
        self.path.write_text(str(new_time), encoding="utf-8")
        logger.info("Clock advanced by %d to %d", delta, new_time)
        return new_time
