import errno
import logging
import os
import select
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

RELOAD_ALL = "reload_all"


class ReloadChannel:
    """Named pipe used to tell an open browser to reload its pages.

    The listening side opens the pipe with ``with channel:`` and calls
    poll() between Playwright calls, so the pipe never blocks the thread
    that delivers browser events.
    """

    def __init__(self, path: str):
        self.path = Path(path)
        self._fd: Optional[int] = None

    def ensure(self) -> None:
        if self.path.exists():
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        os.mkfifo(self.path)

    def __enter__(self) -> "ReloadChannel":
        self.ensure()
        # O_RDWR keeps a writer attached, so select() only wakes up on real data
        self._fd = os.open(self.path, os.O_RDWR | os.O_NONBLOCK)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._fd is not None:
            os.close(self._fd)
            self._fd = None

    def poll(self, timeout: float = 0) -> Optional[str]:
        """Returns the pending message, or None when nothing was sent."""
        if self._fd is None:
            raise RuntimeError("ReloadChannel.poll() called outside 'with channel:'")
        ready, _, _ = select.select([self._fd], [], [], timeout)
        if not ready:
            return None
        return os.read(self._fd, 4096).decode("utf-8").strip()

    def broadcast(self, message: str = RELOAD_ALL) -> bool:
        """Returns False when no browser is listening on the pipe."""
        self.ensure()
        try:
            fd = os.open(self.path, os.O_WRONLY | os.O_NONBLOCK)
        except OSError as e:
            if e.errno == errno.ENXIO:
                logger.warning("No browser listening on %s", self.path)
                return False
            raise
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(message)
        return True
