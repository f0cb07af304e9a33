"""Clock helpers in the host's native unit (milliseconds)."""

import time


def now_ms() -> float:
    """Return the current UNIX epoch time in milliseconds."""
    return time.time() * 1000.0
