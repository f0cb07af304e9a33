"""Idle reminder debouncer for IdleNudge.

Turns a raw stream of idle notifications into a gated stream of reminder
actions.  A reminder fires at most once per cooldown window; the window
boundary is inclusive, so a notification arriving exactly ``cooldown_ms``
after the last emitted reminder fires again.
"""

import logging
import math

from idlenudge.core.models import DEFAULT_COOLDOWN_MS, DebounceState, Decision

logger = logging.getLogger(__name__)


class IdleReminderDebouncer:
    """Decides, per idle notification, whether a reminder should be emitted."""

    def __init__(self, cooldown_ms: float = DEFAULT_COOLDOWN_MS) -> None:
        if not math.isfinite(cooldown_ms) or cooldown_ms < 0:
            raise ValueError(f"cooldown_ms must be a finite number >= 0, got {cooldown_ms!r}")
        self._state = DebounceState(cooldown_ms=cooldown_ms)

    @property
    def state(self) -> DebounceState:
        """The debounce state owned by this instance."""
        return self._state

    def on_idle_notification(self, now: float) -> Decision:
        """Process one idle notification arriving at *now* (milliseconds).

        Returns ``Decision.ACTION`` and records *now* as the last firing
        time when the cooldown has elapsed (or nothing has fired yet);
        otherwise returns ``Decision.SUPPRESSED`` and leaves state untouched.
        """
        last = self._state.last_fired_at
        if last is not None:
            elapsed = now - last
            # A clock that went backwards yields a negative elapsed; suppress.
            if elapsed < self._state.cooldown_ms:
                logger.debug(
                    "Idle reminder suppressed (%.0f ms since last, cooldown %.0f ms)",
                    elapsed, self._state.cooldown_ms,
                )
                return Decision.SUPPRESSED

        self._state.last_fired_at = now
        return Decision.ACTION

    def reset(self) -> None:
        """Forget the last firing time so the next notification always fires."""
        self._state.last_fired_at = None
