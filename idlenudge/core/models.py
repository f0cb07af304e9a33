"""Core data models for IdleNudge.

Defines all dataclasses and enums used across the plugin:
- Host events: HostEvent
- Debouncing: Decision, DebounceState
- Reminder dispatch: ReminderMode, ToastVariant, ReminderConfig
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


# ---------------------------------------------------------------------------
# Host events
# ---------------------------------------------------------------------------

# Fired when the assistant finishes responding and the host waits for input.
IDLE_EVENT_TYPE = "session.idle"


@dataclass
class HostEvent:
    """A single lifecycle event delivered by the host runtime."""
    type: str
    properties: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "HostEvent":
        """Build an event from the host's ``{"type": ..., "properties": ...}`` shape.

        Raises ``ValueError`` if ``type`` is missing or not a string.
        """
        event_type = data.get("type")
        if not isinstance(event_type, str) or not event_type:
            raise ValueError(f"Event has no valid 'type': {data!r}")
        properties = data.get("properties") or {}
        if not isinstance(properties, dict):
            properties = {}
        return cls(type=event_type, properties=properties)


# ---------------------------------------------------------------------------
# Debouncing
# ---------------------------------------------------------------------------

class Decision(Enum):
    """Outcome of a single debounce check."""
    ACTION = "action"
    SUPPRESSED = "suppressed"


@dataclass
class DebounceState:
    """Timestamp of the last emitted reminder plus the fixed cooldown window."""
    cooldown_ms: float
    last_fired_at: Optional[float] = None  # None means "never fired"


# ---------------------------------------------------------------------------
# Reminder dispatch
# ---------------------------------------------------------------------------

class ReminderMode(Enum):
    """How an emitted reminder is presented by the host."""
    TOAST = "toast"
    APPEND = "append"


class ToastVariant(Enum):
    """Toast styles understood by the host."""
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


DEFAULT_TOAST_MESSAGE = (
    "Continuous learning: if we learned something non-obvious, "
    "run /retrospective to save it as a skill."
)

DEFAULT_APPEND_TEXT = (
    "\n\n[Learning checkpoint] If we discovered a non-obvious "
    "fix/workaround/pattern, run /retrospective to save it as a skill."
)

DEFAULT_COOLDOWN_MS = 1500


@dataclass
class ReminderConfig:
    """Typed view of the plugin configuration."""
    mode: ReminderMode = ReminderMode.TOAST
    cooldown_ms: float = DEFAULT_COOLDOWN_MS
    event_type: str = IDLE_EVENT_TYPE
    toast_message: str = DEFAULT_TOAST_MESSAGE
    toast_variant: ToastVariant = ToastVariant.INFO
    append_text: str = DEFAULT_APPEND_TEXT
    host: str = "console"
