"""Idle reminder plugin.

Subscribes to the host's idle event and, at most once per cooldown
window, reminds the user to run /retrospective so that non-obvious
fixes get saved as skills.
"""

import logging
from typing import Any, Callable, Optional, Union

from idlenudge.core.clock import now_ms
from idlenudge.core.debouncer import IdleReminderDebouncer
from idlenudge.core.dispatcher import ReminderDispatcher
from idlenudge.core.models import Decision, HostEvent, ReminderConfig
from idlenudge.platform.base import HostClient

logger = logging.getLogger(__name__)


class IdleReminderPlugin:
    """Event handler wiring one debouncer to one reminder dispatcher."""

    def __init__(
        self,
        client: HostClient,
        config: Optional[ReminderConfig] = None,
        clock: Callable[[], float] = now_ms,
    ) -> None:
        self.config = config if config is not None else ReminderConfig()
        self.clock = clock
        self.debouncer = IdleReminderDebouncer(cooldown_ms=self.config.cooldown_ms)
        self.dispatcher = ReminderDispatcher(client, self.config)

    @property
    def handled_event_type(self) -> str:
        """The one event kind this plugin reacts to."""
        return self.config.event_type

    def handle_event(self, event: Union[HostEvent, dict[str, Any]]) -> Optional[Decision]:
        """Handle one host event.

        Returns ``None`` for events other than the idle event (they pass
        through untouched), otherwise the debounce decision.
        """
        if isinstance(event, dict):
            try:
                event = HostEvent.from_dict(event)
            except ValueError:
                logger.warning("Ignoring malformed host event: %r", event)
                return None

        if event.type != self.handled_event_type:
            return None

        decision = self.debouncer.on_idle_notification(self.clock())
        if decision == Decision.ACTION:
            logger.info("Session idle; dispatching %s reminder", self.config.mode.value)
            self.dispatcher.dispatch()
        return decision
