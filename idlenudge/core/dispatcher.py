"""Reminder dispatcher for IdleNudge.

Translates an emitted reminder into the configured host call: a toast
notification or an append to the prompt input.  Host failures are
logged and reported through the return value only; they never reach
the debouncer.
"""

import logging

from idlenudge.core.models import ReminderConfig, ReminderMode
from idlenudge.platform.base import HostClient

logger = logging.getLogger(__name__)


class ReminderDispatcher:
    """Performs the configured reminder action against a HostClient."""

    def __init__(self, client: HostClient, config: ReminderConfig) -> None:
        self.client = client
        self.config = config

    def dispatch(self) -> bool:
        """Show the reminder.  Returns ``False`` if the host call failed."""
        try:
            if self.config.mode == ReminderMode.APPEND:
                self.client.append_prompt(self.config.append_text)
            else:
                self.client.show_toast(self.config.toast_message, self.config.toast_variant)
        except Exception:
            logger.exception("Host rejected %s reminder", self.config.mode.value)
            return False
        return True
