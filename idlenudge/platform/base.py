"""Abstract base class for host clients."""

from abc import ABC, abstractmethod

from idlenudge.core.models import ToastVariant


class HostClient(ABC):
    """Capabilities the host exposes to the plugin.

    The host owns rendering; the plugin only asks it to show a toast or
    to append text to the interactive prompt input.
    """

    @abstractmethod
    def show_toast(self, message: str, variant: ToastVariant = ToastVariant.INFO) -> None:
        """Display a transient notification."""
        pass

    @abstractmethod
    def append_prompt(self, text: str) -> None:
        """Append *text* to the prompt input buffer."""
        pass
