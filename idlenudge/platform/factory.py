"""Factory for creating the requested HostClient."""

from idlenudge.platform.base import HostClient


def create_host_client(kind: str = "console") -> HostClient:
    """Return the HostClient for *kind* (``"console"`` or ``"tray"``).

    Uses lazy imports so the tray backend (pystray/PIL) is only loaded
    when it is actually requested.

    Raises:
        ValueError: If *kind* is not a known host client.
    """
    if kind == "console":
        from idlenudge.platform.console import ConsoleHostClient
        return ConsoleHostClient()

    if kind == "tray":
        from idlenudge.platform.tray import TrayHostClient
        client = TrayHostClient()
        client.start()
        return client

    raise ValueError(
        f"Unknown host client: {kind!r}. "
        "IdleNudge supports 'console' and 'tray'."
    )
