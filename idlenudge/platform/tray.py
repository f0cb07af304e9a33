"""System tray host client.

Shows reminder toasts as desktop notifications through a pystray icon.
The icon runs in a daemon background thread so event handling stays
responsive.  Prompt appends have no tray equivalent and are recorded
and logged instead.
"""

import logging
import threading
from typing import Optional

from idlenudge.core.models import ToastVariant
from idlenudge.platform.base import HostClient

logger = logging.getLogger(__name__)

_TITLES = {
    ToastVariant.INFO: "IdleNudge",
    ToastVariant.SUCCESS: "IdleNudge",
    ToastVariant.WARNING: "IdleNudge: warning",
    ToastVariant.ERROR: "IdleNudge: error",
}


def _create_default_icon():
    """Draw a simple 64x64 tray icon with PIL."""
    try:
        from PIL import Image, ImageDraw
    except ImportError:
        return None

    img = Image.new("RGB", (64, 64), color=(90, 125, 154))
    draw = ImageDraw.Draw(img)
    draw.ellipse((16, 16, 48, 48), fill=(245, 196, 66))
    return img


class TrayHostClient(HostClient):
    """Host client backed by a pystray system tray icon."""

    def __init__(self, name: str = "IdleNudge") -> None:
        self.name = name
        self.icon = None
        self.prompt = ""
        self._thread: Optional[threading.Thread] = None

    def start(self) -> None:
        """Create the tray icon and run it in a daemon thread."""
        if self.icon is not None:
            return
        try:
            import pystray
            from pystray import Menu, MenuItem
        except ImportError:
            logger.warning(
                "pystray not available; reminders will only be logged. "
                "Install pystray for desktop notifications."
            )
            return

        image = _create_default_icon()
        if image is None:
            logger.warning("Could not create tray icon image; skipping tray")
            return

        menu = Menu(MenuItem("Quit", lambda: self.stop()))
        self.icon = pystray.Icon(self.name, image, self.name, menu)
        self._thread = threading.Thread(
            target=self.icon.run, daemon=True, name="idlenudge-tray"
        )
        self._thread.start()
        logger.info("Tray icon started in background thread")

    def stop(self) -> None:
        """Tear down the tray icon."""
        if self.icon is not None:
            try:
                self.icon.stop()
            except Exception:
                logger.debug("Tray icon already stopped")
            self.icon = None
        if self._thread is not None and self._thread is not threading.current_thread():
            self._thread.join(timeout=5)
        self._thread = None

    # ------------------------------------------------------------------
    # HostClient interface
    # ------------------------------------------------------------------

    def show_toast(self, message: str, variant: ToastVariant = ToastVariant.INFO) -> None:
        if self.icon is None or not getattr(self.icon, "HAS_NOTIFICATION", False):
            logger.info("%s: %s", _TITLES[variant], message)
            return
        self.icon.notify(message, _TITLES[variant])

    def append_prompt(self, text: str) -> None:
        self.prompt += text
        logger.info("Prompt reminder: %s", text.strip())
