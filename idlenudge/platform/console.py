"""Headless host client that writes reminders to a text stream."""

import sys
from typing import Optional, TextIO

from idlenudge.core.models import ToastVariant
from idlenudge.platform.base import HostClient


class ConsoleHostClient(HostClient):
    """Prints toasts and keeps appended text in an in-memory prompt buffer."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self.prompt = ""

    def show_toast(self, message: str, variant: ToastVariant = ToastVariant.INFO) -> None:
        self.stream.write(f"[{variant.value}] {message}\n")
        self.stream.flush()

    def append_prompt(self, text: str) -> None:
        self.prompt += text
        self.stream.write(text + "\n")
        self.stream.flush()

    def clear_prompt(self) -> str:
        """Empty the prompt buffer and return what it held."""
        text, self.prompt = self.prompt, ""
        return text
