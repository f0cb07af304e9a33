"""IdleNudge command-line host runner.

Reads host events as JSON lines and feeds them to the idle reminder
plugin, standing in for the host runtime's event delivery.

Usage:
    python -m idlenudge.main                          # events from stdin
    python -m idlenudge.main --events events.jsonl    # events from a file
    python -m idlenudge.main --mode append --cooldown-ms 3000
"""

import argparse
import json
import logging
import sys
from typing import Any, Iterable

from idlenudge.core.config import (
    HOST_KINDS,
    get_default_config_path,
    load_config,
    parse_reminder_config,
)
from idlenudge.core.models import ReminderMode
from idlenudge.platform.factory import create_host_client
from idlenudge.plugin import IdleReminderPlugin

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build and return the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="idlenudge",
        description="IdleNudge: learning-checkpoint reminders on session idle",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to config.json (defaults to the platform data directory)",
    )
    parser.add_argument(
        "--mode",
        choices=[m.value for m in ReminderMode],
        default=None,
        help="Show a toast or append to the prompt (overrides config)",
    )
    parser.add_argument(
        "--cooldown-ms",
        type=float,
        default=None,
        help="Minimum milliseconds between reminders (overrides config)",
    )
    parser.add_argument(
        "--host",
        choices=list(HOST_KINDS),
        default=None,
        help="Host client used to present reminders (overrides config)",
    )
    parser.add_argument(
        "--events",
        default="-",
        help="File of JSON-line host events, '-' for stdin (default)",
    )
    return parser


def _apply_overrides(config: dict[str, Any], parsed: argparse.Namespace) -> dict[str, Any]:
    """Return a copy of *config* with CLI flags layered on top."""
    merged = dict(config)
    if parsed.mode is not None:
        merged["mode"] = parsed.mode
    if parsed.cooldown_ms is not None:
        merged["cooldown_ms"] = parsed.cooldown_ms
    if parsed.host is not None:
        merged["host"] = parsed.host
    return merged


def run_events(plugin: IdleReminderPlugin, lines: Iterable[str]) -> int:
    """Feed JSON-line events to *plugin*.  Returns the number delivered."""
    delivered = 0
    for lineno, line in enumerate(lines, start=1):
        line = line.strip()
        if not line:
            continue
        try:
            data = json.loads(line)
        except json.JSONDecodeError as exc:
            logger.warning("Skipping line %d: invalid JSON (%s)", lineno, exc)
            continue
        if not isinstance(data, dict):
            logger.warning("Skipping line %d: event must be a JSON object", lineno)
            continue
        plugin.handle_event(data)
        delivered += 1
    return delivered


def main(args: list[str] | None = None) -> None:
    """Entry point for IdleNudge.

    When *args* is ``None`` the arguments are read from ``sys.argv``.
    """
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    parser = build_parser()
    parsed = parser.parse_args(args)

    config_path = parsed.config or get_default_config_path()
    config = _apply_overrides(load_config(str(config_path)), parsed)
    reminder_config = parse_reminder_config(config)

    client = create_host_client(reminder_config.host)
    plugin = IdleReminderPlugin(client, reminder_config)

    try:
        if parsed.events == "-":
            count = run_events(plugin, sys.stdin)
        else:
            with open(parsed.events, "r", encoding="utf-8") as fh:
                count = run_events(plugin, fh)
        logger.info("Processed %d host events", count)
    finally:
        stop = getattr(client, "stop", None)
        if stop is not None:
            stop()


if __name__ == "__main__":
    main()
