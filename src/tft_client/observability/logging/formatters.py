"""Renderers for structured client logs."""

import json
from datetime import UTC, datetime
from typing import Any

from colorama import Fore, Style, just_fix_windows_console

just_fix_windows_console()

# Rendered in a fixed position by ConsoleFormatter, not as key=value pairs
_HEADER_KEYS = ("timestamp", "level", "logger", "request_id", "event")


class JSONFormatter:
    """JSON formatter for structured logs."""

    def __init__(self, ensure_ascii: bool = False, indent: int | None = None):
        self.ensure_ascii = ensure_ascii
        self.indent = indent

    def __call__(
        self, logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> str:
        """Format log event as JSON."""
        event_dict.setdefault("timestamp", datetime.now(UTC).isoformat())
        event_dict["level"] = method_name.upper()
        return json.dumps(
            event_dict, ensure_ascii=self.ensure_ascii, indent=self.indent, default=str
        )


class ConsoleFormatter:
    """Human-readable single-line formatter, optionally coloured."""

    level_colors = {
        "debug": Fore.CYAN,
        "info": Fore.GREEN,
        "warning": Fore.YELLOW,
        "error": Fore.RED,
        "critical": Fore.RED + Style.BRIGHT,
    }

    def __init__(self, colors: bool = True):
        self.colors = colors

    def _paint(self, text: str, color: str) -> str:
        return f"{color}{text}{Style.RESET_ALL}" if self.colors else text

    def __call__(
        self, logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> str:
        """Format log event for console output."""
        parts = []

        if "timestamp" in event_dict:
            parts.append(f"[{event_dict['timestamp']}]")

        level = method_name.upper()
        parts.append(self._paint(level, self.level_colors.get(method_name, "")))

        if "logger" in event_dict:
            parts.append(self._paint(f"[{event_dict['logger']}]", Fore.BLUE))
        if "request_id" in event_dict:
            parts.append(self._paint(f"[{event_dict['request_id']}]", Fore.MAGENTA))

        message = event_dict.get("event", "")
        if message:
            parts.append(str(message))

        fields = []
        for key, value in event_dict.items():
            if key in _HEADER_KEYS:
                continue
            if isinstance(value, dict | list):
                value = json.dumps(value, default=str)
            fields.append(f"{key}={value}")
        if fields:
            parts.append(", ".join(fields))

        return " ".join(parts)
