"""Rich console handler rendering filesystem diagnostics."""

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class DiagnosticRichHandler(RichHandler):
    """Rich handler that highlights segment paths and their outcomes."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "directories.segment.ok": ("✅", "green"),
        "directories.segment.failed": ("❌", "red"),
        "filesystem.exists.error": ("ℹ️", "yellow"),
        "filesystem.fatal": ("⛔", "red"),
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str) -> Text:
        """Format a path with coloured separators, keeping only the last few parts.

        Args:
            path: Absolute or relative path string to format.

        Returns:
            Text: Formatted path with ellipsis truncation.
        """
        pure_path = self._to_pure_path(path)
        separator = "\\" if isinstance(pure_path, PureWindowsPath) else "/"
        anchor = pure_path.anchor
        body_parts = [part for part in pure_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]

        display_string = anchor if anchor else ""
        if truncated:
            display_string += "…" + separator
        display_string += separator.join(body_parts)
        if not display_string:
            display_string = path or "."

        return self._style_path_string(display_string, separator)

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        """Return a platform-aware ``PurePath`` for the given raw string."""

        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    @staticmethod
    def _style_path_string(path_string: str, separator: str) -> Text:
        """Apply Rich styling to the rendered path string."""

        text = Text()
        separator_chars = {separator}
        if separator == "\\":
            separator_chars.add("/")

        for char in path_string:
            if char in separator_chars or char == "…":
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _event_key(self, record: logging.LogRecord) -> str | None:
        event = getattr(record, "fs_event", None)
        if not isinstance(event, str):
            return None
        if event == "directories.segment":
            return f"{event}.ok" if getattr(record, "segment_ok", False) else f"{event}.failed"
        return event

    def _render_diagnostic(self, record: logging.LogRecord, message: str) -> Text | None:
        """Render structured filesystem events with dedicated styling."""

        event = self._event_key(record)
        if event is None:
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        segment_path = getattr(record, "segment_path", None)
        if not event.startswith("directories.segment") or not isinstance(segment_path, str):
            _ = text.append(message, style=Style(color=color))
            return text

        body = Text(style=Style(color=color))
        _ = body.append("mkdir ")
        _ = body.append_text(self._format_path(segment_path))
        error_code = getattr(record, "error_code", None)
        reason = getattr(record, "reason", None)
        if isinstance(error_code, int) and isinstance(reason, str):
            _ = body.append(f" (errno={error_code}, {reason})")
        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for filesystem events."""

        diagnostic = self._render_diagnostic(record, message)
        if diagnostic is not None:
            return diagnostic

        return super().render_message(record, message)
