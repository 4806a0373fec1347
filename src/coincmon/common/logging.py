# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Rich console logging with optional file output.

Log lines render as ``HH:MM:SS.mmm LEVEL    message (logger:lineno)`` with light
syntax highlighting. The same Rich console can be shared with a ``Live``
display so log lines print above the live table instead of tearing it.

Usage::

    from coincmon.common.logging import setup_rich_logging

    setup_rich_logging(level="DEBUG", log_file=Path("coincmon.log"))
"""

import logging
import re
from datetime import datetime
from pathlib import Path

from rich.console import Console, ConsoleRenderable, Group
from rich.highlighter import RegexHighlighter
from rich.logging import RichHandler
from rich.text import Span, Text
from rich.traceback import Traceback

from coincmon.common.coincmon_logger import CoincmonLogger
from coincmon.common.environment import Environment

_logger = CoincmonLogger(__name__)

TRANSPORT_LOGGERS = ("socketio", "socketio.client", "engineio", "engineio.client")


def setup_rich_logging(
    level: str | int | None = None,
    log_file: Path | None = None,
    console: Console | None = None,
) -> "CustomRichHandler":
    """Install the Rich console handler (and optionally a file handler) on the root logger.

    Existing root handlers are removed so repeated calls do not duplicate output.

    Args:
        level: Root log level. Defaults to ``Environment.LOGGING.LEVEL``.
        log_file: File to mirror log output to. Defaults to ``Environment.LOGGING.FILE``.
        console: Console to render to. Pass the console used by a ``Live`` display
            to keep the two from fighting over the terminal.

    Returns:
        The installed console handler.
    """
    level = level or Environment.LOGGING.LEVEL
    if isinstance(level, str):
        level = level.upper()
    log_file = log_file or Environment.LOGGING.FILE

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for existing_handler in root_logger.handlers[:]:
        root_logger.removeHandler(existing_handler)

    rich_handler = CustomRichHandler(
        rich_tracebacks=True,
        show_path=False,
        console=console or Console(stderr=True),
        show_time=False,
        show_level=False,
        tracebacks_show_locals=False,
    )
    rich_handler.setLevel(level)
    root_logger.addHandler(rich_handler)

    if log_file:
        root_logger.addHandler(create_file_handler(Path(log_file), level))

    # The transport libraries are chatty at INFO (every packet), keep them quiet
    # unless trace output was explicitly requested.
    transport_level = (
        level
        if level == "TRACE"
        else Environment.LOGGING.TRANSPORT_LEVEL.upper()
    )
    for name in TRANSPORT_LOGGERS:
        logging.getLogger(name).setLevel(transport_level)

    _logger.debug(lambda: f"Logging initialized with level: {level}")
    return rich_handler


def create_file_handler(log_file: Path, level: str | int) -> logging.FileHandler:
    """Configure a file handler for logging."""
    log_file.parent.mkdir(parents=True, exist_ok=True)

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(level)
    file_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    return file_handler


class LogHighlighter(RegexHighlighter):
    """Lightweight highlighter for log messages.

    Highlights URLs, namespaces/paths, numbers with units, quoted strings,
    booleans, brackets and key=value pairs with a single combined regex.
    """

    base_style = "repr."

    _MEGA_PATTERN = re.compile(
        r"(?P<url>(?:https?|wss?)://[^\s\]\)'\"]+)"  # URLs
        r"|(?P<path>(?<![/\w.~])(?:/[\w._-]+)+/?)"  # Paths and namespaces
        r"|(?P<number>(?<![.\w])-?\d+\.?\d*(?:(?:e[+-]?\d+)|(?:ps|ns|us|ms|s))?\b)"  # Numbers
        r"|(?P<str>\"[^\"]*\"|'[^']*')"  # Quoted strings
        r"|\b(?P<bool_true>True)\b|\b(?P<bool_false>False)\b|\b(?P<none>None)\b"  # Booleans
        r"|(?P<brace>[\[\](){}])"  # Brackets
        r"|\b(?P<attrib_name>\w+)=(?P<attrib_value>[^\s,=\[\](){}]+)?"  # key=value
    )  # fmt: skip

    highlights = [_MEGA_PATTERN]

    def highlight(self, text: Text) -> None:
        """Apply highlighting in-place using a single `finditer` pass."""
        plain = text.plain
        append_span = text._spans.append
        prefix = self.base_style

        for match in self._MEGA_PATTERN.finditer(plain):
            for name, value in match.groupdict().items():
                if value is not None:
                    start, end = match.span(name)
                    if start != -1:
                        append_span(Span(start, end, f"{prefix}{name}"))


class CustomRichHandler(RichHandler):
    """Rich logging handler with a compact, terminal-width aware format.

    Example output::

        12:26:52.092 INFO     Connecting to http://localhost:5003/ws/timetagger/coincidence (ChannelClient:97)
        12:26:52.279 DEBUG    Session state connecting -> active (SessionController:211)

    Long messages wrap at character boundaries and continuation lines are
    indented under the message column.
    """

    LOG_LEVEL_STYLES = {
        "TRACE": "dim",
        "DEBUG": "dim",
        "INFO": "cyan",
        "WARNING": "yellow",
        "ERROR": "red",
        "CRITICAL": "bold red",
    }

    MIN_MESSAGE_WIDTH = 20
    PREFIX_LENGTH = 22  # "HH:MM:SS.mmm LEVEL    "

    _CONTINUATION = Text("\n" + " " * PREFIX_LENGTH)

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.highlighter = LogHighlighter()

    def render(
        self,
        *,
        record: logging.LogRecord,
        traceback: Traceback | None,
        message_renderable: ConsoleRenderable,
    ) -> ConsoleRenderable:
        """Render a record from scratch; `message_renderable` is ignored.

        Highlighting is applied before the message is sliced into lines, so
        styles carry across wrap boundaries.
        """
        timestamp = datetime.fromtimestamp(record.created).strftime("%H:%M:%S.%f")[:-3]
        level_style = self.LOG_LEVEL_STYLES.get(record.levelname, "white")

        body = Text(record.getMessage()[: Environment.LOGGING.MAX_CONSOLE_MESSAGE_LENGTH])
        self.highlighter.highlight(body)
        body.append(f" ({record.name}:{record.lineno})", style="dim italic")

        console_width = (
            self.console.size.width
            if self.console
            else Environment.LOGGING.DEFAULT_CONSOLE_WIDTH
        )
        width = max(console_width - 2 - self.PREFIX_LENGTH, self.MIN_MESSAGE_WIDTH)
        rows = [
            row
            for line in body.split("\n")
            for row in line.divide(range(width, len(line), width))
        ]

        formatted_log = Text.assemble(
            (f"{timestamp} ", "log.time"),
            (f"{record.levelname:<8} ", level_style),
            self._CONTINUATION.join(rows),
        )
        formatted_log.no_wrap = True
        return Group(formatted_log, traceback) if traceback else formatted_log

    def emit(self, record: logging.LogRecord) -> None:
        traceback = None
        if self.rich_tracebacks and record.exc_info and record.exc_info[0] is not None:
            traceback = Traceback.from_exception(*record.exc_info)
        self.console.print(
            self.render(record=record, traceback=traceback, message_renderable=Text("")),
            soft_wrap=False,
        )
