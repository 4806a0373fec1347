# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Logger wrapper with a TRACE level and lazily evaluated messages.

Messages may be passed as a zero-argument callable, which is only invoked when
the level is enabled. Use this in hot paths (per-message handlers) so that the
f-string is never built when the level is filtered out::

    _logger = CoincmonLogger(__name__)
    _logger.debug(lambda: f"Appended point at t={point.time}")
"""

import logging
from collections.abc import Callable
from typing import Any

_TRACE = logging.DEBUG - 5
_DEBUG = logging.DEBUG
_INFO = logging.INFO
_WARNING = logging.WARNING
_ERROR = logging.ERROR
_CRITICAL = logging.CRITICAL

logging.addLevelName(_TRACE, "TRACE")

LogMessage = str | Callable[[], str]


class CoincmonLogger:
    """Thin wrapper around :class:`logging.Logger`.

    Adds a TRACE level and lazy message evaluation while keeping the caller's
    file and line number on the emitted record.
    """

    def __init__(self, logger_name: str) -> None:
        self.logger_name = logger_name
        self._logger = logging.getLogger(logger_name)

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def is_enabled_for(self, level: int) -> bool:
        return self._logger.isEnabledFor(level)

    def log(
        self, level: int, msg: LogMessage, *args: Any, stacklevel: int = 1, **kwargs
    ) -> None:
        """Log `msg` at `level`, evaluating it first if it is a callable.

        `stacklevel` counts frames above the caller of this method, so wrappers
        add one per layer to keep the caller's location on the record.
        """
        if not self.is_enabled_for(level):
            return
        if callable(msg):
            msg = msg()
        self._logger.log(level, msg, *args, stacklevel=stacklevel + 1, **kwargs)

    def trace(self, msg: LogMessage, *args: Any, **kwargs) -> None:
        self.log(_TRACE, msg, *args, stacklevel=2, **kwargs)

    def debug(self, msg: LogMessage, *args: Any, **kwargs) -> None:
        self.log(_DEBUG, msg, *args, stacklevel=2, **kwargs)

    def info(self, msg: LogMessage, *args: Any, **kwargs) -> None:
        self.log(_INFO, msg, *args, stacklevel=2, **kwargs)

    def warning(self, msg: LogMessage, *args: Any, **kwargs) -> None:
        self.log(_WARNING, msg, *args, stacklevel=2, **kwargs)

    def error(self, msg: LogMessage, *args: Any, **kwargs) -> None:
        self.log(_ERROR, msg, *args, stacklevel=2, **kwargs)

    def exception(self, msg: LogMessage, *args: Any, **kwargs) -> None:
        kwargs.setdefault("exc_info", True)
        self.log(_ERROR, msg, *args, stacklevel=2, **kwargs)

    def critical(self, msg: LogMessage, *args: Any, **kwargs) -> None:
        self.log(_CRITICAL, msg, *args, stacklevel=2, **kwargs)
