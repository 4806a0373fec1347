# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from typing import Any

from coincmon.common.coincmon_logger import (
    _CRITICAL,
    _DEBUG,
    _ERROR,
    _INFO,
    _TRACE,
    _WARNING,
    CoincmonLogger,
    LogMessage,
)


class CoincmonLoggerMixin:
    """Mixin giving a class `self.debug(...)`, `self.info(...)`, etc.

    The logger is named after the concrete class unless `logger_name` is passed.
    Messages can be strings or lambdas (see :class:`CoincmonLogger`).
    """

    def __init__(self, logger_name: str | None = None, **kwargs) -> None:
        self.logger = CoincmonLogger(logger_name or self.__class__.__name__)
        super().__init__(**kwargs)

    def trace(self, msg: LogMessage, *args: Any, **kwargs) -> None:
        self.logger.log(_TRACE, msg, *args, stacklevel=2, **kwargs)

    def debug(self, msg: LogMessage, *args: Any, **kwargs) -> None:
        self.logger.log(_DEBUG, msg, *args, stacklevel=2, **kwargs)

    def info(self, msg: LogMessage, *args: Any, **kwargs) -> None:
        self.logger.log(_INFO, msg, *args, stacklevel=2, **kwargs)

    def warning(self, msg: LogMessage, *args: Any, **kwargs) -> None:
        self.logger.log(_WARNING, msg, *args, stacklevel=2, **kwargs)

    def error(self, msg: LogMessage, *args: Any, **kwargs) -> None:
        self.logger.log(_ERROR, msg, *args, stacklevel=2, **kwargs)

    def exception(self, msg: LogMessage, *args: Any, **kwargs) -> None:
        kwargs.setdefault("exc_info", True)
        self.logger.log(_ERROR, msg, *args, stacklevel=2, **kwargs)

    def critical(self, msg: LogMessage, *args: Any, **kwargs) -> None:
        self.logger.log(_CRITICAL, msg, *args, stacklevel=2, **kwargs)
