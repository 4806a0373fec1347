# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from typing import Any


class CoincmonError(Exception):
    """Base class for all exceptions raised by coincmon."""

    def __str__(self) -> str:
        """Return the string representation of the exception with the class name."""
        return super().__str__()


class ConfigurationError(CoincmonError):
    """Exception raised when the CLI or environment configuration is invalid."""


class InvalidGroupSpecError(ConfigurationError):
    """Exception raised when no group keys can be parsed from a group spec."""

    def __init__(self, group_spec_text: str) -> None:
        self.group_spec_text = group_spec_text
        super().__init__(
            f"No channel groups found in {group_spec_text!r} (expected e.g. '1,2; 3,4')"
        )


class TelemetryDecodeError(CoincmonError):
    """Base class for errors raised while decoding a telemetry message."""


class RemoteReportedError(TelemetryDecodeError):
    """Exception raised when the server reports a non-success status."""

    def __init__(self, status: int, payload: Any = None) -> None:
        self.status = status
        self.payload = payload
        super().__init__(f"Server reported status {status}: {payload}")


class MalformedTelemetryError(TelemetryDecodeError):
    """Exception raised when a telemetry message is missing fields or has invalid ones."""


class ChannelError(CoincmonError):
    """Base class for channel transport errors."""


class ChannelConnectionError(ChannelError):
    """Exception raised when a channel could not be connected, retries included."""

    def __init__(self, url: str, namespace: str, reason: Any = None) -> None:
        self.url = url
        self.namespace = namespace
        self.reason = reason
        super().__init__(f"Failed to connect to {url}{namespace}: {reason}")


class ChannelDisconnectedError(ChannelError):
    """Exception raised when the channel is not connected, or dropped its connection."""
