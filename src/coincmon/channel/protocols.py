# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from collections.abc import Awaitable, Callable
from typing import Any, Protocol, runtime_checkable

ChannelHandler = Callable[..., Awaitable[None]]
"""Async handler for a channel event. Receives the event's payload arguments, if any."""


@runtime_checkable
class ChannelProtocol(Protocol):
    """Protocol for a persistent, bidirectional message channel to one server namespace.

    Handlers are invoked on the event loop in delivery order. Once `close` has
    been called no handler is invoked again, even for events already queued by
    the transport.
    """

    @property
    def connected(self) -> bool:
        """Whether the channel is currently connected to its namespace."""
        ...

    @property
    def closed(self) -> bool:
        """Whether `close` has been called."""
        ...

    def on(self, event: str, handler: ChannelHandler) -> None:
        """Register `handler` for `event`, replacing any previous handler."""
        ...

    async def connect(self) -> None:
        """Open the connection. Raises ChannelConnectionError if it cannot be established."""
        ...

    async def send(self, event: str, data: Any) -> None:
        """Send `data` as `event`. Raises ChannelDisconnectedError if not connected."""
        ...

    async def close(self) -> None:
        """Close the connection, stop reconnecting and invalidate every handler. Idempotent."""
        ...


ChannelFactory = Callable[[], ChannelProtocol]
"""Creates a fresh, unconnected channel for a new session."""
