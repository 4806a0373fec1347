# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Socket.IO channel to one namespace of the instrument server.

Thin adapter over :class:`socketio.AsyncClient`: the transport owns framing,
ordering and bounded automatic reconnection. This class adds the guarantees
the session controller relies on:

- Handlers are registered per event and replaced, never stacked.
- After :meth:`ChannelClient.close` no handler runs again, even for packets
  the transport already queued.
- Transport exceptions are translated into :class:`ChannelError` subclasses.
"""

from typing import Any

import socketio
from socketio import exceptions as socketio_exceptions

from coincmon.channel.protocols import ChannelHandler, ChannelProtocol
from coincmon.common.decorators import implements_protocol
from coincmon.common.environment import Environment
from coincmon.common.exceptions import (
    ChannelConnectionError,
    ChannelDisconnectedError,
)
from coincmon.common.mixins import CoincmonLoggerMixin


@implements_protocol(ChannelProtocol)
class ChannelClient(CoincmonLoggerMixin):
    """Persistent bidirectional channel to a named Socket.IO namespace.

    Args:
        namespace: Namespace to join, e.g. ``/ws/timetagger/coincidence``.
        server_url: Base server URL. Defaults to ``Environment.CHANNEL.SERVER_URL``.
        transports: Engine.IO transports to try, in order.
        reconnection_attempts: Reconnection attempts before giving up (0 means unlimited).
        reconnection_delay: Initial delay in seconds between reconnection attempts.
        reconnection_delay_max: Upper bound in seconds for the reconnection backoff.
        wait_timeout: Seconds to wait for the namespace connection once the transport is up.
    """

    def __init__(
        self,
        namespace: str | None = None,
        server_url: str | None = None,
        *,
        transports: list[str] | None = None,
        reconnection_attempts: int | None = None,
        reconnection_delay: float | None = None,
        reconnection_delay_max: float | None = None,
        wait_timeout: float | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.namespace = namespace or Environment.CHANNEL.NAMESPACE
        self.server_url = (server_url or Environment.CHANNEL.SERVER_URL).rstrip("/")
        self.transports = transports or list(Environment.CHANNEL.TRANSPORTS)
        self.wait_timeout = wait_timeout or Environment.CHANNEL.CONNECT_WAIT_TIMEOUT

        if reconnection_attempts is None:
            reconnection_attempts = Environment.CHANNEL.RECONNECTION_ATTEMPTS

        self._sio = socketio.AsyncClient(
            reconnection=True,
            reconnection_attempts=reconnection_attempts,
            reconnection_delay=reconnection_delay
            or Environment.CHANNEL.RECONNECTION_DELAY,
            reconnection_delay_max=reconnection_delay_max
            or Environment.CHANNEL.RECONNECTION_DELAY_MAX,
            logger=False,
            engineio_logger=False,
        )
        self._handlers: dict[str, ChannelHandler] = {}
        self._closed = False

    @property
    def url(self) -> str:
        """Full URL of the namespace, for display."""
        return f"{self.server_url}{self.namespace}"

    @property
    def connected(self) -> bool:
        return (
            not self._closed
            and self._sio.connected
            and self.namespace in self._sio.namespaces
        )

    @property
    def closed(self) -> bool:
        return self._closed

    def on(self, event: str, handler: ChannelHandler) -> None:
        """Register `handler` for `event`, replacing any previous handler."""
        event = str(event)
        if event not in self._handlers:
            self._sio.on(event, self._make_dispatcher(event), namespace=self.namespace)
        self._handlers[event] = handler

    def _make_dispatcher(self, event: str) -> ChannelHandler:
        async def dispatch(*args: Any) -> None:
            if self._closed:
                self.trace(lambda: f"Dropping '{event}' received after close")
                return
            handler = self._handlers.get(event)
            if handler is None:
                return
            self.trace(lambda: f"Dispatching '{event}' from {self.url}")
            await handler(*args)

        return dispatch

    async def connect(self) -> None:
        """Connect to the server and join the namespace.

        The transport retries with its bounded backoff before this gives up.

        Raises:
            ChannelConnectionError: If the connection could not be established.
        """
        if self._closed:
            raise ChannelConnectionError(self.server_url, self.namespace, "channel is closed")

        self.info(f"Connecting to {self.url}")
        try:
            await self._sio.connect(
                self.server_url,
                namespaces=[self.namespace],
                transports=self.transports,
                wait_timeout=self.wait_timeout,
                retry=True,
            )
        except socketio_exceptions.ConnectionError as e:
            raise ChannelConnectionError(self.server_url, self.namespace, e) from e

    async def send(self, event: str, data: Any) -> None:
        """Emit `data` as `event` on the namespace.

        Raises:
            ChannelDisconnectedError: If the channel is closed or not connected.
        """
        if self._closed:
            raise ChannelDisconnectedError(f"Cannot send '{event}': channel is closed")
        self.debug(lambda: f"Sending '{event}': {data}")
        try:
            await self._sio.emit(str(event), data, namespace=self.namespace)
        except socketio_exceptions.SocketIOError as e:
            raise ChannelDisconnectedError(
                f"Cannot send '{event}' to {self.url}: {e}"
            ) from e

    async def close(self) -> None:
        """Disconnect, abort any pending reconnection and invalidate all handlers."""
        if self._closed:
            return
        self._closed = True
        self._handlers.clear()
        try:
            await self._sio.shutdown()
            # shutdown() leaves the engine.io HTTP session open if no connect completed
            http = self._sio.eio.http
            if http is not None and not http.closed:
                await http.close()
        except Exception as e:
            self.warning(f"Error while closing channel {self.url}: {e!r}")
        self.info(f"Closed channel {self.url}")
