# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Lifecycle of one live coincidence monitoring session.

State machine::

    IDLE --start()--> CONNECTING --channel connect--> ACTIVE
      ^                    |                             |
      |                    +------ stop() / dispose() ---+--> STOPPING --> IDLE
      +---------- connect retries exhausted -------------+

All transitions run on the event loop. Channel callbacks are bound to the
channel that registered them; events from a channel that is no longer the
current one are ignored, so a closed or replaced channel can never reach the
aggregator.
"""

import asyncio
from collections.abc import Awaitable, Callable
from functools import partial
from typing import Any

from coincmon.aggregator import SlidingWindowAggregator
from coincmon.channel import ChannelClient, ChannelFactory, ChannelProtocol
from coincmon.codec import ConfigurationCodec
from coincmon.common.enums import ChannelEvent, SessionState
from coincmon.common.exceptions import (
    ChannelConnectionError,
    ChannelDisconnectedError,
    CoincmonError,
    TelemetryDecodeError,
)
from coincmon.common.mixins import CoincmonLoggerMixin
from coincmon.common.models import DataPoint
from coincmon.config import SessionConfig

DataCallback = Callable[[DataPoint], Awaitable[None]]
ErrorCallback = Callable[[CoincmonError], Awaitable[None]]


class SessionController(CoincmonLoggerMixin):
    """Drives a channel, the codec and the aggregator through a session's lifecycle.

    Args:
        config: Initial session config. Defaults to ``SessionConfig()``.
        aggregator: Buffer to fill. A new one is created if not given.
        codec: Message codec. A new one is created if not given.
        channel_factory: Creates a fresh channel for each session. Defaults to
            a :class:`ChannelClient` on the configured coincidence namespace.
        data_callback: Awaited with every appended data point.
        error_callback: Awaited with every surfaced session error.
    """

    def __init__(
        self,
        config: SessionConfig | None = None,
        *,
        aggregator: SlidingWindowAggregator | None = None,
        codec: ConfigurationCodec | None = None,
        channel_factory: ChannelFactory | None = None,
        data_callback: DataCallback | None = None,
        error_callback: ErrorCallback | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self._config = config or SessionConfig()
        self.aggregator = aggregator or SlidingWindowAggregator()
        self.codec = codec or ConfigurationCodec()
        self.channel_factory: ChannelFactory = channel_factory or ChannelClient
        self.data_callback = data_callback
        self.error_callback = error_callback

        self._state = SessionState.IDLE
        self._channel: ChannelProtocol | None = None
        self._connect_task: asyncio.Task | None = None
        self._last_error: CoincmonError | None = None
        self._last_ack: Any = None
        # Serializes start, stop and update_config
        self._lock = asyncio.Lock()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(state={self._state}, groups={self._config.groups!r})"

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def config(self) -> SessionConfig:
        return self._config

    @property
    def last_error(self) -> CoincmonError | None:
        """Most recent error surfaced by the session, cleared on start."""
        return self._last_error

    @property
    def last_ack(self) -> Any:
        """Payload of the most recent `configured` acknowledgement, if any."""
        return self._last_ack

    @property
    def is_running(self) -> bool:
        return self._state in (SessionState.CONNECTING, SessionState.ACTIVE)

    @property
    def is_connected(self) -> bool:
        return self._channel is not None and self._channel.connected

    def can_start(self, config: SessionConfig | None = None) -> bool:
        """Whether `config` (or the current config) has at least one group key."""
        return (config or self._config).has_groups

    async def start(self, config: SessionConfig | None = None) -> bool:
        """Start a new session, tearing down any existing one first.

        Returns immediately; the connection is established in the background.
        Overlapping calls to start, stop and update_config run one at a time,
        so only the last start leaves a channel open.

        Returns:
            False if the config has no group keys and nothing was started.
        """
        candidate = config or self._config
        if not self.can_start(candidate):
            self.warning(
                f"Not starting session: no channel groups in {candidate.groups!r}"
            )
            return False

        async with self._lock:
            self._config = candidate
            if self._channel is not None or self._state != SessionState.IDLE:
                await self._teardown()
            self._open_channel()
        return True

    def _open_channel(self) -> None:
        self._set_state(SessionState.CONNECTING)
        self.aggregator.reset()
        self._last_error = None
        self._last_ack = None

        channel = self.channel_factory()
        channel.on(ChannelEvent.CONNECT, partial(self._on_channel_connect, channel))
        channel.on(ChannelEvent.DISCONNECT, partial(self._on_channel_disconnect, channel))
        channel.on(ChannelEvent.CONFIGURED, partial(self._on_channel_configured, channel))
        channel.on(ChannelEvent.COINCIDENCE, partial(self._on_channel_coincidence, channel))
        self._channel = channel
        self._connect_task = asyncio.create_task(self._connect(channel))

    async def stop(self) -> None:
        """Stop the session: close the channel and clear the buffer. No-op when idle."""
        async with self._lock:
            if self._state == SessionState.IDLE and self._channel is None:
                self.debug("Session already stopped")
                return
            await self._teardown()

    async def dispose(self) -> None:
        """Release the session's resources. Safe to call in any state."""
        await self.stop()

    async def __aenter__(self) -> "SessionController":
        return self

    async def __aexit__(self, exc_type, exc_value, traceback) -> None:
        await self.dispose()

    async def update_config(self, config: SessionConfig) -> None:
        """Adopt `config`, re-sending it to the server if the session is live.

        The buffer and clock are left untouched. An empty group set stops a
        running session. A disconnected session picks the new config up on
        its next connect.
        """
        async with self._lock:
            self._config = config
            if not self.is_running:
                return
            if not config.has_groups:
                self.info("Channel groups cleared, stopping session")
                await self._teardown()
                return
            if self._state == SessionState.ACTIVE and self.is_connected:
                await self._send_config(self._channel)
            else:
                self.debug("Channel not connected, config will be sent on connect")

    def _set_state(self, state: SessionState) -> None:
        if state != self._state:
            self.debug(lambda: f"Session state {self._state} -> {state}")
            self._state = state

    def _is_current(self, channel: ChannelProtocol) -> bool:
        return channel is self._channel and not channel.closed

    async def _connect(self, channel: ChannelProtocol) -> None:
        try:
            await channel.connect()
        except ChannelConnectionError as e:
            if not self._is_current(channel):
                return
            self.error(f"Unable to connect: {e}")
            await self._report_error(e)
            async with self._lock:
                if self._is_current(channel):
                    await self._teardown()

    async def _teardown(self) -> None:
        """Move to IDLE through STOPPING, closing the channel on every path."""
        channel, self._channel = self._channel, None
        connect_task, self._connect_task = self._connect_task, None
        self._set_state(SessionState.STOPPING)
        try:
            if (
                connect_task is not None
                and connect_task is not asyncio.current_task()
                and not connect_task.done()
            ):
                connect_task.cancel()
                await asyncio.gather(connect_task, return_exceptions=True)
        finally:
            try:
                if channel is not None:
                    await channel.close()
            finally:
                # A new session may have started while the channel was closing
                if self._channel is None:
                    self.aggregator.reset()
                    self._set_state(SessionState.IDLE)

    async def _send_config(self, channel: ChannelProtocol) -> None:
        message = self.codec.encode(self._config)
        self.info(
            f"Configuring server: groups={message.groups!r} cwin={message.cwin} rtime={message.rtime:g}"
        )
        try:
            await channel.send(ChannelEvent.CONFIGURE, message.model_dump())
        except ChannelDisconnectedError as e:
            self.warning(f"Failed to send configuration: {e}")
            await self._report_error(e)

    async def _on_channel_connect(self, channel: ChannelProtocol, *args: Any) -> None:
        if not self._is_current(channel):
            return
        if self._state == SessionState.CONNECTING:
            self._set_state(SessionState.ACTIVE)
            self.info("Channel connected")
        elif self._state == SessionState.ACTIVE:
            self.info("Channel reconnected")
        else:
            return
        await self._send_config(channel)

    async def _on_channel_disconnect(self, channel: ChannelProtocol, *args: Any) -> None:
        if not self._is_current(channel) or self._state != SessionState.ACTIVE:
            return
        reason = f" ({args[0]})" if args else ""
        self.warning(f"Channel disconnected{reason}, waiting for reconnection")
        await self._report_error(ChannelDisconnectedError(f"Channel disconnected{reason}"))

    async def _on_channel_configured(self, channel: ChannelProtocol, raw: Any = None) -> None:
        if not self._is_current(channel):
            return
        self._last_ack = self.codec.decode_ack(raw)

    async def _on_channel_coincidence(self, channel: ChannelProtocol, raw: Any = None) -> None:
        if not self._is_current(channel) or self._state != SessionState.ACTIVE:
            self.trace(lambda: f"Ignoring telemetry in state {self._state}")
            return
        try:
            record = self.codec.decode(raw)
        except TelemetryDecodeError as e:
            self.warning(f"Dropping telemetry message: {e}")
            await self._report_error(e)
            return

        point = self.aggregator.append(record)
        self.trace(lambda: f"Appended {point}")
        if self.data_callback is not None:
            try:
                await self.data_callback(point)
            except Exception as e:
                self.error(f"Failed to process data point: {e!r}", exc_info=True)

    async def _report_error(self, error: CoincmonError) -> None:
        self._last_error = error
        if self.error_callback is not None:
            try:
                await self.error_callback(error)
            except Exception as e:
                self.error(f"Failed to report session error: {e!r}", exc_info=True)
