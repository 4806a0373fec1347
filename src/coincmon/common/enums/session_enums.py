# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from coincmon.common.enums.base_enums import CaseInsensitiveStrEnum


class SessionState(CaseInsensitiveStrEnum):
    """Lifecycle state of a telemetry session."""

    IDLE = "idle"
    """No channel is open and the buffer is empty."""

    CONNECTING = "connecting"
    """The buffer was reset and a channel is being opened."""

    ACTIVE = "active"
    """The channel connected and the configuration was sent. Telemetry is being aggregated."""

    STOPPING = "stopping"
    """The channel is being closed. Transitions to IDLE once cleanup finishes."""


class ChannelEvent(CaseInsensitiveStrEnum):
    """Event names exchanged over the coincidence channel."""

    CONNECT = "connect"
    DISCONNECT = "disconnect"

    CONFIGURE = "configure"
    """Outgoing: push group spec, coincidence window and report interval to the server."""

    CONFIGURED = "configured"
    """Incoming: opaque acknowledgement of a configure message."""

    COINCIDENCE = "coincidence"
    """Incoming: one coincidence-rate telemetry report."""


class SocketNamespace(CaseInsensitiveStrEnum):
    """Socket.IO namespaces served by the instrument server."""

    LASER_STATUS = "/ws/laser/status"
    TIMETAGGER_STATUS = "/ws/timetagger/status"
    COUNTRATE = "/ws/timetagger/countrate"
    COINCIDENCE = "/ws/timetagger/coincidence"
    CORRELATION = "/ws/timetagger/correlation"
