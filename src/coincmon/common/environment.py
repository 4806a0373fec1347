# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Environment-driven settings for coincmon.

Every value can be overridden with an environment variable (or a `.env` file in
the working directory). Variable names are the section prefix plus the field
name, e.g. ``COINCMON_CHANNEL_SERVER_URL`` or ``COINCMON_AGGREGATOR_RETENTION_SECONDS``.

Usage::

    from coincmon.common.environment import Environment

    Environment.CHANNEL.SERVER_URL
    Environment.AGGREGATOR.RETENTION_SECONDS
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from coincmon.common.enums import SocketNamespace


class _ChannelSettings(BaseSettings):
    """Socket.IO channel connection settings."""

    model_config = SettingsConfigDict(
        env_prefix="COINCMON_CHANNEL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    SERVER_URL: str = Field(
        default="http://localhost:5003",
        description="Base URL of the time tagger server",
    )
    NAMESPACE: str = Field(
        default=SocketNamespace.COINCIDENCE.value,
        description="Socket.IO namespace that serves coincidence telemetry",
    )
    TRANSPORTS: list[str] = Field(
        default=["websocket", "polling"],
        description="Engine.IO transports to try, in order",
    )
    RECONNECTION_ATTEMPTS: int = Field(
        default=5,
        ge=0,
        description="Maximum reconnection attempts before giving up (0 means unlimited)",
    )
    RECONNECTION_DELAY: float = Field(
        default=1.0,
        gt=0.0,
        description="Initial delay in seconds between reconnection attempts",
    )
    RECONNECTION_DELAY_MAX: float = Field(
        default=5.0,
        gt=0.0,
        description="Upper bound in seconds for the reconnection backoff",
    )
    CONNECT_WAIT_TIMEOUT: float = Field(
        default=1.0,
        gt=0.0,
        description="Seconds to wait for the namespace connection after the transport connects",
    )


class _AggregatorSettings(BaseSettings):
    """Sliding-window aggregator settings."""

    model_config = SettingsConfigDict(
        env_prefix="COINCMON_AGGREGATOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    RETENTION_SECONDS: float = Field(
        default=15.0,
        gt=0.0,
        description="Seconds of cumulative time kept in the buffer",
    )
    TIME_PRECISION: int = Field(
        default=2,
        ge=0,
        description="Decimal places the cumulative clock is rounded to after each append",
    )


class _LoggingSettings(BaseSettings):
    """Logging settings."""

    model_config = SettingsConfigDict(
        env_prefix="COINCMON_LOGGING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    LEVEL: str = Field(default="INFO", description="Root log level")
    FILE: Path | None = Field(
        default=None, description="Optional file to mirror log output to"
    )
    TRANSPORT_LEVEL: str = Field(
        default="WARNING",
        description="Log level for the socketio/engineio library loggers",
    )
    MAX_CONSOLE_MESSAGE_LENGTH: int = Field(
        default=2000,
        ge=1,
        description="Console messages longer than this are truncated",
    )
    DEFAULT_CONSOLE_WIDTH: int = Field(
        default=120,
        ge=40,
        description="Console width used when the handler has no console attached",
    )


class _UISettings(BaseSettings):
    """Terminal UI settings."""

    model_config = SettingsConfigDict(
        env_prefix="COINCMON_UI_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    REFRESH_PER_SECOND: float = Field(
        default=4.0, gt=0.0, description="Live table refresh rate"
    )


class _Environment(BaseSettings):
    """Root settings object grouping every settings section."""

    model_config = SettingsConfigDict(
        env_prefix="COINCMON_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    CHANNEL: _ChannelSettings = Field(default_factory=_ChannelSettings)
    AGGREGATOR: _AggregatorSettings = Field(default_factory=_AggregatorSettings)
    LOGGING: _LoggingSettings = Field(default_factory=_LoggingSettings)
    UI: _UISettings = Field(default_factory=_UISettings)


Environment = _Environment()
