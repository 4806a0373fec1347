# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Shared fixtures for unit tests.

This file contains fixtures that are automatically discovered by pytest
and made available to test functions in the same directory and subdirectories.
"""

from collections.abc import Callable
from typing import Any

import pytest

from coincmon.aggregator import SlidingWindowAggregator
from coincmon.codec import ConfigurationCodec
from coincmon.config import SessionConfig
from coincmon.session import SessionController
from tests.harness import FakeChannelFactory

CoincidencePayloadFactory = Callable[..., dict[str, Any]]


@pytest.fixture
def session_config() -> SessionConfig:
    return SessionConfig(groups="1,2; 3,4", coincidence_window=1000, report_interval=1.0)


@pytest.fixture
def coincidence_payload() -> CoincidencePayloadFactory:
    """Build a `coincidence` payload as the server sends it."""

    def _make(
        rates: list[float] | None = None,
        groups: list[list[int]] | None = None,
        rtime: float = 1.0,
        status: int = 200,
        **extra: Any,
    ) -> dict[str, Any]:
        return {
            "status": status,
            "rtime": rtime,
            "groups": [[1, 2], [3, 4]] if groups is None else groups,
            "rates": [10, 20] if rates is None else rates,
            **extra,
        }

    return _make


@pytest.fixture
def codec() -> ConfigurationCodec:
    return ConfigurationCodec()


@pytest.fixture
def aggregator() -> SlidingWindowAggregator:
    return SlidingWindowAggregator(retention_seconds=15.0, time_precision=2)


@pytest.fixture
def channel_factory() -> FakeChannelFactory:
    return FakeChannelFactory()


@pytest.fixture
async def controller(
    session_config: SessionConfig,
    aggregator: SlidingWindowAggregator,
    channel_factory: FakeChannelFactory,
):
    """Idle controller wired to fake channels. Disposed after the test."""
    controller = SessionController(
        session_config, aggregator=aggregator, channel_factory=channel_factory
    )
    yield controller
    await controller.dispose()
