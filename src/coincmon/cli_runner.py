# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import asyncio
from contextlib import AsyncExitStack, suppress
from functools import partial
from pathlib import Path

from rich.console import Console
from rich.live import Live

from coincmon.channel import ChannelClient
from coincmon.common.coincmon_logger import CoincmonLogger
from coincmon.common.environment import Environment
from coincmon.common.exceptions import ChannelConnectionError, CoincmonError
from coincmon.common.group_spec import require_group_list
from coincmon.common.logging import setup_rich_logging
from coincmon.config import SessionConfig
from coincmon.exporters import DataPointJSONLExporter
from coincmon.session import SessionController
from coincmon.ui import RichSessionView

_logger = CoincmonLogger(__name__)


def run_monitor(
    config: SessionConfig,
    *,
    url: str | None = None,
    duration: float | None = None,
    export: Path | None = None,
    log_level: str | None = None,
) -> None:
    """Run a monitoring session until interrupted or `duration` elapses.

    Raises:
        InvalidGroupSpecError: If `config` has no channel groups.
        ChannelConnectionError: If the server could not be reached.
    """
    require_group_list(config.groups)

    console = Console()
    setup_rich_logging(level=log_level, console=console)

    with suppress(KeyboardInterrupt):
        asyncio.run(
            _monitor(
                config,
                console=console,
                url=url,
                duration=duration,
                export=export,
            )
        )


async def _monitor(
    config: SessionConfig,
    *,
    console: Console,
    url: str | None,
    duration: float | None,
    export: Path | None,
) -> None:
    connection_failed = asyncio.Event()
    connection_error: list[ChannelConnectionError] = []

    async def on_error(error: CoincmonError) -> None:
        if isinstance(error, ChannelConnectionError):
            connection_error.append(error)
            connection_failed.set()

    async with AsyncExitStack() as stack:
        exporter = None
        if export is not None:
            exporter = await stack.enter_async_context(DataPointJSONLExporter(export))

        controller = await stack.enter_async_context(
            SessionController(
                config,
                channel_factory=partial(ChannelClient, server_url=url),
                data_callback=exporter.export if exporter else None,
                error_callback=on_error,
            )
        )
        view = RichSessionView(controller)
        stack.enter_context(
            Live(
                view,
                console=console,
                refresh_per_second=Environment.UI.REFRESH_PER_SECOND,
                transient=False,
            )
        )

        await controller.start()
        _logger.info(f"Monitoring groups {config.group_keys} ({config.describe()})")
        with suppress(asyncio.TimeoutError):
            await asyncio.wait_for(connection_failed.wait(), timeout=duration)

    if connection_error:
        raise connection_error[0]
