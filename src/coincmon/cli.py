# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Main CLI entry point for coincmon."""

################################################################################
# NOTE: Keep the imports here to a minimum. This file is read every time
# the CLI is run, including to generate the help text.
################################################################################

from pathlib import Path
from typing import Annotated

from cyclopts import App, Parameter

from coincmon.cli_utils import exit_on_error
from coincmon.config import SessionConfig

app = App(name="coincmon", help="Live coincidence-rate monitor for time tagger servers")


@app.command(name="monitor")
def monitor(
    session_config: Annotated[SessionConfig | None, Parameter(name="*")] = None,
    *,
    url: str | None = None,
    duration: float | None = None,
    export: Path | None = None,
    log_level: str | None = None,
) -> None:
    """Stream coincidence rates from a time tagger server into a live table.

    Runs until interrupted with Ctrl-C, or for `--duration` seconds.

    Args:
        session_config: Channel groups, coincidence window and report interval.
        url: Server base URL. Defaults to COINCMON_CHANNEL_SERVER_URL or http://localhost:5003.
        duration: Stop after this many seconds.
        export: Append every data point to this JSON Lines file.
        log_level: Log level (TRACE, DEBUG, INFO, WARNING, ERROR).
    """
    with exit_on_error(title="Error Running Coincidence Monitor"):
        from coincmon.cli_runner import run_monitor

        run_monitor(
            session_config or SessionConfig(),
            url=url,
            duration=duration,
            export=export,
            log_level=log_level,
        )
