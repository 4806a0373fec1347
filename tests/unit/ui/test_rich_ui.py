# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from io import StringIO

import pytest
from rich.console import Console

from coincmon.common.exceptions import RemoteReportedError
from coincmon.common.models import TelemetryRecord
from coincmon.session import SessionController
from coincmon.ui import RichSessionView


def render(view: RichSessionView) -> str:
    console = Console(file=StringIO(), width=120, color_system=None)
    console.print(view)
    return console.file.getvalue()


class TestRichSessionView:
    @pytest.mark.asyncio
    async def test_idle_session_lists_configured_groups(self, controller: SessionController):
        output = render(RichSessionView(controller))
        assert "Coincidence Rates" in output
        assert "1,2" in output
        assert "3,4" in output
        assert "idle" in output
        assert "Window: 1s • Coin. Win: 1000ps" in output

    @pytest.mark.asyncio
    async def test_shows_latest_rate_and_point_count(self, controller: SessionController):
        aggregator = controller.aggregator
        aggregator.append(
            TelemetryRecord(elapsed_delta=1.0, group_keys=("1,2", "3,4"), rates=(100, 7))
        )
        aggregator.append(
            TelemetryRecord(elapsed_delta=1.0, group_keys=("1,2",), rates=(1500,))
        )

        output = render(RichSessionView(controller))
        row = next(line for line in output.splitlines() if "1,2" in line)
        assert "1,500" in row
        assert "800" in row
        assert "t=2.00s" in output

    @pytest.mark.asyncio
    async def test_series_without_data_shows_dash(self, controller: SessionController):
        output = render(RichSessionView(controller))
        row = next(line for line in output.splitlines() if "3,4" in line)
        assert "-" in row

    @pytest.mark.asyncio
    async def test_shows_last_error(self, controller: SessionController):
        controller._last_error = RemoteReportedError(500, "tagger offline")
        output = render(RichSessionView(controller))
        assert "tagger offline" in output

    def test_format_rate(self):
        assert RichSessionView._format_rate(1234) == "1,234"
        assert RichSessionView._format_rate(12.34) == "12.3"
