# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from rich.console import Group, RenderableType
from rich.table import Table
from rich.text import Text

from coincmon.common.enums import SessionState
from coincmon.common.models import DataPoint
from coincmon.session import SessionController

__all__ = ["RichSessionView"]


class RichSessionView:
    """Renders a session as a Rich table for use inside ``rich.live.Live``.

    One row per series: the configured group keys first, in order, then any
    other key the server reported. Rates are shown for the latest point that
    carries the series; a series missing from the window shows ``-``.
    """

    TITLE = "Coincidence Rates"

    STATE_STYLES = {
        SessionState.IDLE: "dim",
        SessionState.CONNECTING: "yellow",
        SessionState.ACTIVE: "green",
        SessionState.STOPPING: "yellow",
    }

    def __init__(self, controller: SessionController) -> None:
        self.controller = controller

    def __rich__(self) -> RenderableType:
        return self.get_renderable()

    def get_renderable(self) -> RenderableType:
        return Group(self._create_rates_table(), self._create_status_line())

    def _series_keys(self) -> list[str]:
        keys = dict.fromkeys(self.controller.config.group_keys)
        keys.update(dict.fromkeys(self.controller.aggregator.series_keys()))
        return list(keys)

    def _create_rates_table(self) -> Table:
        points = self.controller.aggregator.points
        table = Table(title=self.TITLE, title_justify="left")
        table.add_column("Group", justify="left", style="cyan")
        table.add_column("Rate (cps)", justify="right", style="green")
        table.add_column("Avg (cps)", justify="right")
        table.add_column("Points", justify="right", style="dim")

        for key in self._series_keys():
            values = [point.rates[key] for point in points if key in point.rates]
            if values:
                table.add_row(
                    key,
                    self._format_rate(values[-1]),
                    self._format_rate(sum(values) / len(values)),
                    str(len(values)),
                )
            else:
                table.add_row(key, "-", "-", "0")
        return table

    def _create_status_line(self) -> Text:
        controller = self.controller
        state = controller.state
        status = Text()
        status.append(f"{state}", style=self.STATE_STYLES.get(state, "white"))
        status.append(f" • Groups: {len(controller.config.group_keys)}")
        status.append(f" • {controller.config.describe()}")
        status.append(f" • t={self._format_time(controller.aggregator.latest)}")
        if controller.last_error is not None:
            status.append(f"\n{controller.last_error}", style="red")
        return status

    @staticmethod
    def _format_rate(value: float) -> str:
        return f"{value:,.0f}" if float(value).is_integer() else f"{value:,.1f}"

    @staticmethod
    def _format_time(point: DataPoint | None) -> str:
        return f"{point.time:.2f}s" if point is not None else "-"
