# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Time-bounded buffer of coincidence data points.

The aggregator keeps a cumulative clock advanced by the elapsed time each
report carries, and retains only the points inside a trailing window::

    aggregator = SlidingWindowAggregator(retention_seconds=15.0)
    aggregator.append(record)          # clock += record.elapsed_delta
    aggregator.points                  # oldest first, all within the window

The buffer is an immutable tuple replaced in a single assignment, so readers
never observe a point appended but not yet evicted.
"""

from collections.abc import Iterator

from coincmon.common.environment import Environment
from coincmon.common.models import DataPoint, TelemetryRecord


class SlidingWindowAggregator:
    """Cumulative clock plus a bounded, time-ordered buffer of data points.

    Args:
        retention_seconds: Width of the trailing window. A point is evicted once
            ``point.time <= current_time - retention_seconds``.
        time_precision: Decimal places the cumulative clock is rounded to after
            each append, keeping float drift from accumulating.
    """

    def __init__(
        self,
        retention_seconds: float | None = None,
        time_precision: int | None = None,
    ) -> None:
        self.retention_seconds = (
            retention_seconds
            if retention_seconds is not None
            else Environment.AGGREGATOR.RETENTION_SECONDS
        )
        self.time_precision = (
            time_precision
            if time_precision is not None
            else Environment.AGGREGATOR.TIME_PRECISION
        )
        self._current_time = 0.0
        self._points: tuple[DataPoint, ...] = ()

    @property
    def current_time(self) -> float:
        """Cumulative seconds since the last reset."""
        return self._current_time

    @property
    def points(self) -> tuple[DataPoint, ...]:
        """Retained points, oldest first."""
        return self._points

    @property
    def latest(self) -> DataPoint | None:
        return self._points[-1] if self._points else None

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[DataPoint]:
        return iter(self._points)

    def reset(self) -> None:
        """Zero the clock and drop every point."""
        self._current_time = 0.0
        self._points = ()

    def append(self, record: TelemetryRecord) -> DataPoint:
        """Advance the clock by the record's elapsed time and buffer a new point.

        Negative or zero deltas are applied as-is; the clock may stand still or
        move backwards.

        Returns:
            The point that was appended.
        """
        new_time = round(self._current_time + record.elapsed_delta, self.time_precision)
        point = DataPoint(time=new_time, rates=dict(record.items()))
        cutoff = new_time - self.retention_seconds

        self._current_time = new_time
        self._points = tuple(p for p in (*self._points, point) if p.time > cutoff)
        return point

    def series_keys(self) -> list[str]:
        """Every group key present in the buffer, in first-seen order."""
        keys: dict[str, None] = {}
        for point in self._points:
            keys.update(dict.fromkeys(point.rates))
        return list(keys)
