# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from typing import Annotated

from cyclopts import Parameter
from pydantic import ConfigDict, Field

from coincmon.common.group_spec import get_group_list
from coincmon.common.models.base_models import CoincmonBaseModel

COINCIDENCE_WINDOW_MIN_PS = 1000
COINCIDENCE_WINDOW_MAX_PS = 10000
REPORT_INTERVAL_MIN_S = 0.1
REPORT_INTERVAL_MAX_S = 5.0


class SessionConfig(CoincmonBaseModel):
    """User-facing parameters of a coincidence monitoring session.

    Instances are immutable; derive updated configs with
    ``config.model_copy(update={...})`` or :meth:`with_changes`, which re-validates.
    An empty or unparsable `groups` value is a valid config that cannot be started.
    """

    model_config = ConfigDict(frozen=True)

    groups: Annotated[
        str,
        Field(description="Channel groups, semicolon separated (e.g. '1,2; 3,4')"),
        Parameter(name=("--groups", "-g")),
    ] = "1,2"

    coincidence_window: Annotated[
        int,
        Field(
            description="Coincidence window in picoseconds",
            ge=COINCIDENCE_WINDOW_MIN_PS,
            le=COINCIDENCE_WINDOW_MAX_PS,
        ),
        Parameter(name=("--coincidence-window", "--cwin")),
    ] = 1000

    report_interval: Annotated[
        float,
        Field(
            description="Seconds between telemetry reports",
            ge=REPORT_INTERVAL_MIN_S,
            le=REPORT_INTERVAL_MAX_S,
        ),
        Parameter(name=("--report-interval", "--rtime")),
    ] = 1.0

    @property
    def group_keys(self) -> list[str]:
        """Group keys parsed from `groups`, in order."""
        return get_group_list(self.groups)

    @property
    def has_groups(self) -> bool:
        return bool(self.group_keys)

    def with_changes(self, **changes) -> "SessionConfig":
        """Return a validated copy with `changes` applied."""
        return self.model_validate({**self.model_dump(), **changes})

    def describe(self) -> str:
        return f"Window: {self.report_interval:g}s • Coin. Win: {self.coincidence_window}ps"
