# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Wire messages exchanged on the coincidence channel."""

from typing import Any

from pydantic import Field

from coincmon.common.models.base_models import (
    CoincmonBaseModel,
    FrozenCoincmonBaseModel,
)

SUCCESS_STATUS = 200


class ConfigureMessage(FrozenCoincmonBaseModel):
    """Outgoing `configure` message.

    All values are passed through untouched. The server parses the group spec
    text into channel groupings itself.
    """

    groups: str = Field(description="Raw group spec text, e.g. '1,2; 3,4'")
    cwin: int = Field(description="Coincidence window in picoseconds")
    rtime: float = Field(description="Requested report interval in seconds")


class ResponseStatus(CoincmonBaseModel):
    """Status envelope shared by every server response."""

    status: int = Field(description="HTTP-like status code, 200 on success")
    error: Any = Field(
        default=None, description="Error payload, present when status is not 200"
    )

    @property
    def is_success(self) -> bool:
        return self.status == SUCCESS_STATUS


class CoincidenceMessage(ResponseStatus):
    """Incoming successful `coincidence` telemetry message.

    `groups` and `rates` are parallel lists: `rates[i]` is the rate of the
    channel group `groups[i]`. There is no other key linking them.
    """

    rtime: float = Field(description="Seconds elapsed since the previous report")
    groups: list[list[int]] = Field(
        description="Channel groupings in server order, e.g. [[1, 2], [3, 4]]"
    )
    rates: list[int | float | None] = Field(
        description="Coincidence rate per group in counts per second. null means no rate for that group"
    )
