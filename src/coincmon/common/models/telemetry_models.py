# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from pydantic import Field, model_validator
from typing_extensions import Self

from coincmon.common.models.base_models import FrozenCoincmonBaseModel

Rate = int | float


class TelemetryRecord(FrozenCoincmonBaseModel):
    """One decoded coincidence report.

    `group_keys[i]` and `rates[i]` belong together; position is the only link.
    """

    elapsed_delta: float = Field(
        description="Seconds elapsed since the previous report, as reported by the server"
    )
    group_keys: tuple[str, ...] = Field(
        default=(), description="Group keys in the server's order, e.g. ('1,2', '3,4')"
    )
    rates: tuple[Rate, ...] = Field(
        default=(), description="Rate per group key in counts per second"
    )

    @model_validator(mode="after")
    def validate_lengths(self) -> Self:
        if len(self.group_keys) != len(self.rates):
            raise ValueError(
                f"group_keys ({len(self.group_keys)}) and rates ({len(self.rates)}) must have the same length"
            )
        return self

    def items(self) -> Iterator[tuple[str, Rate]]:
        """Iterate over (group key, rate) pairs."""
        return zip(self.group_keys, self.rates, strict=True)


@dataclass(frozen=True, slots=True)
class DataPoint:
    """A point of the plotted time series.

    Only groups reported in the originating message have an entry in `rates`;
    a missing key means "no value at this time", not zero.
    """

    time: float
    rates: Mapping[str, Rate] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "rates", MappingProxyType(dict(self.rates)))

    def get(self, group_key: str) -> Rate | None:
        return self.rates.get(group_key)

    def as_row(self) -> dict[str, Any]:
        """Flatten into a single mapping keyed by `time` and each group key."""
        return {"time": self.time, **self.rates}

    def to_json_dict(self) -> dict[str, Any]:
        return {"time": self.time, "rates": dict(self.rates)}
