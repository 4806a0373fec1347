# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from pydantic import BaseModel, ConfigDict


class CoincmonBaseModel(BaseModel):
    """Base model for all coincmon pydantic models.

    Unknown fields are ignored so newer servers can add fields to their
    payloads without breaking older clients.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class FrozenCoincmonBaseModel(CoincmonBaseModel):
    """Immutable variant of :class:`CoincmonBaseModel`. Changes go through `model_copy(update=...)`."""

    model_config = ConfigDict(frozen=True)
