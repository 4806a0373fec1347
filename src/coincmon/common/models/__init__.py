# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from coincmon.common.models.base_models import (
    CoincmonBaseModel,
    FrozenCoincmonBaseModel,
)
from coincmon.common.models.message_models import (
    SUCCESS_STATUS,
    CoincidenceMessage,
    ConfigureMessage,
    ResponseStatus,
)
from coincmon.common.models.telemetry_models import (
    DataPoint,
    Rate,
    TelemetryRecord,
)

__all__ = [
    "SUCCESS_STATUS",
    "CoincidenceMessage",
    "CoincmonBaseModel",
    "ConfigureMessage",
    "DataPoint",
    "FrozenCoincmonBaseModel",
    "Rate",
    "ResponseStatus",
    "TelemetryRecord",
]
