# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from coincmon.common.enums.base_enums import CaseInsensitiveStrEnum
from coincmon.common.enums.session_enums import (
    ChannelEvent,
    SessionState,
    SocketNamespace,
)

__all__ = [
    "CaseInsensitiveStrEnum",
    "ChannelEvent",
    "SessionState",
    "SocketNamespace",
]
