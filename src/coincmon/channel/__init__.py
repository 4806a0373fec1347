# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from coincmon.channel.channel_client import ChannelClient
from coincmon.channel.protocols import (
    ChannelFactory,
    ChannelHandler,
    ChannelProtocol,
)

__all__ = [
    "ChannelClient",
    "ChannelFactory",
    "ChannelHandler",
    "ChannelProtocol",
]
