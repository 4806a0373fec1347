# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from tests.harness.fake_channel import (
    FAKE_NAMESPACE,
    FAKE_URL,
    FakeChannel,
    FakeChannelFactory,
    flush_event_loop,
)

__all__ = [
    "FAKE_NAMESPACE",
    "FAKE_URL",
    "FakeChannel",
    "FakeChannelFactory",
    "flush_event_loop",
]
