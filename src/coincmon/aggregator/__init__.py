# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from coincmon.aggregator.sliding_window_aggregator import SlidingWindowAggregator

__all__ = ["SlidingWindowAggregator"]
