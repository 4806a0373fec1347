# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from coincmon.common.mixins.coincmon_logger_mixin import CoincmonLoggerMixin

__all__ = ["CoincmonLoggerMixin"]
