# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from coincmon.config.session_config import (
    COINCIDENCE_WINDOW_MAX_PS,
    COINCIDENCE_WINDOW_MIN_PS,
    REPORT_INTERVAL_MAX_S,
    REPORT_INTERVAL_MIN_S,
    SessionConfig,
)

__all__ = [
    "COINCIDENCE_WINDOW_MAX_PS",
    "COINCIDENCE_WINDOW_MIN_PS",
    "REPORT_INTERVAL_MAX_S",
    "REPORT_INTERVAL_MIN_S",
    "SessionConfig",
]
