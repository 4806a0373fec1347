# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from coincmon.session.session_controller import (
    DataCallback,
    ErrorCallback,
    SessionController,
)

__all__ = ["DataCallback", "ErrorCallback", "SessionController"]
