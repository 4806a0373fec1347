# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from coincmon.codec.configuration_codec import ConfigurationCodec

__all__ = ["ConfigurationCodec"]
