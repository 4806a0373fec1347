# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from coincmon.exporters.jsonl_exporter import DataPointJSONLExporter

__all__ = ["DataPointJSONLExporter"]
