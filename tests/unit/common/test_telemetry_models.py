# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
import pytest
from pydantic import ValidationError

from coincmon.common.models import DataPoint, TelemetryRecord


class TestTelemetryRecord:
    def test_items_pairs_keys_and_rates(self):
        record = TelemetryRecord(
            elapsed_delta=1.0, group_keys=("1,2", "3,4"), rates=(150, 80)
        )
        assert list(record.items()) == [("1,2", 150), ("3,4", 80)]

    def test_rejects_length_mismatch(self):
        with pytest.raises(ValidationError):
            TelemetryRecord(elapsed_delta=1.0, group_keys=("1,2",), rates=(1, 2))

    def test_is_frozen(self):
        record = TelemetryRecord(elapsed_delta=1.0)
        with pytest.raises(ValidationError):
            record.elapsed_delta = 2.0


class TestDataPoint:
    def test_rates_are_read_only(self):
        point = DataPoint(time=1.0, rates={"1,2": 10})
        with pytest.raises(TypeError):
            point.rates["1,2"] = 20

    def test_copies_input_mapping(self):
        rates = {"1,2": 10}
        point = DataPoint(time=1.0, rates=rates)
        rates["3,4"] = 20
        assert "3,4" not in point.rates

    def test_missing_group_has_no_value(self):
        point = DataPoint(time=1.0, rates={"1,2": 10})
        assert point.get("3,4") is None

    def test_as_row(self):
        point = DataPoint(time=2.5, rates={"1,2": 10, "3,4": 20})
        assert point.as_row() == {"time": 2.5, "1,2": 10, "3,4": 20}

    def test_to_json_dict(self):
        point = DataPoint(time=2.5, rates={"1,2": 10})
        assert point.to_json_dict() == {"time": 2.5, "rates": {"1,2": 10}}
