# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
import pytest
from pydantic import ValidationError

from coincmon.config import SessionConfig


class TestSessionConfig:
    """Tests for session config defaults, bounds and derived values."""

    def test_defaults(self):
        config = SessionConfig()
        assert config.groups == "1,2"
        assert config.coincidence_window == 1000
        assert config.report_interval == 1.0

    @pytest.mark.parametrize("coincidence_window", [999, 10001, -1])
    def test_coincidence_window_bounds(self, coincidence_window: int):
        with pytest.raises(ValidationError):
            SessionConfig(coincidence_window=coincidence_window)

    @pytest.mark.parametrize("report_interval", [0.0, 0.05, 5.5])
    def test_report_interval_bounds(self, report_interval: float):
        with pytest.raises(ValidationError):
            SessionConfig(report_interval=report_interval)

    def test_group_keys(self):
        assert SessionConfig(groups=" 1,2 ;; 3 ,4 ").group_keys == ["1,2", "3,4"]

    @pytest.mark.parametrize(
        "groups,expected",
        [("1,2", True), ("", False), (" ; ", False)],
    )  # fmt: skip
    def test_has_groups(self, groups: str, expected: bool):
        assert SessionConfig(groups=groups).has_groups is expected

    def test_is_frozen(self):
        config = SessionConfig()
        with pytest.raises(ValidationError):
            config.groups = "3,4"

    def test_with_changes_returns_new_validated_config(self):
        config = SessionConfig()
        changed = config.with_changes(groups="5,6", report_interval=2.0)
        assert changed.groups == "5,6"
        assert changed.report_interval == 2.0
        assert config.groups == "1,2"

    def test_with_changes_validates(self):
        with pytest.raises(ValidationError):
            SessionConfig().with_changes(coincidence_window=50)

    def test_describe(self):
        config = SessionConfig(coincidence_window=2500, report_interval=0.5)
        assert config.describe() == "Window: 0.5s • Coin. Win: 2500ps"
