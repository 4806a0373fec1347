# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from coincmon.common.exceptions import MalformedTelemetryError, RemoteReportedError
from coincmon.common.group_spec import join_group_key
from coincmon.common.mixins import CoincmonLoggerMixin
from coincmon.common.models import (
    CoincidenceMessage,
    ConfigureMessage,
    ResponseStatus,
    TelemetryRecord,
)
from coincmon.config import SessionConfig


class ConfigurationCodec(CoincmonLoggerMixin):
    """Translates between session configs, wire messages and telemetry records.

    Stateless; a single instance can be shared by any number of sessions.
    """

    def encode(self, config: SessionConfig) -> ConfigureMessage:
        """Build the `configure` message for `config`.

        The group spec text is sent as typed; the server does its own parsing.
        """
        return ConfigureMessage(
            groups=config.groups,
            cwin=config.coincidence_window,
            rtime=config.report_interval,
        )

    def decode(self, raw: Any) -> TelemetryRecord:
        """Decode one incoming `coincidence` payload into a telemetry record.

        Group keys are rebuilt from the server's echoed groupings, so they
        reflect what the server actually measured. If the server sends fewer
        rates than groups (or vice versa) the extra entries are dropped. A
        null rate leaves its group out of the record.

        Raises:
            RemoteReportedError: If the payload carries a non-success status.
            MalformedTelemetryError: If the payload is not a mapping or misses
                a required field.
        """
        if not isinstance(raw, Mapping):
            raise MalformedTelemetryError(
                f"Expected a mapping, got {type(raw).__name__}: {raw!r}"
            )

        try:
            status = ResponseStatus.model_validate(dict(raw))
        except ValidationError as e:
            raise MalformedTelemetryError(
                f"Invalid response status in {raw!r}: {e}"
            ) from e

        if not status.is_success:
            raise RemoteReportedError(status.status, status.error)

        try:
            message = CoincidenceMessage.model_validate(dict(raw))
        except ValidationError as e:
            raise MalformedTelemetryError(f"Invalid coincidence message: {e}") from e

        group_keys = tuple(join_group_key(group) for group in message.groups)
        rates = tuple(message.rates)
        if len(group_keys) != len(rates):
            count = min(len(group_keys), len(rates))
            self.warning(
                f"Received {len(group_keys)} groups but {len(rates)} rates, keeping the first {count}"
            )
            group_keys, rates = group_keys[:count], rates[:count]

        if None in rates:
            pairs = [(key, rate) for key, rate in zip(group_keys, rates) if rate is not None]
            self.debug(
                lambda: f"Skipping {len(rates) - len(pairs)} group(s) without a rate"
            )
            group_keys = tuple(key for key, _ in pairs)
            rates = tuple(rate for _, rate in pairs)

        return TelemetryRecord(
            elapsed_delta=message.rtime, group_keys=group_keys, rates=rates
        )

    def decode_ack(self, raw: Any) -> Any:
        """Log a `configured` acknowledgement and return its payload unchanged."""
        self.debug(lambda: f"Server acknowledged configuration: {raw!r}")
        return raw
