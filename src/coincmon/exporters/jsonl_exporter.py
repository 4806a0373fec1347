# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from pathlib import Path

import aiofiles
import orjson

from coincmon.common.mixins import CoincmonLoggerMixin
from coincmon.common.models import DataPoint


class DataPointJSONLExporter(CoincmonLoggerMixin):
    """Appends data points to a JSON Lines file, one ``{"time", "rates"}`` object per line.

    Usable directly as a session data callback::

        async with DataPointJSONLExporter(path) as exporter:
            controller = SessionController(config, data_callback=exporter.export)
    """

    def __init__(self, file_path: Path, **kwargs) -> None:
        super().__init__(**kwargs)
        self._file_path = Path(file_path)
        self._file = None
        self._exported_count = 0

    @property
    def file_path(self) -> Path:
        return self._file_path

    @property
    def exported_count(self) -> int:
        return self._exported_count

    async def open(self) -> None:
        if self._file is not None:
            return
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        self._file = await aiofiles.open(self._file_path, "a", encoding="utf-8")
        self.debug(lambda: f"Exporting data points to {self._file_path}")

    async def export(self, point: DataPoint) -> None:
        if self._file is None:
            await self.open()
        try:
            await self._file.write(orjson.dumps(point.to_json_dict()).decode() + "\n")
            await self._file.flush()
        except Exception as e:
            self.error(lambda: f"Failed to export to {self._file_path}: {e}")
            raise
        self._exported_count += 1

    async def close(self) -> None:
        if self._file is None:
            return
        file, self._file = self._file, None
        await file.close()
        self.info(f"Exported {self._exported_count} data points to {self._file_path}")

    async def __aenter__(self) -> "DataPointJSONLExporter":
        await self.open()
        return self

    async def __aexit__(self, exc_type, exc_value, traceback) -> None:
        await self.close()
