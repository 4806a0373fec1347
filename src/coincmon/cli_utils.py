# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import sys
from collections.abc import Iterator
from contextlib import contextmanager

from rich.console import Console
from rich.panel import Panel


@contextmanager
def exit_on_error(title: str = "Error", exit_code: int = 1) -> Iterator[None]:
    """Print any exception raised in the block as a Rich panel and exit.

    `SystemExit` and `KeyboardInterrupt` pass through untouched.
    """
    try:
        yield
    except (SystemExit, KeyboardInterrupt):
        raise
    except Exception as e:
        console = Console(stderr=True)
        console.print(
            Panel(
                f"[bold]{type(e).__name__}[/bold]: {e}",
                title=title,
                title_align="left",
                border_style="red",
                expand=False,
            )
        )
        console.file.flush()
        sys.exit(exit_code)
