# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from collections.abc import Callable
from typing import TypeVar

from typing_extensions import get_protocol_members

ClassT = TypeVar("ClassT", bound=type)


def implements_protocol(protocol: type) -> Callable[[ClassT], ClassT]:
    """Class decorator declaring that the class implements `protocol`.

    Checked once at import time: every member the protocol declares must be
    defined on the class.

    Raises:
        TypeError: If the class is missing any protocol member.
    """

    def decorator(cls: ClassT) -> ClassT:
        missing = sorted(
            name for name in get_protocol_members(protocol) if not hasattr(cls, name)
        )
        if missing:
            raise TypeError(
                f"{cls.__name__} does not implement {protocol.__name__}: missing {', '.join(missing)}"
            )
        return cls

    return decorator
