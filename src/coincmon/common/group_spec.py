# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Parsing of channel group specs such as ``"1,2; 3,4"``.

A group spec is a semicolon-separated list of group keys; a group key is a
comma-joined list of channel identifiers. Group keys double as data-series
labels, so they must match the labels rebuilt from the server's echoed
groupings (``[1, 2]`` -> ``"1,2"``). Channel identifiers themselves are not
validated here; the server owns that.
"""

from collections.abc import Iterable

from coincmon.common.exceptions import InvalidGroupSpecError

GROUP_SEPARATOR = ";"
CHANNEL_SEPARATOR = ","


def normalize_group_key(group_text: str) -> str:
    """Normalize one group key by stripping whitespace around each channel.

    Empty channel tokens are dropped, so ``" 1 , 2 "`` and ``"1,,2"`` both
    become ``"1,2"``. Returns an empty string if no channel is left.
    """
    channels = (channel.strip() for channel in group_text.split(CHANNEL_SEPARATOR))
    return CHANNEL_SEPARATOR.join(channel for channel in channels if channel)


def get_group_list(group_spec_text: str) -> list[str]:
    """Parse group spec text into its ordered list of group keys.

    Empty or whitespace-only segments are discarded. Order and duplicates are
    preserved, and the result is stable under re-parsing::

        >>> get_group_list("1,2; 3,4;;")
        ['1,2', '3,4']
        >>> get_group_list(";".join(get_group_list("1,2; 3,4;;")))
        ['1,2', '3,4']
    """
    keys = (
        normalize_group_key(segment)
        for segment in group_spec_text.split(GROUP_SEPARATOR)
    )
    return [key for key in keys if key]


def require_group_list(group_spec_text: str) -> list[str]:
    """Like :func:`get_group_list`, but raise if no group key is found.

    Raises:
        InvalidGroupSpecError: If the text contains no group key.
    """
    group_keys = get_group_list(group_spec_text)
    if not group_keys:
        raise InvalidGroupSpecError(group_spec_text)
    return group_keys


def join_group_key(channels: Iterable[int | str]) -> str:
    """Build the group key for a server-side grouping: ``[1, 2]`` -> ``"1,2"``."""
    return CHANNEL_SEPARATOR.join(str(channel) for channel in channels)
