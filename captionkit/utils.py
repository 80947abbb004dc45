"""
Shared utility functions for captionkit.

Provides timestamp formatting from ``datetime.timedelta`` to the SRT
``HH:MM:SS,mmm`` notation, millisecond parsing for raw payload fields and a
small URL query helper.
"""

import math
from datetime import timedelta
from typing import Any, Optional
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

_ONE_MILLISECOND = timedelta(milliseconds=1)


def format_srt_timestamp(value: timedelta) -> str:
    """
    Convert a timedelta to SRT ``HH:MM:SS,mmm`` format.

    Milliseconds are truncated, and hours keep counting past 24 instead of
    wrapping into days.

    Args:
        value: Non-negative time offset

    Returns:
        Timestamp string in HH:MM:SS,mmm format

    Example:
        >>> format_srt_timestamp(timedelta(seconds=2.5))
        '00:00:02,500'
        >>> format_srt_timestamp(timedelta(hours=25, milliseconds=7))
        '25:00:00,007'
    """
    if value < timedelta(0):
        raise ValueError(f"Cannot format negative timestamp: {value}")

    total_ms = value // _ONE_MILLISECOND
    hours, remainder = divmod(total_ms, 3_600_000)
    minutes, remainder = divmod(remainder, 60_000)
    seconds, milliseconds = divmod(remainder, 1000)

    return f"{hours:02d}:{minutes:02d}:{seconds:02d},{milliseconds:03d}"


def parse_milliseconds(value: Any) -> Optional[timedelta]:
    """
    Parse a raw millisecond count into a timedelta.

    Returns None for anything that is not a finite, non-negative number (or a
    string holding one).
    """
    if value is None or isinstance(value, bool):
        return None

    try:
        number = float(value)
    except (TypeError, ValueError):
        return None

    if not math.isfinite(number) or number < 0:
        return None

    return timedelta(milliseconds=number)


def set_query_parameter(url: str, key: str, value: str) -> str:
    """Return ``url`` with query parameter ``key`` set to ``value``."""
    parts = urlsplit(url)
    query = [(k, v) for k, v in parse_qsl(parts.query, keep_blank_values=True) if k != key]
    query.append((key, value))
    return urlunsplit(parts._replace(query=urlencode(query)))
