"""Time and duration formatting."""

from __future__ import annotations

import time


def epoch() -> int:
    """Return the current time in whole seconds since the epoch."""
    return int(time.time())


def duration_format(ms: int) -> str:
    """Format an elapsed time in milliseconds as ``HH:M:SS``.

    Leading units that are zero are left out; an elapsed time under one
    second gives an empty string.
    """
    seconds = int(ms) // 1000
    minutes = seconds // 60
    seconds -= minutes * 60
    hours = minutes // 60
    minutes -= hours * 60

    parts = []
    if hours > 0:
        parts.append(f"0{hours}:" if hours < 10 else f"{hours}:")
    if minutes > 0 or hours:
        parts.append(f"{minutes}:")
    if seconds > 0 or hours or minutes:
        parts.append(f"0{seconds}" if seconds < 10 else str(seconds))
    return "".join(parts)


def date_format(epoch_seconds: int) -> str:
    """Format an epoch time in local time as ``HH:MM:SS YYYY-MM-DD``."""
    return time.strftime("%H:%M:%S %Y-%m-%d", time.localtime(epoch_seconds))


def time_format(epoch_seconds: int) -> str:
    """Format an epoch time in local time as ``HH:MM:SS-AM/PM``."""
    return time.strftime("%H:%M:%S-%p", time.localtime(epoch_seconds))