"""
Display formatting for snapshot values.

Converts raw byte counts, integers and durations into the strings the
dashboard renders next to the numeric fields.
"""

from __future__ import annotations

# Constants
_BYTE_UNITS = ("B", "KB", "MB", "GB", "TB", "PB")
_KIB = 1024
_SECONDS_PER_DAY = 86400
_SECONDS_PER_HOUR = 3600
_SECONDS_PER_MINUTE = 60


def format_bytes(num_bytes: float) -> str:
    """Render a byte count with a binary unit and two decimals, e.g. ``1.50 GB``."""
    if num_bytes <= 0:
        return "0 B"
    value = float(num_bytes)
    unit_index = 0
    while value >= _KIB and unit_index < len(_BYTE_UNITS) - 1:
        value /= _KIB
        unit_index += 1
    return f"{value:.2f} {_BYTE_UNITS[unit_index]}"


def format_thousands(value: int) -> str:
    return f"{value:,}"


def split_uptime(total_seconds: float) -> tuple[int, int, int, int]:
    """Decompose seconds into (days, hours, minutes, seconds)."""
    whole = max(int(total_seconds), 0)
    days, remainder = divmod(whole, _SECONDS_PER_DAY)
    hours, remainder = divmod(remainder, _SECONDS_PER_HOUR)
    minutes, seconds = divmod(remainder, _SECONDS_PER_MINUTE)
    return days, hours, minutes, seconds


def format_uptime(total_seconds: float) -> str:
    days, hours, minutes, seconds = split_uptime(total_seconds)
    return f"{days}d {hours}h {minutes}m {seconds}s"


def format_uptime_short(total_seconds: float) -> str:
    days, hours, _, _ = split_uptime(total_seconds)
    return f"{days}d {hours}h"


__all__ = ["format_bytes", "format_thousands", "format_uptime", "format_uptime_short", "split_uptime"]
