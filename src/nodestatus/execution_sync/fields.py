"""Field parsers for execution client progress lines."""

from __future__ import annotations

import math
import re
from typing import Optional

from .types import ETA_COMPUTING

# Go duration strings as printed by the client, e.g. ``3h15m``, ``1h2m3.5s``, ``42s``
_ETA_PATTERN = re.compile(r"^(?:(\d+)h)?(?:(\d+)m(?!s))?(?:\d+(?:\.\d+)?(?:s|ms|us|µs|ns))?$")

MIN_PERCENTAGE = 0.0
MAX_PERCENTAGE = 100.0


def parse_eta(raw: Optional[str]) -> str:
    """Render an ETA token as ``"<H>h <M>m"``, or ``"computing..."`` when unusable."""
    if not raw:
        return ETA_COMPUTING
    match = _ETA_PATTERN.match(raw.strip())
    if not match or not match.group(0):
        return ETA_COMPUTING
    hours = int(match.group(1) or 0)
    minutes = int(match.group(2) or 0)
    return f"{hours}h {minutes}m"


def parse_percentage(raw: Optional[str]) -> float:
    """
    Parse ``"42.50%"`` into ``42.5``.

    Missing, malformed or non-finite values give 0; anything else is clamped
    to the 0-100 range.
    """
    if not raw:
        return MIN_PERCENTAGE
    try:
        value = float(raw.replace("%", ""))
    except ValueError:
        return MIN_PERCENTAGE
    if not math.isfinite(value):
        return MIN_PERCENTAGE
    return min(max(value, MIN_PERCENTAGE), MAX_PERCENTAGE)


def parse_block_number(raw: Optional[str]) -> int:
    """
    Parse a block number that may contain thousands separators.

    Raises:
        ValueError: when the token is not a non-negative integer
    """
    if not raw:
        return 0
    value = int(raw.replace(",", ""))
    if value < 0:
        raise ValueError(f"Block number must be non-negative, got {raw!r}")
    return value


__all__ = ["MAX_PERCENTAGE", "MIN_PERCENTAGE", "parse_block_number", "parse_eta", "parse_percentage"]
