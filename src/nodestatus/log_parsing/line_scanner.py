"""
Last-match-wins scanning over ordered log lines.

Logs are chronological, so the most recent line matching a category is taken
as current truth and earlier matches of the same category are ignored.
"""

from __future__ import annotations

import re
from collections import deque
from typing import Dict, Iterable, List, Mapping, Optional, Pattern


def scan_last_matches(lines: Iterable[str], patterns: Mapping[str, Pattern[str]]) -> Dict[str, str]:
    """
    Fold over *lines* keeping the most recent matching line per category.

    Args:
        lines: Log lines in chronological order
        patterns: Category name to compiled pattern

    Returns:
        Category name to the matched text of its last matching line. The matched
        text runs from the start of the pattern match to the end of the line.
        Categories with no match are absent.
    """
    latest: Dict[str, str] = {}
    for line in lines:
        for category, pattern in patterns.items():
            match = pattern.search(line)
            if match:
                latest[category] = line[match.start() :]
    return latest


def last_match(lines: Iterable[str], pattern: Pattern[str]) -> Optional[str]:
    """Return the tail of the most recent line matching *pattern*, if any."""
    return scan_last_matches(lines, {"match": pattern}).get("match")


def collect_recent_matches(lines: Iterable[str], pattern: Pattern[str], limit: int) -> List[re.Match[str]]:
    """Return up to *limit* most recent matches of *pattern*, oldest first."""
    if limit <= 0:
        return []
    recent: deque[re.Match[str]] = deque(maxlen=limit)
    for line in lines:
        match = pattern.search(line)
        if match:
            recent.append(match)
    return list(recent)


__all__ = ["collect_recent_matches", "last_match", "scan_last_matches"]
