"""Process id lookup by command-line keyword."""

from __future__ import annotations

import logging
import os
from typing import Optional

import psutil

logger = logging.getLogger(__name__)


def find_pid_by_keyword(keyword: str) -> Optional[int]:
    """
    Return the lowest pid whose name or command line contains *keyword*.

    Mirrors ``pgrep -f <keyword> | head -1``; the current process is skipped so
    a status service started with the keyword in its arguments never matches
    itself.
    """
    needle = keyword.lower()
    if not needle:
        return None

    own_pid = os.getpid()
    matches = []
    try:
        for proc in psutil.process_iter(["pid", "name", "cmdline"]):
            try:
                pid = proc.info["pid"]
                if pid == own_pid:
                    continue
                cmdline_value = proc.info.get("cmdline")
                cmdline = " ".join(str(arg) for arg in cmdline_value) if isinstance(cmdline_value, list) else ""
                name = str(proc.info.get("name") or "")
                if needle in cmdline.lower() or needle in name.lower():
                    matches.append(pid)
            except (psutil.NoSuchProcess, psutil.AccessDenied):
                continue
    except (psutil.Error, OSError):
        logger.debug("Process scan for %r failed", keyword, exc_info=True)
        return None

    return min(matches) if matches else None


__all__ = ["find_pid_by_keyword"]
