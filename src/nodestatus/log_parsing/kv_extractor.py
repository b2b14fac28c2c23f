"""Extraction of ``key=value`` tokens embedded in free-text log lines."""

from __future__ import annotations

import re
from typing import Dict

_KV_PATTERN = re.compile(r"(\w+)=(\S+)")
_TRAILING_SEPARATOR = re.compile(r"[,;]$")


def extract_kv_pairs(line: str) -> Dict[str, str]:
    """
    Return every ``identifier=value`` token found in *line*.

    The value is the run of non-whitespace characters after ``=`` with one
    trailing ``,`` or ``;`` removed. Later duplicates of a key overwrite earlier
    ones. Lines without tokens yield an empty dict.
    """
    pairs: Dict[str, str] = {}
    for key, raw_value in _KV_PATTERN.findall(line):
        pairs[key] = _TRAILING_SEPARATOR.sub("", raw_value)
    return pairs


__all__ = ["extract_kv_pairs"]
