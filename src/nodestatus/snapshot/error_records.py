"""Merging of per-service error records."""

from __future__ import annotations

from itertools import chain, islice
from typing import Iterable, List

from ..records import ErrorRecord

MAX_SNAPSHOT_ERRORS = 10


def merge_error_records(*groups: Iterable[ErrorRecord], limit: int = MAX_SNAPSHOT_ERRORS) -> List[ErrorRecord]:
    """Concatenate groups in order and keep the first *limit* records overall."""
    return list(islice(chain.from_iterable(groups), limit))


__all__ = ["MAX_SNAPSHOT_ERRORS", "merge_error_records"]
