"""Log text primitives shared by the execution and consensus parsers."""

from .kv_extractor import extract_kv_pairs
from .line_scanner import collect_recent_matches, last_match, scan_last_matches
from .log_text import LogText

__all__ = [
    "LogText",
    "collect_recent_matches",
    "extract_kv_pairs",
    "last_match",
    "scan_last_matches",
]
