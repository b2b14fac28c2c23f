"""Reader for ``.env``-style default files."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Tuple

from ..errors import ConfigurationError

_EXPORT_PREFIX = "export "
_QUOTES = "'\""


def parse_dotenv_line(line: str) -> Optional[Tuple[str, str]]:
    """Return ``(key, value)`` for an assignment line, None for blanks and comments."""
    stripped = line.strip()
    if not stripped or stripped.startswith("#") or "=" not in stripped:
        return None
    key, raw_value = stripped.split("=", 1)
    key = key.strip()
    if key.startswith(_EXPORT_PREFIX):
        key = key[len(_EXPORT_PREFIX) :].strip()
    if not key:
        return None
    return key, raw_value.strip().strip(_QUOTES)


class DotenvLoader:
    """Loads service defaults such as ``~/.nodestatus.env``; later duplicates win."""

    @staticmethod
    def load_from_file(path: Path) -> Dict[str, str]:
        if not path.is_file():
            return {}
        try:
            text = path.read_text()
        except OSError as exc:
            raise ConfigurationError.load_failed("dotenv file", str(path)) from exc
        return dict(pair for pair in map(parse_dotenv_line, text.splitlines()) if pair)


__all__ = ["DotenvLoader", "parse_dotenv_line"]
