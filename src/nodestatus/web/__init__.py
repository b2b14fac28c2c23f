"""HTTP surface of the status service."""

from .app import SNAPSHOT_ROUTE, create_app
from .themes import THEME_COLORS, theme_colors

__all__ = ["SNAPSHOT_ROUTE", "THEME_COLORS", "create_app", "theme_colors"]
