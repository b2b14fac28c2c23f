"""Dashboard colour themes."""

from __future__ import annotations

from typing import Dict

THEME_COLORS: Dict[str, Dict[str, str]] = {
    "slate": {
        "primary": "#667eea",
        "primaryHover": "#5568d3",
        "primaryActive": "#4952bc",
        "gradient": "linear-gradient(135deg, #667eea 0%, #764ba2 100%)",
        "accent": "#667eea",
    },
    "blue": {
        "primary": "#3b82f6",
        "primaryHover": "#2563eb",
        "primaryActive": "#1d4ed8",
        "gradient": "linear-gradient(135deg, #3b82f6 0%, #1e40af 100%)",
        "accent": "#0ea5e9",
    },
    "red": {
        "primary": "#ef4444",
        "primaryHover": "#dc2626",
        "primaryActive": "#b91c1c",
        "gradient": "linear-gradient(135deg, #ef4444 0%, #991b1b 100%)",
        "accent": "#f87171",
    },
    "orange": {
        "primary": "#f97316",
        "primaryHover": "#ea580c",
        "primaryActive": "#c2410c",
        "gradient": "linear-gradient(135deg, #f97316 0%, #b45309 100%)",
        "accent": "#fb923c",
    },
}


def theme_colors(theme: str) -> Dict[str, str]:
    return THEME_COLORS.get(theme, THEME_COLORS["slate"])


__all__ = ["THEME_COLORS", "theme_colors"]
