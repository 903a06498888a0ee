"""
Theme data models.

A theme is the pairing of a color palette and a font. Both are plain values
passed to the renderers; nothing here holds selection state.
"""

from dataclasses import dataclass
from typing import Tuple

PALETTE_ROLES = ("primary", "dark", "light", "accent")


def normalize_hex(hex_color: str) -> str:
    """Six-digit upper-case hex without a leading ``#``."""
    return hex_color.lstrip('#').upper()


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convert hex color string to RGB tuple."""
    hex_color = normalize_hex(hex_color)
    return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))


@dataclass(frozen=True)
class ThemePalette:
    """Named color set. Colors are six-digit hex strings without ``#``."""
    id: str
    name: str
    primary: str
    dark: str
    light: str
    accent: str
    bg_gradient: str = ""  # Decorative, preview only

    def rgb(self, role: str) -> Tuple[int, int, int]:
        """Get the RGB tuple of a palette role (primary, dark, light, accent)."""
        if role not in PALETTE_ROLES:
            raise KeyError(f"Unknown palette role: {role}")
        return hex_to_rgb(getattr(self, role))


@dataclass(frozen=True)
class ThemeFont:
    """Named font family applied to every run of an export."""
    id: str
    name: str
    family: str
