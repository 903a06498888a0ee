"""
Theme models for document generation.

The palette and font catalog lives in ``generator.config``.
"""

from .models import (
    ThemePalette,
    ThemeFont,
    PALETTE_ROLES,
    hex_to_rgb,
    normalize_hex,
)

__all__ = [
    "ThemePalette",
    "ThemeFont",
    "PALETTE_ROLES",
    "hex_to_rgb",
    "normalize_hex",
]
