"""
Document Generation Configuration

Palette and font catalog plus the fixed, non-theme colors used by the
renderers. The catalog is built once at import and never mutated.
"""

from typing import Tuple

from docugen.core.config import settings
from docugen.services.base import ValidationError

from .theme.models import ThemePalette, ThemeFont


# =============================================================================
# Palette Catalog
# =============================================================================

PALETTES: Tuple[ThemePalette, ...] = (
    ThemePalette(
        id="indigo",
        name="Modern Indigo",
        primary="4F46E5",
        dark="1E1B4B",
        light="F8FAFC",
        accent="818CF8",
        bg_gradient="from-indigo-800 via-indigo-600 to-purple-800",
    ),
    ThemePalette(
        id="emerald",
        name="Professional Emerald",
        primary="10B981",
        dark="064E3B",
        light="F0FDF4",
        accent="34D399",
        bg_gradient="from-emerald-800 via-emerald-600 to-teal-800",
    ),
    ThemePalette(
        id="ruby",
        name="Corporate Ruby",
        primary="E11D48",
        dark="4C0519",
        light="FFF1F2",
        accent="FB7185",
        bg_gradient="from-rose-800 via-rose-600 to-pink-800",
    ),
    ThemePalette(
        id="amber",
        name="Sunset Business",
        primary="F59E0B",
        dark="451A03",
        light="FFFBEB",
        accent="FBBF24",
        bg_gradient="from-amber-800 via-amber-600 to-orange-800",
    ),
)


# =============================================================================
# Font Catalog
# =============================================================================

FONTS: Tuple[ThemeFont, ...] = (
    ThemeFont(id="sans", name="Modern Sans", family="Arial"),
    ThemeFont(id="serif", name="Classic Serif", family="Georgia"),
    ThemeFont(id="mono", name="Technical Mono", family="Courier New"),
)


# =============================================================================
# Fixed Colors
# =============================================================================

WHITE = "FFFFFF"
SLATE_TEXT = "334155"      # Bullets and body paragraphs
MUTED_TEXT = "64748B"      # Branding caption, issue date
FOOTER_TEXT = "94A3B8"
WATERMARK_TEXT = "F1F5F9"  # Slide number watermark

DOCUMENT_TAGLINE = "STRATEGIC ANALYSIS & DOCUMENTATION"
BRAND_MARK = "DG."


# =============================================================================
# Lookups
# =============================================================================

def get_palette(palette_id: str) -> ThemePalette:
    """Get a palette by id."""
    for palette in PALETTES:
        if palette.id == palette_id:
            return palette
    raise ValidationError(f"Unknown palette: {palette_id}", field="palette")


def get_font(font_id: str) -> ThemeFont:
    """Get a font by id."""
    for font in FONTS:
        if font.id == font_id:
            return font
    raise ValidationError(f"Unknown font: {font_id}", field="font")


def default_palette() -> ThemePalette:
    """Palette a new session starts with."""
    try:
        return get_palette(settings.DEFAULT_PALETTE)
    except ValidationError:
        return PALETTES[0]


def default_font() -> ThemeFont:
    """Font a new session starts with."""
    try:
        return get_font(settings.DEFAULT_FONT)
    except ValidationError:
        return FONTS[0]
