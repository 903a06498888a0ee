"""
Document Generator Package

Turns a generation request into a themed PPTX deck or DOCX document.

Workflow:
1. GenerationParams -> OutlineSynthesizer (one LLM round-trip)
2. SlidesOutline / DocumentOutline held by the session
3. Palette + font chosen independently of content
4. Format generator renders the outline into a single file
"""

from .models import (
    OutputType,
    Tone,
    Language,
    GenerationParams,
    SlideContent,
    DocumentSection,
    SlidesOutline,
    DocumentOutline,
    GeneratedData,
    RenderedFile,
    parse_generated_data,
    MIN_COUNT,
    MAX_COUNT,
    DEFAULT_COUNT,
)

from .theme import ThemePalette, ThemeFont

from .config import (
    PALETTES,
    FONTS,
    get_palette,
    get_font,
    default_palette,
    default_font,
)

from .outline import OutlineSynthesizer, synthesize

from .formats import (
    BaseFormatGenerator,
    FormatGeneratorFactory,
    PPTXGenerator,
    DOCXGenerator,
)

from .service import render_outline, export_outline

from .session import GenerationSession, SessionState

__all__ = [
    # Models
    "OutputType",
    "Tone",
    "Language",
    "GenerationParams",
    "SlideContent",
    "DocumentSection",
    "SlidesOutline",
    "DocumentOutline",
    "GeneratedData",
    "RenderedFile",
    "parse_generated_data",
    "MIN_COUNT",
    "MAX_COUNT",
    "DEFAULT_COUNT",
    # Theme
    "ThemePalette",
    "ThemeFont",
    "PALETTES",
    "FONTS",
    "get_palette",
    "get_font",
    "default_palette",
    "default_font",
    # Synthesis
    "OutlineSynthesizer",
    "synthesize",
    # Rendering
    "BaseFormatGenerator",
    "FormatGeneratorFactory",
    "PPTXGenerator",
    "DOCXGenerator",
    "render_outline",
    "export_outline",
    # Session
    "GenerationSession",
    "SessionState",
]
