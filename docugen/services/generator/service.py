"""
Document Generation Service

Dispatches an outline to the generator registered for its type.
"""

from typing import Optional

import structlog

from docugen.services.base import RenderError

from .formats import FormatGeneratorFactory
from .formats.base import BaseFormatGenerator
from .models import RenderedFile
from .theme.models import ThemeFont, ThemePalette

logger = structlog.get_logger(__name__)


def get_generator(data) -> BaseFormatGenerator:
    """Get the generator for an outline's declared type."""
    output_type = getattr(data, "type", None)
    generator = FormatGeneratorFactory.get(output_type) if output_type is not None else None
    if generator is None:
        raise RenderError(f"No generator for outline type {output_type!r}")
    return generator


def render_outline(data, palette: ThemePalette, font: ThemeFont) -> RenderedFile:
    """Render an outline in memory without touching the filesystem."""
    return get_generator(data).render(data, palette, font)


async def export_outline(
    data,
    palette: ThemePalette,
    font: ThemeFont,
    output_dir: Optional[str] = None,
) -> str:
    """Render an outline and save it.

    Returns:
        Path to the saved file
    """
    generator = get_generator(data)
    try:
        return await generator.generate(data, palette, font, output_dir=output_dir)
    except RenderError as e:
        logger.error("Export aborted", format=generator.format_name, error=e.message)
        raise
