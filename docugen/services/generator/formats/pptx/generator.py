"""
PPTX Format Generator

Lays out a slides outline on a 16:9 canvas: one title slide followed by
one content slide per outline item, colored from the palette and set in
the theme font.
"""

import io

import structlog
from pptx import Presentation
from pptx.enum.text import PP_ALIGN
from pptx.util import Inches

from docugen.core.config import settings
from docugen.services.base import RenderError

from ..base import BaseFormatGenerator, validate_theme
from ..factory import register_generator
from ...config import FOOTER_TEXT, MUTED_TEXT, SLATE_TEXT, WATERMARK_TEXT, WHITE
from ...models import OutputType, RenderedFile, SlideContent, SlidesOutline
from ...theme.models import ThemeFont, ThemePalette
from .styler import (
    add_bullets,
    add_filled_rect,
    add_rule,
    add_text,
    apply_slide_background,
)

logger = structlog.get_logger(__name__)

# 16:9 canvas in inches
SLIDE_WIDTH = 10.0
SLIDE_HEIGHT = 5.625

BLANK_LAYOUT_INDEX = 6


def check_slides_outline(data) -> SlidesOutline:
    """Reject anything that is not a slides outline with slide-shaped items."""
    if not isinstance(data, SlidesOutline):
        declared = getattr(data, "type", None)
        raise RenderError(
            f"Presentation export needs a slides outline, got {getattr(declared, 'value', declared)!r}",
            output_type=OutputType.SLIDES.value,
        )
    for idx, item in enumerate(data.items):
        if not isinstance(item, SlideContent):
            raise RenderError(
                f"Item {idx + 1} is not a slide (title and points)",
                output_type=OutputType.SLIDES.value,
                details={"item_index": idx},
            )
    return data


@register_generator(OutputType.SLIDES)
class PPTXGenerator(BaseFormatGenerator):
    """PowerPoint generator.

    Layout:
    - Title slide: dark background, accent bar, upper-cased title,
      optional subtitle and a branding caption
    - Content slides: sidebar, numbered watermark, title with rule,
      native bullets and a footer
    """

    @property
    def output_type(self) -> OutputType:
        return OutputType.SLIDES

    @property
    def format_name(self) -> str:
        return "pptx"

    @property
    def file_extension(self) -> str:
        return ".pptx"

    @property
    def media_type(self) -> str:
        return "application/vnd.openxmlformats-officedocument.presentationml.presentation"

    @property
    def file_suffix(self) -> str:
        return "Presentation"

    def render(self, data, palette: ThemePalette, font: ThemeFont) -> RenderedFile:
        """Render a slides outline into a .pptx file.

        Args:
            data: SlidesOutline to render
            palette: Color palette
            font: Font family

        Returns:
            RenderedFile holding the presentation bytes
        """
        outline = check_slides_outline(data)
        validate_theme(palette, font, OutputType.SLIDES)

        prs = Presentation()
        prs.slide_width = Inches(SLIDE_WIDTH)
        prs.slide_height = Inches(SLIDE_HEIGHT)
        self._set_properties(prs, outline)

        self._add_title_slide(prs, outline, palette, font)
        for idx, item in enumerate(outline.items):
            self._add_content_slide(prs, outline, item, idx + 1, palette, font)

        buffer = io.BytesIO()
        prs.save(buffer)

        logger.info(
            "Rendered presentation",
            slides=len(prs.slides),
            palette=palette.id,
            font=font.id,
        )
        return RenderedFile(
            filename=self.get_filename(outline.title),
            content=buffer.getvalue(),
            media_type=self.media_type,
        )

    def _set_properties(self, prs, outline: SlidesOutline):
        props = prs.core_properties
        props.title = outline.title
        props.author = settings.APP_NAME
        props.last_modified_by = settings.APP_NAME
        props.subject = "Presentation"
        if outline.tone:
            props.category = outline.tone.value
        if outline.language:
            props.language = outline.language.value

    def _add_title_slide(self, prs, outline: SlidesOutline, palette: ThemePalette, font: ThemeFont):
        slide = prs.slides.add_slide(prs.slide_layouts[BLANK_LAYOUT_INDEX])
        apply_slide_background(slide, palette.dark)

        add_filled_rect(slide, 0, 0, prs.slide_width, Inches(0.1), palette.accent, name="Accent Bar")

        add_text(
            slide, 0.5, 1.5, 9, 1.6, outline.title.upper(),
            font.family, 48, palette.light, bold=True, align=PP_ALIGN.CENTER, name="Title",
        )

        if outline.subtitle:
            add_text(
                slide, 1, 3.5, 8, 0.8, outline.subtitle,
                font.family, 24, palette.accent, italic=True, align=PP_ALIGN.CENTER, name="Subtitle",
            )

        add_text(
            slide, 1, 5, 8, 0.4, f"{settings.APP_NAME} • Strategic Deck",
            font.family, 12, MUTED_TEXT, bold=True, align=PP_ALIGN.CENTER, name="Branding",
        )

    def _add_content_slide(
        self,
        prs,
        outline: SlidesOutline,
        item: SlideContent,
        number: int,
        palette: ThemePalette,
        font: ThemeFont,
    ):
        slide = prs.slides.add_slide(prs.slide_layouts[BLANK_LAYOUT_INDEX])
        apply_slide_background(slide, WHITE)

        add_filled_rect(slide, 0, 0, Inches(0.15), prs.slide_height, palette.primary, name="Sidebar")

        add_text(
            slide, 8.5, 0.3, 1, 0.8, f"{number:02d}",
            font.family, 40, WATERMARK_TEXT, bold=True, align=PP_ALIGN.RIGHT, name="Slide Number",
        )

        add_text(
            slide, 0.5, 0.4, 8, 0.7, item.title,
            font.family, 32, palette.dark, bold=True, name="Title",
        )

        add_rule(slide, 0.5, 1.1, 4, palette.primary, weight=2, name="Title Rule")

        add_bullets(
            slide, 0.5, 1.6, 9, 3.5, item.points,
            font.family, 20, SLATE_TEXT, name="Bullets",
        )

        add_text(
            slide, 0.5, 5.2, 9, 0.3, f"{settings.APP_NAME} | {outline.title}",
            font.family, 10, FOOTER_TEXT, bold=True, name="Footer",
        )
