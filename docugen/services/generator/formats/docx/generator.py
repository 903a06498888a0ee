"""
DOCX Format Generator

Lays out a document outline on US Letter pages: a one-page cover followed
by one numbered section per outline item.
"""

import io
from datetime import date
from typing import Optional

import structlog
from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.oxml import OxmlElement
from docx.oxml.ns import qn
from docx.shared import Inches, Pt, RGBColor

from docugen.core.config import settings
from docugen.services.base import RenderError

from ..base import BaseFormatGenerator, validate_theme
from ..factory import register_generator
from ...config import BRAND_MARK, DOCUMENT_TAGLINE, MUTED_TEXT, SLATE_TEXT
from ...models import DocumentOutline, DocumentSection, OutputType, RenderedFile
from ...theme.models import ThemeFont, ThemePalette, normalize_hex
from ...utils import sanitize_text

logger = structlog.get_logger(__name__)

PAGE_WIDTH = Inches(8.5)
PAGE_HEIGHT = Inches(11)
MARGIN = Inches(1)

HEADING_SIZE = 14
BODY_SIZE = 12
BODY_LINE_SPACING = 1.5

# Elements that follow w:pBdr inside w:pPr
_PBDR_SUCCESSORS = (
    'w:shd', 'w:tabs', 'w:suppressAutoHyphens', 'w:kinsoku', 'w:wordWrap',
    'w:overflowPunct', 'w:topLinePunct', 'w:autoSpaceDE', 'w:autoSpaceDN',
    'w:bidi', 'w:adjustRightInd', 'w:snapToGrid', 'w:spacing', 'w:ind',
    'w:contextualSpacing', 'w:mirrorIndents', 'w:suppressOverlap', 'w:jc',
    'w:textDirection', 'w:textAlignment', 'w:textboxTightWrap',
    'w:outlineLvl', 'w:divId', 'w:cnfStyle', 'w:rPr', 'w:sectPr',
    'w:pPrChange',
)

# Elements that follow w:spacing inside w:rPr
_RPR_SPACING_SUCCESSORS = (
    'w:w', 'w:kern', 'w:position', 'w:sz', 'w:szCs', 'w:highlight', 'w:u',
    'w:effect', 'w:bdr', 'w:shd', 'w:fitText', 'w:vertAlign', 'w:rtl',
    'w:cs', 'w:em', 'w:lang', 'w:eastAsianLayout', 'w:specVanish', 'w:oMath',
)


MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def format_issue_date(issued_on: date) -> str:
    """Long US English date such as ``October 19, 2026``, whatever the locale."""
    return f"{MONTH_NAMES[issued_on.month - 1]} {issued_on.day}, {issued_on.year}"


def check_document_outline(data) -> DocumentOutline:
    """Reject anything that is not a document outline with section-shaped items."""
    if not isinstance(data, DocumentOutline):
        declared = getattr(data, "type", None)
        raise RenderError(
            f"Document export needs a document outline, got {getattr(declared, 'value', declared)!r}",
            output_type=OutputType.DOCUMENT.value,
        )
    for idx, item in enumerate(data.items):
        if not isinstance(item, DocumentSection):
            raise RenderError(
                f"Item {idx + 1} is not a section (heading and paragraphs)",
                output_type=OutputType.DOCUMENT.value,
                details={"item_index": idx},
            )
    return data


def add_styled_run(
    paragraph,
    text: str,
    font_name: str,
    size: int,
    color: str,
    bold: bool = False,
):
    """Add a run with the theme font in every script slot."""
    run = paragraph.add_run(sanitize_text(text))
    set_run_font(run, font_name)
    run.font.size = Pt(size)
    run.font.bold = bold
    run.font.color.rgb = RGBColor.from_string(normalize_hex(color))
    return run


def set_run_font(run, font_name: str):
    """Set the font for Latin, East Asian and complex scripts."""
    run.font.name = font_name
    rFonts = run._element.rPr.rFonts
    rFonts.set(qn('w:eastAsia'), font_name)
    rFonts.set(qn('w:cs'), font_name)


def set_character_spacing(run, points: float):
    """Expand the spacing between characters of a run."""
    spacing = OxmlElement('w:spacing')
    spacing.set(qn('w:val'), str(int(points * 20)))
    run._element.get_or_add_rPr().insert_element_before(spacing, *_RPR_SPACING_SUCCESSORS)


def add_bottom_border(paragraph, color: str, size: int = 6, space: int = 1):
    """Draw a rule under a paragraph."""
    pBdr = OxmlElement('w:pBdr')
    bottom = OxmlElement('w:bottom')
    bottom.set(qn('w:val'), 'single')
    bottom.set(qn('w:sz'), str(size))
    bottom.set(qn('w:space'), str(space))
    bottom.set(qn('w:color'), normalize_hex(color))
    pBdr.append(bottom)
    paragraph._p.get_or_add_pPr().insert_element_before(pBdr, *_PBDR_SUCCESSORS)


@register_generator(OutputType.DOCUMENT)
class DOCXGenerator(BaseFormatGenerator):
    """Word document generator.

    Layout:
    - Cover page: brand mark, title, tagline and issue date, then a page break
    - Sections: ``SECTION n: HEADING`` with a themed rule, justified
      paragraphs at 1.5 line spacing
    """

    @property
    def output_type(self) -> OutputType:
        return OutputType.DOCUMENT

    @property
    def format_name(self) -> str:
        return "docx"

    @property
    def file_extension(self) -> str:
        return ".docx"

    @property
    def media_type(self) -> str:
        return "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

    @property
    def file_suffix(self) -> str:
        return "Document"

    def render(
        self,
        data,
        palette: ThemePalette,
        font: ThemeFont,
        issued_on: Optional[date] = None,
    ) -> RenderedFile:
        """Render a document outline into a .docx file.

        Args:
            data: DocumentOutline to render
            palette: Color palette
            font: Font family
            issued_on: Date printed on the cover, defaults to today

        Returns:
            RenderedFile holding the document bytes
        """
        outline = check_document_outline(data)
        validate_theme(palette, font, OutputType.DOCUMENT)

        doc = Document()
        for section in doc.sections:
            section.page_width = PAGE_WIDTH
            section.page_height = PAGE_HEIGHT
            section.top_margin = MARGIN
            section.bottom_margin = MARGIN
            section.left_margin = MARGIN
            section.right_margin = MARGIN

        self._set_properties(doc, outline)
        self._add_cover(doc, outline, palette, font, issued_on or date.today())
        for idx, item in enumerate(outline.items):
            self._add_section(doc, item, idx + 1, palette, font)

        buffer = io.BytesIO()
        doc.save(buffer)

        logger.info(
            "Rendered document",
            sections=len(outline.items),
            palette=palette.id,
            font=font.id,
        )
        return RenderedFile(
            filename=self.get_filename(outline.title),
            content=buffer.getvalue(),
            media_type=self.media_type,
        )

    def _set_properties(self, doc, outline: DocumentOutline):
        props = doc.core_properties
        props.title = outline.title
        props.author = settings.APP_NAME
        props.last_modified_by = settings.APP_NAME
        props.subject = "Strategic Analysis & Documentation"
        keywords = []
        if outline.tone:
            props.category = outline.tone.value
            keywords.append(outline.tone.value)
        if outline.language:
            props.language = outline.language.value
            keywords.append(outline.language.value)
        if keywords:
            props.keywords = ", ".join(keywords)

    def _add_cover(self, doc, outline: DocumentOutline, palette: ThemePalette, font: ThemeFont, issued_on: date):
        # Brand mark
        brand = doc.add_paragraph()
        brand.alignment = WD_ALIGN_PARAGRAPH.LEFT
        brand.paragraph_format.space_after = Pt(60)
        add_styled_run(brand, BRAND_MARK, font.family, 24, palette.primary, bold=True)

        # Title
        title = doc.add_paragraph()
        title.alignment = WD_ALIGN_PARAGRAPH.CENTER
        title.paragraph_format.space_before = Pt(50)
        title.paragraph_format.space_after = Pt(20)
        add_styled_run(title, outline.title, font.family, 36, palette.dark, bold=True)

        # Tagline
        tagline = doc.add_paragraph()
        tagline.alignment = WD_ALIGN_PARAGRAPH.CENTER
        tagline.paragraph_format.space_after = Pt(100)
        tagline_run = add_styled_run(tagline, DOCUMENT_TAGLINE, font.family, 12, palette.primary, bold=True)
        set_character_spacing(tagline_run, 2)

        # Issue date
        issued = doc.add_paragraph()
        issued.alignment = WD_ALIGN_PARAGRAPH.CENTER
        add_styled_run(issued, f"Issued on: {format_issue_date(issued_on)}", font.family, 12, MUTED_TEXT)

        page_break = doc.add_page_break()
        for run in page_break.runs:
            set_run_font(run, font.family)

    def _add_section(self, doc, item: DocumentSection, number: int, palette: ThemePalette, font: ThemeFont):
        heading = doc.add_paragraph(style="Heading 1")
        heading.alignment = WD_ALIGN_PARAGRAPH.LEFT
        heading.paragraph_format.space_before = Pt(30)
        heading.paragraph_format.space_after = Pt(20)
        add_bottom_border(heading, palette.primary)
        add_styled_run(
            heading,
            f"SECTION {number}: {item.heading.upper()}",
            font.family, HEADING_SIZE, palette.primary, bold=True,
        )

        for text in item.paragraphs:
            para = doc.add_paragraph()
            para.alignment = WD_ALIGN_PARAGRAPH.JUSTIFY
            para.paragraph_format.line_spacing = BODY_LINE_SPACING
            para.paragraph_format.space_after = Pt(12.5)
            add_styled_run(para, text, font.family, BODY_SIZE, SLATE_TEXT)
