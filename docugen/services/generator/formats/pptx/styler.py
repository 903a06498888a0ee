"""
PPTX Styling Utilities

Functions for placing styled text, shapes and backgrounds on slides.
Colors are always passed as six-digit hex strings so that callers read
them from the palette or from the fixed colors in ``generator.config``.
"""

from typing import Optional

import structlog
from lxml import etree
from pptx.dml.color import RGBColor
from pptx.enum.shapes import MSO_CONNECTOR, MSO_SHAPE
from pptx.enum.text import MSO_ANCHOR, PP_ALIGN
from pptx.oxml.ns import qn
from pptx.util import Emu, Inches, Pt

from ...theme.models import normalize_hex
from ...utils import sanitize_text

logger = structlog.get_logger(__name__)

BULLET_CHAR = "•"


# =============================================================================
# Color Utilities
# =============================================================================

def rgb(hex_color: str) -> RGBColor:
    """Convert a hex color string to an RGBColor."""
    return RGBColor.from_string(normalize_hex(hex_color))


# =============================================================================
# Font Application
# =============================================================================

def style_run(
    run,
    font_name: str,
    size: int,
    color: str,
    bold: bool = False,
    italic: bool = False,
):
    """Apply font, size, color and weight to a single run."""
    run.font.name = font_name
    run.font.size = Pt(size)
    run.font.bold = bold
    run.font.italic = italic
    run.font.color.rgb = rgb(color)


# =============================================================================
# Text
# =============================================================================

def add_text(
    slide,
    left: float,
    top: float,
    width: float,
    height: float,
    text: str,
    font_name: str,
    size: int,
    color: str,
    bold: bool = False,
    italic: bool = False,
    align=PP_ALIGN.LEFT,
    name: Optional[str] = None,
):
    """Add a single-paragraph text box. Geometry is in inches.

    Returns:
        The created shape
    """
    shape = slide.shapes.add_textbox(Inches(left), Inches(top), Inches(width), Inches(height))
    if name:
        shape.name = name
    tf = shape.text_frame
    tf.word_wrap = True

    p = tf.paragraphs[0]
    p.alignment = align
    run = p.add_run()
    run.text = sanitize_text(text)
    style_run(run, font_name, size, color, bold=bold, italic=italic)
    return shape


def add_native_bullet_to_paragraph(p, bullet_char: str = BULLET_CHAR):
    """
    Give a paragraph native PowerPoint bullet formatting.

    Uses OOXML a:buChar elements instead of a text prefix, so the bullet
    text itself stays exactly as generated.

    Args:
        p: python-pptx paragraph object
        bullet_char: Bullet character
    """
    pPr = p._p.get_or_add_pPr()

    # 0.25" text margin, bullet hung 0.25" to its left (EMU)
    pPr.set('marL', str(Inches(0.25)))
    pPr.set('indent', str(-Inches(0.25)))

    buFont = etree.SubElement(pPr, qn('a:buFont'))
    buFont.set('typeface', 'Arial')
    buFont.set('panose', '020B0604020202020204')

    buChar = etree.SubElement(pPr, qn('a:buChar'))
    buChar.set('char', bullet_char)


def add_bullets(
    slide,
    left: float,
    top: float,
    width: float,
    height: float,
    points,
    font_name: str,
    size: int,
    color: str,
    space_before: int = 10,
    name: Optional[str] = None,
):
    """Add a top-anchored text box with one bulleted paragraph per point.

    An empty ``points`` sequence leaves the box blank.
    """
    shape = slide.shapes.add_textbox(Inches(left), Inches(top), Inches(width), Inches(height))
    if name:
        shape.name = name
    tf = shape.text_frame
    tf.word_wrap = True
    tf.vertical_anchor = MSO_ANCHOR.TOP

    for idx, point in enumerate(points):
        p = tf.paragraphs[0] if idx == 0 else tf.add_paragraph()
        add_native_bullet_to_paragraph(p)
        p.space_before = Pt(space_before)
        run = p.add_run()
        run.text = sanitize_text(point)
        style_run(run, font_name, size, color)

    return shape


# =============================================================================
# Shapes and Backgrounds
# =============================================================================

def apply_slide_background(slide, color: str):
    """Fill the slide background with a solid color."""
    fill = slide.background.fill
    fill.solid()
    fill.fore_color.rgb = rgb(color)


def add_filled_rect(slide, left, top, width, height, color: str, name: Optional[str] = None):
    """Add a borderless solid rectangle. Geometry is in EMU."""
    shape = slide.shapes.add_shape(MSO_SHAPE.RECTANGLE, Emu(left), Emu(top), Emu(width), Emu(height))
    if name:
        shape.name = name
    shape.fill.solid()
    shape.fill.fore_color.rgb = rgb(color)
    shape.line.fill.background()
    shape.shadow.inherit = False
    return shape


def add_rule(slide, left: float, top: float, width: float, color: str, weight: int = 2, name: Optional[str] = None):
    """Add a horizontal line. Geometry is in inches, weight in points."""
    line = slide.shapes.add_connector(
        MSO_CONNECTOR.STRAIGHT,
        Inches(left), Inches(top),
        Inches(left + width), Inches(top),
    )
    if name:
        line.name = name
    line.line.color.rgb = rgb(color)
    line.line.width = Pt(weight)
    return line
