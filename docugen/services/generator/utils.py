"""
Document Generation Utilities

Text and filename helpers shared by the format generators, and the single
place that writes exports to disk.
"""

import os
import re
import tempfile

import structlog

from .models import RenderedFile

logger = structlog.get_logger(__name__)


# =============================================================================
# Text Utilities
# =============================================================================

_XML_ILLEGAL_CHARS = re.compile(r'[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]')


def sanitize_text(text: str) -> str:
    """Drop control characters that are illegal in OOXML.

    Everything else, including non-Latin scripts and typographic
    punctuation, is kept verbatim.
    """
    if not text:
        return ""
    return _XML_ILLEGAL_CHARS.sub('', text)


# =============================================================================
# Filename Utilities
# =============================================================================

_FILENAME_ILLEGAL_CHARS = re.compile(r'[/\\:*?"<>|\x00-\x1f\x7f]')


def build_filename(title: str, suffix: str, extension: str) -> str:
    """Build the export file name from a title.

    Whitespace runs become a single underscore; characters that are not
    allowed in file names are dropped.

    Args:
        title: Outline title
        suffix: Type-specific suffix (e.g. "Presentation")
        extension: File extension including the dot

    Returns:
        File name such as ``Q3_Plan_Presentation.pptx``
    """
    # Whitespace first: tabs and newlines are also in the illegal class
    stem = re.sub(r'\s+', '_', (title or '').strip())
    stem = _FILENAME_ILLEGAL_CHARS.sub('', stem)
    if not stem.strip('_.'):
        stem = "Untitled"
    return f"{stem}_{suffix}{extension}"


# =============================================================================
# Saving
# =============================================================================

def save_rendered(rendered: RenderedFile, output_dir: str) -> str:
    """Write a rendered file into ``output_dir``.

    The bytes go to a temporary file in the same directory which then
    replaces the destination, so readers never see a partial file.

    Returns:
        Path of the saved file
    """
    os.makedirs(output_dir, exist_ok=True)
    output_path = os.path.join(output_dir, rendered.filename)

    fd, tmp_path = tempfile.mkstemp(dir=output_dir, prefix=".", suffix=".part")
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(rendered.content)
        os.replace(tmp_path, output_path)
    except BaseException:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise

    logger.info("Saved export", path=output_path, size=rendered.size)
    return output_path
