"""
DOCX Format Generator Package

Generates Word documents with a cover page and numbered sections.
"""

from .generator import DOCXGenerator, check_document_outline

__all__ = ["DOCXGenerator", "check_document_outline"]
