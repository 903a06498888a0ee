"""
PPTX Format Generator Package

Generates 16:9 PowerPoint decks with themed colors and fonts.
"""

from .generator import PPTXGenerator, check_slides_outline

__all__ = ["PPTXGenerator", "check_slides_outline"]
