"""
Format Generators Package

Importing this package registers the PPTX and DOCX generators with the
factory.
"""

from .base import BaseFormatGenerator, validate_theme
from .factory import FormatGeneratorFactory, register_generator
from .pptx import PPTXGenerator
from .docx import DOCXGenerator

__all__ = [
    "BaseFormatGenerator",
    "validate_theme",
    "FormatGeneratorFactory",
    "register_generator",
    "PPTXGenerator",
    "DOCXGenerator",
]
