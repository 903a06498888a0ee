"""
Outline Synthesis Package

Generates slide and document outlines with an LLM.
"""

from .generator import (
    OutlineSynthesizer,
    synthesize,
    build_brief,
    get_schema,
    SLIDES_SCHEMA,
    DOCUMENT_SCHEMA,
)

__all__ = [
    "OutlineSynthesizer",
    "synthesize",
    "build_brief",
    "get_schema",
    "SLIDES_SCHEMA",
    "DOCUMENT_SCHEMA",
]
