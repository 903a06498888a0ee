"""
DocuGen - Pytest Configuration
==============================

Shared fixtures and configuration for all tests.
"""

import io
import os
from unittest.mock import AsyncMock, MagicMock

import pytest

# Set test environment BEFORE any imports
os.environ["LLM_PROVIDER"] = "google"
os.environ["GOOGLE_API_KEY"] = "test-google-key"
os.environ["OPENAI_API_KEY"] = "test-openai-key"
os.environ["DEFAULT_PALETTE"] = "indigo"
os.environ["DEFAULT_FONT"] = "sans"

from docx import Document
from pptx import Presentation

from docugen.services.generator import (
    DocumentOutline,
    DocumentSection,
    GenerationParams,
    OutputType,
    SlideContent,
    SlidesOutline,
    get_font,
    get_palette,
)


# =============================================================================
# Theme Fixtures
# =============================================================================

@pytest.fixture
def indigo():
    return get_palette("indigo")


@pytest.fixture
def emerald():
    return get_palette("emerald")


@pytest.fixture
def sans():
    return get_font("sans")


@pytest.fixture
def serif():
    return get_font("serif")


# =============================================================================
# Outline Fixtures
# =============================================================================

@pytest.fixture
def q3_slides() -> SlidesOutline:
    """Two-slide deck: title slide plus one content slide."""
    return SlidesOutline(
        title="Q3 Plan",
        items=[SlideContent(title="Revenue", points=["Up 12%", "New market"])],
    )


@pytest.fixture
def multi_slides() -> SlidesOutline:
    return SlidesOutline(
        title="Growth Strategy 2026",
        subtitle="Where we play and how we win",
        items=[
            SlideContent(title="Market", points=["TAM is $4B", "Growing 18% a year"]),
            SlideContent(title="Product", points=["Ship v2 in Q1", "Retire legacy API", "Self-serve onboarding"]),
            SlideContent(title="Open Questions", points=[]),
        ],
    )


@pytest.fixture
def report_document() -> DocumentOutline:
    return DocumentOutline(
        title="Report",
        items=[DocumentSection(heading="Intro", paragraphs=["A.", "B."])],
    )


@pytest.fixture
def multi_document() -> DocumentOutline:
    return DocumentOutline(
        title="Annual Review",
        items=[
            DocumentSection(heading="Summary", paragraphs=["The year closed ahead of plan."]),
            DocumentSection(heading="Risks", paragraphs=["Supply chain.", "Hiring.", "Currency exposure."]),
        ],
    )


@pytest.fixture
def slides_params() -> GenerationParams:
    return GenerationParams(prompt="Quarterly plan for the sales team", type=OutputType.SLIDES, count=3)


@pytest.fixture
def document_params() -> GenerationParams:
    return GenerationParams(prompt="Annual review of operations", type=OutputType.DOCUMENT, count=2)


# =============================================================================
# LLM Fixtures
# =============================================================================

@pytest.fixture
def make_llm():
    """Build a chat model mock whose ainvoke returns the given content."""
    def _make(content: str = "", side_effect=None):
        llm = AsyncMock()
        if side_effect is not None:
            llm.ainvoke.side_effect = side_effect
        else:
            llm.ainvoke.return_value = MagicMock(content=content)
        return llm
    return _make


# =============================================================================
# File Readers
# =============================================================================

@pytest.fixture
def read_pptx():
    def _read(content: bytes):
        return Presentation(io.BytesIO(content))
    return _read


@pytest.fixture
def read_docx():
    def _read(content: bytes):
        return Document(io.BytesIO(content))
    return _read
