"""
DocuGen - Generator Utility Tests
=================================
"""

import os

import pytest
from unittest.mock import patch

from docugen.services.base import RenderError
from docugen.services.generator import (
    DOCXGenerator,
    FormatGeneratorFactory,
    OutputType,
    PPTXGenerator,
    RenderedFile,
    SlidesOutline,
)
from docugen.services.generator.service import export_outline, get_generator, render_outline
from docugen.services.generator.utils import build_filename, sanitize_text, save_rendered


# =============================================================================
# Filename Tests
# =============================================================================

class TestBuildFilename:
    @pytest.mark.parametrize("title,expected", [
        ("Q3 Plan", "Q3_Plan_Presentation.pptx"),
        ("  Q3   Plan\t2026 ", "Q3_Plan_2026_Presentation.pptx"),
        ("Q3/Q4: Plan?", "Q3Q4_Plan_Presentation.pptx"),
        ("Q3\tPlan\nDraft", "Q3_Plan_Draft_Presentation.pptx"),
        ("Q3\r\n\x0bPlan", "Q3_Plan_Presentation.pptx"),
        ("Q3\x00Plan\x07", "Q3Plan_Presentation.pptx"),
        ("منصوبہ بندی", "منصوبہ_بندی_Presentation.pptx"),
        ("", "Untitled_Presentation.pptx"),
        ("???", "Untitled_Presentation.pptx"),
    ])
    def test_presentation_names(self, title, expected):
        assert build_filename(title, "Presentation", ".pptx") == expected

    def test_document_suffix(self):
        assert build_filename("Report", "Document", ".docx") == "Report_Document.docx"


class TestSanitizeText:
    def test_strips_control_characters(self):
        assert sanitize_text("A\x00B\x0bC") == "ABC"

    def test_keeps_whitespace_and_unicode(self):
        text = "Line one\n\tاردو “quoted”"
        assert sanitize_text(text) == text

    def test_empty(self):
        assert sanitize_text("") == ""
        assert sanitize_text(None) == ""


# =============================================================================
# Saving Tests
# =============================================================================

class TestSaveRendered:
    def test_creates_directory(self, tmp_path):
        rendered = RenderedFile(filename="a.pptx", content=b"data", media_type="application/octet-stream")
        output_dir = tmp_path / "nested" / "exports"

        path = save_rendered(rendered, str(output_dir))

        with open(path, "rb") as handle:
            assert handle.read() == b"data"

    def test_overwrites_existing(self, tmp_path):
        save_rendered(RenderedFile("a.docx", b"old", "x"), str(tmp_path))
        path = save_rendered(RenderedFile("a.docx", b"new", "x"), str(tmp_path))

        with open(path, "rb") as handle:
            assert handle.read() == b"new"
        assert os.listdir(tmp_path) == ["a.docx"]

    def test_no_partial_file_on_failure(self, tmp_path):
        """Test a failed write leaves neither the target nor a temp file."""
        with patch("docugen.services.generator.utils.os.replace", side_effect=OSError("disk full")):
            with pytest.raises(OSError):
                save_rendered(RenderedFile("a.pptx", b"data", "x"), str(tmp_path))

        assert os.listdir(tmp_path) == []


# =============================================================================
# Dispatch Tests
# =============================================================================

class TestDispatch:
    def test_get_generator_by_tag(self, q3_slides, report_document):
        assert get_generator(q3_slides).format_name == "pptx"
        assert get_generator(report_document).format_name == "docx"

    def test_untagged_data_rejected(self):
        with pytest.raises(RenderError):
            get_generator({"title": "Deck"})

    def test_factory_resolves_tag_values(self):
        assert isinstance(FormatGeneratorFactory.get("slides"), PPTXGenerator)
        assert isinstance(FormatGeneratorFactory.get("word"), DOCXGenerator)
        assert FormatGeneratorFactory.get("excel") is None

    def test_register_replaces_generator(self):
        original = FormatGeneratorFactory.get(OutputType.SLIDES)

        class OtherDeckGenerator(PPTXGenerator):
            pass

        try:
            FormatGeneratorFactory.register(OutputType.SLIDES, OtherDeckGenerator)
            assert isinstance(FormatGeneratorFactory.get(OutputType.SLIDES), OtherDeckGenerator)
        finally:
            FormatGeneratorFactory._registry[OutputType.SLIDES] = original

    def test_render_outline(self, q3_slides, indigo, sans):
        rendered = render_outline(q3_slides, indigo, sans)

        assert rendered.filename == "Q3_Plan_Presentation.pptx"
        assert rendered.size > 0

    @pytest.mark.asyncio
    async def test_export_defaults_to_output_dir(self, indigo, sans, tmp_path):
        from docugen.core.config import settings

        outline = SlidesOutline(title="Deck", items=[])
        with patch.object(settings, "OUTPUT_DIR", str(tmp_path / "out")):
            path = await export_outline(outline, indigo, sans)

        assert path == os.path.join(str(tmp_path / "out"), "Deck_Presentation.pptx")
