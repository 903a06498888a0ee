"""
DocuGen - Outline Synthesizer Tests
===================================

Tests for brief construction, response parsing and failure mapping. The
chat model is always a mock; no provider is contacted.
"""

import asyncio
import json

import pytest
from unittest.mock import patch, MagicMock

from langchain_core.messages import HumanMessage, SystemMessage

from docugen.services.base import ConfigurationError, SynthesisError, ValidationError
from docugen.services.generator import (
    DocumentOutline,
    GenerationParams,
    Language,
    OutputType,
    SlidesOutline,
    Tone,
)
from docugen.services.generator.outline import (
    DOCUMENT_SCHEMA,
    SLIDES_SCHEMA,
    OutlineSynthesizer,
    build_brief,
    get_schema,
    synthesize,
)


SLIDES_REPLY = json.dumps({
    "title": "Q3 Plan",
    "subtitle": "Sales kickoff",
    "items": [
        {"title": "Revenue", "points": ["Up 12%", "New market"]},
        {"title": "Hiring", "points": ["Two AEs"]},
    ],
})

DOCUMENT_REPLY = json.dumps({
    "title": "Report",
    "items": [{"heading": "Intro", "paragraphs": ["A.", "B."]}],
})


# =============================================================================
# Brief Tests
# =============================================================================

class TestBrief:
    """Tests for the natural-language brief."""

    def test_slides_brief(self):
        params = GenerationParams(prompt="Q3 plan", count=4, tone="Business", language="Urdu")
        brief = build_brief(params)

        assert "PowerPoint presentation" in brief
        assert "Topic: Q3 plan" in brief
        assert "Number of slides: 4" in brief
        assert "Tone: Business" in brief
        assert "Language: Urdu" in brief

    def test_document_brief(self):
        params = GenerationParams(prompt="Annual review", type=OutputType.DOCUMENT, count=6)
        brief = build_brief(params)

        assert "MS Word document" in brief
        assert "Length (Sections): 6" in brief
        assert "Tone: Professional" in brief

    def test_schema_per_type(self):
        assert get_schema(OutputType.SLIDES) is SLIDES_SCHEMA
        assert get_schema(OutputType.DOCUMENT) is DOCUMENT_SCHEMA
        assert SLIDES_SCHEMA["required"] == ["title", "items"]
        assert DOCUMENT_SCHEMA["properties"]["items"]["items"]["required"] == ["heading", "paragraphs"]

    def test_messages(self, slides_params, make_llm):
        messages = OutlineSynthesizer(llm=make_llm()).build_messages(slides_params)

        assert isinstance(messages[0], SystemMessage)
        assert isinstance(messages[1], HumanMessage)
        assert build_brief(slides_params) in messages[1].content
        assert '"points"' in messages[1].content


# =============================================================================
# Synthesis Tests
# =============================================================================

class TestSynthesize:
    """Tests for OutlineSynthesizer.synthesize."""

    @pytest.mark.asyncio
    async def test_slides_outline(self, slides_params, make_llm):
        llm = make_llm(SLIDES_REPLY)

        outline = await OutlineSynthesizer(llm=llm).synthesize(slides_params)

        assert isinstance(outline, SlidesOutline)
        assert outline.type == OutputType.SLIDES
        assert outline.title == "Q3 Plan"
        assert outline.subtitle == "Sales kickoff"
        assert [item.title for item in outline.items] == ["Revenue", "Hiring"]
        assert outline.items[0].points == ["Up 12%", "New market"]
        llm.ainvoke.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_document_outline(self, document_params, make_llm):
        outline = await OutlineSynthesizer(llm=make_llm(DOCUMENT_REPLY)).synthesize(document_params)

        assert isinstance(outline, DocumentOutline)
        assert outline.type == OutputType.DOCUMENT
        assert outline.items[0].paragraphs == ["A.", "B."]

    @pytest.mark.asyncio
    async def test_tone_and_language_stamped(self, make_llm):
        params = GenerationParams(prompt="Q3 plan", tone=Tone.SIMPLE, language=Language.URDU)

        outline = await OutlineSynthesizer(llm=make_llm(SLIDES_REPLY)).synthesize(params)

        assert outline.tone == Tone.SIMPLE
        assert outline.language == Language.URDU

    @pytest.mark.asyncio
    async def test_item_count_not_enforced(self, make_llm):
        """Test the returned item count is kept even when it differs from count."""
        params = GenerationParams(prompt="Q3 plan", count=10)

        outline = await OutlineSynthesizer(llm=make_llm(SLIDES_REPLY)).synthesize(params)

        assert len(outline.items) == 2

    @pytest.mark.asyncio
    async def test_empty_items_accepted(self, slides_params, make_llm):
        reply = json.dumps({"title": "Deck", "items": []})

        outline = await OutlineSynthesizer(llm=make_llm(reply)).synthesize(slides_params)

        assert outline.items == []

    @pytest.mark.asyncio
    async def test_code_fenced_reply(self, slides_params, make_llm):
        reply = f"```json\n{SLIDES_REPLY}\n```"

        outline = await OutlineSynthesizer(llm=make_llm(reply)).synthesize(slides_params)

        assert outline.title == "Q3 Plan"

    @pytest.mark.asyncio
    async def test_content_blocks_reply(self, slides_params):
        """Test replies made of content blocks are joined."""
        llm = MagicMock()

        async def ainvoke(messages):
            return MagicMock(content=[{"type": "text", "text": SLIDES_REPLY}])

        llm.ainvoke = ainvoke

        outline = await OutlineSynthesizer(llm=llm).synthesize(slides_params)

        assert outline.title == "Q3 Plan"

    @pytest.mark.asyncio
    async def test_module_level_synthesize(self, slides_params, make_llm):
        outline = await synthesize(slides_params, llm=make_llm(SLIDES_REPLY))

        assert isinstance(outline, SlidesOutline)

    @pytest.mark.asyncio
    async def test_uses_structured_model_when_no_llm_given(self, slides_params, make_llm):
        llm = make_llm(SLIDES_REPLY)

        with patch("docugen.services.llm.LLMFactory.get_structured_model", return_value=llm) as mock_get:
            outline = await OutlineSynthesizer(provider="openai").synthesize(slides_params)

        assert outline.title == "Q3 Plan"
        mock_get.assert_called_once_with(SLIDES_SCHEMA, provider="openai")


# =============================================================================
# Failure Tests
# =============================================================================

class TestSynthesizeFailures:
    """Every failure surfaces as SynthesisError with no partial outline."""

    @pytest.mark.asyncio
    async def test_missing_title(self, slides_params, make_llm):
        reply = json.dumps({"items": [{"title": "Revenue", "points": []}]})

        with pytest.raises(SynthesisError) as exc_info:
            await OutlineSynthesizer(llm=make_llm(reply)).synthesize(slides_params)

        assert exc_info.value.code == "SYNTHESIS_ERROR"
        assert exc_info.value.details["errors"]

    @pytest.mark.asyncio
    async def test_slide_without_points(self, slides_params, make_llm):
        """Test points is required on every slide, even when empty."""
        reply = json.dumps({"title": "Deck", "items": [{"title": "Revenue"}]})

        with pytest.raises(SynthesisError) as exc_info:
            await OutlineSynthesizer(llm=make_llm(reply)).synthesize(slides_params)

        assert exc_info.value.details["errors"][0]["loc"] == ("items", 0, "points")

    @pytest.mark.asyncio
    async def test_section_without_paragraphs(self, document_params, make_llm):
        reply = json.dumps({"title": "Report", "items": [{"heading": "Intro"}]})

        with pytest.raises(SynthesisError):
            await OutlineSynthesizer(llm=make_llm(reply)).synthesize(document_params)

    @pytest.mark.asyncio
    async def test_wrong_item_shape(self, document_params, make_llm):
        """Test slide-shaped items are rejected for a document request."""
        with pytest.raises(SynthesisError):
            await OutlineSynthesizer(llm=make_llm(SLIDES_REPLY)).synthesize(document_params)

    @pytest.mark.asyncio
    async def test_invalid_json(self, slides_params, make_llm):
        with pytest.raises(SynthesisError, match="not valid JSON"):
            await OutlineSynthesizer(llm=make_llm("Here is your outline!")).synthesize(slides_params)

    @pytest.mark.asyncio
    async def test_non_object_json(self, slides_params, make_llm):
        with pytest.raises(SynthesisError, match="JSON object"):
            await OutlineSynthesizer(llm=make_llm("[1, 2, 3]")).synthesize(slides_params)

    @pytest.mark.asyncio
    async def test_provider_error(self, slides_params, make_llm):
        llm = make_llm(side_effect=RuntimeError("quota exceeded"))

        with pytest.raises(SynthesisError, match="quota exceeded") as exc_info:
            await OutlineSynthesizer(llm=llm, provider="google").synthesize(slides_params)

        assert exc_info.value.details["provider"] == "google"
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    @pytest.mark.asyncio
    async def test_timeout(self, slides_params, make_llm):
        llm = make_llm(side_effect=asyncio.TimeoutError())

        with pytest.raises(SynthesisError, match="timed out"):
            await OutlineSynthesizer(llm=llm).synthesize(slides_params)

    @pytest.mark.asyncio
    async def test_configuration_error_wrapped(self, slides_params):
        with patch(
            "docugen.services.llm.LLMFactory.get_structured_model",
            side_effect=ConfigurationError("GOOGLE_API_KEY environment variable is not set"),
        ):
            with pytest.raises(SynthesisError, match="GOOGLE_API_KEY"):
                await OutlineSynthesizer().synthesize(slides_params)

    @pytest.mark.asyncio
    async def test_invalid_params_make_no_call(self, make_llm):
        llm = make_llm(SLIDES_REPLY)

        with pytest.raises(ValidationError):
            await OutlineSynthesizer(llm=llm).synthesize({"prompt": "Q3 plan"})

        llm.ainvoke.assert_not_called()
