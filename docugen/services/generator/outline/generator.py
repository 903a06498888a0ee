"""
Outline Synthesizer

Turns GenerationParams into a brief for the LLM, requests JSON matching a
fixed schema, and validates the reply into the tagged outline model.
"""

import asyncio
import json
from typing import Any, Dict, List, Optional, Type, Union

import structlog
from langchain_core.language_models import BaseChatModel
from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from docugen.core.config import settings
from docugen.services.base import ServiceException, SynthesisError, ValidationError

from ..models import (
    DocumentOutline,
    DocumentSection,
    GenerationParams,
    OutputType,
    SlideContent,
    SlidesOutline,
)

logger = structlog.get_logger(__name__)


# =============================================================================
# Response Schemas
# =============================================================================

SLIDES_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "title": {"type": "string"},
        "subtitle": {"type": "string"},
        "items": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "title": {"type": "string"},
                    "points": {"type": "array", "items": {"type": "string"}},
                },
                "required": ["title", "points"],
            },
        },
    },
    "required": ["title", "items"],
}

DOCUMENT_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "title": {"type": "string"},
        "items": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "heading": {"type": "string"},
                    "paragraphs": {"type": "array", "items": {"type": "string"}},
                },
                "required": ["heading", "paragraphs"],
            },
        },
    },
    "required": ["title", "items"],
}


# Every item field is required, matching the schemas above

class _SlideReply(BaseModel):
    title: str
    points: List[str]


class _SectionReply(BaseModel):
    heading: str
    paragraphs: List[str]


class _SlidesPayload(BaseModel):
    title: str
    subtitle: Optional[str] = None
    items: List[_SlideReply]


class _DocumentPayload(BaseModel):
    title: str
    subtitle: Optional[str] = None
    items: List[_SectionReply]


_PAYLOAD_MODELS: Dict[OutputType, Type[BaseModel]] = {
    OutputType.SLIDES: _SlidesPayload,
    OutputType.DOCUMENT: _DocumentPayload,
}

_SCHEMAS: Dict[OutputType, Dict[str, Any]] = {
    OutputType.SLIDES: SLIDES_SCHEMA,
    OutputType.DOCUMENT: DOCUMENT_SCHEMA,
}

SYSTEM_PROMPT = (
    "You are an expert writer of presentations and business documents. "
    "Respond only with JSON that matches the requested schema."
)


def get_schema(output_type: OutputType) -> Dict[str, Any]:
    """Get the JSON schema the generator must answer with."""
    return _SCHEMAS[output_type]


def build_brief(params: GenerationParams) -> str:
    """Build the natural-language brief for a request."""
    if params.type == OutputType.SLIDES:
        return (
            "Create a professional PowerPoint presentation outline.\n"
            f"Topic: {params.prompt}\n"
            f"Number of slides: {params.count}\n"
            f"Tone: {params.tone.value}\n"
            f"Language: {params.language.value}\n"
            "Instructions: Include a title slide and content slides with bullet points. "
            f"Write every title, subtitle and bullet point in {params.language.value}."
        )
    return (
        "Create a professional MS Word document structure.\n"
        f"Topic: {params.prompt}\n"
        f"Length (Sections): {params.count}\n"
        f"Tone: {params.tone.value}\n"
        f"Language: {params.language.value}\n"
        "Instructions: Include headings and detailed paragraphs. "
        f"Write every heading and paragraph in {params.language.value}."
    )


def _strip_code_fences(content: str) -> str:
    content = content.strip()
    if content.startswith("```json"):
        content = content[7:]
    elif content.startswith("```"):
        content = content[3:]
    if content.endswith("```"):
        content = content[:-3]
    return content.strip()


def _response_text(response: Any) -> str:
    content = response.content if hasattr(response, "content") else response
    # Some providers return a list of content blocks
    if isinstance(content, list):
        content = "".join(
            block.get("text", "") if isinstance(block, dict) else str(block)
            for block in content
        )
    return content if isinstance(content, str) else str(content)


class OutlineSynthesizer:
    """Synthesizes a typed outline from generation parameters.

    One request is one LLM round-trip. Failures are never retried and never
    produce a partial outline.
    """

    def __init__(self, llm: Optional[BaseChatModel] = None, provider: Optional[str] = None):
        self._llm = llm
        self.provider = provider or settings.LLM_PROVIDER

    def _get_llm(self, output_type: OutputType) -> BaseChatModel:
        if self._llm is not None:
            return self._llm
        from docugen.services.llm import LLMFactory
        return LLMFactory.get_structured_model(get_schema(output_type), provider=self.provider)

    def build_messages(self, params: GenerationParams) -> List[BaseMessage]:
        schema = json.dumps(get_schema(params.type), indent=2)
        return [
            SystemMessage(content=SYSTEM_PROMPT),
            HumanMessage(content=f"{build_brief(params)}\n\nOUTPUT FORMAT: JSON matching this schema:\n{schema}"),
        ]

    async def synthesize(self, params: GenerationParams) -> Union[SlidesOutline, DocumentOutline]:
        """Generate an outline for the request.

        Args:
            params: Validated generation parameters

        Returns:
            SlidesOutline or DocumentOutline matching ``params.type``

        Raises:
            ValidationError: If ``params`` is not a GenerationParams
            SynthesisError: If the call fails or the reply does not match the schema
        """
        if not isinstance(params, GenerationParams):
            raise ValidationError("Expected GenerationParams", field="params")

        logger.info(
            "Synthesizing outline",
            output_type=params.type.value,
            count=params.count,
            tone=params.tone.value,
            language=params.language.value,
        )

        try:
            llm = self._get_llm(params.type)
            response = await llm.ainvoke(self.build_messages(params))
        except ServiceException as e:
            logger.error("Outline provider unavailable", error=e.message)
            raise SynthesisError(e.message, provider=self.provider) from e
        except asyncio.TimeoutError as e:
            logger.error("Outline generation timed out", provider=self.provider)
            raise SynthesisError("Outline generation timed out", provider=self.provider) from e
        except Exception as e:
            logger.error("Outline generation failed", provider=self.provider, error=str(e))
            raise SynthesisError(f"Outline generation failed: {e}", provider=self.provider) from e

        raw = _response_text(response)
        logger.debug("LLM outline response received", response_length=len(raw))
        return self.parse_response(raw, params)

    def parse_response(self, raw: str, params: GenerationParams) -> Union[SlidesOutline, DocumentOutline]:
        """Validate raw JSON text into an outline stamped with the request's type."""
        try:
            payload = json.loads(_strip_code_fences(raw))
        except json.JSONDecodeError as e:
            logger.error("Outline response is not valid JSON", error=str(e))
            raise SynthesisError("Outline response is not valid JSON", provider=self.provider) from e

        if not isinstance(payload, dict):
            raise SynthesisError("Outline response must be a JSON object", provider=self.provider)

        try:
            validated = _PAYLOAD_MODELS[params.type].model_validate(payload)
        except PydanticValidationError as e:
            logger.error("Outline response failed schema validation", errors=e.error_count())
            raise SynthesisError(
                "Outline response does not match the expected schema",
                provider=self.provider,
                details={"errors": e.errors(include_url=False)},
            ) from e

        if params.type == OutputType.SLIDES:
            outline_cls = SlidesOutline
            items = [SlideContent(title=item.title, points=item.points) for item in validated.items]
        else:
            outline_cls = DocumentOutline
            items = [DocumentSection(heading=item.heading, paragraphs=item.paragraphs) for item in validated.items]
        outline = outline_cls(
            title=validated.title,
            subtitle=validated.subtitle,
            items=items,
            tone=params.tone,
            language=params.language,
        )
        logger.info(
            "Outline synthesized",
            output_type=params.type.value,
            requested=params.count,
            items=len(outline.items),
        )
        return outline


async def synthesize(params: GenerationParams, llm: Optional[BaseChatModel] = None):
    """Convenience wrapper around ``OutlineSynthesizer.synthesize``."""
    return await OutlineSynthesizer(llm=llm).synthesize(params)
