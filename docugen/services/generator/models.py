"""
Document Generation Models

Core data models for the generation workflow: request parameters, the
tagged outline model produced by synthesis and consumed by the renderers,
and the rendered file.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from docugen.services.base import ValidationError


# =============================================================================
# Enums
# =============================================================================

class OutputType(str, Enum):
    """Supported export shapes."""
    SLIDES = "slides"
    DOCUMENT = "word"


class Tone(str, Enum):
    """Content register requested from the outline generator."""
    PROFESSIONAL = "Professional"
    ACADEMIC = "Academic"
    SIMPLE = "Simple"
    BUSINESS = "Business"


class Language(str, Enum):
    """Natural language of the generated text."""
    ENGLISH = "English"
    URDU = "Urdu"

    @property
    def is_rtl(self) -> bool:
        return self in _RTL_LANGUAGES


_RTL_LANGUAGES = frozenset({Language.URDU})


# =============================================================================
# Request
# =============================================================================

MIN_COUNT = 1
MAX_COUNT = 15
DEFAULT_COUNT = 5


def _coerce_enum(enum_cls, value, field: str):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        valid = ", ".join(member.value for member in enum_cls)
        raise ValidationError(f"Invalid {field}: {value!r} (expected one of {valid})", field=field)


@dataclass(frozen=True)
class GenerationParams:
    """A single generation request, immutable once submitted."""
    prompt: str
    type: OutputType = OutputType.SLIDES
    tone: Tone = Tone.PROFESSIONAL
    count: int = DEFAULT_COUNT
    language: Language = Language.ENGLISH

    def __post_init__(self):
        if not isinstance(self.prompt, str) or not self.prompt.strip():
            raise ValidationError("Please enter a topic or instructions.", field="prompt")
        # bool is an int subclass
        if isinstance(self.count, bool) or not isinstance(self.count, int):
            raise ValidationError(f"count must be an integer, got {self.count!r}", field="count")
        if not MIN_COUNT <= self.count <= MAX_COUNT:
            raise ValidationError(
                f"count must be between {MIN_COUNT} and {MAX_COUNT}, got {self.count}",
                field="count",
            )
        object.__setattr__(self, "type", _coerce_enum(OutputType, self.type, "type"))
        object.__setattr__(self, "tone", _coerce_enum(Tone, self.tone, "tone"))
        object.__setattr__(self, "language", _coerce_enum(Language, self.language, "language"))


# =============================================================================
# Outline Model
# =============================================================================

class SlideContent(BaseModel):
    """One content slide: a title and its bullet points."""
    model_config = ConfigDict(frozen=True)

    title: str
    points: List[str] = Field(default_factory=list)


class DocumentSection(BaseModel):
    """One document section: a heading and its paragraphs."""
    model_config = ConfigDict(frozen=True)

    heading: str
    paragraphs: List[str] = Field(default_factory=list)


class _OutlineBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    subtitle: Optional[str] = None
    # Echoed into file metadata only
    tone: Optional[Tone] = None
    language: Optional[Language] = None


class SlidesOutline(_OutlineBase):
    """Outline for a slide deck."""
    type: Literal[OutputType.SLIDES] = OutputType.SLIDES
    items: List[SlideContent] = Field(default_factory=list)


class DocumentOutline(_OutlineBase):
    """Outline for a word-processor document."""
    type: Literal[OutputType.DOCUMENT] = OutputType.DOCUMENT
    items: List[DocumentSection] = Field(default_factory=list)


GeneratedData = Annotated[Union[SlidesOutline, DocumentOutline], Field(discriminator="type")]

_generated_data_adapter = TypeAdapter(GeneratedData)


def parse_generated_data(payload: Dict[str, Any]) -> Union[SlidesOutline, DocumentOutline]:
    """Validate a dict (including its ``type`` tag) into the matching outline.

    Raises:
        pydantic.ValidationError: If the payload does not match either shape
    """
    return _generated_data_adapter.validate_python(payload)


# =============================================================================
# Rendered output
# =============================================================================

@dataclass(frozen=True)
class RenderedFile:
    """A fully built export, ready to be saved."""
    filename: str
    content: bytes
    media_type: str

    @property
    def size(self) -> int:
        return len(self.content)
