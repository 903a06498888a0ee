"""
Generation Session

In-process counterpart of the editor UI state: the latest outline, the
selected theme and the ``idle -> generating -> ready | failed`` state
machine.

Synthesis requests are tagged with a monotonically increasing sequence
number. Only the latest request may commit its outcome; anything that
resolves after a newer request was issued is discarded (last-writer-wins,
no cancellation).
"""

from enum import Enum
from typing import Optional, Union

import structlog

from docugen.services.base import RenderError, ServiceException, ValidationError

from .config import default_font, default_palette, get_font, get_palette
from .models import DocumentOutline, GenerationParams, OutputType, RenderedFile, SlidesOutline
from .outline import OutlineSynthesizer
from .service import export_outline, render_outline
from .theme.models import ThemeFont, ThemePalette

logger = structlog.get_logger(__name__)

Outline = Union[SlidesOutline, DocumentOutline]


class SessionState(str, Enum):
    """Session lifecycle as observed by the UI."""
    IDLE = "idle"
    GENERATING = "generating"
    READY = "ready"
    FAILED = "failed"


class GenerationSession:
    """Holds one user's outline and theme selection.

    Usage:
        session = GenerationSession()
        await session.generate(GenerationParams(prompt="Q3 plan"))
        session.select_palette("emerald")
        path = await session.export()
    """

    def __init__(
        self,
        synthesizer: Optional[OutlineSynthesizer] = None,
        palette: Optional[ThemePalette] = None,
        font: Optional[ThemeFont] = None,
        output_type: OutputType = OutputType.SLIDES,
    ):
        self.synthesizer = synthesizer or OutlineSynthesizer()
        self.palette = palette or default_palette()
        self.font = font or default_font()
        self.output_type = output_type
        self.state = SessionState.IDLE
        self.data: Optional[Outline] = None
        self.error: Optional[str] = None
        self._sequence = 0

    @property
    def is_busy(self) -> bool:
        """True while a synthesis request is in flight."""
        return self.state == SessionState.GENERATING

    @property
    def sequence(self) -> int:
        """Sequence number of the latest issued request."""
        return self._sequence

    # =========================================================================
    # Generation
    # =========================================================================

    async def generate(self, params: GenerationParams) -> Optional[Outline]:
        """Synthesize a new outline.

        Returns:
            The committed outline, or None when a newer request superseded
            this one before it resolved

        Raises:
            ValidationError: If ``params`` is invalid (state is unchanged)
            SynthesisError: If the latest request failed
        """
        if not isinstance(params, GenerationParams):
            raise ValidationError("Expected GenerationParams", field="params")

        self._sequence += 1
        sequence = self._sequence

        if params.type != self.output_type:
            self.set_output_type(params.type)

        self.state = SessionState.GENERATING
        self.error = None
        logger.info("Generation started", sequence=sequence, output_type=params.type.value)

        try:
            outline = await self.synthesizer.synthesize(params)
        except ServiceException as e:
            if sequence != self._sequence:
                logger.info("Discarding superseded failure", sequence=sequence, latest=self._sequence)
                return None
            self.state = SessionState.FAILED
            self.error = e.message
            logger.warning("Generation failed", sequence=sequence, code=e.code)
            raise

        if sequence != self._sequence:
            logger.info("Discarding superseded outline", sequence=sequence, latest=self._sequence)
            return None

        self.data = outline
        self.state = SessionState.READY
        logger.info("Generation ready", sequence=sequence, items=len(outline.items))
        return outline

    def set_output_type(self, output_type: OutputType) -> None:
        """Switch export format. Item shapes differ, so the outline is dropped."""
        output_type = OutputType(output_type)
        if output_type == self.output_type:
            return
        self.output_type = output_type
        self.data = None
        self.error = None
        if self.state != SessionState.GENERATING:
            self.state = SessionState.IDLE

    # =========================================================================
    # Theme
    # =========================================================================

    def select_palette(self, palette_id: str) -> ThemePalette:
        """Select a palette by id. Content is untouched."""
        self.palette = get_palette(palette_id)
        return self.palette

    def select_font(self, font_id: str) -> ThemeFont:
        """Select a font by id. Content is untouched."""
        self.font = get_font(font_id)
        return self.font

    # =========================================================================
    # Export
    # =========================================================================

    def _require_data(self) -> Outline:
        if self.data is None:
            raise RenderError("Nothing to export: generate an outline first")
        return self.data

    def render(self) -> RenderedFile:
        """Render the current outline with the selected theme."""
        return render_outline(self._require_data(), self.palette, self.font)

    async def export(self, output_dir: Optional[str] = None) -> str:
        """Render and save the current outline. Does not change state.

        Returns:
            Path to the saved file
        """
        return await export_outline(self._require_data(), self.palette, self.font, output_dir=output_dir)
