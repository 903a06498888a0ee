"""
Base Format Generator

Abstract base class for the export format generators.
"""

from abc import ABC, abstractmethod
from typing import Optional, TYPE_CHECKING

from docugen.core.config import settings
from docugen.services.base import RenderError

from ..models import RenderedFile
from ..utils import build_filename, save_rendered

if TYPE_CHECKING:
    from ..models import OutputType
    from ..theme.models import ThemePalette, ThemeFont


def validate_theme(palette: "ThemePalette", font: "ThemeFont", output_type: "OutputType") -> None:
    """Require the identifying fields of a theme; colors are trusted."""
    if palette is None or not getattr(palette, "id", None):
        raise RenderError("Palette must have a non-empty id", output_type=output_type.value)
    if font is None or not getattr(font, "id", None) or not getattr(font, "family", None):
        raise RenderError("Font must have a non-empty id and family", output_type=output_type.value)


class BaseFormatGenerator(ABC):
    """Abstract base class for export format generators.

    ``render`` is a pure function of (outline, palette, font) that returns
    the complete file in memory; ``generate`` renders and then saves it.
    """

    @property
    @abstractmethod
    def output_type(self) -> "OutputType":
        """Return the outline type this generator accepts."""
        pass

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Return the format name (e.g., 'pptx', 'docx')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension (e.g., '.pptx', '.docx')."""
        pass

    @property
    @abstractmethod
    def media_type(self) -> str:
        """Return the MIME type of the produced file."""
        pass

    @property
    @abstractmethod
    def file_suffix(self) -> str:
        """Return the suffix appended to the title in file names."""
        pass

    @abstractmethod
    def render(self, data, palette: "ThemePalette", font: "ThemeFont") -> RenderedFile:
        """Render an outline into a complete file.

        Args:
            data: The outline to render
            palette: Color palette
            font: Font family

        Returns:
            RenderedFile with the file name and bytes

        Raises:
            RenderError: If the outline shape does not match this format
        """
        pass

    def get_filename(self, title: str) -> str:
        return build_filename(title, self.file_suffix, self.file_extension)

    async def generate(
        self,
        data,
        palette: "ThemePalette",
        font: "ThemeFont",
        output_dir: Optional[str] = None,
    ) -> str:
        """Render an outline and save it.

        Returns:
            Path to the saved file
        """
        rendered = self.render(data, palette, font)
        return save_rendered(rendered, output_dir or settings.OUTPUT_DIR)
