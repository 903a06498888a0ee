"""
Format Generator Registry

Maps each outline type tag to the generator that renders it. Each format
module registers itself on import.
"""

from typing import Dict, Optional, Type

from ..models import OutputType
from .base import BaseFormatGenerator


class FormatGeneratorFactory:
    """One shared generator instance per outline type.

    Usage:
        generator = FormatGeneratorFactory.get(outline.type)
        rendered = generator.render(outline, palette, font)
    """

    _registry: Dict[OutputType, BaseFormatGenerator] = {}

    @classmethod
    def register(cls, output_type: OutputType, generator_class: Type[BaseFormatGenerator]) -> None:
        """Install the generator for an outline type, replacing any previous one."""
        cls._registry[OutputType(output_type)] = generator_class()

    @classmethod
    def get(cls, output_type) -> Optional[BaseFormatGenerator]:
        """Generator for an outline type, or None if the tag is unknown."""
        try:
            return cls._registry.get(OutputType(output_type))
        except ValueError:
            return None


def register_generator(output_type: OutputType):
    """Class decorator registering a generator for ``output_type``."""
    def decorator(cls: Type[BaseFormatGenerator]) -> Type[BaseFormatGenerator]:
        FormatGeneratorFactory.register(output_type, cls)
        return cls
    return decorator
