"""Renderer package for color scheme palette previews."""

from .models import PreviewLayout
from .preview import PaletteRenderer

__all__ = [
    "PaletteRenderer",
    "PreviewLayout",
]
