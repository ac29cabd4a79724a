"""ColorScheme aggregate extracted from an iTerm2 color preset document."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from .accessors import expect_dictionary
from .color import Color, named_color
from .kitty import render_kitty
from .loader import load_document, loads_document


ANSI_COLOR_COUNT = 16


def ansi_key(index: int) -> str:
    return f"Ansi {index} Color"


@dataclass(frozen=True)
class SpecialColors:
    background: Color
    bold: Color
    cursor: Color
    cursor_text: Color
    foreground: Color
    selected_text: Color
    selection: Color

    @classmethod
    def from_dictionary(cls, d: Mapping[str, Any]) -> "SpecialColors":
        return cls(
            background=named_color("Background Color", d),
            bold=named_color("Bold Color", d),
            cursor=named_color("Cursor Color", d),
            cursor_text=named_color("Cursor Text Color", d),
            foreground=named_color("Foreground Color", d),
            selected_text=named_color("Selected Text Color", d),
            selection=named_color("Selection Color", d),
        )


@dataclass(frozen=True)
class ColorScheme:
    """Sixteen indexed ANSI colors plus the special-purpose colors."""

    ansi: tuple[Color, ...]
    special: SpecialColors

    @classmethod
    def from_dictionary(cls, d: Mapping[str, Any]) -> "ColorScheme":
        # Keyword arguments evaluate left to right: ANSI slots fail first.
        return cls(ansi=cls._ansi_from_dictionary(d), special=SpecialColors.from_dictionary(d))

    @staticmethod
    def _ansi_from_dictionary(d: Mapping[str, Any]) -> tuple[Color, ...]:
        return tuple(named_color(ansi_key(i), d) for i in range(ANSI_COLOR_COUNT))

    @classmethod
    def from_file(cls, path: str | Path) -> "ColorScheme":
        return cls.from_dictionary(expect_dictionary(load_document(path)))

    @classmethod
    def from_bytes(cls, data: bytes) -> "ColorScheme":
        return cls.from_dictionary(expect_dictionary(loads_document(data)))

    def render(self) -> str:
        return render_kitty(self)

    to_kitty = render
