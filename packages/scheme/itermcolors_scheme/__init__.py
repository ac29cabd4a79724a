"""iTerm2 color preset parsing and kitty color config rendering."""

from .accessors import expect_dictionary, expect_real, expect_string, get_required, value_kind
from .color import SRGB, Color, ColorSpace, HexColor, color_from_dictionary, float_channel_to_byte, named_color, to_hex
from .errors import (
    DocumentParseError,
    InvalidChannel,
    InvalidColorSpace,
    InvalidType,
    MissingKey,
    SchemeError,
    UnknownColorSpace,
)
from .kitty import render_kitty
from .loader import load_document, loads_document
from .scheme import ANSI_COLOR_COUNT, ColorScheme, SpecialColors, ansi_key

__all__ = [
    "ANSI_COLOR_COUNT",
    "Color",
    "ColorScheme",
    "ColorSpace",
    "DocumentParseError",
    "HexColor",
    "InvalidChannel",
    "InvalidColorSpace",
    "InvalidType",
    "MissingKey",
    "SRGB",
    "SchemeError",
    "SpecialColors",
    "UnknownColorSpace",
    "ansi_key",
    "color_from_dictionary",
    "expect_dictionary",
    "expect_real",
    "expect_string",
    "float_channel_to_byte",
    "get_required",
    "load_document",
    "loads_document",
    "named_color",
    "render_kitty",
    "to_hex",
]
