"""Color model and float-channel to hex conversion."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Mapping, Union

from .accessors import expect_dictionary, expect_real, expect_string, get_required
from .errors import InvalidChannel, InvalidColorSpace, UnknownColorSpace


COLOR_SPACE_KEY = "Color Space"


class ColorSpace(str, Enum):
    SRGB = "sRGB"


@dataclass(frozen=True)
class SRGB:
    """Linear-channel sRGB triple. Channels are not range checked here."""

    r: float
    g: float
    b: float

    @classmethod
    def from_dictionary(cls, d: Mapping[str, Any]) -> "SRGB":
        color_space = expect_string(get_required(d, COLOR_SPACE_KEY))
        if color_space != ColorSpace.SRGB.value:
            raise InvalidColorSpace(expected=ColorSpace.SRGB.value, actual=color_space)

        r = expect_real(get_required(d, "Red Component"))
        g = expect_real(get_required(d, "Green Component"))
        b = expect_real(get_required(d, "Blue Component"))
        return cls(r, g, b)


# One member per supported color space.
Color = Union[SRGB]

_EXTRACTORS: dict[str, Callable[[Mapping[str, Any]], Color]] = {
    ColorSpace.SRGB.value: SRGB.from_dictionary,
}


@dataclass(frozen=True)
class HexColor:
    r: int
    g: int
    b: int

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def as_string(self) -> str:
        return f"{self.r:02x}{self.g:02x}{self.b:02x}"

    def __str__(self) -> str:
        return f"#{self.as_string()}"


def float_channel_to_byte(value: float) -> int:
    """Scale a 0.0-1.0 channel to 0..255, clamping first and rounding half up.

    Raises InvalidChannel for NaN and infinities.
    """
    if not math.isfinite(value):
        raise InvalidChannel(value)
    scaled = min(max(value * 255.0, 0.0), 255.0)
    return int(math.floor(scaled + 0.5))


def color_from_dictionary(d: Mapping[str, Any]) -> Color:
    color_space = expect_string(get_required(d, COLOR_SPACE_KEY))
    extractor = _EXTRACTORS.get(color_space)
    if extractor is None:
        raise UnknownColorSpace(color_space)
    return extractor(d)


def named_color(name: str, d: Mapping[str, Any]) -> Color:
    return color_from_dictionary(expect_dictionary(get_required(d, name)))


def to_hex(color: Color) -> HexColor:
    if isinstance(color, SRGB):
        return HexColor(
            float_channel_to_byte(color.r),
            float_channel_to_byte(color.g),
            float_channel_to_byte(color.b),
        )
    raise TypeError(f"Unsupported color variant: {type(color).__name__}")
