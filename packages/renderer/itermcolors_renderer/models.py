"""Typed renderer models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PreviewLayout:
    swatch: int
    gap: int
    columns: int = 8
    rows: int = 2

    @property
    def width(self) -> int:
        return self.gap + self.columns * (self.swatch + self.gap)

    @property
    def header_height(self) -> int:
        return self.swatch

    @property
    def height(self) -> int:
        return self.gap + self.header_height + self.gap + self.rows * (self.swatch + self.gap)

    def swatch_box(self, index: int) -> tuple[int, int, int, int]:
        row, col = divmod(index, self.columns)
        x0 = self.gap + col * (self.swatch + self.gap)
        y0 = self.gap + self.header_height + self.gap + row * (self.swatch + self.gap)
        return (x0, y0, x0 + self.swatch - 1, y0 + self.swatch - 1)
