"""Palette preview image composer for parsed color schemes."""

from __future__ import annotations

import base64
from io import BytesIO
from pathlib import Path

from PIL import Image, ImageDraw, ImageFont

from itermcolors_scheme import ColorScheme, to_hex

from .models import PreviewLayout


RGB = tuple[int, int, int]


def _label_fill(rgb: RGB) -> RGB:
    r, g, b = rgb
    luma = 0.299 * r + 0.587 * g + 0.114 * b
    return (0, 0, 0) if luma > 140 else (255, 255, 255)


class PaletteRenderer:
    """Draws the scheme background, a text sample and the 16 ANSI swatches."""

    def __init__(self, swatch: int = 48, gap: int = 8) -> None:
        self.layout = PreviewLayout(swatch=swatch, gap=gap)

    @property
    def size(self) -> tuple[int, int]:
        return (self.layout.width, self.layout.height)

    def render_image(self, scheme: ColorScheme) -> Image.Image:
        special = scheme.special
        image = Image.new("RGB", self.size, to_hex(special.background).rgb)
        draw = ImageDraw.Draw(image)

        self._draw_header(draw, scheme)
        self._draw_swatches(draw, scheme)
        return image

    def save(self, scheme: ColorScheme, path: Path) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        self.render_image(scheme).save(path, format="PNG")
        return path

    def preview_data_url(self, scheme: ColorScheme) -> str:
        buf = BytesIO()
        self.render_image(scheme).save(buf, format="PNG")
        b64 = base64.b64encode(buf.getvalue()).decode("ascii")
        return f"data:image/png;base64,{b64}"

    def _font(self, size: int):
        try:
            return ImageFont.truetype("JetBrainsMono-Regular.ttf", size)
        except OSError:
            try:
                return ImageFont.truetype("DejaVuSansMono.ttf", size)
            except OSError:
                return ImageFont.load_default()

    def _draw_header(self, draw: ImageDraw.ImageDraw, scheme: ColorScheme) -> None:
        layout = self.layout
        special = scheme.special
        font = self._font(max(layout.swatch // 3, 8))
        top = layout.gap
        bottom = layout.gap + layout.header_height - 1
        split = layout.width // 2

        draw.text((layout.gap, top + layout.gap // 2), "foreground", font=font, fill=to_hex(special.foreground).rgb)

        draw.rectangle((split, top, layout.width - layout.gap - 1, bottom), fill=to_hex(special.selection).rgb)
        draw.text((split + layout.gap // 2, top + layout.gap // 2), "selection", font=font, fill=to_hex(special.selected_text).rgb)

    def _draw_swatches(self, draw: ImageDraw.ImageDraw, scheme: ColorScheme) -> None:
        font = self._font(max(self.layout.swatch // 4, 8))
        for i, color in enumerate(scheme.ansi):
            rgb = to_hex(color).rgb
            x0, y0, x1, y1 = self.layout.swatch_box(i)
            draw.rectangle((x0, y0, x1, y1), fill=rgb)
            draw.text((x0 + 3, y0 + 2), str(i), font=font, fill=_label_fill(rgb))
