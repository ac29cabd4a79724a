"""kitty.conf color block emitter."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .color import to_hex

if TYPE_CHECKING:  # pragma: no cover
    from .scheme import ColorScheme


def render_kitty(scheme: ColorScheme) -> str:
    special = scheme.special
    lines = [
        f"foreground {to_hex(special.foreground)}",
        f"background {to_hex(special.background)}",
        f"selection_foreground {to_hex(special.selected_text)}",
        f"selection_background {to_hex(special.selection)}",
    ]
    for i, color in enumerate(scheme.ansi):
        name = f"color{i:<2}"
        lines.append(f"{name} {to_hex(color)}")
    # bold, cursor and cursor_text have no kitty mapping here yet.
    return "".join(f"{line}\n" for line in lines)
