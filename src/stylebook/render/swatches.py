from html import escape

import typer

from stylebook.guide.colors import hex_to_rgb, is_dark
from stylebook.guide.parser import ColorEntry


def overlay_class(color: str) -> str:
    return "on-dark" if is_dark(color) else "on-light"


def render_swatches(colors: list[ColorEntry]) -> str:
    if not colors:
        return ""

    items = []
    for entry in colors:
        color = escape(entry.color, quote=True)
        items.append(
            f'<button type="button" class="swatch {overlay_class(entry.color)}" '
            f'style="background-color: {color}" data-copy="{color}" '
            f'title="Copy {color}">'
            f'<span class="swatch-name">{escape(entry.name)}</span>'
            f'<span class="swatch-hex">{color}</span>'
            "</button>"
        )
    return '<div class="swatch-grid">' + "".join(items) + "</div>"


def format_swatch(entry: ColorEntry) -> str:
    """One terminal line: a filled block, the hex code and the name."""
    rgb = hex_to_rgb(entry.color)
    fg = "white" if is_dark(entry.color) else "black"
    tone = "dark" if is_dark(entry.color) else "light"
    block = typer.style(f" {entry.color} ", fg=fg, bg=rgb)
    return f"{block} {entry.name} ({tone})"
