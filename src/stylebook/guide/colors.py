import re

# Strict bound: exactly 0.6 counts as light
DARK_THRESHOLD = 0.6

HEX_COLOR_RE = re.compile(r"^#?([0-9A-Fa-f]{6})$")


def hex_to_rgb(color: str) -> tuple[int, int, int]:
    match = HEX_COLOR_RE.match(color.strip())
    if not match:
        raise ValueError(f"Not a #RRGGBB color: {color!r}")
    digits = match.group(1)
    return (
        int(digits[0:2], 16),
        int(digits[2:4], 16),
        int(digits[4:6], 16),
    )


def luminance(color: str) -> float:
    """Perceived brightness of a hex color in the 0..1 range."""
    r, g, b = hex_to_rgb(color)
    return (0.299 * r + 0.587 * g + 0.114 * b) / 255


def is_dark_luminance(value: float) -> bool:
    return value < DARK_THRESHOLD


def is_dark(color: str) -> bool:
    """Whether overlay text on this color should be light."""
    return is_dark_luminance(luminance(color))
