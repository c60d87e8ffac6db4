from __future__ import annotations

import logging
import re

from ..models.config_models import DEFAULT_BASE_COLOR

"""Deterministic color palette generation.

The first 15 colors come from a fixed curated list. Longer palettes are
extended with HSL colors whose hue advances by the golden angle (137.5 deg)
from a base hue, which keeps consecutive generated colors far apart.

The base hue is the base color's hex digits read as one integer, modulo 360.
It is a seed, not a colorimetric hue.
"""

__all__ = [
    "FIXED_PALETTE",
    "GOLDEN_ANGLE",
    "generate_color_palette",
]

logger = logging.getLogger(__name__)

FIXED_PALETTE: tuple[str, ...] = (
    "#8884d8", "#82ca9d", "#ffc658", "#ff7c7c", "#8dd1e1",
    "#d084d0", "#ffb347", "#87ceeb", "#dda0dd", "#98fb98",
    "#f0e68c", "#ff6347", "#40e0d0", "#ee82ee", "#90ee90",
)
GOLDEN_ANGLE = 137.5
_LEADING_HEX = re.compile(r"[0-9a-fA-F]+")


def _base_hue(base_color: str) -> int:
    digits = _LEADING_HEX.match(base_color[1:] if base_color.startswith("#") else base_color)
    if digits is None:
        logger.warning(f"invalid base color {base_color!r}; using {DEFAULT_BASE_COLOR}")
        return _base_hue(DEFAULT_BASE_COLOR)
    return int(digits.group(0), 16)


def _format_hue(hue: float) -> str:
    # 184.0 -> "184", 321.5 -> "321.5"
    return str(int(hue)) if hue.is_integer() else repr(hue)


def generate_color_palette(count: int, base_color: str = DEFAULT_BASE_COLOR) -> list[str]:
    """Return ``count`` CSS colors.

    Args:
        count: Number of colors required; negative counts yield an empty list
        base_color: Hex color seeding the hue of generated colors

    Returns:
        The fixed palette prefix, followed by ``hsl(h, 70%, 60%)`` colors when
        more than 15 are requested

    Examples:
        >>> generate_color_palette(3)
        ['#8884d8', '#82ca9d', '#ffc658']
        >>> generate_color_palette(16)[-1]
        'hsl(184, 70%, 60%)'
    """
    if count <= 0:
        return []
    if count <= len(FIXED_PALETTE):
        return list(FIXED_PALETTE[:count])

    base_hue = _base_hue(base_color)
    colors = list(FIXED_PALETTE)
    for i in range(count - len(FIXED_PALETTE)):
        hue = (base_hue + i * GOLDEN_ANGLE) % 360
        colors.append(f"hsl({_format_hue(hue)}, 70%, 60%)")
    return colors
