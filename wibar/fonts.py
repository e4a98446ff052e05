"""
Font Metrics

Resolves the default wibar thickness from the height of the bar font.
Font heights are measured with Cairo.
"""

from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from functools import lru_cache

logger = logging.getLogger(__name__)

DEFAULT_FAMILY = "sans-serif"
DEFAULT_SIZE = 12.0

_WEIGHTS = {"bold"}
_SLANTS = {"italic", "oblique"}


@dataclass(frozen=True)
class FontDescription:
    """A font as "family [style...] size", e.g. "DejaVu Sans Bold 10"."""

    family: str = DEFAULT_FAMILY
    size: float = DEFAULT_SIZE
    bold: bool = False
    italic: bool = False

    @classmethod
    def parse(cls, spec) -> "FontDescription":
        """Parse a font spec string.

        Args:
            spec: Font string, FontDescription or None for the default font

        Returns:
            The parsed FontDescription
        """
        if spec is None:
            return cls()
        if isinstance(spec, cls):
            return spec

        tokens = str(spec).split()
        size = DEFAULT_SIZE
        if tokens:
            try:
                size = float(tokens[-1])
                tokens = tokens[:-1]
            except ValueError:
                pass

        bold = italic = False
        while tokens and tokens[-1].lower() in _WEIGHTS | _SLANTS:
            style = tokens.pop().lower()
            if style in _WEIGHTS:
                bold = True
            else:
                italic = True

        family = " ".join(tokens) or DEFAULT_FAMILY
        return cls(family=family, size=size, bold=bold, italic=italic)


@lru_cache(maxsize=32)
def _measure(font: FontDescription) -> float:
    import cairo

    # Create temporary surface to measure font
    surface = cairo.ImageSurface(cairo.FORMAT_ARGB32, 1, 1)
    ctx = cairo.Context(surface)
    ctx.select_font_face(
        font.family,
        cairo.FONT_SLANT_ITALIC if font.italic else cairo.FONT_SLANT_NORMAL,
        cairo.FONT_WEIGHT_BOLD if font.bold else cairo.FONT_WEIGHT_NORMAL,
    )
    ctx.set_font_size(font.size)

    # font_extents returns (ascent, descent, height, max_x_advance, max_y_advance)
    height = ctx.font_extents()[2]
    logger.debug("Measured font %s: height %.2f", font, height)
    return height


def cairo_font_height(font=None) -> float:
    """Return the line height of a font in pixels."""
    return _measure(FontDescription.parse(font))


def default_thickness(font_height: float, factor: float = 1.5) -> int:
    """Default bar thickness for a given font height."""
    return int(math.ceil(font_height * factor))
