"""
wibar - screen-edge docked bars

Docks bars against the edges of a multi-monitor desktop and keeps bars on
the same screen from overlapping.

This package provides:
- Edge, margin and placement types shared with the windowing collaborator
- A weakly held registry defining the stacking order of bars
- Margin calculation and (re)attachment of bars through a placement
- The Wibar lifecycle and the WibarManager service creating bars

Example usage:
    from wibar import WibarManager, Screen, Area

    screen = Screen("DP-1", Area(0, 0, 1920, 1080))
    manager = WibarManager(placement=my_placement, primary_screen=screen)

    top = manager.create(position="top")
    side = manager.create(position="left", width=32)
    side.set_position("right")
    top.remove()
"""

__version__ = "0.1.0"
__author__ = "pinpox"

from .protocol import (
    Edge,
    MaximizeAxis,
    Margins,
    Dimensions,
    Area,
    Screen,
    PlacementOptions,
    Placement,
)

from .errors import WibarError, InvalidPositionError, InvalidSizeError

from .config import WibarConfig
from .fonts import FontDescription, cairo_font_height, default_thickness
from .sizing import parse_percentage, resolve_size
from .registry import WibarRegistry
from .margins import compute_margin, compute_margins
from .placement import PlacementDriver, PLACEMENT_TABLE
from .bar import Wibar
from .manager import WibarManager

from . import topics

__all__ = [
    # Version
    "__version__",
    # Types
    "Edge",
    "MaximizeAxis",
    "Margins",
    "Dimensions",
    "Area",
    "Screen",
    "PlacementOptions",
    "Placement",
    # Errors
    "WibarError",
    "InvalidPositionError",
    "InvalidSizeError",
    # Configuration and sizing
    "WibarConfig",
    "FontDescription",
    "cairo_font_height",
    "default_thickness",
    "parse_percentage",
    "resolve_size",
    # Core
    "WibarRegistry",
    "compute_margin",
    "compute_margins",
    "PlacementDriver",
    "PLACEMENT_TABLE",
    "Wibar",
    "WibarManager",
    # Event topics
    "topics",
]
