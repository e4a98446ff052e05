"""
Deprecated Wibar Functions

Free-function aliases kept for configurations written against the old API.
Each one emits a DeprecationWarning and forwards to the Wibar methods.
"""

from __future__ import annotations
import warnings
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .bar import Wibar
    from .protocol import Edge

ALIGNMENTS = (
    "top_left",
    "top_right",
    "bottom_left",
    "bottom_right",
    "left",
    "right",
    "top",
    "bottom",
    "centered",
    "center_vertical",
    "center_horizontal",
)


def deprecate(message: str):
    warnings.warn(message, DeprecationWarning, stacklevel=3)


def get_position(wb: "Wibar") -> "Edge":
    """Get a wibar position, top if it has not been set."""
    deprecate("Use wb.get_position() instead of wibar.get_position")
    return wb.get_position()


def set_position(wb: "Wibar", position, screen=None):
    """Put a wibar at a position. The screen argument is ignored."""
    deprecate("Use wb.set_position(position) instead of wibar.set_position")
    wb.set_position(position)


def attach(wb: "Wibar", position, screen=None):
    """Does nothing anymore, placement attaches wibars itself."""
    deprecate(
        "wibar.attach is deprecated, use the 'attach' option of the placement. "
        "This function doesn't do anything anymore"
    )


def align(wb: "Wibar", alignment: str, screen=None):
    """Align a wibar through the placement collaborator.

    Args:
        wb: The wibar
        alignment: One of ALIGNMENTS ("center" is accepted for "centered")
        screen: Ignored, use wb.screen

    Returns:
        Whatever the placement's align() returns, or None if the alignment
        is unknown or unsupported
    """
    if alignment == "center":
        deprecate("wibar.align(wb, 'center') is deprecated, use 'centered'")
        alignment = "centered"

    if screen is not None:
        deprecate("wibar.align 'screen' argument is deprecated")

    placement = wb._manager.placement
    if alignment in ALIGNMENTS and hasattr(placement, "align"):
        return placement.align(wb, alignment)
    return None
