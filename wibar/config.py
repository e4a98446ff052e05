"""
Wibar Configuration
"""

from __future__ import annotations
import os
from dataclasses import dataclass, field

from .protocol import Edge
from .fonts import FontDescription


def _debug_from_env() -> bool:
    return bool(os.getenv("WIBAR_DEBUG"))


@dataclass
class WibarConfig:
    """Defaults applied to every wibar created by a WibarManager."""

    # Edge used when create() gets no position
    default_position: str | Edge = Edge.TOP

    # Font used to derive the default bar thickness ("family size")
    font: str | FontDescription = "sans-serif 12"

    # Default thickness is ceil(font height * size_factor)
    size_factor: float = 1.5

    # Window type passed through to the placement collaborator
    bar_type: str = "dock"

    # Log every event published on the bus (also enabled by WIBAR_DEBUG)
    debug_events: bool = field(default_factory=_debug_from_env)

    def __post_init__(self):
        """Normalize and validate settings."""
        self.default_position = Edge.parse(self.default_position)
        self.font = FontDescription.parse(self.font)
        if self.size_factor <= 0:
            raise ValueError(
                f"Invalid size_factor: {self.size_factor}. Must be positive"
            )
